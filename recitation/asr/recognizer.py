"""Client for the external speech-recognition service."""
import os

import requests

ASR_SERVICE_URL = os.environ.get("RECITATION_ASR_URL", "http://localhost:8000/asr")
ASR_TIMEOUT = float(os.environ.get("RECITATION_ASR_TIMEOUT", "60"))


def transcribe(file_path, language="ar"):
    """
    Send a recording to the ASR service and return its best transcript.
    Returns "" when the file is missing or the service fails, so the caller
    can decide whether to retry.
    """
    if not os.path.exists(file_path):
        print(f"Recording not found: {file_path}")
        return ""

    try:
        with open(file_path, "rb") as f:
            response = requests.post(
                ASR_SERVICE_URL,
                files={"file": f},
                data={"language": language},
                timeout=ASR_TIMEOUT,
            )
            response.raise_for_status()
            result = response.json()
    except (requests.RequestException, ValueError) as e:
        print(f"ASR Service error: {e}")
        return ""

    # The service returns {"text": "...", "word_timestamps": [...]}
    if not isinstance(result, dict):
        print(f"ASR Service returned unexpected payload: {type(result).__name__}")
        return ""
    return (result.get("text") or "").strip()

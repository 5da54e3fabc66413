import os
from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from recitation.alignment.tokenizer import split_expected
from recitation.rules import SAMPLE_TEXT
from recitation.scorer.verdict_builder import verify

app = FastAPI(title="Recitation Verification Service")

HOST = os.environ.get("RECITATION_HOST", "0.0.0.0")
PORT = int(os.environ.get("RECITATION_PORT", "8010"))


# --- Data Models ---
class VerifyRequest(BaseModel):
    expected: Optional[List[str]] = None
    text: Optional[str] = None
    transcript: str = ""
    trace: bool = False


class WordResult(BaseModel):
    word: str
    status: Literal["correct", "incorrect"]
    spoken_text: str


class ScoreResult(BaseModel):
    correct: int
    total: int


class TraceResult(BaseModel):
    expected_index: int
    candidate: str
    score: float


class VerifyResponse(BaseModel):
    words: List[WordResult]
    score: ScoreResult
    percentage: int
    trace: List[TraceResult] = []


class SampleResponse(BaseModel):
    text: str
    expected: List[str]


# --- Endpoints ---

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/sample", response_model=SampleResponse)
def sample_text():
    """
    Sample passage (Bismillah) for a first practice session.
    """
    return {"text": SAMPLE_TEXT, "expected": split_expected(SAMPLE_TEXT)}


@app.post("/verify", response_model=VerifyResponse)
def verify_recitation(req: VerifyRequest):
    """
    Verify a recognizer transcript against the expected words.
    Expected words come from "expected" or, failing that, from splitting "text".
    """
    if req.expected is not None:
        expected = req.expected
    elif req.text is not None:
        expected = split_expected(req.text)
    else:
        raise HTTPException(status_code=422, detail="Provide 'expected' words or 'text'")

    print(f"Verifying {len(expected)} words against transcript: {req.transcript!r}")
    result = verify(expected, req.transcript, trace=req.trace)

    payload = result.to_dict()
    payload["percentage"] = result.score.percentage
    return payload


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)

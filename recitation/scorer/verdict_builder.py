"""Per-word verdicts and score for a recitation attempt."""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..alignment.aligner import align_words
from ..alignment.edit_distance import acceptance_threshold, similarity
from ..alignment.normalizer import normalize_arabic
from ..alignment.tokenizer import tokenize_transcript
from ..models.verdict import Score, TraceEntry, Verdict, VerificationResult, WordStatus


def verify(
    expected_words: Sequence[str], transcript: str, *, trace: bool = False
) -> VerificationResult:
    """Judge every expected word against a recognizer transcript.

    Aligned words are correct and report the literal spoken token. Each
    unaligned word takes the most similar spoken token left over by the
    alignment; it is correct only if that similarity reaches the word's
    threshold, and the token is reported either way. An accepted token is
    removed from the leftovers, so no spoken token is credited twice. With
    nothing left over the word is incorrect with no spoken text.

    Never raises: an empty transcript makes every word incorrect and an empty
    word list yields a 0/0 score.

    Args:
        expected_words: Words to recite, in order
        transcript: Best hypothesis from the recognizer ("" if none)
        trace: Collect the scored candidates behind each verdict

    Returns:
        VerificationResult with one Verdict per expected word, in input order
    """
    expected = list(expected_words)
    _, raw_tokens = tokenize_transcript(transcript)

    alignment = align_words(expected, raw_tokens)
    consumed = alignment.matched_spoken
    leftovers = [j for j in range(len(raw_tokens)) if j not in consumed]

    words: List[Verdict] = []
    entries: List[TraceEntry] = []

    for idx, word in enumerate(expected):
        target = normalize_arabic(word)
        spoken_idx = alignment.expected_to_spoken[idx]

        if spoken_idx is not None:
            spoken = raw_tokens[spoken_idx]
            words.append(Verdict(word=word, status=WordStatus.CORRECT, spoken_text=spoken))
            if trace:
                entries.append(TraceEntry(idx, spoken, similarity(normalize_arabic(spoken), target)))
            continue

        best_idx: Optional[int] = None
        best_text = ""
        best_score: Optional[float] = None
        for j in leftovers:
            candidate = raw_tokens[j]
            score = similarity(normalize_arabic(candidate), target)
            if trace:
                entries.append(TraceEntry(idx, candidate, score))
            if best_score is None or score > best_score:
                best_idx, best_text, best_score = j, candidate, score

        if best_score is not None and best_score >= acceptance_threshold(len(target)):
            status = WordStatus.CORRECT
            # an accepted token is consumed; rejected picks stay shareable
            leftovers.remove(best_idx)
        else:
            status = WordStatus.INCORRECT
        words.append(Verdict(word=word, status=status, spoken_text=best_text))

    correct = sum(1 for v in words if v.is_correct)
    return VerificationResult(
        words=words,
        score=Score(correct=correct, total=len(expected)),
        trace=entries,
    )

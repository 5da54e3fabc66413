"""Practice session controller tests."""
import pytest

from recitation.models.verdict import Score, WordStatus
from recitation.rules import SAMPLE_TEXT
from recitation.session.practice_session import PracticeSession, SessionState


def test_start_marks_first_word_current(session):
    words = session.start(SAMPLE_TEXT)
    assert [w.status for w in words] == [
        WordStatus.CURRENT,
        WordStatus.PENDING,
        WordStatus.PENDING,
        WordStatus.PENDING,
    ]
    assert session.state is SessionState.LISTENING
    assert session.score == Score(correct=0, total=4)
    assert session.current_index == 0
    assert session.progress == 0


def test_start_rejects_blank_text(session):
    with pytest.raises(ValueError):
        session.start("   ")
    assert session.state is SessionState.IDLE


def test_correct_recitation_completes_session(session):
    session.start(SAMPLE_TEXT)
    result = session.submit("بسم الله الرحمن الرحيم")

    assert result is not None
    assert session.state is SessionState.COMPLETE
    assert all(w.status is WordStatus.CORRECT for w in session.words)
    assert [w.spoken_text for w in session.words] == ["بسم", "الله", "الرحمن", "الرحيم"]
    assert session.score_percentage == 100
    assert session.current_index == 4
    assert session.progress == 100


def test_empty_transcript_retried_once(session):
    session.start(SAMPLE_TEXT)
    assert session.submit("") is None
    assert session.state is SessionState.LISTENING

    result = session.submit("  ")
    assert result is not None
    assert result.score == Score(correct=0, total=4)
    assert all(w.status is WordStatus.INCORRECT for w in session.words)
    assert session.state is SessionState.COMPLETE


def test_no_retry_budget_verifies_immediately():
    session = PracticeSession(max_empty_retries=0)
    session.start("بسم الله")
    result = session.submit("")
    assert result is not None
    assert result.score == Score(correct=0, total=2)


def test_submit_after_completion_rejected(session):
    session.start("بسم")
    session.submit("بسم")
    with pytest.raises(ValueError):
        session.submit("بسم")


def test_submit_before_start_rejected(session):
    with pytest.raises(ValueError):
        session.submit("بسم")


def test_expire_marks_all_incorrect(session):
    session.start("الله اكبر")
    result = session.expire()
    assert [v.status for v in result.words] == [WordStatus.INCORRECT, WordStatus.INCORRECT]
    assert session.state is SessionState.COMPLETE


def test_run_retries_empty_attempt(session):
    attempts = iter(["", "بسم الله الرحمن الرحيم"])
    calls = []

    def attempt():
        transcript = next(attempts)
        calls.append(transcript)
        return transcript

    session.start(SAMPLE_TEXT)
    result = session.run(attempt)
    assert len(calls) == 2
    assert result.score == Score(correct=4, total=4)


def test_partial_recitation_score(session):
    session.start("الله اكبر")
    session.submit("الله")
    assert session.score == Score(correct=1, total=2)
    assert session.score_percentage == 50


def test_stop_keeps_words(session):
    session.start("الله اكبر")
    session.stop()
    assert session.state is SessionState.IDLE
    assert len(session.words) == 2


def test_reset_clears_session(session):
    session.start("الله اكبر")
    session.submit("الله اكبر")
    session.reset()
    assert session.state is SessionState.IDLE
    assert session.words == []
    assert session.score == Score()
    assert session.result is None


@pytest.mark.parametrize("transcript", ["...", "hello world", "؟ ،"])
def test_transcript_without_arabic_words_is_retried(session, transcript):
    session.start("الله اكبر")
    assert session.submit(transcript) is None
    assert session.state is SessionState.LISTENING
    assert session.empty_retries == 1

    result = session.submit(transcript)
    assert result is not None
    assert result.score == Score(correct=0, total=2)

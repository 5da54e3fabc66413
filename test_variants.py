"""Prefix variant generation tests."""
from recitation.alignment.variants import generate_variants


def test_word_itself_always_included():
    assert generate_variants("قلم") == frozenset({"قلم"})


def test_definite_article_optional():
    assert generate_variants("الرحمن") == frozenset({"الرحمن", "رحمن"})


def test_conjunction_then_article_chained():
    assert generate_variants("والرحمن") == frozenset({"والرحمن", "الرحمن", "رحمن"})


def test_preposition_then_article_chained():
    assert generate_variants("بالله") == frozenset({"بالله", "الله", "له"})


def test_single_letter_prefix_stripped():
    assert generate_variants("بسم") == frozenset({"بسم", "سم"})
    assert generate_variants("كتاب") == frozenset({"كتاب", "تاب"})
    assert generate_variants("لله") == frozenset({"لله", "له"})


def test_bare_prefix_letter_is_kept_whole():
    assert generate_variants("و") == frozenset({"و"})


def test_bare_article_is_kept_whole():
    assert generate_variants("ال") == frozenset({"ال"})


def test_empty_word_has_no_variants():
    assert generate_variants("") == frozenset()


def test_variants_are_immutable():
    assert isinstance(generate_variants("الله"), frozenset)


def test_fa_prefix_then_article_chained():
    assert generate_variants("فالله") == frozenset({"فالله", "الله", "له"})


def test_sa_prefix_stripped():
    assert generate_variants("سيعلم") == frozenset({"سيعلم", "يعلم"})

from __future__ import annotations

import pytest

from safeguard.extraction.lexicon import Lexicon, tokenize
from safeguard.extraction.linguistic_engine import LinguisticEngine


def extract(text: str):
    return LinguisticEngine().extract(tokenize(text))


def test_neutral_text_scores_fifty() -> None:
    f = extract("the weather is mild today")
    assert list(f) == [0.0, 0.0, 0.0, 0.0, 50.0, 0.0, 0.0, 0.0]


def test_no_tokens_gives_neutral_block() -> None:
    f = LinguisticEngine().extract([])
    assert list(f) == [0.0, 0.0, 0.0, 0.0, 50.0, 0.0, 0.0, 0.0]


def test_critical_keywords_clamp_threat() -> None:
    f = extract("help police emergency")
    assert f[0] == 1.0
    assert f[1] == 100.0
    assert f[2] == 1.0


def test_negative_keyword_threat_accumulates() -> None:
    f = extract("sad and alone")
    assert f[0] == 1.0
    assert f[1] == 20.0
    assert f[2] == 0.0


def test_critical_only_word() -> None:
    f = extract("call")
    assert f[0] == 0.0
    assert f[1] == 50.0
    assert f[2] == 1.0


def test_positive_dominant_sentiment() -> None:
    f = extract("happy happy scared")
    assert f[3] == 0.0
    assert f[4] == pytest.approx(50.0 + 50.0 / 3.0, rel=1e-6)


def test_all_positive_sentiment_stays_at_fifty() -> None:
    f = extract("happy calm safe fine good")
    assert f[3] == 0.0
    assert f[4] == 50.0


def test_negative_dominant_sentiment() -> None:
    f = extract("sad sad happy")
    assert f[3] == 1.0
    assert f[4] == pytest.approx(50.0 + 50.0 * 2.0 / 3.0, rel=1e-6)


def test_tie_is_not_negative() -> None:
    f = extract("sad happy")
    assert f[3] == 0.0
    assert f[4] == 75.0


def test_emotion_and_stress_scores() -> None:
    f = extract("scared afraid terrified")
    # fear 60, anger 0, sentiment 100 -> stress 0.4*60 + 20
    assert f[5] == 60.0
    assert f[6] == pytest.approx(44.0)
    assert f[7] == 60.0


def test_anger_drives_max_emotion() -> None:
    f = extract("annoyed irritated frustrated")
    # none of these are negative words, sentiment stays neutral
    assert f[4] == 50.0
    assert f[5] == 60.0
    assert f[6] == pytest.approx(18.0)
    assert f[7] == 0.0


def test_repeated_tokens_count_every_time() -> None:
    f = extract("scared scared")
    assert f[1] == 20.0
    assert f[7] == 40.0


def test_scores_are_clamped_to_one_hundred() -> None:
    f = extract("scared " * 6 + "angry " * 10)
    # fear 120, anger 200, stress 48 + 60 + 20
    assert f[5] == 100.0
    assert f[6] == 100.0
    assert f[7] == 100.0
    assert f[1] == 100.0


def test_custom_lexicon_is_used() -> None:
    lex = Lexicon.from_words(["grim"], ["sunny"], ["sos"], {"fear": ["grim"], "anger": []})
    f = LinguisticEngine(lex).extract(tokenize("grim sos"))
    assert f[0] == 1.0
    assert f[1] == 60.0
    assert f[2] == 1.0
    assert f[7] == 20.0


def test_describe_names_text_features() -> None:
    engine = LinguisticEngine()
    named = engine.describe(engine.extract(tokenize("help")))
    assert named["is_critical"] == 1.0
    assert named["sentiment_score"] == 100.0
    assert len(named) == 8

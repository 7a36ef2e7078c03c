# tests/test_matcher.py

from types import MappingProxyType

import pytest

from catsearch.domain.models import Entity, ModelWord
from catsearch.infrastructure.matcher import (
    EPSILON,
    ScoringStrategy,
    distance_score,
    score_entity,
    score_word,
)


def _make_entity(*words: ModelWord, key: str = "Test") -> Entity:
    return Entity(
        key=key,
        size="", coat="", color="", description="", did_you_know="",
        model=MappingProxyType({w.word: w for w in words}),
    )


def _word(word: str, synonyms=(), weight: float = 1.0) -> ModelWord:
    return ModelWord(word=word, pos="NN", weight=weight, synonyms=tuple(synonyms))


def test_exact_match_is_maximal():
    assert distance_score("cat", "cat") == pytest.approx(1 / EPSILON)


def test_distance_score_is_inverse_edit_distance():
    assert distance_score("cat", "cot") == pytest.approx(1 / (1 + EPSILON))
    assert distance_score("kitten", "sitting") == pytest.approx(1 / (3 + EPSILON))


def test_no_query_tokens_score_zero():
    assert score_word([], "cat") == 0.0


def test_last_strategy_keeps_only_the_last_token():
    score = score_word(["cat", "zzzzzz"], "cat", ScoringStrategy.LAST)
    assert score == pytest.approx(1 / (6 + EPSILON))


def test_max_and_sum_strategies():
    query = ["cat", "zzzzzz"]
    assert score_word(query, "cat", ScoringStrategy.MAX) == pytest.approx(1 / EPSILON)
    assert score_word(query, "cat", ScoringStrategy.SUM) == pytest.approx(
        1 / EPSILON + 1 / (6 + EPSILON)
    )


def test_synonym_scores_are_added():
    entity = _make_entity(_word("kitten", synonyms=["cat", "kitty"]))
    result = score_entity(entity, ["cat"])

    expected = (
        distance_score("cat", "kitten")
        + distance_score("cat", "cat")
        + distance_score("cat", "kitty")
    )
    assert result.word_scores["kitten"] == pytest.approx(expected)
    assert result.total_score == pytest.approx(expected)


def test_total_is_sum_of_word_scores():
    entity = _make_entity(_word("cat"), _word("dog"), _word("bird"))
    result = score_entity(entity, ["cat"])
    assert result.total_score == pytest.approx(sum(result.word_scores.values()))


def test_spotlight_is_highest_scoring_word():
    entity = _make_entity(_word("dog"), _word("cat"), _word("cap"))
    assert score_entity(entity, ["cat"]).spotlight == "cat"


def test_spotlight_ties_keep_first_seen_word():
    entity = _make_entity(_word("bat"), _word("cat"))
    assert score_entity(entity, ["rat"]).spotlight == "bat"


def test_empty_model_scores_zero_without_spotlight():
    result = score_entity(_make_entity(), ["cat"])
    assert result.total_score == 0.0
    assert result.spotlight is None


def test_weighted_scoring_scales_by_tfidf_weight():
    entity = _make_entity(_word("cat", weight=2.0), _word("dog", weight=0.5))
    plain = score_entity(entity, ["cat"])
    weighted = score_entity(entity, ["cat"], weighted=True)

    assert weighted.word_scores["cat"] == pytest.approx(2.0 * plain.word_scores["cat"])
    assert weighted.word_scores["dog"] == pytest.approx(0.5 * plain.word_scores["dog"])


def test_scoring_does_not_touch_the_entity():
    word = _word("cat")
    entity = _make_entity(word)
    score_entity(entity, ["cat"])
    assert entity.model["cat"] is word
    assert not hasattr(word, "word_score")

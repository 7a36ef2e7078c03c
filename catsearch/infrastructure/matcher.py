# catsearch/infrastructure/matcher.py

from enum import Enum
from typing import List, Sequence

from rapidfuzz.distance import Levenshtein

from catsearch.domain.models import Entity, EntityScore, SearchIndex


# Keeps an exact match (distance 0) finite: 1 / EPSILON is the maximal score.
EPSILON = 1e-6


class ScoringStrategy(str, Enum):
    """
    How the per-token distance scores of one word combine.

    LAST: each query token overwrites the running value, so only the last
          token counts. This is the legacy ranking behaviour.
    MAX:  best token wins.
    SUM:  every token contributes.
    """
    LAST = "last"
    MAX = "max"
    SUM = "sum"


def distance_score(query_word: str, word: str) -> float:
    return 1.0 / (Levenshtein.distance(query_word, word) + EPSILON)


def score_word(
    query_words: Sequence[str],
    word: str,
    strategy: ScoringStrategy = ScoringStrategy.LAST,
) -> float:
    """Score one word against every query token. No tokens -> 0."""
    score = 0.0
    for query_word in query_words:
        value = distance_score(query_word, word)
        if strategy is ScoringStrategy.SUM:
            score += value
        elif strategy is ScoringStrategy.MAX:
            score = max(score, value)
        else:
            score = value
    return score


def score_entity(
    entity: Entity,
    query_words: Sequence[str],
    strategy: ScoringStrategy = ScoringStrategy.LAST,
    weighted: bool = False,
) -> EntityScore:
    """
    Score every model word (plus each of its synonyms, summed) and track
    the spotlight: the strictly highest positive word score, first seen wins.
    """
    result = EntityScore(entity=entity)
    best = 0.0

    for word, token in entity.model.items():
        word_score = score_word(query_words, token.word, strategy)
        for synonym in token.synonyms:
            word_score += score_word(query_words, synonym, strategy)
        if weighted:
            word_score *= token.weight

        result.word_scores[word] = word_score
        result.total_score += word_score
        if word_score > 0 and word_score > best:
            best = word_score
            result.spotlight = token.word

    return result


def score_index(
    index: SearchIndex,
    query_words: Sequence[str],
    strategy: ScoringStrategy = ScoringStrategy.LAST,
    weighted: bool = False,
) -> List[EntityScore]:
    return [
        score_entity(entity, query_words, strategy, weighted)
        for entity in index.entities
    ]

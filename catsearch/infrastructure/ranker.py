# catsearch/infrastructure/ranker.py

from typing import List, Sequence

import numpy as np

from catsearch.domain.models import EntityScore, SearchResult
from catsearch.infrastructure.highlighter import build_title


DEFAULT_TOP_K = 5


def rank(scores: Sequence[EntityScore], top_k: int = DEFAULT_TOP_K) -> List[SearchResult]:
    """
    Drop non-matching entities, order the rest by total score descending
    (equal scores keep corpus order) and attach a highlighted title.
    """
    matched = [score for score in scores if score.total_score > 0]
    if not matched or top_k <= 0:
        return []

    totals = np.array([score.total_score for score in matched], dtype=np.float64)
    order = np.argsort(-totals, kind="stable")[:top_k]

    return [
        SearchResult(
            entity=matched[i].entity,
            total_score=float(totals[i]),
            title=build_title(matched[i]),
        )
        for i in order
    ]

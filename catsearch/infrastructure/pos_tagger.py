# catsearch/infrastructure/pos_tagger.py
# Resource name stays a concrete constructor argument, NOT part of the port

from typing import List, Sequence, Tuple

import nltk

from catsearch.domain.interfaces import TaggerPort
from catsearch.infrastructure.nltk_data import ensure_resource


DEFAULT_TAGGER_RESOURCE = "averaged_perceptron_tagger_eng"


class NltkPosTagger(TaggerPort):
    """
    Averaged perceptron tagger from NLTK. Downloads its model on first use
    when the local nltk_data does not have it yet.
    """

    def __init__(self, resource: str = DEFAULT_TAGGER_RESOURCE):
        self._resource = resource
        ensure_resource("taggers", resource)

    def tag(self, words: Sequence[str]) -> List[Tuple[str, str]]:
        if not words:
            return []
        return nltk.pos_tag(list(words), lang="eng")

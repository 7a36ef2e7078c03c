# catsearch/domain/interfaces.py

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple


class TaggerPort(ABC):
    """
    Port for any part-of-speech tagger.
    Tags follow the Penn Treebank tagset (NN, NNS, VB, VBZ, JJ, ...).
    """

    @abstractmethod
    def tag(self, words: Sequence[str]) -> List[Tuple[str, str]]: ...


class CorpusSourcePort(ABC):

    @abstractmethod
    def load_corpus(self) -> List[dict]:
        """
        Return the ordered catalog, one dict per entity with a `key`
        plus every raw text field.
        """
        ...

    @abstractmethod
    def load_synonyms(self) -> dict[str, List[str]]: ...

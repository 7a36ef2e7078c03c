# catsearch/infrastructure/term_frequency.py

import math
from collections import Counter
from typing import Iterable, List

from catsearch.infrastructure.text_processing import tokenize_words


class TermFrequencyTable:
    """
    Term frequency / inverse document frequency accumulator.

    Documents are lowercased and split with the corpus word tokenizer;
    stop words are dropped, so their tf (and weight) is always 0.
        tf(term, doc)  = raw count of term in doc
        idf(term)      = 1 + ln(N / (1 + df(term)))
        tfidf(t, doc)  = sum of tf * idf over the tokens of t

    Two-pass use: add_document() for every paragraph, seal(), then query.
    IDF queried before every document is registered would be wrong, so
    queries on an unsealed table raise.
    """

    def __init__(self, stop_words: Iterable[str] = ()):
        self._stop_words = frozenset(word.lower() for word in stop_words)
        self._documents: List[Counter] = []
        self._document_frequency: Counter = Counter()
        self._sealed = False

    def add_document(self, text: str) -> int:
        """Register a document and return its id (0-based, insertion order)."""
        if self._sealed:
            raise RuntimeError("Term table is sealed. Documents must be added before weighting.")

        counts = Counter(
            token for token in tokenize_words(text.lower())
            if token not in self._stop_words
        )
        self._documents.append(counts)
        self._document_frequency.update(counts.keys())
        return len(self._documents) - 1

    def seal(self) -> None:
        self._sealed = True

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def __len__(self) -> int:
        return len(self._documents)

    def tf(self, term: str, document_id: int) -> int:
        return self._documents[document_id].get(term, 0)

    def idf(self, term: str) -> float:
        self._require_sealed()
        return 1.0 + math.log(len(self._documents) / (1.0 + self._document_frequency.get(term, 0)))

    def tfidf(self, terms: str, document_id: int) -> float:
        self._require_sealed()
        if not 0 <= document_id < len(self._documents):
            raise IndexError(f"Unknown document id: {document_id}")

        return sum(
            self.tf(term, document_id) * self.idf(term)
            for term in tokenize_words(terms.lower())
        )

    def _require_sealed(self) -> None:
        if not self._sealed:
            raise RuntimeError("Term table is still accepting documents. Call seal() first.")

# catsearch/application/search_service.py

import threading
from enum import Enum
from typing import Iterable, List, Optional

from catsearch.application import search_engine
from catsearch.domain.interfaces import CorpusSourcePort, TaggerPort
from catsearch.domain.models import SearchIndex, SearchResult
from catsearch.infrastructure.matcher import ScoringStrategy
from catsearch.infrastructure.ranker import DEFAULT_TOP_K


class IndexState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    FAILED = "failed"


class CatSearchService:
    """
    Core use case: rank catalog entries for a free-text query.

    Lifecycle:
    - UNINITIALIZED → build_index() → READY
    - build_index() raising (BuildError, missing NLTK data, ...) → FAILED

    Queries are only answered in READY; anything else is rejected
    immediately, never queued.
    """

    def __init__(
        self,
        corpus_source: CorpusSourcePort,
        tagger: Optional[TaggerPort] = None,
        top_k: int = DEFAULT_TOP_K,
        strategy: ScoringStrategy = ScoringStrategy.LAST,
        weighted: bool = False,
        stop_words: Optional[Iterable[str]] = None,
    ):
        self._corpus_source = corpus_source
        self._tagger = tagger
        self._stop_words = stop_words
        self._top_k = top_k
        self._strategy = ScoringStrategy(strategy)
        self._weighted = weighted

        self._lock = threading.Lock()
        self._state = IndexState.UNINITIALIZED
        self._index: Optional[SearchIndex] = None
        self._error: Optional[str] = None

    @property
    def state(self) -> IndexState:
        return self._state

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def index(self) -> Optional[SearchIndex]:
        return self._index

    def is_ready(self) -> bool:
        return self._state is IndexState.READY

    def build_index(self) -> SearchIndex:
        """Load the corpus and synonyms, then build the immutable index."""
        # The lock only guards the state swap: queries arriving mid-build
        # must be rejected, not blocked behind the build.
        try:
            corpus = self._corpus_source.load_corpus()
            synonyms = self._corpus_source.load_synonyms()

            print(f"[SearchService] Building index for {len(corpus)} entries...")
            index = search_engine.build(
                corpus, synonyms, tagger=self._tagger, stop_words=self._stop_words
            )
        except Exception as error:
            # Any failure here (bad corpus, missing NLTK data) is fatal.
            with self._lock:
                self._state = IndexState.FAILED
                self._error = str(error)
            print(f"[SearchService] ✗ Index build failed: {error}")
            raise

        with self._lock:
            self._index = index
            self._error = None
            self._state = IndexState.READY
        print(f"[SearchService] Index built successfully. {len(index)} entries ready.")
        return index

    def search(self, query: str) -> List[SearchResult]:
        with self._lock:
            state, index = self._state, self._index

        if state is not IndexState.READY:
            raise RuntimeError(f"Index not built (state: {state.value}). Call build_index() first.")

        return search_engine.search(
            index,
            query,
            top_k=self._top_k,
            strategy=self._strategy,
            weighted=self._weighted,
        )

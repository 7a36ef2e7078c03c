# catsearch/application/search_engine.py

from typing import Iterable, List, Mapping, Optional, Sequence

from catsearch.domain.errors import QueryError
from catsearch.domain.interfaces import TaggerPort
from catsearch.domain.models import SearchIndex, SearchResult
from catsearch.infrastructure.lexical_model import LexicalModelBuilder
from catsearch.infrastructure.matcher import ScoringStrategy, score_index
from catsearch.infrastructure.ranker import DEFAULT_TOP_K, rank
from catsearch.infrastructure.text_processing import CorpusPreprocessor, tokenize_words


# Bounds the cost of a query: entities x model words x tokens x synonyms.
MAX_QUERY_LENGTH = 256


def build(
    corpus: Sequence[Mapping],
    synonyms: Optional[Mapping[str, Sequence[str]]] = None,
    tagger: Optional[TaggerPort] = None,
    stop_words: Optional[Iterable[str]] = None,
) -> SearchIndex:
    """
    Preprocess the whole corpus and weight its model words.

    `tagger` defaults to the NLTK perceptron tagger and `stop_words` to
    NLTK's English list; stop words never count towards TF-IDF.

    Raises BuildError when an entry or the synonym table is malformed.
    """
    if tagger is None:
        from catsearch.infrastructure.pos_tagger import NltkPosTagger
        tagger = NltkPosTagger()
    if stop_words is None:
        from catsearch.infrastructure.nltk_data import load_stop_words
        stop_words = load_stop_words()

    # Synonyms are validated before the (slower) tagging pass.
    builder = LexicalModelBuilder(synonyms, stop_words=stop_words)
    entities = CorpusPreprocessor(tagger).process(corpus)
    return builder.build(entities)


def validate_query(query: Optional[str]) -> str:
    # Whitespace-only queries are valid; they simply have no tokens.
    if not query:
        raise QueryError("Query cannot be empty.")
    if len(query) > MAX_QUERY_LENGTH:
        raise QueryError(f"Query is longer than {MAX_QUERY_LENGTH} characters.")
    return query


def search(
    index: SearchIndex,
    query: str,
    top_k: int = DEFAULT_TOP_K,
    strategy: ScoringStrategy = ScoringStrategy.LAST,
    weighted: bool = False,
) -> List[SearchResult]:
    """
    Rank the index against a free-text query.

    Returns at most `top_k` results with a positive score, best first.
    Nothing is written back to the index, so concurrent calls are safe.
    """
    query = validate_query(query)
    query_words = tokenize_words(query)
    if not query_words:
        return []

    scores = score_index(index, query_words, strategy=ScoringStrategy(strategy), weighted=weighted)
    return rank(scores, top_k)

# catsearch/infrastructure/lexical_model.py

from dataclasses import replace
from types import MappingProxyType
from typing import Iterable, List, Mapping, Sequence, Tuple

from catsearch.domain.errors import BuildError
from catsearch.domain.models import Entity, SearchIndex
from catsearch.infrastructure.term_frequency import TermFrequencyTable


def normalize_synonyms(synonyms: Mapping) -> dict[str, Tuple[str, ...]]:
    """Validate the static word -> words table."""
    if synonyms is None:
        return {}
    if not isinstance(synonyms, Mapping):
        raise BuildError(f"Synonym table must be an object, got {type(synonyms).__name__}.")

    table = {}
    for word, alternatives in synonyms.items():
        if isinstance(alternatives, str) or not isinstance(alternatives, (list, tuple)):
            raise BuildError(f"Synonyms for '{word}' must be a list of words.")
        if not all(isinstance(alt, str) for alt in alternatives):
            raise BuildError(f"Synonyms for '{word}' must all be text.")
        table[word] = tuple(alternatives)
    return table


class LexicalModelBuilder:
    """
    Weights every model word of every entity with TF-IDF and attaches its
    synonyms.

    Pass 1 registers every paragraph with the term table.
    Pass 2 reads weights, so IDF always sees the whole corpus.
    """

    def __init__(
        self,
        synonyms: Mapping[str, Sequence[str]] | None = None,
        stop_words: Iterable[str] = (),
    ):
        self._synonyms = normalize_synonyms(synonyms)
        self._stop_words = frozenset(stop_words)

    def synonyms_for(self, word: str) -> Tuple[str, ...]:
        return self._synonyms.get(word, ())

    def build(self, entities: Sequence[Entity]) -> SearchIndex:
        term_frequency = TermFrequencyTable(self._stop_words)

        # ── Pass 1: register documents ─────────────────────────────────────
        for entity in entities:
            document_id = term_frequency.add_document(entity.paragraph)
            if document_id != entity.paragraph_id:
                raise BuildError(
                    f"Paragraph id mismatch for '{entity.key}': "
                    f"expected {entity.paragraph_id}, got {document_id}"
                )
        term_frequency.seal()

        # ── Pass 2: weight model words ─────────────────────────────────────
        weighted: List[Entity] = [
            self._weight_entity(entity, term_frequency) for entity in entities
        ]

        return SearchIndex(entities=tuple(weighted), term_frequency=term_frequency)

    def _weight_entity(self, entity: Entity, term_frequency: TermFrequencyTable) -> Entity:
        model = {
            word: replace(
                token,
                weight=term_frequency.tfidf(word, entity.paragraph_id),
                synonyms=self.synonyms_for(word),
            )
            for word, token in entity.model.items()
        }
        return replace(entity, model=MappingProxyType(model))

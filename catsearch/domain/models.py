# catsearch/domain/models.py

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


# Raw text fields every corpus entry must carry, in paragraph order.
TEXT_FIELDS = ("size", "coat", "color", "description", "did_you_know")


@dataclass(frozen=True)
class ModelWord:
    """
    A noun or verb kept from an entity's text as a matchable unit.
    `weight` is the TF-IDF score of the word inside its entity's paragraph.
    """
    word: str
    pos: str
    weight: float = 0.0
    synonyms: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Sentence:
    text: str
    words: Tuple[str, ...]
    model_words: Tuple[ModelWord, ...]


@dataclass(frozen=True)
class Entity:
    """
    One catalog item (a cat breed) with its derived lexical model.
    """
    key: str
    size: str
    coat: str
    color: str
    description: str
    did_you_know: str
    paragraph: str = ""
    paragraph_id: int = -1
    sentences: Tuple[Sentence, ...] = field(default=(), repr=False)
    model: Mapping[str, ModelWord] = field(
        default_factory=lambda: MappingProxyType({}), repr=False
    )

    def field_text(self, name: str) -> str:
        if name not in TEXT_FIELDS:
            raise KeyError(f"Unknown text field: '{name}' (expected one of {TEXT_FIELDS})")
        return getattr(self, name)

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "size": self.size,
            "coat": self.coat,
            "color": self.color,
            "description": self.description,
            "did_you_know": self.did_you_know,
            "paragraphId": self.paragraph_id,
        }


@dataclass(frozen=True)
class Highlight:
    """
    Excerpt of a field around the word that anchored the match.
    Invariant: excerpt1 + highlight_word + excerpt2 == excerpt.
    """
    index: int
    excerpt: str
    highlight_word: str
    excerpt1: str
    excerpt2: str

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "excerpt": self.excerpt,
            "highlightWord": self.highlight_word,
            "excerpt1": self.excerpt1,
            "excerpt2": self.excerpt2,
        }


@dataclass
class EntityScore:
    """
    Per-query scoring scratch for one entity. Never stored on the index.
    """
    entity: Entity
    word_scores: Dict[str, float] = field(default_factory=dict)
    total_score: float = 0.0
    spotlight: Optional[str] = None


@dataclass
class SearchResult:
    """
    Represents a ranked search result returned to the caller.
    """
    entity: Entity
    total_score: float
    title: Optional[Highlight] = None

    def to_dict(self) -> dict:
        payload = self.entity.to_dict()
        payload["totalScore"] = self.total_score
        payload["title"] = self.title.to_dict() if self.title else None
        return payload

    def __repr__(self) -> str:
        excerpt = self.title.excerpt if self.title else self.entity.description[:60]
        return (
            f"SearchResult(score={self.total_score:.4f}, "
            f"key='{self.entity.key}', "
            f"excerpt='{excerpt}')"
        )


@dataclass(frozen=True)
class SearchIndex:
    """
    Immutable result of build(): every entity in corpus order plus the
    corpus-wide term statistics used for weighting.
    """
    entities: Tuple[Entity, ...]
    term_frequency: Any = field(repr=False)

    def __len__(self) -> int:
        return len(self.entities)

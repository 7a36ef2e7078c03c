# catsearch/infrastructure/highlighter.py

from typing import Callable, Optional, Tuple

from catsearch.domain.models import Entity, EntityScore, Highlight


# Characters of context kept on each side of the highlighted word.
NEIGHBORHOOD_SYMBOLS = 30
ELLIPSIS = "..."

# Fields searched for the anchor word, most informative first.
TITLE_FIELDS = ("did_you_know", "description", "size", "coat", "color")


def _spotlight_word(score: EntityScore) -> Optional[str]:
    return score.spotlight


def _first_model_word(score: EntityScore) -> Optional[str]:
    return next(iter(score.entity.model), None)


# Ordered (field, word picker) attempts; the first that finds its word wins.
TITLE_ATTEMPTS: Tuple[Tuple[str, Callable[[EntityScore], Optional[str]]], ...] = tuple(
    (field, _spotlight_word) for field in TITLE_FIELDS
) + tuple(
    (field, _first_model_word) for field in TITLE_FIELDS
)


def highlight_word(text: str, word: str) -> Optional[Highlight]:
    """
    Cut an excerpt of `text` around the first occurrence of `word`.

    The window opens at the first space at or after (index - 30) and closes
    at the first space at or after (word end + 30), so no token is cut in
    half. "..." marks a side where text was dropped.
    """
    if not text or not word:
        return None

    index = text.find(word)
    if index == -1:
        return None

    start = text.find(" ", max(0, index - NEIGHBORHOOD_SYMBOLS))
    end = text.find(" ", index + len(word) + NEIGHBORHOOD_SYMBOLS)

    prefix = suffix = ""
    if start < 0 or start > index:
        start = 0
    else:
        prefix = ELLIPSIS

    if end < index:
        end = len(text)
    else:
        suffix = ELLIPSIS

    excerpt = prefix + text[start:end] + suffix
    short_index = excerpt.find(word)
    return Highlight(
        index=short_index,
        excerpt=excerpt,
        highlight_word=word,
        excerpt1=excerpt[:short_index],
        excerpt2=excerpt[short_index + len(word):],
    )


def build_title(score: EntityScore) -> Optional[Highlight]:
    entity: Entity = score.entity
    for field, pick_word in TITLE_ATTEMPTS:
        highlight = highlight_word(entity.field_text(field), pick_word(score))
        if highlight is not None:
            return highlight
    return None

# catsearch/infrastructure/text_processing.py

from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from nltk.tokenize import PunktSentenceTokenizer, RegexpTokenizer

from catsearch.domain.errors import BuildError
from catsearch.domain.interfaces import TaggerPort
from catsearch.domain.models import TEXT_FIELDS, Entity, ModelWord, Sentence


# Only tokens whose Penn Treebank tag contains one of these become model words.
MODEL_POS_MARKERS = ("NN", "VB")

# Untrained Punkt parameters: splits on terminal punctuation followed by
# whitespace and needs no downloaded model.
_SENTENCE_TOKENIZER = PunktSentenceTokenizer()
_WORD_TOKENIZER = RegexpTokenizer(r"\w+")


def tokenize_words(text: str) -> List[str]:
    """Word tokens in reading order. No stemming, case preserved."""
    if not text:
        return []
    return _WORD_TOKENIZER.tokenize(text)


def split_sentences(text: str) -> List[str]:
    if not text or not text.strip():
        return []
    return _SENTENCE_TOKENIZER.tokenize(text)


def build_paragraph(fields: Mapping[str, str]) -> str:
    """
    Join the raw fields into the document that gets tokenized and weighted.
    No separator goes between description and did_you_know.
    """
    return (
        fields["size"] + ". "
        + fields["coat"] + ". "
        + fields["color"] + ". "
        + fields["description"]
        + fields["did_you_know"]
    )


def extract_model_words(tagged: Sequence[Tuple[str, str]]) -> List[ModelWord]:
    """
    Keep nouns and verbs, first occurrence per sentence only.
    """
    seen = set()
    model_words: List[ModelWord] = []
    for word, pos in tagged:
        if word in seen:
            continue
        if not any(marker in pos for marker in MODEL_POS_MARKERS):
            continue
        seen.add(word)
        model_words.append(ModelWord(word=word, pos=pos))
    return model_words


def normalize_entry(entry: Mapping) -> Dict[str, str]:
    """
    Validate one raw corpus entry and coerce missing text (None) to "".
    A field that is absent altogether is a malformed corpus.
    """
    if not isinstance(entry, Mapping):
        raise BuildError(f"Corpus entry must be an object, got {type(entry).__name__}.")

    key = entry.get("key")
    if not isinstance(key, str) or not key.strip():
        raise BuildError(f"Corpus entry is missing its key: {dict(entry)!r}")

    missing = [name for name in TEXT_FIELDS if name not in entry]
    if missing:
        raise BuildError(f"Entry '{key}' is missing required fields: {missing}")

    normalized = {"key": key}
    for name in TEXT_FIELDS:
        value = entry[name]
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise BuildError(
                f"Entry '{key}' field '{name}' must be text, got {type(value).__name__}."
            )
        normalized[name] = value
    return normalized


class CorpusPreprocessor:
    """
    Turns raw catalog entries into entities with sentences and an
    unweighted model (word -> ModelWord).

    Model words from later sentences overwrite earlier entries for the same
    word but keep the position of the first insertion.
    """

    def __init__(self, tagger: TaggerPort):
        self._tagger = tagger

    def process(self, corpus: Sequence[Mapping]) -> List[Entity]:
        entities: List[Entity] = []
        seen_keys = set()

        for paragraph_id, entry in enumerate(corpus):
            fields = normalize_entry(entry)
            if fields["key"] in seen_keys:
                raise BuildError(f"Duplicate corpus key: '{fields['key']}'")
            seen_keys.add(fields["key"])
            entities.append(self._process_entry(fields, paragraph_id))

        return entities

    def _process_entry(self, fields: Dict[str, str], paragraph_id: int) -> Entity:
        paragraph = build_paragraph(fields)
        model: Dict[str, ModelWord] = {}
        sentences: List[Sentence] = []

        for text in split_sentences(paragraph):
            words = tokenize_words(text)
            tagged = self._tagger.tag(words) if words else []
            model_words = extract_model_words(tagged)
            for token in model_words:
                model[token.word] = token
            sentences.append(Sentence(
                text=text,
                words=tuple(words),
                model_words=tuple(model_words),
            ))

        return Entity(
            key=fields["key"],
            size=fields["size"],
            coat=fields["coat"],
            color=fields["color"],
            description=fields["description"],
            did_you_know=fields["did_you_know"],
            paragraph=paragraph,
            paragraph_id=paragraph_id,
            sentences=tuple(sentences),
            model=MappingProxyType(model),
        )

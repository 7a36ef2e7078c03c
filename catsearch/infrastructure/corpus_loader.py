# catsearch/infrastructure/corpus_loader.py

import json
from pathlib import Path
from typing import List

from catsearch.domain.errors import BuildError
from catsearch.domain.interfaces import CorpusSourcePort


DEFAULT_CORPUS_FILE = "cats-db.json"
DEFAULT_SYNONYMS_FILE = "synonyms.json"


class JsonCorpusSource(CorpusSourcePort):
    """
    Reads the breed catalog and the synonym table from JSON files.

    cats-db.json:  { "<breed>": { "size": ..., "coat": ..., "color": ...,
                                  "description": ..., "did_you_know": ... } }
    synonyms.json: { "<word>": ["<word>", ...] }

    Breed order in the file is the corpus order (and so the paragraph ids).
    """

    def __init__(self, corpus_path: str, synonyms_path: str | None = None):
        self._corpus_path = Path(corpus_path)
        self._synonyms_path = Path(synonyms_path) if synonyms_path else None

    @classmethod
    def from_directory(cls, directory_path: str) -> "JsonCorpusSource":
        data_dir = Path(directory_path)
        return cls(
            corpus_path=str(data_dir / DEFAULT_CORPUS_FILE),
            synonyms_path=str(data_dir / DEFAULT_SYNONYMS_FILE),
        )

    def load_corpus(self) -> List[dict]:
        raw = self._read_json(self._corpus_path)
        if not isinstance(raw, dict):
            raise BuildError(
                f"Corpus file '{self._corpus_path.name}' must hold an object of breed -> details."
            )

        corpus = []
        for key, details in raw.items():
            if not isinstance(details, dict):
                raise BuildError(f"Details for breed '{key}' must be an object.")
            corpus.append({"key": key, **details})

        print(f"[CorpusLoader] Loaded {len(corpus)} entries from {self._corpus_path.name}")
        return corpus

    def load_synonyms(self) -> dict[str, List[str]]:
        if self._synonyms_path is None:
            return {}

        raw = self._read_json(self._synonyms_path)
        if not isinstance(raw, dict):
            raise BuildError(
                f"Synonym file '{self._synonyms_path.name}' must hold an object of word -> words."
            )

        print(f"[CorpusLoader] Loaded {len(raw)} synonym groups from {self._synonyms_path.name}")
        return raw

    @staticmethod
    def _read_json(file_path: Path):
        if not file_path.exists():
            raise BuildError(f"Data file not found: {file_path}")
        try:
            with open(file_path, encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as error:
            raise BuildError(f"Malformed JSON in '{file_path.name}': {error}") from error

# catsearch/infrastructure/nltk_data.py

from typing import FrozenSet

import nltk


STOP_WORDS_RESOURCE = "stopwords"
STOP_WORDS_LANGUAGE = "english"


def ensure_resource(category: str, name: str) -> None:
    """
    Make sure an NLTK data package is installed, downloading it if needed.
    Raises RuntimeError when it is missing and cannot be fetched.
    """
    try:
        nltk.data.find(f"{category}/{name}")
        return
    except LookupError:
        pass

    print(f"[NltkData] Downloading NLTK resource: {name} ...")
    if not nltk.download(name, quiet=True):
        raise RuntimeError(
            f"NLTK resource '{name}' is not installed and could not be downloaded.\n"
            f"Fix: run `python -m nltk.downloader {name}`."
        )
    print(f"[NltkData] Resource '{name}' ready.")


def load_stop_words(language: str = STOP_WORDS_LANGUAGE) -> FrozenSet[str]:
    """English stop words, excluded from the TF-IDF documents."""
    ensure_resource("corpora", STOP_WORDS_RESOURCE)
    return frozenset(nltk.corpus.stopwords.words(language))

# catsearch/domain/errors.py


class BuildError(ValueError):
    """Corpus or synonym input cannot be turned into a search index."""


class QueryError(ValueError):
    """Client supplied an empty, missing or oversized query."""

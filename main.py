# main.py

import sys
from catsearch.domain.errors import BuildError, QueryError
from catsearch.infrastructure.corpus_loader import JsonCorpusSource
from catsearch.application.search_service import CatSearchService
from catsearch.infrastructure.ranker import DEFAULT_TOP_K
from catsearch.interface.cli import (
    display_welcome_banner,
    display_indexing_status,
    prompt_for_query,
    display_results,
    display_error,
    ask_continue,
)


DATA_DIRECTORY = "data"


def main() -> None:
    display_welcome_banner()

    # ── 1. Build the index ───────────────────────────────────────────────────
    search_service = CatSearchService(
        corpus_source=JsonCorpusSource.from_directory(DATA_DIRECTORY),
        top_k=DEFAULT_TOP_K,
    )

    try:
        index = search_service.build_index()
    except (BuildError, RuntimeError) as error:
        display_error(str(error))
        sys.exit(1)

    display_indexing_status(len(index))

    # ── 2. Interactive search loop ────────────────────────────────────────────
    while True:
        query = prompt_for_query()
        try:
            results = search_service.search(query)
            display_results(query, results)
        except QueryError as error:
            display_error(str(error))

        if not ask_continue():
            break


if __name__ == "__main__":
    main()

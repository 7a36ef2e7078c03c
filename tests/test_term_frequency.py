# tests/test_term_frequency.py

import math

import pytest
from unittest.mock import MagicMock

from catsearch.application.search_engine import build
from catsearch.infrastructure.term_frequency import TermFrequencyTable


def _make_tagger():
    tagger = MagicMock()
    tagger.tag.side_effect = lambda words: [(w, "NN") for w in words]
    return tagger


def _table(*documents: str) -> TermFrequencyTable:
    table = TermFrequencyTable()
    for document in documents:
        table.add_document(document)
    table.seal()
    return table


def test_add_document_returns_sequential_ids():
    table = TermFrequencyTable()
    assert table.add_document("one") == 0
    assert table.add_document("two") == 1
    assert len(table) == 2


def test_tf_counts_lowercased_tokens():
    table = _table("Playful cats are playful. PLAYFUL!")
    assert table.tf("playful", 0) == 3
    assert table.tf("dogs", 0) == 0


def test_idf_formula():
    table = _table("cats nap", "cats play")
    assert table.idf("cats") == pytest.approx(1 + math.log(2 / 3))
    assert table.idf("nap") == pytest.approx(1.0)
    assert table.idf("unknown") == pytest.approx(1 + math.log(2))


def test_rarer_word_scores_higher():
    table = _table("cats nap", "cats play", "cats nap")
    assert table.tfidf("play", 1) > table.tfidf("cats", 1)


def test_tfidf_is_case_insensitive():
    table = _table("Siamese cats talk", "Persian cats sleep")
    assert table.tfidf("Siamese", 0) == pytest.approx(table.tfidf("siamese", 0))
    assert table.tfidf("Siamese", 1) == 0


def test_weights_cannot_be_read_before_all_documents_are_registered():
    table = TermFrequencyTable()
    table.add_document("cats nap")
    with pytest.raises(RuntimeError, match="seal"):
        table.tfidf("cats", 0)


def test_documents_cannot_be_added_after_sealing():
    table = _table("cats nap")
    with pytest.raises(RuntimeError, match="sealed"):
        table.add_document("late document")


def test_unknown_document_id_raises():
    table = _table("cats nap")
    with pytest.raises(IndexError):
        table.tfidf("cats", 5)


def test_shared_word_gets_a_different_weight_per_entity():
    corpus = [
        {
            "key": "Bengal", "size": "Large", "coat": "Short", "color": "Spotted",
            "description": "Playful and playful again. ",
            "did_you_know": "Bengals are playful swimmers.",
        },
        {
            "key": "Persian", "size": "Medium", "coat": "Long", "color": "White",
            "description": "Quiet but playful. ",
            "did_you_know": "Persians nap all day.",
        },
    ]
    index = build(corpus, {}, tagger=_make_tagger(), stop_words=())
    bengal, persian = index.entities

    idf = 1 + math.log(2 / 3)
    assert bengal.model["playful"].weight == pytest.approx(3 * idf)
    assert persian.model["playful"].weight == pytest.approx(1 * idf)
    assert bengal.model["playful"].weight != persian.model["playful"].weight


def test_stop_words_are_not_counted():
    table = TermFrequencyTable(["are", "The"])
    table.add_document("The cats are playful")
    table.add_document("the dogs are loud")
    table.seal()

    assert table.tf("are", 0) == 0
    assert table.tf("the", 1) == 0
    assert table.tfidf("are", 0) == 0
    assert table.tfidf("cats are", 0) == pytest.approx(table.tfidf("cats", 0))
    assert table.idf("are") == pytest.approx(1 + math.log(2))

import json

import pytest

from foodrag.documents import DocumentStore, FoodDocument
from foodrag.ingest import load_food_documents, parse_food_documents

from tests.conftest import SUSHI


def test_enriched_text_appends_tags():
    assert SUSHI.enriched_text == "Sushi is a Japanese dish of vinegared rice. Region: Japan. Type: Seafood."


def test_enriched_text_without_tags_is_plain_text():
    doc = FoodDocument(id="x", text="Saffron is a spice.")
    assert doc.enriched_text == "Saffron is a spice."


def test_name_is_first_line_cut_at_is():
    assert SUSHI.name == "Sushi"
    assert FoodDocument(id="x", text="Fish and chips is British\nmore").name == "Fish and chips"
    assert FoodDocument(id="y", text="Tacos are Mexican.").name == "Tacos are Mexican."


def test_documents_are_immutable():
    with pytest.raises(AttributeError):
        SUSHI.text = "changed"


def test_store_len_and_iteration(store):
    assert len(store) == 3
    assert [d.id for d in store] == ["1", "2", "3"]
    assert len(DocumentStore()) == 0


def test_bundled_corpus_loads():
    store = load_food_documents()
    assert 0 < len(store) < 100
    assert store.last_updated
    assert len({d.id for d in store}) == len(store)


def test_load_from_custom_path(tmp_path):
    path = tmp_path / "foods.json"
    path.write_text(json.dumps({
        "last_updated": "2026-01-02",
        "documents": [{"id": 7, "text": "Kimchi is fermented.", "region": "Korea"}],
    }))

    store = load_food_documents(path)

    assert store.last_updated == "2026-01-02"
    assert store.documents == (FoodDocument(id="7", text="Kimchi is fermented.", region="Korea"),)


def test_missing_corpus_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_food_documents(tmp_path / "missing.json")


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError, match="Duplicate"):
        parse_food_documents([{"id": "1", "text": "a"}, {"id": "1", "text": "b"}])


def test_record_without_text_rejected():
    with pytest.raises(ValueError, match="missing"):
        parse_food_documents([{"id": "1"}])


@pytest.mark.parametrize("field,value", [("text", 12), ("region", 1), ("type", ["Rice"])])
def test_non_string_fields_rejected(field, value):
    record = {"id": "1", "text": "Paella is a rice dish.", field: value}
    with pytest.raises(ValueError, match=f"'{field}' must be a string"):
        parse_food_documents([record])

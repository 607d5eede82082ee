import pytest
from pydantic import ValidationError

from igdb_search.core.errors import InvalidElementError, MalformedDocumentError, ParseError
from igdb_search.schemas.search import SearchResultRecord
from igdb_search.services.igdb_parser import parse_search_by_title_response


def test_parse_single_game() -> None:
    results = parse_search_by_title_response('[{"id": 7, "name": "Chrono Trigger"}]')
    assert results.result == [SearchResultRecord(id=7, title="Chrono Trigger")]


def test_parse_empty_array() -> None:
    assert parse_search_by_title_response("[]").result == []


def test_parse_keeps_order_and_duplicates() -> None:
    text = (
        '[{"id": 3, "name": "Doom"}, {"id": 1, "name": "Quake"},'
        ' {"id": 3, "name": "Doom"}, {"id": -2, "name": ""}]'
    )
    results = parse_search_by_title_response(text)
    assert [(r.id, r.title) for r in results.result] == [
        (3, "Doom"),
        (1, "Quake"),
        (3, "Doom"),
        (-2, ""),
    ]


def test_parse_maps_name_to_title() -> None:
    text = '[{"id": 10, "name": "Outer Wilds", "title": "Wrong", "slug": "outer-wilds"}]'
    record = parse_search_by_title_response(text).result[0]
    assert record.title == "Outer Wilds"
    assert record.model_dump() == {"id": 10, "title": "Outer Wilds"}


def test_parse_rejects_title_field_without_name() -> None:
    with pytest.raises(InvalidElementError) as exc_info:
        parse_search_by_title_response('[{"id": 10, "title": "Outer Wilds"}]')
    assert exc_info.value.field == "name"


def test_parse_ignores_extra_fields() -> None:
    text = '[{"id": 5, "name": "Hades", "cover": 99, "platforms": [6], "parent_game": null}]'
    assert parse_search_by_title_response(text).result == [SearchResultRecord(id=5, title="Hades")]


def test_parse_accepts_bytes() -> None:
    results = parse_search_by_title_response('[{"id": 1, "name": "Ōkami"}]'.encode("utf-8"))
    assert results.result[0].title == "Ōkami"


def test_parse_is_idempotent() -> None:
    text = '[{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]'
    assert parse_search_by_title_response(text) == parse_search_by_title_response(text)


@pytest.mark.parametrize(
    "text",
    ["", "not json", '{"id": 1, "name": "A"}', '"games"', "42", "null", '[{"id": 1,'],
)
def test_parse_malformed_document(text: str) -> None:
    with pytest.raises(MalformedDocumentError) as exc_info:
        parse_search_by_title_response(text)
    assert exc_info.value.kind == "MalformedDocument"


def test_parse_missing_id_in_later_element() -> None:
    text = '[{"id": 1, "name": "A"}, {"name": "B"}]'
    with pytest.raises(InvalidElementError) as exc_info:
        parse_search_by_title_response(text)
    err = exc_info.value
    assert err.kind == "InvalidElement"
    assert err.index == 1
    assert err.field == "id"
    assert err.document == text
    assert text in str(err)


@pytest.mark.parametrize("value", ['"1"', "1.0", "1.5", "true", "null", "[1]", "9223372036854775808"])
def test_parse_rejects_non_integer_id(value: str) -> None:
    text = f'[{{"id": {value}, "name": "A"}}]'
    with pytest.raises(InvalidElementError) as exc_info:
        parse_search_by_title_response(text)
    assert exc_info.value.field == "id"
    assert exc_info.value.document == text


@pytest.mark.parametrize("value", ["1", "null", "false", '["A"]', '{"value": "A"}'])
def test_parse_rejects_non_string_name(value: str) -> None:
    text = f'[{{"id": 1, "name": {value}}}]'
    with pytest.raises(InvalidElementError) as exc_info:
        parse_search_by_title_response(text)
    assert exc_info.value.field == "name"


def test_parse_rejects_missing_name() -> None:
    with pytest.raises(InvalidElementError):
        parse_search_by_title_response('[{"id": 1}]')


def test_parse_rejects_non_object_element() -> None:
    text = '[{"id": 1, "name": "A"}, 2]'
    with pytest.raises(InvalidElementError) as exc_info:
        parse_search_by_title_response(text)
    assert exc_info.value.index == 1
    assert exc_info.value.field is None
    assert exc_info.value.document == text


def test_parse_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        parse_search_by_title_response("not json")
    with pytest.raises(ParseError):
        parse_search_by_title_response('[{"id": "1", "name": "A"}]')


def test_records_are_immutable() -> None:
    record = parse_search_by_title_response('[{"id": 7, "name": "Chrono Trigger"}]').result[0]
    with pytest.raises(ValidationError):
        record.title = "Other"  # type: ignore[misc]

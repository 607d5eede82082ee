from __future__ import annotations

from typing import Any

import orjson

from igdb_search.core.errors import InvalidElementError, MalformedDocumentError
from igdb_search.schemas.search import SearchResultList, SearchResultRecord

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _document_text(document_text: str | bytes) -> str:
    if isinstance(document_text, bytes):
        return document_text.decode("utf-8", errors="replace")
    return document_text


def _decode(document_text: str | bytes) -> Any:
    try:
        return orjson.loads(document_text)
    except orjson.JSONDecodeError as exc:
        raise MalformedDocumentError(
            f"Failed to parse JSON response from IGDB.SearchByTitle: {exc}"
        ) from exc


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return INT64_MIN <= value <= INT64_MAX


def _extract_id(game: dict[str, Any], index: int, document_text: str | bytes) -> int:
    value = game.get("id")
    if not _is_integer(value):
        raise InvalidElementError(
            f"Game #{index} in response has no 'id' field or has unexpected type.",
            document=_document_text(document_text),
            index=index,
            field="id",
        )
    return value


def _extract_title(game: dict[str, Any], index: int, document_text: str | bytes) -> str:
    value = game.get("name")
    if not isinstance(value, str):
        raise InvalidElementError(
            f"Game #{index} in response has no 'name' field or has unexpected type.",
            document=_document_text(document_text),
            index=index,
            field="name",
        )
    return value


def parse_search_by_title_response(document_text: str | bytes) -> SearchResultList:
    """Turn an IGDB title-search response body into validated search results.

    Every element must carry an integer ``id`` and a string ``name``; the
    ``name`` of the element becomes the ``title`` of the record. The first
    element that does not fails the whole call, so callers either get one
    record per element, in response order, or an exception.

    Raises:
        MalformedDocumentError: the text is not JSON or its root is not an array.
        InvalidElementError: an element is not an object or has a missing or
            mistyped ``id``/``name``. The error carries the full response text.
    """
    games = _decode(document_text)
    if not isinstance(games, list):
        raise MalformedDocumentError(
            f"Expected a JSON array from IGDB.SearchByTitle, got {type(games).__name__}."
        )

    out: list[SearchResultRecord] = []
    for index, game in enumerate(games):
        if not isinstance(game, dict):
            raise InvalidElementError(
                f"Game #{index} in response is not an object.",
                document=_document_text(document_text),
                index=index,
                field=None,
            )
        game_id = _extract_id(game, index, document_text)
        title = _extract_title(game, index, document_text)
        out.append(SearchResultRecord(id=game_id, title=title))

    return SearchResultList(result=out)

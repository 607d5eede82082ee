from igdb_search.core.errors import InvalidElementError, MalformedDocumentError, ParseError
from igdb_search.schemas.search import SearchResultList, SearchResultRecord
from igdb_search.services.igdb_parser import parse_search_by_title_response

__all__ = [
    "InvalidElementError",
    "MalformedDocumentError",
    "ParseError",
    "SearchResultList",
    "SearchResultRecord",
    "parse_search_by_title_response",
]

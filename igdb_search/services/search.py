from __future__ import annotations

import logging
import re
import unicodedata
from datetime import datetime, timezone
from difflib import SequenceMatcher
from pathlib import Path

from igdb_search.core.config import settings
from igdb_search.core.errors import InvalidElementError, ParseError
from igdb_search.schemas.search import SearchResultList, SearchResultRecord
from igdb_search.services.igdb_parser import parse_search_by_title_response
from igdb_search.services.snapshot import save_snapshot

IGDB_PC_PLATFORMS = (6, 13)

logger = logging.getLogger(__name__)


def build_search_query(title: str) -> str:
    clean = (title or "").replace('"', "").strip()
    platforms = ",".join(str(p) for p in IGDB_PC_PLATFORMS)
    return f'search "{clean}"; fields *; where platforms = ({platforms});'


def _default_snapshot_base() -> Path | None:
    root = settings.snapshot_path
    if root is None:
        return None
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
    return root / f"search_{stamp}"


def load_search_results(
    document_text: str | bytes,
    *,
    snapshot_base: str | Path | None = None,
) -> SearchResultList:
    try:
        results = parse_search_by_title_response(document_text)
    except InvalidElementError as exc:
        logger.warning(
            "IGDB search response rejected (%s, element %d, field %s): %s\n%s",
            exc.kind,
            exc.index,
            exc.field,
            exc.message,
            exc.document,
        )
        raise
    except ParseError as exc:
        logger.warning("IGDB search response rejected (%s): %s", exc.kind, exc.message)
        raise

    logger.debug("IGDB search response parsed into %d result(s)", len(results.result))

    base = snapshot_base if snapshot_base is not None else _default_snapshot_base()
    if base is not None:
        txt_path, bin_path = save_snapshot(results, base)
        logger.debug("Saved search snapshot to %s and %s", txt_path, bin_path)
    return results


def _normalize_title(text: str) -> str:
    clean = unicodedata.normalize("NFD", (text or "").lower())
    clean = "".join(ch for ch in clean if unicodedata.category(ch) != "Mn")
    clean = re.sub(r"[^a-z0-9]+", " ", clean)
    return re.sub(r"\s+", " ", clean).strip()


def title_similarity(query: str, title: str) -> float:
    left = _normalize_title(query)
    right = _normalize_title(title)
    if not left or not right:
        return 0.0
    if left == right:
        return 1.0
    return SequenceMatcher(a=left, b=right).ratio()


def sorted_by_relevance(
    title: str,
    records: list[SearchResultRecord],
    *,
    threshold: float | None = None,
) -> list[SearchResultRecord]:
    """Order candidates by how closely their title matches ``title``.

    Ties keep response order. With ``threshold`` set, candidates scoring
    below it are dropped.
    """
    scored = [(title_similarity(title, record.title), record) for record in records]
    if threshold is not None:
        scored = [(score, record) for score, record in scored if score >= threshold]
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [record for _, record in scored]

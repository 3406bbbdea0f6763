"""Lookup of existing data sources and candidate parent pages.

Notion's /search endpoint matches titles fuzzily, so every hit is narrowed
here to an exact title comparison before it counts as found.
"""

import logging

from inthegreen_proxy.notion.client import notion_request
from inthegreen_proxy.notion.models import (
    LookupFailed,
    NoAccessibleParent,
    ParentCandidate,
    SearchResult,
)
from inthegreen_proxy.notion.schema import title_text

logger = logging.getLogger(__name__)

_PAGE_SIZE = 100

NO_PAGES_MESSAGE = "No pages shared with integration. Please share at least one page in Notion."


async def _search_all(token: str, payload: dict, what: str) -> list[dict] | LookupFailed:
    """Run a /search query, following pagination, and return all results."""
    results: list[dict] = []
    start_cursor: str | None = None

    while True:
        body = {**payload, "page_size": _PAGE_SIZE}
        if start_cursor:
            body["start_cursor"] = start_cursor

        response = await notion_request("/search", token, method="POST", body=body)
        if not response.is_success:
            logger.warning("Notion search for %s failed: %s", what, response.status_code)
            return LookupFailed(
                message=f"{what.capitalize()} search failed: {response.status_code}",
                status=response.status_code,
            )

        data = response.json()
        results.extend(data.get("results", []))

        if data.get("has_more") and data.get("next_cursor"):
            start_cursor = data["next_cursor"]
        else:
            return results


async def search_named(token: str, title: str) -> SearchResult | None | LookupFailed:
    """Find a data source whose title is exactly ``title``.

    Returns None when no result matches exactly; substring hits such as
    "Transaction Log" for "Transaction" are ignored.
    """
    results = await _search_all(
        token,
        {"query": title, "filter": {"property": "object", "value": "data_source"}},
        "data source",
    )
    if isinstance(results, LookupFailed):
        return results

    for item in results:
        if title_text(item.get("title")) == title:
            parent = item.get("parent") or {}
            return SearchResult(id=item["id"], title=title, database_id=parent.get("database_id"))
    return None


def _page_title(page: dict) -> str:
    """Flatten the first title-typed property of a page."""
    for prop in (page.get("properties") or {}).values():
        if prop.get("title") is not None:
            return title_text(prop["title"])
    return ""


async def list_parent_candidates(token: str) -> list[ParentCandidate] | LookupFailed:
    """List every page shared with the integration, in API order."""
    results = await _search_all(
        token, {"filter": {"property": "object", "value": "page"}}, "parent page"
    )
    if isinstance(results, LookupFailed):
        return results
    return [ParentCandidate(id=page["id"], title_text=_page_title(page)) for page in results]


def pick_parent(candidates: list[ParentCandidate], name: str) -> ParentCandidate:
    """Choose a parent page: exact title, then title containing ``name``, then the first.

    Pure function; ``candidates`` must be non-empty.
    """
    for candidate in candidates:
        if candidate.title_text == name:
            return candidate
    for candidate in candidates:
        if name in candidate.title_text:
            return candidate
    return candidates[0]


async def find_parent_container(
    token: str, name: str
) -> str | NoAccessibleParent | LookupFailed:
    """Return the id of the page a new database should be created under."""
    candidates = await list_parent_candidates(token)
    if isinstance(candidates, LookupFailed):
        return candidates
    if not candidates:
        return NoAccessibleParent(message=NO_PAGES_MESSAGE)

    parent = pick_parent(candidates, name)
    logger.info("Using parent page %s (%r)", parent.id, parent.title_text)
    return parent.id

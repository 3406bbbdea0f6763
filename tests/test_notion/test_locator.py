"""Tests for data source search and parent page resolution."""

from unittest.mock import AsyncMock, patch

import httpx

from inthegreen_proxy.notion.locator import (
    NO_PAGES_MESSAGE,
    find_parent_container,
    pick_parent,
    search_named,
)
from inthegreen_proxy.notion.models import (
    LookupFailed,
    NoAccessibleParent,
    ParentCandidate,
    SearchResult,
)


def _rich(text: str) -> list[dict]:
    return [{"type": "text", "plain_text": text}]


def _data_source(ds_id: str, title: str, database_id: str | None = None) -> dict:
    item = {"object": "data_source", "id": ds_id, "title": _rich(title)}
    if database_id:
        item["parent"] = {"type": "database_id", "database_id": database_id}
    return item


def _page(page_id: str, title: str) -> dict:
    return {
        "object": "page",
        "id": page_id,
        "properties": {"title": {"id": "title", "type": "title", "title": _rich(title)}},
    }


def _results(items: list[dict], has_more=False, next_cursor=None) -> httpx.Response:
    return httpx.Response(
        200, json={"results": items, "has_more": has_more, "next_cursor": next_cursor}
    )


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_search_named_exact_match_wins_over_substring(mock_request):
    """A fuzzy hit like "Transaction Log" does not count for "Transaction"."""
    mock_request.return_value = _results(
        [_data_source("ds-log", "Transaction Log"), _data_source("ds-tx", "Transaction")]
    )

    result = await search_named("tok", "Transaction")

    assert result == SearchResult(id="ds-tx", title="Transaction")


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_search_named_substring_only_is_absent(mock_request):
    mock_request.return_value = _results([_data_source("ds-log", "Transaction Log")])

    assert await search_named("tok", "Transaction") is None


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_search_named_empty_results(mock_request):
    mock_request.return_value = _results([])

    assert await search_named("tok", "Transaction") is None


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_search_named_request_body(mock_request):
    mock_request.return_value = _results([])

    await search_named("tok", "Transaction")

    args, kwargs = mock_request.call_args
    assert args == ("/search", "tok")
    assert kwargs["method"] == "POST"
    assert kwargs["body"]["query"] == "Transaction"
    assert kwargs["body"]["filter"] == {"property": "object", "value": "data_source"}


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_search_named_flattens_split_title(mock_request):
    """Titles split over several rich_text fragments are joined before comparing."""
    item = {
        "object": "data_source",
        "id": "ds-db",
        "title": [{"plain_text": "InTheGreenYet"}, {"plain_text": " DB"}],
    }
    mock_request.return_value = _results([item])

    result = await search_named("tok", "InTheGreenYet DB")

    assert result is not None
    assert result.id == "ds-db"


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_search_named_reports_parent_database(mock_request):
    mock_request.return_value = _results(
        [_data_source("ds-db", "InTheGreenYet DB", database_id="db-1")]
    )

    result = await search_named("tok", "InTheGreenYet DB")

    assert result.database_id == "db-1"


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_search_named_follows_pagination(mock_request):
    mock_request.side_effect = [
        _results([_data_source("ds-1", "Transactions")], has_more=True, next_cursor="c-2"),
        _results([_data_source("ds-2", "Transaction")]),
    ]

    result = await search_named("tok", "Transaction")

    assert result.id == "ds-2"
    assert mock_request.call_count == 2
    assert mock_request.call_args.kwargs["body"]["start_cursor"] == "c-2"


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_search_named_non_2xx_is_lookup_failed(mock_request):
    """A failed search is an error value, never "not found"."""
    mock_request.return_value = httpx.Response(502, text="bad gateway")

    result = await search_named("tok", "Transaction")

    assert isinstance(result, LookupFailed)
    assert result.status == 502
    assert "502" in result.message


def test_pick_parent_priority():
    """Exact title beats substring, substring beats API order."""
    candidates = [
        ParentCandidate(id="p-notes", title_text="Notes"),
        ParentCandidate(id="p-archive", title_text="InTheGreenYet Archive"),
        ParentCandidate(id="p-exact", title_text="InTheGreenYet"),
    ]
    assert pick_parent(candidates, "InTheGreenYet").id == "p-exact"
    assert pick_parent(candidates[:2], "InTheGreenYet").id == "p-archive"
    assert pick_parent(candidates[:1], "InTheGreenYet").id == "p-notes"


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_find_parent_container_prefers_exact_title(mock_request):
    mock_request.return_value = _results(
        [
            _page("p-notes", "Notes"),
            _page("p-archive", "InTheGreenYet Archive"),
            _page("p-exact", "InTheGreenYet"),
        ]
    )

    assert await find_parent_container("tok", "InTheGreenYet") == "p-exact"
    body = mock_request.call_args.kwargs["body"]
    assert body["filter"] == {"property": "object", "value": "page"}
    assert "query" not in body


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_find_parent_container_falls_back_to_first_page(mock_request):
    mock_request.return_value = _results([_page("p-1", "Notes"), _page("p-2", "Journal")])

    assert await find_parent_container("tok", "InTheGreenYet") == "p-1"


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_find_parent_container_page_without_properties(mock_request):
    mock_request.return_value = _results([{"object": "page", "id": "p-bare"}])

    assert await find_parent_container("tok", "InTheGreenYet") == "p-bare"


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_find_parent_container_no_pages(mock_request):
    """No shared pages is a user-actionable failure, not a transport error."""
    mock_request.return_value = _results([])

    result = await find_parent_container("tok", "InTheGreenYet")

    assert isinstance(result, NoAccessibleParent)
    assert not isinstance(result, LookupFailed)
    assert result.message == NO_PAGES_MESSAGE


@patch("inthegreen_proxy.notion.locator.notion_request", new_callable=AsyncMock)
async def test_find_parent_container_non_2xx(mock_request):
    mock_request.return_value = httpx.Response(401, json={"code": "unauthorized"})

    result = await find_parent_container("tok", "InTheGreenYet")

    assert isinstance(result, LookupFailed)
    assert result.status == 401

import json
from urllib.parse import parse_qs, urlparse

import pytest
import responses

from core.errors import MissingCredentialError, RemoteApiError
from core.notion_api import NotionAPI

from conftest import API, TOKEN


def _body(call):
    return json.loads(call.request.body)


def _query(call):
    return parse_qs(urlparse(call.request.url).query)


def test_empty_token_is_rejected():
    with pytest.raises(MissingCredentialError):
        NotionAPI("  ")


def test_every_request_carries_auth_and_version_headers(notion, mocked):
    mocked.add(responses.GET, f"{API}/users/me", json={"object": "user", "id": "bot"})

    assert notion.get_bot_user() == {"object": "user", "id": "bot"}

    headers = mocked.calls[0].request.headers
    assert headers["Authorization"] == f"Bearer {TOKEN}"
    assert headers["Notion-Version"] == "2025-09-03"
    assert headers["Content-Type"] == "application/json"


def test_search_without_arguments_sends_empty_object(notion, mocked):
    mocked.add(responses.POST, f"{API}/search", json={"object": "list", "results": []})

    notion.search()

    assert _body(mocked.calls[0]) == {}


def test_search_builds_filter_and_sort(notion, mocked):
    mocked.add(responses.POST, f"{API}/search", json={"object": "list", "results": []})

    notion.search(query="Roadmap", filter_object="database", sort_direction="ascending", page_size=5)

    assert _body(mocked.calls[0]) == {
        "query": "Roadmap",
        "filter": {"property": "object", "value": "database"},
        "sort": {"timestamp": "last_edited_time", "direction": "ascending"},
        "page_size": 5,
    }


def test_update_page_drops_none_but_keeps_false(notion, mocked):
    mocked.add(responses.PATCH, f"{API}/pages/p1", json={"object": "page", "id": "p1"})

    notion.update_page("p1", archived=False)

    assert _body(mocked.calls[0]) == {"archived": False}


def test_move_page_wraps_parent(notion, mocked):
    mocked.add(responses.POST, f"{API}/pages/p1/move", json={"object": "page", "id": "p1"})

    notion.move_page("p1", {"page_id": "p2"})

    assert _body(mocked.calls[0]) == {"parent": {"page_id": "p2"}}


def test_non_2xx_raises_remote_api_error(notion, mocked):
    mocked.add(responses.GET, f"{API}/pages/missing", body="not found", status=404)

    with pytest.raises(RemoteApiError) as exc:
        notion.get_page("missing")

    assert exc.value.status == 404
    assert exc.value.body == "not found"
    assert "404" in str(exc.value)
    assert "not found" in str(exc.value)


def test_list_endpoints_put_cursor_in_query_string(notion, mocked):
    mocked.add(responses.GET, f"{API}/users", json={"object": "list", "results": [], "next_cursor": None})

    notion.list_users(start_cursor="cur-1", page_size=25)

    assert _query(mocked.calls[0]) == {"start_cursor": ["cur-1"], "page_size": ["25"]}
    assert mocked.calls[0].request.body is None


def test_list_endpoint_without_paging_has_no_query_string(notion, mocked):
    mocked.add(responses.GET, f"{API}/blocks/b1/children", json={"object": "list", "results": []})

    notion.get_block_children("b1")

    assert urlparse(mocked.calls[0].request.url).query == ""


def test_query_endpoints_put_cursor_in_body(notion, mocked):
    mocked.add(responses.POST, f"{API}/data_sources/ds1/query", json={"object": "list", "results": []})

    notion.query_data_source("ds1", filter={"property": "Status", "select": {"equals": "Done"}}, start_cursor="cur-2")

    assert _body(mocked.calls[0]) == {
        "filter": {"property": "Status", "select": {"equals": "Done"}},
        "start_cursor": "cur-2",
    }
    assert urlparse(mocked.calls[0].request.url).query == ""


def test_comments_listing_passes_block_id_as_query(notion, mocked):
    mocked.add(responses.GET, f"{API}/comments", json={"object": "list", "results": []})

    notion.get_comments("b1", page_size=10)

    assert _query(mocked.calls[0]) == {"block_id": ["b1"], "page_size": ["10"]}


def test_create_data_source_sets_database_parent(notion, mocked):
    mocked.add(responses.POST, f"{API}/data_sources", json={"object": "data_source", "id": "ds1"})

    notion.create_data_source("db1", title=[{"type": "text", "text": {"content": "Tasks"}}])

    assert _body(mocked.calls[0]) == {
        "parent": {"type": "database", "database_id": "db1"},
        "title": [{"type": "text", "text": {"content": "Tasks"}}],
    }


def test_delete_block_uses_delete(notion, mocked):
    mocked.add(responses.DELETE, f"{API}/blocks/b1", json={"object": "block", "id": "b1", "in_trash": True})

    assert notion.delete_block("b1")["in_trash"] is True
    assert mocked.calls[0].request.method == "DELETE"


def test_each_call_is_one_request(notion, mocked):
    mocked.add(responses.GET, f"{API}/pages/p1", json={"object": "page", "id": "p1"})

    first = notion.get_page("p1")
    second = notion.get_page("p1")

    assert first == second
    assert len(mocked.calls) == 2

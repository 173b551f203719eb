from tools import TOOL_CATEGORIES, TOOL_SPECS, advertised_tools
from tools.schema import validation_schema

HINTS = ("readOnlyHint", "destructiveHint", "openWorldHint")


def test_catalog_has_25_uniquely_named_tools_in_order():
    names = [spec["name"] for spec in TOOL_SPECS]

    assert len(names) == 25
    assert len(set(names)) == 25
    assert names[0] == "notion_search"
    assert names[-1] == "notion_get_bot_user"
    assert all(n.startswith("notion_") for n in names)


def test_categories_count_tools_per_resource():
    assert TOOL_CATEGORIES == {
        "search": 1,
        "pages": 5,
        "blocks": 5,
        "data_sources": 5,
        "databases": 3,
        "comments": 3,
        "users": 3,
    }


def test_every_descriptor_is_complete():
    for spec in TOOL_SPECS:
        assert spec["description"]
        assert spec["inputSchema"]["type"] == "object"
        assert spec["annotations"]["title"]
        for hint in HINTS:
            assert isinstance(spec["annotations"][hint], bool), (spec["name"], hint)
        props = spec["inputSchema"]["properties"]
        for field in spec["inputSchema"].get("required", []):
            assert field in props, (spec["name"], field)


def test_only_delete_block_is_destructive():
    destructive = [s["name"] for s in TOOL_SPECS if s["annotations"]["destructiveHint"]]
    assert destructive == ["notion_delete_block"]


def test_read_only_tools_are_reads():
    for spec in TOOL_SPECS:
        if spec["annotations"]["readOnlyHint"]:
            verb = spec["name"].split("_")[1]
            assert verb in ("search", "get", "list", "query"), spec["name"]


def test_advertised_catalog_is_verbatim_and_detached():
    tools = advertised_tools()

    assert tools == TOOL_SPECS
    page_id = tools[2]["inputSchema"]["properties"]["page_id"]
    assert page_id["description"] == "Page ID (UUID, with or without dashes)"

    tools[2]["inputSchema"]["properties"].clear()
    assert TOOL_SPECS[2]["inputSchema"]["properties"]


def test_validation_schema_is_stricter_and_leaves_advertised_alone():
    spec = next(s for s in TOOL_SPECS if s["name"] == "notion_query_data_source")

    schema = validation_schema(spec)

    assert schema["properties"]["page_size"] == {"type": "integer", "minimum": 1, "maximum": 100}
    assert schema["properties"]["data_source_id"] == {"type": "string", "minLength": 1}
    assert "description" not in schema["properties"]["filter"]
    assert spec["inputSchema"]["properties"]["page_size"]["type"] == "number"
    assert "description" in spec["inputSchema"]["properties"]["filter"]


def test_comment_validation_requires_page_or_discussion():
    spec = next(s for s in TOOL_SPECS if s["name"] == "notion_create_comment")

    schema = validation_schema(spec)

    assert schema["anyOf"] == [{"required": ["parent_page_id"]}, {"required": ["discussion_id"]}]
    assert "anyOf" not in spec["inputSchema"]

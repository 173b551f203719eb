from core.notion_api import NotionAPI

TOOL_SPECS = [
    {
        "name": "notion_search",
        "description": "Search pages and databases in your Notion workspace by title. Filter by object type and sort by last edited time.",
        "annotations": {
            "title": "Search Notion",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search text to match against titles"},
                "filter_object": {"type": "string", "enum": ["page", "database"], "description": "Limit results to pages or databases only"},
                "sort_direction": {"type": "string", "enum": ["ascending", "descending"], "description": "Sort by last_edited_time"},
                "start_cursor": {"type": "string", "description": "Pagination cursor from previous response"},
                "page_size": {"type": "number", "description": "Results per page (max 100)"},
            },
        },
    },
]


def search(client: NotionAPI, args: dict):
    return client.search(
        query=args.get("query"),
        filter_object=args.get("filter_object"),
        sort_direction=args.get("sort_direction"),
        start_cursor=args.get("start_cursor"),
        page_size=args.get("page_size"),
    )


RUNNERS = {
    "notion_search": search,
}

from core.notion_api import NotionAPI

# Legacy single-table databases. Kept for integrations not yet on data sources.
TOOL_SPECS = [
    {
        "name": "notion_get_database",
        "description": "Get a database by ID (legacy endpoint). Returns schema with properties and title. For new integrations prefer data source endpoints.",
        "annotations": {
            "title": "Get Database",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "database_id": {"type": "string", "description": "Database ID"},
            },
            "required": ["database_id"],
        },
    },
    {
        "name": "notion_query_database",
        "description": "Query a database with filters and sorts (legacy endpoint). For new integrations prefer notion_query_data_source.",
        "annotations": {
            "title": "Query Database",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "database_id": {"type": "string", "description": "Database ID to query"},
                "filter": {"type": "object", "description": "Filter object (Notion filter syntax)"},
                "sorts": {"type": "array", "description": "Sort criteria array"},
                "start_cursor": {"type": "string", "description": "Pagination cursor"},
                "page_size": {"type": "number", "description": "Results per page (max 100)"},
            },
            "required": ["database_id"],
        },
    },
    {
        "name": "notion_create_database",
        "description": "Create a new inline database inside a page (legacy). Must include at least one title property in the schema.",
        "annotations": {
            "title": "Create Database",
            "readOnlyHint": False,
            "destructiveHint": False,
            "openWorldHint": False,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "parent": {"type": "object", "description": 'Parent page: { "type": "page_id", "page_id": "..." }'},
                "title": {"type": "array", "description": "Database title as rich text"},
                "properties": {"type": "object", "description": "Property schema. Must include a title property."},
            },
            "required": ["parent", "title", "properties"],
        },
    },
]


def get_database(client: NotionAPI, args: dict):
    return client.get_database(args["database_id"])


def query_database(client: NotionAPI, args: dict):
    return client.query_database(
        args["database_id"],
        filter=args.get("filter"),
        sorts=args.get("sorts"),
        start_cursor=args.get("start_cursor"),
        page_size=args.get("page_size"),
    )


def create_database(client: NotionAPI, args: dict):
    return client.create_database(args["parent"], args["title"], args["properties"])


RUNNERS = {
    "notion_get_database": get_database,
    "notion_query_database": query_database,
    "notion_create_database": create_database,
}

from core.notion_api import NotionAPI

# Data sources are the 2025-09-03 API's tables inside a database container.
TOOL_SPECS = [
    {
        "name": "notion_create_data_source",
        "description": "Create a new data source (table) under an existing database. Data sources are individual tables within a database (API 2025-09-03).",
        "annotations": {
            "title": "Create Data Source",
            "readOnlyHint": False,
            "destructiveHint": False,
            "openWorldHint": False,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "database_id": {"type": "string", "description": "Parent database ID"},
                "title": {"type": "array", "description": 'Title as rich text: [{ "type": "text", "text": { "content": "My Table" } }]'},
                "properties": {"type": "object", "description": "Property schema definitions"},
            },
            "required": ["database_id"],
        },
    },
    {
        "name": "notion_get_data_source",
        "description": "Retrieve a data source by ID. Returns title, property schema, and timestamps.",
        "annotations": {
            "title": "Get Data Source",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "data_source_id": {"type": "string", "description": "Data source ID"},
            },
            "required": ["data_source_id"],
        },
    },
    {
        "name": "notion_update_data_source",
        "description": "Update a data source title or property schema.",
        "annotations": {
            "title": "Update Data Source",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": False,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "data_source_id": {"type": "string", "description": "Data source ID"},
                "title": {"type": "array", "description": "New title as rich text"},
                "properties": {"type": "object", "description": "Updated property schema"},
            },
            "required": ["data_source_id"],
        },
    },
    {
        "name": "notion_query_data_source",
        "description": "Query pages in a data source with filters and sorts. For new API (2025-09-03). For legacy databases use notion_query_database.",
        "annotations": {
            "title": "Query Data Source",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "data_source_id": {"type": "string", "description": "Data source ID to query"},
                "filter": {"type": "object", "description": 'Filter: { "property": "Status", "select": { "equals": "Done" } }'},
                "sorts": {"type": "array", "description": 'Sorts: [{ "property": "Created", "direction": "descending" }]'},
                "start_cursor": {"type": "string", "description": "Pagination cursor"},
                "page_size": {"type": "number", "description": "Results per page (max 100)"},
            },
            "required": ["data_source_id"],
        },
    },
    {
        "name": "notion_list_data_source_templates",
        "description": "List page templates available in a data source.",
        "annotations": {
            "title": "List Data Source Templates",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "data_source_id": {"type": "string", "description": "Data source ID"},
                "start_cursor": {"type": "string", "description": "Pagination cursor"},
                "page_size": {"type": "number", "description": "Results per page"},
            },
            "required": ["data_source_id"],
        },
    },
]


def create_data_source(client: NotionAPI, args: dict):
    return client.create_data_source(
        args["database_id"],
        title=args.get("title"),
        properties=args.get("properties"),
    )


def get_data_source(client: NotionAPI, args: dict):
    return client.get_data_source(args["data_source_id"])


def update_data_source(client: NotionAPI, args: dict):
    return client.update_data_source(
        args["data_source_id"],
        title=args.get("title"),
        properties=args.get("properties"),
    )


def query_data_source(client: NotionAPI, args: dict):
    return client.query_data_source(
        args["data_source_id"],
        filter=args.get("filter"),
        sorts=args.get("sorts"),
        start_cursor=args.get("start_cursor"),
        page_size=args.get("page_size"),
    )


def list_data_source_templates(client: NotionAPI, args: dict):
    return client.list_data_source_templates(
        args["data_source_id"],
        start_cursor=args.get("start_cursor"),
        page_size=args.get("page_size"),
    )


RUNNERS = {
    "notion_create_data_source": create_data_source,
    "notion_get_data_source": get_data_source,
    "notion_update_data_source": update_data_source,
    "notion_query_data_source": query_data_source,
    "notion_list_data_source_templates": list_data_source_templates,
}

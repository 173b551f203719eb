from core.notion_api import NotionAPI

TOOL_SPECS = [
    {
        "name": "notion_create_page",
        "description": "Create a new page in Notion. Set parent as a data source (data_source_id) or another page (page_id). Provide properties matching the parent schema. Optionally include initial content blocks.",
        "annotations": {
            "title": "Create Page",
            "readOnlyHint": False,
            "destructiveHint": False,
            "openWorldHint": False,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "parent": {"type": "object", "description": 'Parent: { "data_source_id": "..." } for database pages, or { "page_id": "..." } for sub-pages'},
                "properties": {"type": "object", "description": 'Page properties. For title: { "Name": { "title": [{ "text": { "content": "..." } }] } }'},
                "children": {"type": "array", "description": "Initial content blocks (optional)"},
                "icon": {"type": "object", "description": 'Page icon: { "type": "emoji", "emoji": "..." }'},
                "cover": {"type": "object", "description": 'Cover image: { "type": "external", "external": { "url": "..." } }'},
            },
            "required": ["parent", "properties"],
        },
    },
    {
        "name": "notion_get_page",
        "description": "Retrieve a Notion page by ID. Returns properties, parent, timestamps, and URL. Use notion_get_block_children to read the page content.",
        "annotations": {
            "title": "Get Page",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "page_id": {"type": "string", "description": "Page ID (UUID, with or without dashes)"},
            },
            "required": ["page_id"],
        },
    },
    {
        "name": "notion_update_page",
        "description": "Update a Notion page. Change properties, icon, cover, or archive/trash status. Use block tools to update page content.",
        "annotations": {
            "title": "Update Page",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": False,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "page_id": {"type": "string", "description": "Page ID to update"},
                "properties": {"type": "object", "description": "Updated properties"},
                "icon": {"type": "object", "description": "New page icon"},
                "cover": {"type": "object", "description": "New cover image"},
                "archived": {"type": "boolean", "description": "Set true to archive"},
                "in_trash": {"type": "boolean", "description": "Set true to move to trash"},
            },
            "required": ["page_id"],
        },
    },
    {
        "name": "notion_move_page",
        "description": "Move a page to a new parent page or data source.",
        "annotations": {
            "title": "Move Page",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": False,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "page_id": {"type": "string", "description": "Page ID to move"},
                "new_parent": {"type": "object", "description": 'New parent: { "page_id": "..." } or { "data_source_id": "..." }'},
            },
            "required": ["page_id", "new_parent"],
        },
    },
    {
        "name": "notion_get_page_property",
        "description": "Retrieve a specific property value from a page. Useful for paginated properties like relations or rollups.",
        "annotations": {
            "title": "Get Page Property",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "page_id": {"type": "string", "description": "Page ID"},
                "property_id": {"type": "string", "description": "Property ID (from page properties response)"},
                "start_cursor": {"type": "string", "description": "Pagination cursor"},
                "page_size": {"type": "number", "description": "Items per page"},
            },
            "required": ["page_id", "property_id"],
        },
    },
]


def create_page(client: NotionAPI, args: dict):
    return client.create_page(
        parent=args["parent"],
        properties=args["properties"],
        children=args.get("children"),
        icon=args.get("icon"),
        cover=args.get("cover"),
    )


def get_page(client: NotionAPI, args: dict):
    return client.get_page(args["page_id"])


def update_page(client: NotionAPI, args: dict):
    return client.update_page(
        args["page_id"],
        properties=args.get("properties"),
        icon=args.get("icon"),
        cover=args.get("cover"),
        archived=args.get("archived"),
        in_trash=args.get("in_trash"),
    )


def move_page(client: NotionAPI, args: dict):
    return client.move_page(args["page_id"], parent=args["new_parent"])


def get_page_property(client: NotionAPI, args: dict):
    return client.get_page_property(
        args["page_id"],
        args["property_id"],
        start_cursor=args.get("start_cursor"),
        page_size=args.get("page_size"),
    )


RUNNERS = {
    "notion_create_page": create_page,
    "notion_get_page": get_page,
    "notion_update_page": update_page,
    "notion_move_page": move_page,
    "notion_get_page_property": get_page_property,
}

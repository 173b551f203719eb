from core.notion_api import NotionAPI

TOOL_SPECS = [
    {
        "name": "notion_get_block",
        "description": "Retrieve a single block by ID. Returns block type, content, and whether it has children.",
        "annotations": {
            "title": "Get Block",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "block_id": {"type": "string", "description": "Block ID (a page ID also works)"},
            },
            "required": ["block_id"],
        },
    },
    {
        "name": "notion_get_block_children",
        "description": "Get child blocks of a page or block. This is how you read page content. Returns a paginated list of blocks.",
        "annotations": {
            "title": "Get Block Children",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "block_id": {"type": "string", "description": "Block or page ID"},
                "start_cursor": {"type": "string", "description": "Pagination cursor"},
                "page_size": {"type": "number", "description": "Blocks per page (max 100)"},
            },
            "required": ["block_id"],
        },
    },
    {
        "name": "notion_append_blocks",
        "description": "Append content blocks to a page or block. Max 100 blocks, 2 levels of nesting. Common types: paragraph, heading_1/2/3, bulleted_list_item, numbered_list_item, to_do, code, quote, callout, divider, table.",
        "annotations": {
            "title": "Append Block Children",
            "readOnlyHint": False,
            "destructiveHint": False,
            "openWorldHint": False,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "block_id": {"type": "string", "description": "Page or block ID to append to"},
                "children": {"type": "array", "description": 'Block objects. Example: { "type": "paragraph", "paragraph": { "rich_text": [{ "type": "text", "text": { "content": "Hello" } }] } }'},
            },
            "required": ["block_id", "children"],
        },
    },
    {
        "name": "notion_update_block",
        "description": 'Update a block\'s content. Send the block type key with updated data, e.g. { "paragraph": { "rich_text": [...] } }.',
        "annotations": {
            "title": "Update Block",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": False,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "block_id": {"type": "string", "description": "Block ID to update"},
                "data": {"type": "object", "description": 'Block type key with content: { "paragraph": { "rich_text": [...] } }'},
            },
            "required": ["block_id", "data"],
        },
    },
    {
        "name": "notion_delete_block",
        "description": "Delete (archive) a block. The block is moved to trash.",
        "annotations": {
            "title": "Delete Block",
            "readOnlyHint": False,
            "destructiveHint": True,
            "openWorldHint": False,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "block_id": {"type": "string", "description": "Block ID to delete"},
            },
            "required": ["block_id"],
        },
    },
]


def get_block(client: NotionAPI, args: dict):
    return client.get_block(args["block_id"])


def get_block_children(client: NotionAPI, args: dict):
    return client.get_block_children(
        args["block_id"],
        start_cursor=args.get("start_cursor"),
        page_size=args.get("page_size"),
    )


def append_blocks(client: NotionAPI, args: dict):
    return client.append_blocks(args["block_id"], args["children"])


def update_block(client: NotionAPI, args: dict):
    return client.update_block(args["block_id"], args["data"])


def delete_block(client: NotionAPI, args: dict):
    return client.delete_block(args["block_id"])


RUNNERS = {
    "notion_get_block": get_block,
    "notion_get_block_children": get_block_children,
    "notion_append_blocks": append_blocks,
    "notion_update_block": update_block,
    "notion_delete_block": delete_block,
}

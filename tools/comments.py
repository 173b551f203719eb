from core.notion_api import NotionAPI

TOOL_SPECS = [
    {
        "name": "notion_create_comment",
        "description": "Create a comment on a page or reply in a discussion thread. Integration must have comment capabilities enabled.",
        "annotations": {
            "title": "Create Comment",
            "readOnlyHint": False,
            "destructiveHint": False,
            "openWorldHint": False,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "parent_page_id": {"type": "string", "description": "Page ID to comment on (use this OR discussion_id)"},
                "discussion_id": {"type": "string", "description": "Discussion thread ID to reply to"},
                "rich_text": {"type": "array", "description": 'Comment content: [{ "type": "text", "text": { "content": "My comment" } }]'},
            },
            "required": ["rich_text"],
        },
    },
    {
        "name": "notion_get_comments",
        "description": "List unresolved comments on a page or block.",
        "annotations": {
            "title": "List Comments",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "block_id": {"type": "string", "description": "Page or block ID"},
                "start_cursor": {"type": "string", "description": "Pagination cursor"},
                "page_size": {"type": "number", "description": "Comments per page"},
            },
            "required": ["block_id"],
        },
    },
    {
        "name": "notion_get_comment",
        "description": "Retrieve a single comment by ID.",
        "annotations": {
            "title": "Get Comment",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "comment_id": {"type": "string", "description": "Comment ID"},
            },
            "required": ["comment_id"],
        },
    },
]


def create_comment(client: NotionAPI, args: dict):
    parent = None
    if args.get("parent_page_id"):
        parent = {"page_id": args["parent_page_id"]}
    return client.create_comment(
        args["rich_text"],
        parent=parent,
        discussion_id=args.get("discussion_id") or None,
    )


def get_comments(client: NotionAPI, args: dict):
    return client.get_comments(
        args["block_id"],
        start_cursor=args.get("start_cursor"),
        page_size=args.get("page_size"),
    )


def get_comment(client: NotionAPI, args: dict):
    return client.get_comment(args["comment_id"])


RUNNERS = {
    "notion_create_comment": create_comment,
    "notion_get_comments": get_comments,
    "notion_get_comment": get_comment,
}

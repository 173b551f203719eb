from core.notion_api import NotionAPI

TOOL_SPECS = [
    {
        "name": "notion_list_users",
        "description": "List all users in the workspace. Returns names, types (person/bot), and avatars.",
        "annotations": {
            "title": "List Users",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "start_cursor": {"type": "string", "description": "Pagination cursor"},
                "page_size": {"type": "number", "description": "Users per page"},
            },
        },
    },
    {
        "name": "notion_get_user",
        "description": "Get a user by ID.",
        "annotations": {
            "title": "Get User",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {
                "user_id": {"type": "string", "description": "User ID"},
            },
            "required": ["user_id"],
        },
    },
    {
        "name": "notion_get_bot_user",
        "description": "Get the bot user info for this integration. Useful for checking identity and permissions.",
        "annotations": {
            "title": "Get Bot Info",
            "readOnlyHint": True,
            "destructiveHint": False,
            "openWorldHint": True,
        },
        "inputSchema": {
            "type": "object",
            "properties": {},
        },
    },
]


def list_users(client: NotionAPI, args: dict):
    return client.list_users(start_cursor=args.get("start_cursor"), page_size=args.get("page_size"))


def get_user(client: NotionAPI, args: dict):
    return client.get_user(args["user_id"])


def get_bot_user(client: NotionAPI, args: dict):
    return client.get_bot_user()


RUNNERS = {
    "notion_list_users": list_users,
    "notion_get_user": get_user,
    "notion_get_bot_user": get_bot_user,
}

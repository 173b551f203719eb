from __future__ import annotations


class GatewayError(Exception):
    pass


class MissingCredentialError(GatewayError):
    def __init__(self, message: str = "NOTION_API_KEY is required") -> None:
        super().__init__(message)


class RemoteApiError(GatewayError):
    """Non-2xx answer from the Notion API. Never retried."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"Notion API Error ({status}): {body}")


class UnknownToolError(GatewayError):
    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class ArgumentError(GatewayError):
    def __init__(self, tool_name: str, reason: str) -> None:
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"Invalid arguments for {tool_name}: {reason}")

from __future__ import annotations
import copy
from typing import Any, Dict, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import Field

from core.config import SERVICE_NAME, VERSION
from core.io_utils import pretty_json
from . import TOOL_SPECS, TOOL_CATEGORIES
from .invocation import ToolInvoker

SERVER_INFO_URI = "notion://server-info"


class NotionTool(Tool):
    """MCP tool backed by the catalog entry of the same name.

    ``parameters`` is the declared inputSchema as-is, so tools/list shows
    every field description. Arguments are not coerced here; validation
    happens in dispatch().
    """

    invoker: Any = Field(exclude=True, repr=False)

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        envelope = await self.invoker.invoke(self.name, arguments)
        text = envelope["content"][0]["text"]
        if envelope["isError"]:
            raise ToolError(text)
        return ToolResult(content=[TextContent(type="text", text=text)])


def server_info(invoker: ToolInvoker) -> Dict[str, Any]:
    return {
        "name": SERVICE_NAME,
        "version": VERSION,
        "connected": invoker.connected,
        "tools_available": len(TOOL_SPECS),
        "tool_categories": dict(TOOL_CATEGORIES),
    }


MANAGE_PAGES_PROMPT = "\n".join([
    "You are a Notion workspace assistant. Help me manage my Notion pages and content.",
    "",
    "Available actions:",
    "1. **Search** - Use notion_search to find pages and databases",
    "2. **Get page** - Use notion_get_page to read page properties",
    "3. **Create page** - Use notion_create_page with parent and properties",
    "4. **Update page** - Use notion_update_page to modify properties",
    "5. **Blocks** - Use notion_get_block_children, notion_append_blocks to manage content",
    "6. **Comments** - Use notion_create_comment, notion_get_comments for discussions",
    "",
    "Start by searching for my recent pages.",
])

QUERY_DATABASES_PROMPT = "\n".join([
    "You are a Notion database assistant. Help me query and manage my databases.",
    "",
    "Available actions:",
    "1. **Search databases** - Use notion_search with filter_object=database",
    "2. **Query database** - Use notion_query_database with filters and sorts",
    "3. **Create database** - Use notion_create_database with schema",
    "4. **Data sources** - Use notion_query_data_source for the new data source API",
    "5. **Templates** - Use notion_list_data_source_templates for available templates",
    "6. **Users** - Use notion_list_users to see workspace members",
    "",
    "Start by searching for my databases.",
])


def build_server(invoker: Optional[ToolInvoker] = None) -> FastMCP:
    invoker = invoker or ToolInvoker()
    mcp = FastMCP(name=SERVICE_NAME)

    for spec in TOOL_SPECS:
        mcp.add_tool(
            NotionTool(
                name=spec["name"],
                description=spec["description"],
                parameters=copy.deepcopy(spec["inputSchema"]),
                annotations=ToolAnnotations(**spec["annotations"]),
                invoker=invoker,
            )
        )

    @mcp.prompt(
        name="manage-pages",
        description="Guide for managing Notion pages: search, create, update, and organize content",
    )
    def manage_pages() -> str:
        return MANAGE_PAGES_PROMPT

    @mcp.prompt(
        name="query-databases",
        description="Guide for querying and managing Notion databases and data sources",
    )
    def query_databases() -> str:
        return QUERY_DATABASES_PROMPT

    @mcp.resource(
        SERVER_INFO_URI,
        name="Notion Server Info",
        description="Connection status and available tools for this Notion MCP server",
        mime_type="application/json",
    )
    def notion_server_info() -> str:
        return pretty_json(server_info(invoker))

    return mcp

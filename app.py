from typing import Any, Dict, Optional

from fastapi import Body, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import SERVICE_NAME, VERSION, MCP_TRANSPORT, HOST, PORT
from core.io_utils import utc_now_iso
from core.log_setup import setup_logging
from tools import TOOL_SPECS, advertised_tools
from tools.invocation import ToolInvoker
from tools.mcp_bridge import build_server

# -----------------------------
# MCP server
# -----------------------------
invoker = ToolInvoker()
mcp = build_server(invoker)
mcp_app = mcp.http_app(path="/mcp")

# -----------------------------
# FastAPI (health + catalog + CORS)
# -----------------------------
app = FastAPI(title=SERVICE_NAME, version=VERSION, lifespan=mcp_app.lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def root():
    return {
        "ok": True,
        "message": "Notion MCP Gateway alive",
        "service": SERVICE_NAME,
        "version": VERSION,
        "ts": utc_now_iso(),
        "connected": invoker.connected,
        "tools_available": len(TOOL_SPECS),
        "mcp": "/mcp",
    }

@app.get("/health")
def health():
    return {"ok": True, "ts": utc_now_iso(), "service": SERVICE_NAME, "version": VERSION}

@app.get("/tools")
def list_tools():
    # Verbatim catalog; MCP tools/list serves the same schemas.
    return {"tools": advertised_tools()}

@app.post("/tools/{tool_name}")
async def call_tool(tool_name: str, args: Optional[Dict[str, Any]] = Body(default=None)):
    return await invoker.invoke(tool_name, args)

# Mount MCP streamable HTTP (gives /mcp)
app.mount("/", mcp_app)


if __name__ == "__main__":
    setup_logging()
    if MCP_TRANSPORT == "http":
        import uvicorn
        uvicorn.run(app, host=HOST, port=PORT)
    else:
        mcp.run(transport="stdio")  # stdout belongs to the protocol

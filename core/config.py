import os

def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()

# --- Service ---
SERVICE_NAME = env("SERVICE_NAME", "notion-mcp-gateway")
VERSION = env("VERSION", "1.0.3")
LOG_LEVEL = env("LOG_LEVEL", "INFO")

# --- Notion ---
# Static key. When unset, every tool call must carry NOTION_API_KEY itself.
NOTION_API_KEY = env("NOTION_API_KEY")
NOTION_API_BASE = env("NOTION_API_BASE", "https://api.notion.com/v1")
NOTION_VERSION = env("NOTION_VERSION", "2025-09-03")  # data_sources needs >= 2025-09-03
_timeout = env("NOTION_TIMEOUT")
NOTION_TIMEOUT = float(_timeout) if _timeout else None

# --- Runtime controls ---
CLIENT_CACHE_SIZE = int(env("CLIENT_CACHE_SIZE", "8"))
MCP_TRANSPORT = env("MCP_TRANSPORT", "stdio")
HOST = env("HOST", "0.0.0.0")
PORT = int(env("PORT", "8000"))

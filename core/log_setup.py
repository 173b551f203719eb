from __future__ import annotations
import logging
import sys

from core.config import LOG_LEVEL


def setup_logging(level: str | None = None) -> None:
    # stderr only: on the stdio transport stdout carries the MCP protocol.
    logging.basicConfig(
        level=(level or LOG_LEVEL or "INFO").upper(),
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

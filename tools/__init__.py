import copy

from core.errors import UnknownToolError
from .loader import load_tools
from .schema import build_validator, validate_arguments

TOOL_RUNNERS, TOOL_SPECS, TOOL_CATEGORIES = load_tools()
TOOL_VALIDATORS = {spec["name"]: build_validator(spec) for spec in TOOL_SPECS}


def advertised_tools() -> list[dict]:
    """The catalog exactly as declared, field descriptions included."""
    return copy.deepcopy(TOOL_SPECS)


def dispatch(tool_name: str, args: dict | None, client):
    if args is None:
        args = {}

    if tool_name not in TOOL_RUNNERS:
        raise UnknownToolError(tool_name)

    clean = validate_arguments(tool_name, TOOL_VALIDATORS[tool_name], args)
    return TOOL_RUNNERS[tool_name](client, clean)

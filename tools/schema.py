"""
Argument validation for tool calls.

The advertised ``inputSchema`` of a tool is what agents see and is never
touched. Validation runs against a stricter schema derived from it:
descriptions are dropped, ids must be non-empty, ``page_size`` must be an
integer in 1..100, and a few cross-field rules are added per tool.
"""
from __future__ import annotations
import copy
from typing import Any, Dict

from jsonschema import Draft202012Validator
from jsonschema.exceptions import relevance

from core.errors import ArgumentError

MAX_PAGE_SIZE = 100

# Cross-field rules the advertised schema can only state in prose.
EXTRA_RULES: Dict[str, Dict[str, Any]] = {
    "notion_create_comment": {
        "anyOf": [{"required": ["parent_page_id"]}, {"required": ["discussion_id"]}],
    },
}


def validation_schema(spec: Dict[str, Any]) -> Dict[str, Any]:
    schema = copy.deepcopy(spec.get("inputSchema") or {"type": "object"})
    for key, prop in (schema.get("properties") or {}).items():
        prop.pop("description", None)
        if key == "page_size":
            prop.update({"type": "integer", "minimum": 1, "maximum": MAX_PAGE_SIZE})
        elif key.endswith("_id") or key == "start_cursor":
            prop["minLength"] = 1
    schema.update(copy.deepcopy(EXTRA_RULES.get(spec["name"], {})))
    return schema


def build_validator(spec: Dict[str, Any]) -> Draft202012Validator:
    schema = validation_schema(spec)
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def _describe(err) -> str:
    if err.validator == "anyOf":
        fields = [r for sub in err.validator_value for r in sub.get("required", [])]
        return f"one of {' or '.join(fields)} is required"
    where = "/".join(str(p) for p in err.absolute_path) or "arguments"
    return f"{where}: {err.message}"


def validate_arguments(tool_name: str, validator: Draft202012Validator, args: Any) -> Dict[str, Any]:
    """Validate ``args`` and return a normalized copy.

    Raises ArgumentError naming the first offending field.
    """
    if not isinstance(args, dict):
        raise ArgumentError(tool_name, "arguments must be an object")

    errors = list(validator.iter_errors(args))
    if errors:
        raise ArgumentError(tool_name, _describe(max(errors, key=relevance)))

    out = dict(args)
    # JSON numbers may arrive as 10.0; Notion wants 10.
    if isinstance(out.get("page_size"), float):
        out["page_size"] = int(out["page_size"])
    return out

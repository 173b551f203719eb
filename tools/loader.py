import importlib

# Catalog order is the order agents see the tools in.
TOOL_MODULES = (
    "search",
    "pages",
    "blocks",
    "data_sources",
    "databases",
    "comments",
    "users",
)


def load_tools():
    """
    Collect tool modules inside the tools/ package, in TOOL_MODULES order.
    Each tool module must expose:
      - TOOL_SPECS (list of MCP-style tool descriptors)
      - RUNNERS (dict: tool name -> run(client, args))
    Returns (runners, specs, categories) where specs keeps catalog order
    and categories maps module name -> tool count.
    """
    package_name = __name__.rsplit(".", 1)[0]  # "tools"

    runners = {}
    specs = []
    categories = {}

    for name in TOOL_MODULES:
        m = importlib.import_module(f"{package_name}.{name}")

        module_specs = getattr(m, "TOOL_SPECS", None) or []
        module_runners = getattr(m, "RUNNERS", None) or {}

        for spec in module_specs:
            tool_name = spec["name"]
            runner = module_runners.get(tool_name)
            if not callable(runner):
                raise RuntimeError(f"Tool {tool_name} in tools/{name}.py has no runner")
            if tool_name in runners:
                raise RuntimeError(f"Duplicate tool name: {tool_name}")
            runners[tool_name] = runner
            specs.append(spec)

        categories[name] = len(module_specs)

    return runners, specs, categories

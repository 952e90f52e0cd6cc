"""Unit tests for the ToolRegistry."""

from toolchat_server.tools import (
    ParameterSpec,
    ToolDefinition,
    ToolParameters,
    ToolRegistry,
)


def make_tool(name: str, result: str = "ok") -> ToolDefinition:
    return ToolDefinition(
        name=name,
        description=f"The {name} tool",
        execute=lambda args: result,
        parameters=ToolParameters((ParameterSpec(name="value"),)),
    )


def test_empty_registry():
    """Test that a new registry has no tools."""
    registry = ToolRegistry()

    assert len(registry) == 0
    assert registry.get_all() == []
    assert registry.get_by_name("anything") is None


def test_get_by_name_returns_registered_definition():
    """Test that look-up returns the exact definition registered."""
    registry = ToolRegistry()
    first = make_tool("first")
    second = make_tool("second")

    registry.register_tool("first", first)
    registry.register_tool("second", second)

    assert registry.get_by_name("first") is first
    assert registry.get_by_name("second") is second
    assert "first" in registry
    assert "third" not in registry


def test_last_registration_wins():
    """Test that registering a name again silently replaces the tool."""
    registry = ToolRegistry()
    original = make_tool("echo", result="original")
    replacement = make_tool("echo", result="replacement")

    registry.register_tool("echo", original)
    registry.register_tool("echo", replacement)

    assert registry.get_by_name("echo") is replacement
    assert len(registry) == 1
    assert len(registry.get_all()) == 1


def test_get_all_returns_one_schema_per_name_in_order():
    """Test that schemas are listed once per name in registration order."""
    registry = ToolRegistry()
    for name in ["b_tool", "a_tool", "c_tool", "a_tool"]:
        registry.register_tool(name, make_tool(name))

    schemas = registry.get_all()

    assert [schema["function"]["name"] for schema in schemas] == [
        "b_tool",
        "a_tool",
        "c_tool",
    ]
    assert registry.names() == ["b_tool", "a_tool", "c_tool"]


def test_get_all_schema_shape():
    """Test that schemas use the Ollama function tool format."""
    registry = ToolRegistry()
    registry.register_tool("echo", make_tool("echo"))

    assert registry.get_all() == [
        {
            "type": "function",
            "function": {
                "name": "echo",
                "description": "The echo tool",
                "parameters": {
                    "type": "object",
                    "properties": {"value": {"type": "string", "description": ""}},
                    "required": ["value"],
                },
            },
        }
    ]

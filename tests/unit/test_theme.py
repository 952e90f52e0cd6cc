"""Unit tests for the theme service and its tool."""

import pytest

from toolchat_server.theme import ThemeService, register_theme_tools
from toolchat_server.tools import ToolArgumentError, ToolRegistry


def test_default_theme():
    assert ThemeService().theme == "light"
    assert ThemeService(theme="dark").theme == "dark"


def test_change_theme():
    service = ThemeService()

    assert service.change_theme("dark") == "dark"
    assert service.theme == "dark"


def test_change_theme_rejects_unknown():
    service = ThemeService()

    with pytest.raises(ValueError, match="Unknown theme 'purple'"):
        service.change_theme("purple")
    assert service.theme == "light"


def test_invalid_initial_theme():
    with pytest.raises(ValueError):
        ThemeService(theme="solarized")


def test_toggle():
    service = ThemeService()

    assert service.toggle() == "dark"
    assert service.toggle() == "light"


def test_change_theme_tool():
    """Test that the registered tool changes the theme."""
    registry = ToolRegistry()
    service = ThemeService()
    register_theme_tools(registry, service)

    tool = registry.get_by_name("change_theme")
    result = tool.execute(tool.parameters.validate("change_theme", {"theme": "dark"}))

    assert result == "Theme changed to dark"
    assert service.theme == "dark"


def test_change_theme_tool_schema():
    registry = ToolRegistry()
    register_theme_tools(registry, ThemeService())

    function = registry.get_all()[0]["function"]
    assert function["name"] == "change_theme"
    assert function["parameters"]["properties"]["theme"]["enum"] == ["light", "dark"]
    assert function["parameters"]["required"] == ["theme"]


def test_change_theme_tool_rejects_unknown_theme():
    registry = ToolRegistry()
    register_theme_tools(registry, ThemeService())

    tool = registry.get_by_name("change_theme")
    with pytest.raises(ToolArgumentError):
        tool.parameters.validate("change_theme", {"theme": "purple"})

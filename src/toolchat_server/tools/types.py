"""Type definitions for tools exposed to the model.

This module contains the dataclasses describing a tool: its typed parameter
declarations, the JSON-schema rendering advertised to Ollama, and the
argument validation applied before a tool is executed.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

# A tool's execute function may be sync or async and may return nothing.
ToolExecutor = Callable[[dict[str, Any]], "str | None | Awaitable[str | None]"]

PARAMETER_TYPES = ("string", "number", "integer", "boolean")


class ToolArgumentError(ValueError):
    """Raised when model-supplied arguments do not match a tool's parameters."""

    def __init__(self, tool_name: str, message: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Invalid arguments for tool {tool_name}: {message}")


@dataclass(frozen=True)
class ParameterSpec:
    """A single declared tool parameter.

    Attributes:
        name: Parameter name as the model must send it
        type: One of "string", "number", "integer", "boolean"
        description: Human-readable description shown to the model
        enum: Optional list of allowed values
        required: Whether the model must supply this parameter
    """

    name: str
    type: str = "string"
    description: str = ""
    enum: tuple[Any, ...] | None = None
    required: bool = True

    def __post_init__(self) -> None:
        """Reject parameter types the schema cannot express."""
        if self.type not in PARAMETER_TYPES:
            raise ValueError(
                f"Unsupported parameter type '{self.type}' for '{self.name}'"
            )

    def to_schema(self) -> dict[str, Any]:
        """Render this parameter as a JSON-schema property."""
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        return schema

    def coerce(self, value: Any) -> Any:
        """Validate a raw argument value and convert it to the declared type.

        Small models frequently send numbers and booleans as strings, so
        numeric and boolean strings are accepted and converted.

        Args:
            value: The raw value from the model's tool call

        Returns:
            The value converted to the declared type

        Raises:
            ValueError: If the value cannot represent the declared type or
                is not one of the allowed enum values
        """
        if self.type == "string":
            if not isinstance(value, str):
                raise ValueError(f"'{self.name}' must be of type string")
            converted: Any = value
        elif self.type == "boolean":
            if isinstance(value, bool):
                converted = value
            elif isinstance(value, str) and value.lower() in ("true", "false"):
                converted = value.lower() == "true"
            else:
                raise ValueError(f"'{self.name}' must be of type boolean")
        else:
            if isinstance(value, bool):
                raise ValueError(f"'{self.name}' must be of type {self.type}")
            try:
                converted = int(value) if self.type == "integer" else float(value)
            except (TypeError, ValueError):
                raise ValueError(f"'{self.name}' must be of type {self.type}")
            if (
                self.type == "integer"
                and isinstance(value, float)
                and not value.is_integer()
            ):
                raise ValueError(f"'{self.name}' must be of type integer")

        if self.enum is not None and converted not in self.enum:
            allowed = ", ".join(str(option) for option in self.enum)
            raise ValueError(f"'{self.name}' must be one of: {allowed}")

        return converted


@dataclass(frozen=True)
class ToolParameters:
    """The ordered parameter declarations of a tool."""

    specs: tuple[ParameterSpec, ...] = ()

    def to_schema(self) -> dict[str, Any]:
        """Render the parameters as the JSON-schema object sent to the model."""
        return {
            "type": "object",
            "properties": {spec.name: spec.to_schema() for spec in self.specs},
            "required": [spec.name for spec in self.specs if spec.required],
        }

    def validate(self, tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """Check arguments against the declared parameters.

        Args:
            tool_name: Name of the tool, used in error messages
            arguments: Raw arguments from the model

        Returns:
            A new dict holding the converted argument values

        Raises:
            ToolArgumentError: On missing required parameters, unknown
                parameters, or values of the wrong type
        """
        if not isinstance(arguments, dict):
            raise ToolArgumentError(tool_name, "arguments must be an object")

        declared = {spec.name: spec for spec in self.specs}
        unknown = sorted(set(arguments) - set(declared))
        if unknown:
            raise ToolArgumentError(
                tool_name, f"unknown parameter(s): {', '.join(unknown)}"
            )

        validated: dict[str, Any] = {}
        for spec in self.specs:
            if spec.name not in arguments:
                if spec.required:
                    raise ToolArgumentError(
                        tool_name, f"missing required parameter '{spec.name}'"
                    )
                continue
            try:
                validated[spec.name] = spec.coerce(arguments[spec.name])
            except ValueError as e:
                raise ToolArgumentError(tool_name, str(e)) from e

        return validated


@dataclass(frozen=True)
class ToolDefinition:
    """A named capability the model may ask to invoke.

    Attributes:
        name: Unique tool identifier
        description: Description shown to the model
        parameters: Declared parameters of the tool
        execute: Function called with the validated arguments
    """

    name: str
    description: str
    execute: ToolExecutor
    parameters: ToolParameters = field(default_factory=ToolParameters)

    def to_schema(self) -> dict[str, Any]:
        """Render the tool in the shape Ollama expects in the `tools` list."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters.to_schema(),
            },
        }

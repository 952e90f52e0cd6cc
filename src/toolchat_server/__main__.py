"""CLI entry point for toolchat-server.

This module provides the command-line interface for starting the server.
It can be invoked as `toolchat-server` (via the script entry point) or
`python -m toolchat_server`.
"""

import argparse
import sys

import uvicorn

from toolchat_server import __version__, create_app
from toolchat_server.config import ToolChatSettings

# Settings that can be overridden from the command line
CLI_SETTINGS = (
    "host",
    "port",
    "ollama_host",
    "model",
    "max_tool_rounds",
    "request_timeout",
    "data_dir",
    "logs_file",
    "default_theme",
    "log_level",
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments. Unset options stay None."""
    parser = argparse.ArgumentParser(
        prog="toolchat-server",
        description="Tool-calling chat server for local Ollama models",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"toolchat-server {__version__}",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 127.0.0.1, can be set via TOOLCHAT_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 8000, can be set via TOOLCHAT_PORT)",
    )

    parser.add_argument(
        "--ollama-host",
        type=str,
        default=None,
        help="Ollama server URL (default: http://localhost:11434, can be set via TOOLCHAT_OLLAMA_HOST)",
    )

    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model used for the conversation (default: functiongemma:270m, can be set via TOOLCHAT_MODEL)",
    )

    parser.add_argument(
        "--max-tool-rounds",
        type=int,
        default=None,
        help="Tool executions allowed per turn (default: 10, can be set via TOOLCHAT_MAX_TOOL_ROUNDS)",
    )

    parser.add_argument(
        "--request-timeout",
        type=float,
        default=None,
        help="Seconds to wait for each model response (default: 120, can be set via TOOLCHAT_REQUEST_TIMEOUT)",
    )

    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Base directory for data files (default: ., can be set via TOOLCHAT_DATA_DIR)",
    )

    parser.add_argument(
        "--logs-file",
        type=str,
        default=None,
        help="Log entries file, relative to the data directory (default: logs.json, can be set via TOOLCHAT_LOGS_FILE)",
    )

    parser.add_argument(
        "--default-theme",
        type=str,
        default=None,
        choices=["light", "dark"],
        help="Theme at startup (default: light, can be set via TOOLCHAT_DEFAULT_THEME)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via TOOLCHAT_LOG_LEVEL)",
    )

    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> ToolChatSettings:
    """Build settings, CLI args override environment variables."""
    settings_kwargs = {
        name: getattr(args, name)
        for name in CLI_SETTINGS
        if getattr(args, name) is not None
    }
    return ToolChatSettings(**settings_kwargs)


def main() -> None:
    """Main entry point for the toolchat-server CLI.

    Parses command-line arguments and starts the uvicorn server with the
    FastAPI application.
    """
    settings = settings_from_args(parse_args())

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())

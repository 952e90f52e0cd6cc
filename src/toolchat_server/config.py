"""Configuration module for toolchat-server using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolChatSettings(BaseSettings):
    """Main configuration settings for toolchat-server.

    All settings can be overridden via environment variables with the
    TOOLCHAT_ prefix. For example, TOOLCHAT_OLLAMA_HOST will override the
    ollama_host setting.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Ollama
    ollama_host: str = "http://localhost:11434"
    model: str = "functiongemma:270m"

    # Conversation loop
    max_tool_rounds: int = Field(default=10, ge=1)
    request_timeout: float | None = Field(default=120.0, gt=0)

    # Data files (relative to data_dir)
    data_dir: str = "."
    logs_file: str = "logs.json"

    # Theme
    default_theme: str = "light"

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="TOOLCHAT_")

    @property
    def resolved_logs_file(self) -> Path:
        """Get the full path to the log entries file."""
        return Path(self.data_dir) / self.logs_file

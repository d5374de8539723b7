"""User configuration models."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fastpaste.core.file_operations.enums import CopyStrategy
from fastpaste.core.file_operations.job_counter import default_max_jobs
from fastpaste.core.file_operations.strategies import DEFAULT_BUFFER_SIZE
from fastpaste.utils.xdg import get_clipboard_dir


class UserConfigData(BaseSettings):
    """User configuration data model with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (highest)
    2. Constructor arguments (file data)
    3. .env file
    4. Default values (lowest)
    """

    model_config = SettingsConfigDict(
        env_prefix="FASTPASTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Return sources in priority order: env > init > dotenv > file_secret."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    # Logging
    log_level: str = "WARNING"

    # Copy engine
    max_jobs: int = Field(
        default_factory=default_max_jobs,
        ge=1,
        description="Maximum number of file copies in flight (default: 4 per CPU)",
    )
    buffer_size: int = Field(
        default=DEFAULT_BUFFER_SIZE,
        ge=1,
        description="Chunk size in bytes for streamed file copies",
    )
    copy_strategy: str = Field(
        default=CopyStrategy.BUFFERED.value,
        description="Single-file copy strategy: 'buffered' (default) or 'sendfile'",
    )
    fail_fast: bool = Field(
        default=True,
        description="Abort a tree copy on the first file that fails to copy",
    )

    # Clipboard
    store_path: Path = Field(
        default_factory=get_clipboard_dir,
        description="Directory of the store remembering the copied path",
    )
    clear_after_paste: bool = Field(
        default=False,
        description="Forget the remembered path once it has been pasted",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a recognized value."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v

    @field_validator("copy_strategy")
    @classmethod
    def validate_copy_strategy(cls, v: str) -> str:
        lower_v = v.strip().lower()
        valid_strategies = [strategy.value for strategy in CopyStrategy]
        if lower_v not in valid_strategies:
            raise ValueError(f"Copy strategy must be one of {valid_strategies}")
        return lower_v

    @field_validator("store_path", mode="before")
    @classmethod
    def expand_store_path(cls, v: Any) -> Any:
        if isinstance(v, str | Path):
            return Path(v).expanduser()
        return v

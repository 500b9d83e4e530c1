from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqlcraft.constants.sql import Dialect, QueryKind
from sqlcraft.types.config import QueryBuilderConfig

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SqlCraftSettings(BaseSettings):
    """Process-level settings read from the environment.

    The engine never reads these; they feed logging setup and the
    defaults the command line uses when it assembles a
    ``QueryBuilderConfig``.
    """
    model_config = SettingsConfigDict(
        env_prefix="SQLCRAFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level used by setup_logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    default_query_type: QueryKind = Field(
        default=QueryKind.SELECT,
        description="Query kind used when the caller does not pick one"
    )
    default_database: Dialect = Field(
        default=Dialect.MYSQL,
        description="Target dialect used when the caller does not pick one"
    )
    indent_size: int = Field(
        default=2,
        ge=1,
        le=16,
        description="Spaces per comma continuation line"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Expected one of: {', '.join(_LOG_LEVELS)}"
            )
        return level

    def default_config(self, **overrides: Any) -> QueryBuilderConfig:
        """Build a ``QueryBuilderConfig`` from these settings.

        Args:
            **overrides: Config fields that take precedence over settings

        Returns:
            Validated QueryBuilderConfig
        """
        values = {
            "query_type": self.default_query_type,
            "database": self.default_database,
            "indent_size": self.indent_size,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return QueryBuilderConfig(**values)


# Singleton instance
_settings: Optional[SqlCraftSettings] = None


def get_settings(force_reload: bool = False) -> SqlCraftSettings:
    """Get the singleton settings instance.

    Args:
        force_reload: Create a new instance even if one already exists.
            Useful for testing or when environment variables have changed.

    Returns:
        The singleton SqlCraftSettings instance
    """
    global _settings

    if _settings is None or force_reload:
        _settings = SqlCraftSettings()

    return _settings

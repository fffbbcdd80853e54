"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use BRACKETEER_ prefix (e.g., BRACKETEER_STRICT_MODE=true).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolution recurses once per nesting level; deeper limits approach the
# interpreter recursion limit.
NESTING_DEPTH_CEILING = 200


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use BRACKETEER_ prefix.

    Examples:
        BRACKETEER_MAX_NESTING_DEPTH=16
        BRACKETEER_STRICT_MODE=true
        BRACKETEER_VERBOSITY=2
    """

    model_config = SettingsConfigDict(
        env_prefix="BRACKETEER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Resolution configuration
    max_nesting_depth: int = Field(
        default=64,
        ge=1,
        le=NESTING_DEPTH_CEILING,
        description="Directives nested at or beyond this depth are left as plain text",
    )

    strict_mode: bool = Field(
        default=False,
        description="Strict mode: raise on an unclosed directive instead of passing it through",
    )

    # Logging configuration
    verbosity: int = Field(
        default=0,
        ge=0,
        description="Default LOG verbosity (0=silent, 1=normal, 2=verbose, 3=trace)",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()

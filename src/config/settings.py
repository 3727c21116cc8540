"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use CLASSNAME_ prefix (e.g., CLASSNAME_SPACE_UNIT=8).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use CLASSNAME_ prefix.

    Examples:
        CLASSNAME_SPACE_UNIT=8
        CLASSNAME_RAW_UNITS='{"dp": 1.0, "px": 0.5}'
        CLASSNAME_STRICT_MODE=true
    """

    model_config = SettingsConfigDict(
        env_prefix="CLASSNAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Resolver configuration
    space_unit: float = Field(
        default=4.0,
        description="Length of one spacing unit (p-1, m-1) in base units",
    )

    radius_unit: float = Field(
        default=4.0,
        description="Length of one radius unit (r-1) in base units",
    )

    raw_units: Dict[str, float] = Field(
        default_factory=lambda: {"dp": 1.0},
        description="Unit suffixes accepted inside bracketed lengths, mapped to base-unit multipliers",
    )

    # CLI configuration
    strict_mode: bool = Field(
        default=False,
        description="Strict mode: treat unresolved tokens as errors",
    )

    output_filename: str = Field(
        default="styles.json",
        description="Name of the compiled JSON file written to the output directory",
    )

    json_indent: Optional[int] = Field(
        default=2,
        description="Indentation of the compiled JSON (None for compact output)",
    )

    def rawUnit_split(self, raw: str) -> Optional[tuple[str, float]]:
        """
        Split a known unit suffix off a raw length literal.

        Longer suffixes are tried first so that overlapping units resolve to
        the most specific one.

        Args:
            raw: Bracket contents, e.g. "12.5dp"

        Returns:
            (numeric part, multiplier) if a known suffix ends the literal,
            None otherwise

        Example:
            >>> settings = AppSettings()
            >>> settings.rawUnit_split('12.5dp')
            ('12.5', 1.0)
            >>> settings.rawUnit_split('12.5') is None
            True
        """
        for suffix in sorted(self.raw_units, key=len, reverse=True):
            if suffix and raw.endswith(suffix):
                return raw[: -len(suffix)], self.raw_units[suffix]
        return None


# Singleton instance - import this in your code
appsettings = AppSettings()

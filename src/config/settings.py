"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use SGRTEMPLATE_ prefix (e.g., SGRTEMPLATE_FORMAT_SAFE=true).

Settings can also be loaded from a .env file in the project root.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use SGRTEMPLATE_ prefix.

    Examples:
        SGRTEMPLATE_INPUT_PATTERN=**/*.tmpl
        SGRTEMPLATE_OUTPUT_SUFFIX=.txt
        SGRTEMPLATE_FORMAT_SAFE=true
    """

    model_config = SettingsConfigDict(
        env_prefix="SGRTEMPLATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Compilation configuration
    format_safe: bool = Field(
        default=False,
        description="Keep literal braces doubled ({{ and }}) so output stays a str.format() template",
    )

    raw_templates: bool = Field(
        default=False,
        description="Treat template files as raw: backslash escapes are not resolved",
    )

    debug_mode: bool = Field(
        default=False,
        description="Start the CLI at debug verbosity (3) instead of 1",
    )

    # File handling configuration
    input_pattern: str = Field(
        default="*.sgr",
        description="Glob (relative to inputdir) selecting template files",
    )

    output_suffix: str = Field(
        default=".ansi",
        description="Suffix given to compiled files",
    )

    @property
    def verbosity_default(self) -> int:
        """CLI verbosity used when no -v flags are given"""
        return 3 if self.debug_mode else 1

    def outputName_make(self, template: Path, suffix: str | None = None) -> str:
        """
        Build the output file name for a template file.

        Args:
            template: Template file path
            suffix: Override for output_suffix

        Returns:
            File name with the suffix replaced

        Example:
            >>> settings = AppSettings()
            >>> settings.outputName_make(Path("greeting.sgr"))
            'greeting.ansi'
        """
        return template.with_suffix(suffix if suffix is not None else self.output_suffix).name


# Singleton instance - import this in your code
appsettings = AppSettings()

"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stdprobe.core.config.loader import ConfigLoader
from stdprobe.models.standard import DEFAULT_STANDARD, CxxStandard

# Searched in order by Settings.load()
DEFAULT_CONFIG_PATHS = [
    Path("stdprobe.yaml"),
    Path.home() / ".config" / "stdprobe" / "config.yaml",
]


class DetectorSettings(BaseSettings):
    """Build standard detection settings."""

    model_config = SettingsConfigDict(
        env_prefix="STDPROBE_DETECTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_standard: CxxStandard = Field(
        default=DEFAULT_STANDARD,
        description="Standard returned when no build evidence is found",
    )
    compile_commands_name: str = Field(
        default="compile_commands.json",
        description="File name of the compilation database",
    )
    build_description_name: str = Field(
        default="CMakeLists.txt",
        description="File name of the CMake project file",
    )

    @field_validator("default_standard", mode="before")
    @classmethod
    def validate_default_standard(cls, v: Any) -> CxxStandard:
        """Accept plain tokens, dialect spellings and draft aliases."""
        if isinstance(v, CxxStandard):
            return v
        standard = CxxStandard.parse(str(v))
        if standard is None:
            valid = ", ".join(s.value for s in CxxStandard)
            raise ValueError(f"Unknown C++ standard: {v}. Must be one of {valid}")
        return standard


class ClangdSettings(BaseSettings):
    """Settings for generated clangd configuration files."""

    model_config = SettingsConfigDict(
        env_prefix="STDPROBE_CLANGD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    file_name: str = Field(
        default=".clangd",
        description="Name of the generated configuration file",
    )
    extra_flags: list[str] = Field(
        default_factory=lambda: ["-Wall", "-Wextra", "-Wpedantic"],
        description="Flags added after the -std flag",
    )
    compilation_database: str = Field(
        default=".",
        description="CompilationDatabase directory written to the config",
    )
    unused_includes: str = Field(
        default="Strict",
        description="Diagnostics.UnusedIncludes policy",
    )
    missing_includes: str = Field(
        default="Strict",
        description="Diagnostics.MissingIncludes policy",
    )

    @field_validator("unused_includes", "missing_includes", mode="before")
    @classmethod
    def validate_include_policy(cls, v: str) -> str:
        """Validate an include diagnostics policy."""
        valid = {"Strict", "None"}
        if v not in valid:
            raise ValueError(f"Invalid include policy: {v}. Must be one of {valid}")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="STDPROBE_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="WARNING",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="STDPROBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    detector: DetectorSettings = Field(default_factory=DetectorSettings)
    clangd: ClangdSettings = Field(default_factory=ClangdSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(path)
        loader.load()

        return cls(
            detector=DetectorSettings(**loader.get_section("detector")),
            clangd=ClangdSettings(**loader.get_section("clangd")),
            logging=LoggingSettings(**loader.get_section("logging")),
        )

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        Priority: YAML file > environment variables > .env > defaults

        Returns:
            Settings instance.
        """
        for default_path in DEFAULT_CONFIG_PATHS:
            if default_path.is_file():
                return cls.from_yaml(default_path)

        # Environment variables and .env are automatically loaded by pydantic-settings
        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()

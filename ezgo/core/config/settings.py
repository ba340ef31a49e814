"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from ezgo.core.config.loader import ConfigLoader


class SectionSettings(BaseSettings):
    """Base for settings sections loadable from ~/.ezgo/config.yaml.

    Values passed to the constructor (the YAML section) rank below
    environment variables and .env, so EZGO_* variables always win.
    """

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, dotenv_settings, init_settings, file_secret_settings


class ToolchainSettings(SectionSettings):
    """CGO toolchain provisioning settings."""

    model_config = SettingsConfigDict(
        env_prefix="EZGO_TOOLCHAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cache_root: Path | None = Field(
        default=None,
        description="Root directory for ezgo environments (None = ~/.cache/ezgo)",
    )
    env_name: str = Field(
        default="cgo_win_env_py312",
        description="Name of the micromamba environment holding the toolchain",
    )
    python_version: str = Field(
        default="3.12",
        description="Python version pinned when the environment is created",
    )
    channel: str = Field(
        default="conda-forge",
        description="Channel used for every package install",
    )
    toolchain_package: str = Field(
        default="m2w64-toolchain_win-64",
        description="Package providing the MinGW-w64 compiler",
    )
    triplet: str = Field(
        default="x86_64-w64-mingw32",
        description="Target triplet of the MinGW-w64 toolchain",
    )
    micromamba: str = Field(
        default="micromamba",
        description="micromamba executable name or path",
    )
    compiler: str = Field(default="gcc.exe", description="C compiler executable")
    cxx_compiler: str = Field(default="g++.exe", description="C++ compiler executable")
    objdump: str = Field(
        default="objdump.exe",
        description="Dependency-dump tool inside the compiler bin directory",
    )

    @field_validator("cache_root", mode="before")
    @classmethod
    def validate_cache_root(cls, v: str | None) -> Path | None:
        """Validate and convert cache_root to Path."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()


class PostBuildSettings(SectionSettings):
    """Settings for the post-build runtime library copy."""

    model_config = SettingsConfigDict(
        env_prefix="EZGO_POSTBUILD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    fail_on_copy_error: bool = Field(
        default=True,
        description="Abort the post-build step on the first failed copy",
    )


class LoggingSettings(SectionSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="EZGO_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="INFO",
        description="Log level",
    )
    format: str = Field(
        default="%(message)s",
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
        env_prefix="EZGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    toolchain: ToolchainSettings = Field(default_factory=ToolchainSettings)
    postbuild: PostBuildSettings = Field(default_factory=PostBuildSettings)
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
            toolchain=ToolchainSettings(**loader.get_section("toolchain")),
            postbuild=PostBuildSettings(**loader.get_section("postbuild")),
            logging=LoggingSettings(**loader.get_section("logging")),
        )

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        Priority: Environment variables > .env > ~/.ezgo/config.yaml > defaults

        Returns:
            Settings instance.
        """
        user_path = Path.home() / ".ezgo" / "config.yaml"
        if user_path.exists():
            return cls.from_yaml(user_path)

        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()

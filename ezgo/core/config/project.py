"""Loading and editing of the per-project .ezgo.yml file."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from ezgo.core.config.loader import ConfigLoader
from ezgo.core.exceptions.errors import ConfigurationError
from ezgo.models.project import ProjectConfig

PROJECT_CONFIG_FILE = ".ezgo.yml"

PROJECT_CONFIG_TEMPLATE = """\
# Add conda-forge package names for your CGO project
#
# packages:
#   - glfw
#
# Add custom environment variables to be passed to the go compiler
#
# environment:
#   SOME_FLAG: "true"
"""


def load_project_config(path: Path | str = PROJECT_CONFIG_FILE) -> ProjectConfig | None:
    """Load the project configuration.

    Args:
        path: Location of the .ezgo.yml file.

    Returns:
        Parsed configuration, or None when the file does not exist.

    Raises:
        ConfigurationError: If the file exists but cannot be parsed.
    """
    path = Path(path)
    if not path.exists():
        return None

    data = ConfigLoader(path).load()
    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"could not parse {path.name}",
            config_key=str(path),
            details={"error": str(e)},
        ) from e


def dump_project_config(config: ProjectConfig) -> str:
    """Serialize a project configuration to YAML text."""
    return yaml.safe_dump(
        config.model_dump(),
        default_flow_style=False,
        sort_keys=False,
    )


def save_project_config(config: ProjectConfig, path: Path | str = PROJECT_CONFIG_FILE) -> None:
    """Write a project configuration back to disk.

    Args:
        config: Configuration to write.
        path: Destination .ezgo.yml file.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    path = Path(path)
    try:
        path.write_text(dump_project_config(config), encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Failed to write {path.name}",
            config_key=str(path),
            details={"error": str(e)},
        ) from e


def init_project_config(path: Path | str = PROJECT_CONFIG_FILE) -> Path:
    """Create a commented default .ezgo.yml.

    Args:
        path: Destination .ezgo.yml file.

    Returns:
        Path of the created file.

    Raises:
        ConfigurationError: If the file already exists or cannot be written.
    """
    path = Path(path)
    if path.exists():
        raise ConfigurationError(f"{path.name} already exists.", config_key=str(path))

    default = ProjectConfig(packages=[], environment={"YOUR_VAR": "your_value"})
    try:
        path.write_text(
            PROJECT_CONFIG_TEMPLATE + dump_project_config(default),
            encoding="utf-8",
        )
    except OSError as e:
        raise ConfigurationError(
            f"Failed to write {path.name}",
            config_key=str(path),
            details={"error": str(e)},
        ) from e
    return path


def add_packages(config: ProjectConfig, names: list[str]) -> list[str]:
    """Append packages not yet listed in the configuration.

    Args:
        config: Configuration to update in place.
        names: Package names requested by the user.

    Returns:
        The names actually added, in request order.
    """
    existing = set(config.packages)
    added: list[str] = []
    for name in names:
        if name not in existing:
            config.packages.append(name)
            existing.add(name)
            added.append(name)
    return added

"""Provisioning of the CGO toolchain environment with micromamba."""

import shutil
import subprocess
from pathlib import Path

from ezgo.core.config.settings import ToolchainSettings, get_settings
from ezgo.core.exceptions.errors import ToolchainError
from ezgo.core.logger.logger import get_logger
from ezgo.models.toolchain import ToolchainPaths

logger = get_logger(__name__)


def get_cache_root(settings: ToolchainSettings | None = None) -> Path:
    """Return the root directory for all ezgo cache and environment data.

    Args:
        settings: Toolchain settings. Uses global settings if not provided.

    Returns:
        Cache root path.
    """
    if settings is None:
        settings = get_settings().toolchain
    if settings.cache_root:
        return settings.cache_root
    return Path.home() / ".cache" / "ezgo"


class MambaEnvironment:
    """A named micromamba environment under a root prefix."""

    def __init__(self, name: str, root: Path, micromamba: str = "micromamba") -> None:
        """Initialize the environment handle.

        Args:
            name: Environment name.
            root: micromamba root prefix.
            micromamba: micromamba executable name or path.
        """
        self.name = name
        self.root = Path(root)
        self.micromamba = micromamba

    @property
    def env_path(self) -> Path:
        """Return the environment directory."""
        return self.root / "envs" / self.name

    def exists(self) -> bool:
        """Check whether the environment has been created."""
        return self.env_path.is_dir()

    def _executable(self) -> str:
        executable = shutil.which(self.micromamba)
        if executable is None:
            raise ToolchainError(
                f"Could not find '{self.micromamba}' executable. "
                "Install micromamba or set EZGO_TOOLCHAIN_MICROMAMBA.",
                env_path=str(self.env_path),
            )
        return executable

    def _run(self, args: list[str], package: str | None = None) -> None:
        cmd = [
            self._executable(),
            *args,
            "--yes",
            "--root-prefix",
            str(self.root),
            "--name",
            self.name,
        ]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, errors="replace")
        except OSError as e:
            raise ToolchainError(
                f"failed to run micromamba: {e}",
                env_path=str(self.env_path),
                package=package,
            ) from e

        if result.returncode != 0:
            raise ToolchainError(
                f"micromamba {args[0]} failed with exit status {result.returncode}",
                env_path=str(self.env_path),
                package=package,
                details={"stderr": result.stderr.strip()[:1000]},
            )

    def create(self, python_version: str, channel: str) -> bool:
        """Create the environment if it does not exist yet.

        Args:
            python_version: Python version installed into the environment.
            channel: Package channel.

        Returns:
            True if the environment was created by this call.

        Raises:
            ToolchainError: If micromamba fails.
        """
        if self.exists():
            return False
        self._run(["create", f"python={python_version}", "--channel", channel])
        return True

    def install_package(self, package: str, channel: str) -> None:
        """Install a package into the environment.

        Args:
            package: Package name (or match spec).
            channel: Package channel.

        Raises:
            ToolchainError: If micromamba fails.
        """
        self._run(["install", package, "--channel", channel], package=package)


def setup_cgo_environment(
    quiet: bool = False,
    packages: list[str] | None = None,
    settings: ToolchainSettings | None = None,
) -> ToolchainPaths:
    """Ensure the CGO toolchain and any requested packages exist.

    Args:
        quiet: Suppress informational messages.
        packages: Project packages to install into the environment.
        settings: Toolchain settings. Uses global settings if not provided.

    Returns:
        Layout of the provisioned toolchain.

    Raises:
        ToolchainError: If the environment cannot be created or a package
            cannot be installed.
    """
    if settings is None:
        settings = get_settings().toolchain

    env = MambaEnvironment(
        name=settings.env_name,
        root=get_cache_root(settings),
        micromamba=settings.micromamba,
    )

    if not env.exists() and not quiet:
        logger.info(
            "ezgo: First run detected. Setting up CGO toolchain "
            "(this may take a few minutes)..."
        )

    is_new = env.create(settings.python_version, settings.channel)

    if is_new:
        if not quiet:
            logger.info(f"ezgo: Installing {settings.toolchain_package}...")
        env.install_package(settings.toolchain_package, settings.channel)
        if not quiet:
            logger.info("ezgo: Toolchain installation complete.")

    if packages:
        if not quiet:
            logger.info("ezgo: Ensuring project-specific dependencies are installed...")
        for package in packages:
            env.install_package(package, settings.channel)

    return ToolchainPaths.from_env_root(
        env.env_path,
        triplet=settings.triplet,
        objdump=settings.objdump,
        is_new=is_new,
    )

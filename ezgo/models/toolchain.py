"""Toolchain layout models."""

from pathlib import Path

from pydantic import BaseModel, Field


class ToolchainPaths(BaseModel):
    """Directories of a provisioned CGO environment.

    The compiler paths point into the MinGW-w64 tree; the general paths point
    at `<env>/Library`, where conda-forge packages install their headers,
    import libraries and DLLs.
    """

    env_path: Path = Field(description="Root of the micromamba environment")
    compiler_bin: Path = Field(description="Directory holding gcc/g++/objdump")
    tool_bin: Path = Field(description="Triplet bin directory with toolchain DLLs")
    include_path: Path = Field(description="Toolchain include directory")
    lib_path: Path = Field(description="Toolchain library directory")
    objdump: str = Field(default="objdump.exe", description="Dependency-dump tool name")
    is_new: bool = Field(default=False, description="Environment was created by this run")

    @property
    def library_root(self) -> Path:
        """Return the general package root (`<env>/Library`)."""
        return self.env_path / "Library"

    @property
    def general_bin(self) -> Path:
        """Return the general package bin directory."""
        return self.library_root / "bin"

    @property
    def general_include(self) -> Path:
        """Return the general package include directory."""
        return self.library_root / "include"

    @property
    def general_lib(self) -> Path:
        """Return the general package lib directory."""
        return self.library_root / "lib"

    @property
    def objdump_path(self) -> Path:
        """Return the dependency-dump tool shipped with the compiler."""
        return self.compiler_bin / self.objdump

    @property
    def search_paths(self) -> list[Path]:
        """Return the ordered DLL search directories.

        Package-local DLLs shadow toolchain DLLs of the same name.
        """
        return [self.general_bin, self.tool_bin]

    @classmethod
    def from_env_root(
        cls,
        env_path: Path,
        triplet: str = "x86_64-w64-mingw32",
        objdump: str = "objdump.exe",
        is_new: bool = False,
    ) -> "ToolchainPaths":
        """Build the standard MinGW-w64 layout under an environment root.

        Args:
            env_path: Root of the micromamba environment.
            triplet: Target triplet of the toolchain.
            objdump: Dependency-dump tool name.
            is_new: Whether the environment was just created.

        Returns:
            ToolchainPaths instance.
        """
        mingw_root = env_path / "Library" / "mingw-w64"
        return cls(
            env_path=env_path,
            compiler_bin=mingw_root / "bin",
            tool_bin=mingw_root / triplet / "bin",
            include_path=mingw_root / triplet / "include",
            lib_path=mingw_root / triplet / "lib",
            objdump=objdump,
            is_new=is_new,
        )

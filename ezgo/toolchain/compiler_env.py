"""Environment variables for CGO builds."""

import os
from collections.abc import Mapping

from ezgo.models.project import ProjectConfig
from ezgo.models.toolchain import ToolchainPaths

CGO_VARIABLE_PREFIXES = ("CGO_",)
CGO_VARIABLE_NAMES = ("CC", "CXX")


def build_go_env(
    paths: ToolchainPaths,
    project_config: ProjectConfig | None = None,
    base_env: Mapping[str, str] | None = None,
    compiler: str = "gcc.exe",
    cxx_compiler: str = "g++.exe",
) -> dict[str, str]:
    """Build the environment for a `go` invocation with CGO enabled.

    Precedence, lowest first: the process environment, the project's custom
    variables, the CGO variables. Keys are upper-cased.

    Args:
        paths: Provisioned toolchain layout.
        project_config: Project configuration with custom variables.
        base_env: Starting environment. Defaults to os.environ.
        compiler: C compiler executable name.
        cxx_compiler: C++ compiler executable name.

    Returns:
        Complete environment mapping.
    """
    if base_env is None:
        base_env = os.environ

    env = {key.upper(): value for key, value in base_env.items()}
    original_path = env.get("PATH", "")

    if project_config is not None:
        for key, value in project_config.environment.items():
            env[key.upper()] = value

    # Compiler first, then package DLLs, then toolchain DLLs, then the env root.
    path_entries = [
        str(paths.compiler_bin),
        str(paths.general_bin),
        str(paths.tool_bin),
        str(paths.env_path),
    ]
    if original_path:
        path_entries.append(original_path)

    env.update(
        {
            "CGO_ENABLED": "1",
            "CC": str(paths.compiler_bin / compiler),
            "CXX": str(paths.compiler_bin / cxx_compiler),
            "PATH": os.pathsep.join(path_entries),
            "CGO_CFLAGS": f"-I{paths.general_include} -I{paths.include_path}",
            "CGO_LDFLAGS": f"-L{paths.general_lib} -L{paths.lib_path}",
        }
    )
    return env


def cgo_variables(env: Mapping[str, str]) -> dict[str, str]:
    """Select the CGO-specific variables of an environment."""
    return {
        key: value
        for key, value in sorted(env.items())
        if key.startswith(CGO_VARIABLE_PREFIXES) or key in CGO_VARIABLE_NAMES
    }

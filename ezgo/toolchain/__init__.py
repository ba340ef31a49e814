"""CGO toolchain provisioning and process launching."""

from ezgo.toolchain.compiler_env import build_go_env, cgo_variables
from ezgo.toolchain.environment import (
    MambaEnvironment,
    get_cache_root,
    setup_cgo_environment,
)
from ezgo.toolchain.launcher import find_executable, launch_shell, run_go

__all__ = [
    "build_go_env",
    "cgo_variables",
    "MambaEnvironment",
    "get_cache_root",
    "setup_cgo_environment",
    "find_executable",
    "launch_shell",
    "run_go",
]

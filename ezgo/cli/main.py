"""Main CLI entry point for ezgo."""

import shutil
from pathlib import Path
from typing import Any, NoReturn

import click

from ezgo import __version__
from ezgo.cli.display import show_error, show_info, show_post_build_result, show_success
from ezgo.core.config.project import (
    PROJECT_CONFIG_FILE,
    add_packages,
    init_project_config,
    load_project_config,
    save_project_config,
)
from ezgo.core.config.settings import get_settings
from ezgo.core.exceptions.errors import EzgoError
from ezgo.core.logger.logger import set_quiet
from ezgo.models.project import ProjectConfig
from ezgo.runtime.output import locate_build_output, strip_no_copy
from ezgo.runtime.resolver import resolve_and_copy
from ezgo.toolchain.compiler_env import build_go_env, cgo_variables
from ezgo.toolchain.environment import get_cache_root, setup_cgo_environment
from ezgo.toolchain.launcher import find_executable, launch_shell, run_go

USAGE_EXAMPLES = """\b
Examples:
  ezgo build -o myapp.exe .
  ezgo build -no-copy ./cmd/tool
  ezgo pkg add glfw
"""


def _fail(message: str) -> NoReturn:
    """Report a fatal error and exit with status 1."""
    show_error(message)
    raise click.exceptions.Exit(1)


def _is_quiet(ctx: click.Context) -> bool:
    obj: dict[str, Any] = ctx.find_root().obj or {}
    return bool(obj.get("quiet", False))


def run_go_command(ctx: click.Context, args: list[str]) -> None:
    """Run a `go` command with the CGO environment applied.

    For `build`, the runtime DLLs of the artifact are copied next to it
    after a successful build unless `-no-copy` is given.

    Args:
        ctx: Click context.
        args: Full `go` argument list, starting with the subcommand.
    """
    quiet = _is_quiet(ctx)
    settings = get_settings()

    try:
        project_config = load_project_config()
    except EzgoError as e:
        _fail(f"Error reading {PROJECT_CONFIG_FILE}: {e}")

    # Builds only ensure the base environment; `ezgo pkg tidy` installs packages.
    try:
        paths = setup_cgo_environment(quiet=quiet, settings=settings.toolchain)
    except EzgoError as e:
        _fail(f"Failed to configure CGO environment: {e}")

    try:
        go_executable = find_executable("go")
    except EzgoError as e:
        _fail(str(e))

    is_build = args[0] == "build"
    skip_copy = False
    if is_build:
        args, skip_copy = strip_no_copy(args)

    env = build_go_env(
        paths,
        project_config,
        compiler=settings.toolchain.compiler,
        cxx_compiler=settings.toolchain.cxx_compiler,
    )
    cwd = Path.cwd()

    try:
        return_code = run_go(args, env, cwd=cwd, go_executable=go_executable)
    except EzgoError as e:
        _fail(str(e))

    if return_code == 0 and is_build:
        try:
            output_path = locate_build_output(args[1:], cwd)
            result = resolve_and_copy(
                output_path,
                paths,
                quiet=quiet,
                skip=skip_copy,
                fail_on_copy_error=settings.postbuild.fail_on_copy_error,
            )
        except EzgoError as e:
            _fail(f"Post-build step failed: {e}")
        if not quiet:
            show_post_build_result(result)

    ctx.exit(return_code)


class GoCommandGroup(click.Group):
    """Command group that forwards unknown subcommands to `go`."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        return _make_go_command(cmd_name)


def _make_go_command(name: str) -> click.Command:
    @click.command(
        name=name,
        add_help_option=False,
        context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    )
    @click.argument("args", nargs=-1, type=click.UNPROCESSED)
    @click.pass_context
    def go_command(ctx: click.Context, args: tuple[str, ...]) -> None:
        run_go_command(ctx, [name, *args])

    return go_command


@click.group(cls=GoCommandGroup, no_args_is_help=True, epilog=USAGE_EXAMPLES)
@click.option("--quiet", "-q", is_flag=True, help="Suppress informational output")
@click.version_option(version=__version__, prog_name="ezgo")
@click.pass_context
def main(ctx: click.Context, quiet: bool) -> None:
    """ezgo - A CGO-aware wrapper for the Go compiler on Windows.

    Any command not listed below is passed to `go` with the CGO
    environment applied, e.g. `ezgo build`, `ezgo run`, `ezgo test`.
    """
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    set_quiet(quiet)


@main.group()
def env() -> None:
    """Manage the ezgo cache and toolchain environment."""


@env.command("clean")
def env_clean() -> None:
    """Remove the ezgo cache directory."""
    cache_root = get_cache_root(get_settings().toolchain)
    if not cache_root.exists():
        show_info("ezgo cache directory does not exist. Nothing to do.")
        return

    show_info(f"Removing ezgo cache directory: {cache_root}")
    try:
        shutil.rmtree(cache_root)
    except OSError as e:
        _fail(f"Failed to remove cache directory: {e}")
    show_success("Cache cleaned successfully.")


@env.command("path")
def env_path() -> None:
    """Print the ezgo cache directory."""
    click.echo(str(get_cache_root(get_settings().toolchain)))


@env.command("vars")
@click.pass_context
def env_vars(ctx: click.Context) -> None:
    """Print the CGO variables injected into go."""
    settings = get_settings()
    try:
        paths = setup_cgo_environment(quiet=_is_quiet(ctx), settings=settings.toolchain)
    except EzgoError as e:
        _fail(f"Failed to setup environment to read variables: {e}")

    go_env = build_go_env(
        paths,
        compiler=settings.toolchain.compiler,
        cxx_compiler=settings.toolchain.cxx_compiler,
    )
    for key, value in cgo_variables(go_env).items():
        click.echo(f"{key}={value}")


@main.group()
def mod() -> None:
    """Manage the project's .ezgo.yml file."""


@mod.command()
def init() -> None:
    """Create a default .ezgo.yml in the current directory."""
    try:
        created = init_project_config(PROJECT_CONFIG_FILE)
    except EzgoError as e:
        _fail(str(e))
    show_success(f"created {created.name}")


@main.group()
def pkg() -> None:
    """Manage conda-forge packages used by the project."""


def _require_project_config() -> ProjectConfig:
    try:
        config = load_project_config(PROJECT_CONFIG_FILE)
    except EzgoError as e:
        _fail(f"Error reading {PROJECT_CONFIG_FILE}: {e}")
    if config is None:
        _fail(f"{PROJECT_CONFIG_FILE} not found. Run 'ezgo mod init' first.")
    return config


@pkg.command()
@click.argument("packages", nargs=-1, required=True)
@click.pass_context
def add(ctx: click.Context, packages: tuple[str, ...]) -> None:
    """Add packages to .ezgo.yml and install them.

    Example:
        ezgo pkg add glfw sdl2
    """
    quiet = _is_quiet(ctx)
    config = _require_project_config()

    added = add_packages(config, list(packages))
    if not added:
        show_info(f"all specified packages already exist in {PROJECT_CONFIG_FILE}.")
        return

    try:
        save_project_config(config, PROJECT_CONFIG_FILE)
    except EzgoError as e:
        _fail(str(e))
    show_info(f"added {', '.join(added)} to {PROJECT_CONFIG_FILE}")

    try:
        setup_cgo_environment(quiet=quiet, packages=added, settings=get_settings().toolchain)
    except EzgoError as e:
        _fail(f"Failed to install new packages: {e}")
    if not quiet:
        show_success("Environment updated successfully.")


@pkg.command()
@click.pass_context
def tidy(ctx: click.Context) -> None:
    """Install every package listed in .ezgo.yml."""
    quiet = _is_quiet(ctx)
    config = _require_project_config()

    if not quiet:
        show_info("Tidying environment...")
    try:
        setup_cgo_environment(
            quiet=quiet,
            packages=config.packages,
            settings=get_settings().toolchain,
        )
    except EzgoError as e:
        _fail(f"Failed to sync environment with {PROJECT_CONFIG_FILE}: {e}")
    if not quiet:
        show_success("Environment is up to date.")


@main.command()
@click.argument("shell_name", required=False, default="cmd", metavar="[powershell|cmd]")
@click.pass_context
def shell(ctx: click.Context, shell_name: str) -> None:
    """Start an interactive shell with the CGO environment."""
    quiet = _is_quiet(ctx)
    settings = get_settings()
    try:
        paths = setup_cgo_environment(quiet=quiet, settings=settings.toolchain)
        go_env = build_go_env(
            paths,
            compiler=settings.toolchain.compiler,
            cxx_compiler=settings.toolchain.cxx_compiler,
        )
        return_code = launch_shell(shell_name, go_env, quiet=quiet)
    except EzgoError as e:
        _fail(f"could not start shell: {e}")
    ctx.exit(return_code)


if __name__ == "__main__":
    main()

"""CLI for ghr."""

import functools
import sys
from pathlib import Path

import click

from ghr.config.logging import configure_logging
from ghr.core.exceptions import GhrError, ProfileNotFoundError, RepositoryNotFoundError
from ghr.core.models.identity import KnownHost


def handle_errors(func):
    """Report ghr errors on stderr and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except GhrError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(1)

    return wrapper


def _load():
    """Load settings and the configuration file under the root."""
    from ghr.config.loader import load_config
    from ghr.config.settings import get_settings

    settings = get_settings()
    return settings, load_config(settings.root_path)


def _create_service():
    from ghr.git.client import GitClient
    from ghr.services.cloning import CloneService

    settings, config = _load()
    return CloneService(settings.root_path, config, GitClient())


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """ghr: manage repositories under a single root directory."""
    log_level = "DEBUG" if verbose else "INFO"
    configure_logging(log_level=log_level)


@cli.command()
@click.argument("repo", nargs=-1, required=True)
@click.option("--recursive", "-r", is_flag=True, help="Clone submodules recursively")
@handle_errors
def clone(repo: tuple[str, ...], recursive: bool) -> None:
    """Clone repositories.

    REPO is a URL or a shorthand such as owner/repo, host:owner/repo
    or git@host:owner/repo.
    """
    service = _create_service()
    for reference in repo:
        resolution = service.clone(reference, recursive=recursive)
        click.echo(f"Cloned a repository successfully to: {resolution.path}")
        if resolution.profile_name:
            click.echo(f"\t-> Attached profile [{resolution.profile_name}] successfully.")


@cli.command()
@click.argument("repo")
@handle_errors
def init(repo: str) -> None:
    """Initialize an empty repository at the location REPO resolves to."""
    service = _create_service()
    resolution = service.init(repo)
    click.echo(f"Initialized a repository successfully in: {resolution.path}")
    if resolution.profile_name:
        click.echo(f"\t-> Attached profile [{resolution.profile_name}] successfully.")


@cli.command()
@click.argument("source", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--force", "-f", is_flag=True, help="Add the repository without any prompt")
@handle_errors
def add(source: Path, force: bool) -> None:
    """Move an existing checkout at SOURCE under the root.

    The destination is resolved from the remote URLs of the checkout.
    """
    service = _create_service()
    resolution = service.locate(source)
    click.echo(f"URL of the repository is: {resolution.url}")
    click.echo(f"This will move the entire repository to: {resolution.path}")
    if not force and not click.confirm("Are you sure want to continue?"):
        return

    service.add(source, resolution)
    click.echo(f"Added the repository successfully to: {resolution.path}")
    if resolution.profile_name:
        click.echo(f"\t-> Attached profile [{resolution.profile_name}] successfully.")


@cli.command()
@click.argument("repo")
@click.option("--force", "-f", is_flag=True, help="Delete the repository without any prompt")
@handle_errors
def delete(repo: str, force: bool) -> None:
    """Delete the local checkout REPO resolves to."""
    service = _create_service()
    resolution = service.resolve(repo)
    if not force and not click.confirm(
        f"Content of {resolution.path} will be deleted permanently. "
        "Are you sure want to continue?"
    ):
        return

    service.delete(repo)
    click.echo(f"Deleted the repository successfully: {resolution.path}")


@cli.command()
@click.argument("repo")
@handle_errors
def resolve(repo: str) -> None:
    """Show the URL, path and profile REPO resolves to, without cloning."""
    resolution = _create_service().resolve(repo)
    click.echo(f"URL:      {resolution.url}")
    click.echo(f"Path:     {resolution.path}")
    click.echo(f"Profile:  {resolution.profile_name or '(none)'}")


@cli.command()
@click.option("--host", help="Remote host of the repository (default: github.com)")
@click.argument("owner", required=False)
@click.argument("repo", required=False)
@handle_errors
def path(host: str | None, owner: str | None, repo: str | None) -> None:
    """Print the path to the root, an owner or a repository."""
    from ghr.git.path_resolver import PartialPath
    from ghr.git.scanner import RepositoryScanner

    settings, _ = _load()
    if host is None and owner is not None:
        host = str(KnownHost.GITHUB)

    partial = PartialPath(host=host, owner=owner, repo=repo)
    target = partial.to_path(settings.root_path)
    if not RepositoryScanner(settings.root_path).exists(partial):
        raise RepositoryNotFoundError(
            "The path does not exist or is not a directory. Did you clone the repository?",
            details={"path": str(target)},
        )

    click.echo(str(target))


@cli.command(name="list")
@click.option("--no-host", is_flag=True, help="List repositories without their hosts")
@click.option("--no-owner", is_flag=True, help="List repositories without their owners")
@handle_errors
def list_repositories(no_host: bool, no_owner: bool) -> None:
    """List all managed repositories."""
    from ghr.git.scanner import RepositoryScanner

    settings, _ = _load()
    for found in RepositoryScanner(settings.root_path).scan():
        click.echo(found.display(host=not no_host, owner=not no_owner))


@cli.group()
def sync() -> None:
    """Back up the managed repositories."""


@sync.command()
@handle_errors
def dump() -> None:
    """Print every managed repository with its ref and remotes as TOML."""
    from ghr.git.client import GitClient
    from ghr.services.sync import SyncService

    settings, _ = _load()
    click.echo(SyncService(settings.root_path, GitClient()).dump_toml(), nl=False)


@cli.group()
def profile() -> None:
    """Manage profiles to use in repositories."""


@profile.command(name="list")
@click.option("--short", "-s", is_flag=True, help="Show only the names of the profiles")
@handle_errors
def list_profiles(short: bool) -> None:
    """List all configured profiles."""
    _, config = _load()
    for name in config.profiles.names():
        if short:
            click.echo(name)
            continue

        configs = config.profiles.get(name)
        user_name = configs.get("user.name") or "(inherit)"
        user_email = configs.get("user.email") or "(inherit)"
        click.echo(f"   OK - {name}: {user_name} <{user_email}>")


@profile.command()
@click.argument("name")
@handle_errors
def show(name: str) -> None:
    """Show a profile in TOML format."""
    _, config = _load()
    found = config.profiles.get(name)
    if found is None:
        raise ProfileNotFoundError(f"Unknown profile: {name}", details={"name": name})

    click.echo(found.to_toml(), nl=False)


@profile.command()
@click.argument("name")
@handle_errors
def apply(name: str) -> None:
    """Apply a profile to the repository in the current directory."""
    from ghr.git.client import GitClient

    _, config = _load()
    found = config.profiles.get(name)
    if found is None:
        raise ProfileNotFoundError(f"Unknown profile: {name}", details={"name": name})

    found.apply(GitClient(), Path.cwd())
    click.echo(f"Attached profile [{name}] successfully.")


if __name__ == "__main__":
    cli()

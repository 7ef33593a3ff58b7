"""Remote commands - manage remote repositories."""

import click
from twig.core.repository import Repository
from twig.cli.output import info, success


@click.command('add-remote')
@click.argument('name')
@click.argument('path')
def add_remote_cmd(name, path):
    """
    Add a remote repository.

    NAME: Remote name (e.g., 'origin')
    PATH: Path to the remote's .twig directory or its work tree

    Examples:
        twig add-remote origin ../other/.twig
    """
    repo = Repository.require()
    repo.remote.add_remote(name, path)
    click.echo(success(f"Added remote '{name}': {path}"))


@click.command('rm-remote')
@click.argument('name')
def rm_remote_cmd(name):
    """
    Remove a remote repository.

    Examples:
        twig rm-remote origin
    """
    repo = Repository.require()
    repo.remote.remove_remote(name)
    click.echo(success(f"Removed remote '{name}'"))


@click.command('remotes')
@click.option('--verbose', '-v', is_flag=True, help='Show paths')
def remotes_cmd(verbose):
    """
    List remote repositories.

    Examples:
        twig remotes
        twig remotes -v
    """
    repo = Repository.require()
    remotes = repo.remote.list_remotes()

    if not remotes:
        click.echo(info("No remotes configured"))
        return

    for name, path in remotes.items():
        if verbose:
            click.echo(f"{name}\t{path}")
        else:
            click.echo(name)

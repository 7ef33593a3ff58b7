"""Fetch command - download a remote branch."""

import click
from twig.core.repository import Repository
from twig.cli.output import success


@click.command('fetch')
@click.argument('remote')
@click.argument('branch')
def fetch_cmd(remote, branch):
    """
    Copy a remote branch into the local repository.

    The result is stored as the local branch REMOTE/BRANCH. The working
    directory and the current branch are not modified.

    Examples:
        twig fetch origin master
    """
    repo = Repository.require()
    tip = repo.remote.fetch(remote, branch)
    click.echo(success(f"Fetched '{remote}/{branch}' at {tip[:7]}"))

"""Push command - update a remote branch with local commits."""

import click
from twig.core.repository import Repository
from twig.cli.output import success, info


@click.command('push')
@click.argument('remote')
@click.argument('branch')
def push_cmd(remote, branch):
    """
    Update a remote branch with the current branch's commits.

    REMOTE: Name of remote to push to
    BRANCH: Remote branch to update

    The remote branch must not have commits the current branch lacks;
    pull first if it does.

    Examples:
        twig push origin master
    """
    repo = Repository.require()
    head = repo.remote.push(remote, branch)
    click.echo(success(f"Pushed to '{remote}/{branch}'"))
    click.echo(info(f"{head[:7]} -> {branch}"))

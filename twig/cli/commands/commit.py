"""Commit command - create a commit from staged changes."""

import click
from twig.core.repository import Repository
from twig.operations.commit import create_commit
from twig.cli.output import success, info


@click.command('commit')
@click.argument('message', required=False, default='')
@click.option('-m', '--message', 'message_opt', help='Commit message')
def commit_cmd(message, message_opt):
    """
    Record the staged changes as a new commit.

    The new commit keeps every file of its parent, with the staged
    additions and removals applied.

    Examples:
        twig commit "Add parser"
        twig commit -m "Fix typo"
    """
    repo = Repository.require()

    message = message_opt or message
    commit_hash = create_commit(repo, message)

    click.echo(success(f"Created commit {commit_hash[:7]}"))
    click.echo(info(f"Message: {message}"))

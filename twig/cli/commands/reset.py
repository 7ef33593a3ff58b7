"""Reset command - move the current branch to a commit."""

import click
from twig.core.repository import Repository
from twig.operations.checkout import reset
from twig.cli.output import success


@click.command('reset')
@click.argument('commit')
def reset_cmd(commit):
    """
    Check out a commit and move the current branch to it.

    COMMIT may be abbreviated. Files tracked by the old head but absent
    from COMMIT are deleted, and the staging area is cleared.

    Examples:
        twig reset 3f2a9c1
    """
    repo = Repository.require()
    commit_hash = reset(repo, commit)
    click.echo(success(f"HEAD is now at {commit_hash[:7]}"))

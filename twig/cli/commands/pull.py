"""Pull command - fetch and merge a remote branch."""

import click
from twig.core.repository import Repository
from twig.cli.commands.merge import report_merge


@click.command('pull')
@click.argument('remote')
@click.argument('branch')
@click.pass_context
def pull_cmd(ctx, remote, branch):
    """
    Fetch a remote branch and merge it into the current branch.

    Equivalent to 'twig fetch REMOTE BRANCH' followed by
    'twig merge REMOTE/BRANCH'.

    Examples:
        twig pull origin master
    """
    repo = Repository.require()
    report_merge(ctx, repo.remote.pull(remote, branch))

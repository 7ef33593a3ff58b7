"""Merge command for Twig VCS."""

import click
from twig.core.repository import Repository
from twig.operations.merge import MergeOutcome
from twig.cli.output import success, error, warning, info


def report_merge(ctx, result) -> None:
    """Print a MergeResult; exits with status 1 if nothing was merged."""
    if result.outcome is MergeOutcome.ALREADY_MERGED:
        click.echo(error(result.message))
        ctx.exit(1)

    if result.outcome is MergeOutcome.FAST_FORWARD:
        click.echo(success(result.message))
        return

    if result.has_conflicts:
        click.echo(warning("Encountered a merge conflict."))
        for conflict in result.conflicts:
            click.echo(warning(f"  CONFLICT: {conflict.path}"))
        click.echo(info("Edit the files, then add and commit them."))

    click.echo(success(f"{result.message} ({result.commit_hash[:7]})"))


@click.command('merge')
@click.argument('branch')
@click.pass_context
def merge_cmd(ctx, branch):
    """
    Merge a branch into the current branch.

    BRANCH is the name of the branch to merge into the current branch.
    A merge commit is always created unless the current branch can be
    fast-forwarded. Conflicting files are written with conflict markers
    and committed as part of the merge.

    Examples:
        twig merge feature
        twig merge origin/master
    """
    repo = Repository.require()
    report_merge(ctx, repo.merge.merge(branch))

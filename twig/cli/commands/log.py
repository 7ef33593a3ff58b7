"""Log commands - show commit history and search commits."""

import click
from datetime import datetime
from twig.core.errors import CommitNotFoundError
from twig.core.objects import Commit
from twig.core.repository import Repository

DATE_FORMAT = "%a %b %d %H:%M:%S %Y %z"


def format_timestamp(timestamp: int) -> str:
    """Format a Unix timestamp in local time."""
    return datetime.fromtimestamp(int(timestamp)).astimezone().strftime(DATE_FORMAT)


def format_commit(commit_hash: str, commit: Commit) -> str:
    """
    Render one log entry.

    Merge commits get a Merge line with both abbreviated parents.
    """
    lines = ["===", f"commit {commit_hash}"]
    if commit.is_merge:
        lines.append(f"Merge: {commit.parent[:7]} {commit.second_parent[:7]}")
    lines.append(f"Date: {format_timestamp(commit.timestamp)}")
    lines.append(commit.message)
    lines.append("")
    return "\n".join(lines)


@click.command('log')
def log_cmd():
    """
    Show the history of the current branch.

    Starts at the head commit and follows first parents back to the
    initial commit.
    """
    repo = Repository.require()

    for commit_hash in repo.graph.first_parent_chain(repo.refs.head_commit()):
        click.echo(format_commit(commit_hash, repo.read_commit(commit_hash)))


@click.command('global-log')
def global_log_cmd():
    """Show every commit ever made, in no particular order."""
    repo = Repository.require()

    for commit_hash, commit in repo.iter_commits():
        click.echo(format_commit(commit_hash, commit))


@click.command('find')
@click.argument('message')
def find_cmd(message):
    """
    Print the ids of all commits with the given message.

    Examples:
        twig find "initial commit"
    """
    repo = Repository.require()

    matches = repo.graph.find_by_message(message)
    if not matches:
        raise CommitNotFoundError("Found no commit with that message.")

    for commit_hash in matches:
        click.echo(commit_hash)

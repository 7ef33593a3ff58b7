"""Checkout command - switch branches or restore files."""

import click
from twig.core.errors import UsageError
from twig.core.repository import Repository
from twig.operations.checkout import checkout_branch, checkout_file
from twig.cli.commands.add import to_repo_name
from twig.cli.output import success


@click.command('checkout')
@click.argument('target', required=False)
@click.option('--file', '-f', 'path', help='Restore a single file instead of switching')
def checkout_cmd(target, path):
    """
    Switch branches or restore a file.

    With --file, TARGET is an optional commit id (full or abbreviated)
    and defaults to the head commit. Without it, TARGET is a branch.

    Examples:
        twig checkout feature          # Switch to branch feature
        twig checkout --file a.txt     # Restore a.txt from the head commit
        twig checkout 3f2a9c1 -f a.txt # Restore a.txt from a commit
    """
    repo = Repository.require()

    if path:
        name = to_repo_name(repo, path)
        commit_hash = checkout_file(repo, name, target)
        click.echo(success(f"Restored {name} from {commit_hash[:7]}"))
        return

    if not target:
        raise UsageError("Incorrect operands.")

    count = checkout_branch(repo, target)
    click.echo(success(f"Switched to branch '{target}' ({count} file(s))"))

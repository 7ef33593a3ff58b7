"""Branch commands - create, list and delete branches."""

import click
from colorama import Fore, Style
from twig.core.repository import Repository
from twig.cli.output import success


@click.command('branch')
@click.argument('name', required=False)
def branch_cmd(name):
    """
    Create a branch at the head commit, or list branches.

    Creating a branch does not switch to it.

    Examples:
        twig branch            # List branches
        twig branch feature    # Create branch feature
    """
    repo = Repository.require()
    refs = repo.refs

    if not name:
        current = refs.current_branch()
        for branch_name, commit_hash in refs.list_branches():
            if branch_name == current:
                click.echo(f"{Fore.GREEN}* {branch_name}{Style.RESET_ALL} {commit_hash[:7]}")
            else:
                click.echo(f"  {branch_name} {commit_hash[:7]}")
        return

    head = refs.head_commit()
    refs.create_branch(name, head)
    click.echo(success(f"Created branch '{name}' at {head[:7]}"))


@click.command('rm-branch')
@click.argument('name')
def rm_branch_cmd(name):
    """
    Delete a branch pointer.

    Commits made on the branch stay in the object store.

    Examples:
        twig rm-branch feature
    """
    repo = Repository.require()
    repo.refs.delete_branch(name)
    click.echo(success(f"Deleted branch '{name}'"))

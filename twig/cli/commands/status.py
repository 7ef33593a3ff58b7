"""Status command - show working tree status."""

import click
from colorama import Fore, Style
from twig.core.repository import Repository
from twig.operations.status import compute_status
from twig.cli.output import header


@click.command('status')
def status_cmd():
    """
    Show the working tree status.

    Displays:
    - Branches, with the active one marked by *
    - Files staged for addition
    - Files staged for removal
    - Modifications not staged for commit
    - Untracked files

    Examples:
        twig status
    """
    repo = Repository.require()
    status = compute_status(repo)

    click.echo(header("Branches"))
    for name in status.branches:
        if name == status.current_branch:
            click.echo(f"{Fore.CYAN}*{name}{Style.RESET_ALL}")
        else:
            click.echo(name)
    click.echo()

    click.echo(header("Staged Files"))
    for name in status.staged:
        click.echo(f"{Fore.GREEN}{name}{Style.RESET_ALL}")
    click.echo()

    click.echo(header("Removed Files"))
    for name in status.removed:
        click.echo(f"{Fore.GREEN}{name}{Style.RESET_ALL}")
    click.echo()

    click.echo(header("Modifications Not Staged For Commit"))
    for name, kind in status.modified:
        click.echo(f"{Fore.YELLOW}{name} ({kind}){Style.RESET_ALL}")
    click.echo()

    click.echo(header("Untracked Files"))
    for name in status.untracked:
        click.echo(f"{Fore.RED}{name}{Style.RESET_ALL}")
    click.echo()

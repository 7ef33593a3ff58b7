"""Main CLI entry point for Twig."""

import logging

import click
from colorama import init

from twig import __version__
from twig.cli.output import BANNER, error
from twig.cli.commands import (init_cmd, add_cmd, commit_cmd, rm_cmd, log_cmd,
                               global_log_cmd, find_cmd, status_cmd, checkout_cmd,
                               branch_cmd, rm_branch_cmd, reset_cmd, merge_cmd,
                               add_remote_cmd, rm_remote_cmd, push_cmd, fetch_cmd,
                               remotes_cmd, pull_cmd)
from twig.core.config import get_config
from twig.core.errors import TwigError
from twig.core.repository import Repository

# Initialize colorama for cross-platform colored output
init(autoreset=True)

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


class TwigGroup(click.Group):
    """Command group that shows the banner and reports Twig errors."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)

    def invoke(self, ctx):
        """Print a TwigError's message and exit with status 1."""
        try:
            return super().invoke(ctx)
        except TwigError as e:
            click.echo(error(str(e)))
            ctx.exit(1)


def configure_logging(verbose: bool) -> None:
    """
    Install the root log handler.

    --verbose forces DEBUG; otherwise log.level from the environment or
    the config files is used.
    """
    if verbose:
        level = 'DEBUG'
    else:
        repo = Repository.find_repository()
        config = repo.config if repo else get_config()
        level = config.log_level()

    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format=LOG_FORMAT, force=True)


@click.group(cls=TwigGroup)
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Log debug details to stderr')
def cli(verbose):
    configure_logging(verbose)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(rm_cmd)
cli.add_command(log_cmd)
cli.add_command(global_log_cmd)
cli.add_command(find_cmd)
cli.add_command(status_cmd)
cli.add_command(checkout_cmd)
cli.add_command(branch_cmd)
cli.add_command(rm_branch_cmd)
cli.add_command(reset_cmd)
cli.add_command(merge_cmd)
cli.add_command(add_remote_cmd)
cli.add_command(rm_remote_cmd)
cli.add_command(remotes_cmd)
cli.add_command(push_cmd)
cli.add_command(fetch_cmd)
cli.add_command(pull_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()

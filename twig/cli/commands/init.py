"""Initialize a new Twig repository."""

import click
from pathlib import Path
from twig.core.repository import Repository
from twig.cli.output import success, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Twig repository.

    Creates a .twig directory and records the initial commit on the
    master branch.

    Examples:
        twig init                    # Initialize in current directory
        twig init my-project         # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()

    if not repo_path.exists():
        repo_path.mkdir(parents=True)
        click.echo(info(f"Created directory {repo_path}"))

    repo = Repository(str(repo_path))
    repo.init()

    click.echo(success(f"Initialized empty Twig repository in {repo.twig_dir}"))
    click.echo(info("You can now start tracking files with:"))
    click.echo(info("  twig add <file>"))
    click.echo(info("  twig commit <message>"))

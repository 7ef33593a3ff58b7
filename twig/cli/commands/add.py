"""Add and rm commands - stage files for the next commit."""

import click
from pathlib import Path
from twig.core.repository import Repository
from twig.cli.output import success, info


def to_repo_name(repo, path: str) -> str:
    """
    Convert a path given on the command line to a work tree filename.

    Relative paths are taken from the current directory, so commands
    work from any subdirectory of the work tree.
    """
    resolved = Path(path)
    if not resolved.is_absolute():
        resolved = Path.cwd() / resolved
    resolved = resolved.resolve()
    try:
        return resolved.relative_to(repo.work_tree).as_posix()
    except ValueError:
        raise click.BadParameter(f"{path} is outside the repository")


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Stage files for the next commit.

    Modified files must be added again to stage the new changes. Adding a
    file identical to the committed version unstages it.

    Examples:
        twig add file.txt
        twig add src/app.py README
    """
    repo = Repository.require()
    index = repo.load_index()

    added = []
    for path in paths:
        name = to_repo_name(repo, path)
        index.stage_for_addition(repo, name)
        added.append(name)

    index.write(repo.index_file)

    click.echo(success(f"Staged {len(added)} file(s)"))
    for name in added:
        click.echo(info(f"  {name}"))


@click.command('rm')
@click.argument('path')
def rm_cmd(path):
    """
    Unstage a file, or stop tracking it.

    A staged file is unstaged. A file tracked by the current commit is
    staged for removal and deleted from the work tree.

    Examples:
        twig rm old.txt
    """
    repo = Repository.require()
    index = repo.load_index()

    name = to_repo_name(repo, path)
    index.stage_for_removal(repo, name)
    index.write(repo.index_file)

    click.echo(success(f"Removed {name}"))

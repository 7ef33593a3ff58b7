"""Integration tests for merge command."""

from click.testing import CliRunner
from twig.cli.main import cli


def run(*args):
    return CliRunner().invoke(cli, list(args))


def commit(repo, files, message):
    for name, content in files.items():
        (repo.work_tree / name).write_text(content)
        assert run('add', name).exit_code == 0
    assert run('commit', message).exit_code == 0
    return repo.refs.head_commit()


class TestMergeCommand:
    """Tests for twig merge."""

    def test_merge_fast_forward(self, cli_repo):
        run('branch', 'feature')
        run('checkout', 'feature')
        tip = commit(cli_repo, {'feature.txt': 'feature content\n'}, 'Feature commit')
        run('checkout', 'master')

        result = run('merge', 'feature')

        assert result.exit_code == 0
        assert 'Current branch fast-forwarded.' in result.output
        assert cli_repo.refs.head_commit() == tip
        assert (cli_repo.work_tree / 'feature.txt').exists()

    def test_merge_ancestor_branch(self, cli_repo):
        run('branch', 'old')
        tip = commit(cli_repo, {'a.txt': 'a'}, 'ahead')

        result = run('merge', 'old')

        assert result.exit_code == 1
        assert 'Given branch is an ancestor of the current branch.' in result.output
        assert cli_repo.refs.head_commit() == tip

    def test_merge_with_conflict(self, cli_repo):
        commit(cli_repo, {'f.txt': 'base\n'}, 'base')
        run('branch', 'other')
        commit(cli_repo, {'f.txt': 'mine\n'}, 'mine')
        run('checkout', 'other')
        commit(cli_repo, {'f.txt': 'theirs\n'}, 'theirs')
        run('checkout', 'master')

        result = run('merge', 'other')

        assert result.exit_code == 0
        assert 'Encountered a merge conflict.' in result.output
        assert 'Merged other into master.' in result.output
        assert (cli_repo.work_tree / 'f.txt').read_text() == \
            '<<<<<<< HEAD\nmine\n=======\ntheirs\n>>>>>>>\n'
        assert cli_repo.head_commit().is_merge

    def test_merge_clean(self, cli_repo):
        commit(cli_repo, {'f.txt': 'base\n'}, 'base')
        run('branch', 'other')
        commit(cli_repo, {'m.txt': 'm'}, 'master side')
        run('checkout', 'other')
        commit(cli_repo, {'g.txt': 'new'}, 'other side')
        run('checkout', 'master')

        result = run('merge', 'other')

        assert result.exit_code == 0
        assert 'Encountered a merge conflict.' not in result.output
        assert (cli_repo.work_tree / 'g.txt').read_text() == 'new'

    def test_merge_self(self, cli_repo):
        result = run('merge', 'master')
        assert result.exit_code == 1
        assert 'Cannot merge a branch with itself.' in result.output

    def test_merge_missing_branch(self, cli_repo):
        result = run('merge', 'nope')
        assert result.exit_code == 1
        assert 'A branch with that name does not exist.' in result.output

    def test_merge_with_staged_changes(self, cli_repo):
        run('branch', 'other')
        (cli_repo.work_tree / 'x.txt').write_text('x')
        run('add', 'x.txt')

        result = run('merge', 'other')
        assert result.exit_code == 1
        assert 'You have uncommitted changes.' in result.output

    def test_merge_missing_argument(self, cli_repo):
        result = run('merge')
        assert result.exit_code == 2

"""Integration tests for repository initialization."""

from click.testing import CliRunner
from twig.cli.main import cli


class TestInitCommand:
    """Tests for twig init."""

    def test_init_in_current_directory(self, temp_dir, monkeypatch):
        runner = CliRunner()
        monkeypatch.chdir(temp_dir)

        result = runner.invoke(cli, ['init'])

        assert result.exit_code == 0
        assert 'Initialized empty Twig repository' in result.output
        assert (temp_dir / '.twig' / 'HEAD').read_text() == 'master\n'

    def test_init_new_directory(self, temp_dir, monkeypatch):
        runner = CliRunner()
        monkeypatch.chdir(temp_dir)

        result = runner.invoke(cli, ['init', 'project'])

        assert result.exit_code == 0
        assert (temp_dir / 'project' / '.twig' / 'objects').is_dir()

    def test_init_twice(self, cli_repo):
        runner = CliRunner()
        result = runner.invoke(cli, ['init'])

        assert result.exit_code == 1
        assert 'A Twig version-control system already exists in the current directory.' \
            in result.output

    def test_commands_outside_repository(self, temp_dir, monkeypatch):
        runner = CliRunner()
        monkeypatch.chdir(temp_dir)

        for args in (['status'], ['log'], ['add', 'x'], ['branch', 'b']):
            result = runner.invoke(cli, args)
            assert result.exit_code == 1
            assert 'Not in an initialized Twig directory.' in result.output

    def test_help_shows_commands(self):
        result = CliRunner().invoke(cli, ['--help'])
        assert result.exit_code == 0
        for name in ('global-log', 'rm-branch', 'add-remote', 'pull'):
            assert name in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ['--version'])
        assert '0.1.0' in result.output

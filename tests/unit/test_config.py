"""Unit tests for configuration."""

from twig.core.config import Config, get_config


def test_fallback_when_unset(repo):
    config = get_config(repo)
    assert config.get('core', 'missing', 'fallback') == 'fallback'
    assert config.protected_names() == ['Makefile']
    assert config.log_level() == 'WARNING'


def test_repository_config(repo):
    repo.config_file.write_text("[log]\nlevel = debug\n")
    assert get_config(repo).log_level() == 'DEBUG'


def test_global_config_used_when_repo_silent(repo, tmp_path, monkeypatch):
    global_file = tmp_path / 'global'
    global_file.write_text("[log]\nlevel = info\n")
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', global_file)
    assert get_config(repo).log_level() == 'INFO'


def test_repository_overrides_global(repo, tmp_path, monkeypatch):
    global_file = tmp_path / 'global'
    global_file.write_text("[log]\nlevel = info\n")
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', global_file)
    repo.config_file.write_text("[log]\nlevel = error\n")
    assert get_config(repo).log_level() == 'ERROR'


def test_environment_overrides_files(repo, monkeypatch):
    repo.config_file.write_text("[log]\nlevel = error\n")
    monkeypatch.setenv('TWIG_LOG_LEVEL', 'debug')
    assert get_config(repo).log_level() == 'DEBUG'


def test_get_list(repo):
    repo.config_file.write_text("[core]\nprotected = a.txt, , b.txt\n")
    assert get_config(repo).protected_names() == ['a.txt', 'b.txt']


def test_global_only_config():
    assert get_config().repo_config is None

"""Shared pytest fixtures for Twig tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from twig.core.repository import Repository
from twig.core.objects import Blob, Commit
from twig.operations.commit import create_commit


def write_file(repo, name, content):
    """Write a working file, creating parent directories."""
    path = repo.work_tree / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def commit_files(repo, message, files=None, remove=()):
    """
    Write files, stage them, stage removals, and commit.

    Args:
        repo: Repository instance
        message: Commit message
        files: Mapping of filename -> content to write and add
        remove: Filenames to stage for removal

    Returns:
        str: Commit hash
    """
    index = repo.load_index()
    for name, content in (files or {}).items():
        write_file(repo, name, content)
        index.stage_for_addition(repo, name)
    for name in remove:
        index.stage_for_removal(repo, name)
    index.write(repo.index_file)
    return create_commit(repo, message)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the user's ~/.twigconfig and TWIG_* variables out of tests."""
    from twig.core.config import Config
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', tmp_path / 'no-such-config')
    monkeypatch.delenv('TWIG_CORE_PROTECTED', raising=False)
    monkeypatch.delenv('TWIG_LOG_LEVEL', raising=False)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def make_commit():
    """Return the commit_files helper."""
    return commit_files


@pytest.fixture
def put_file():
    """Return the write_file helper."""
    return write_file


@pytest.fixture
def sample_blob():
    """Create a sample blob object."""
    return Blob('hello.txt', b"Hello, World!\n")


@pytest.fixture
def sample_commit(repo, sample_blob):
    """Sample commit object tracking one blob."""
    blob_hash = repo.write_object(sample_blob)
    return Commit.create(
        message="Test commit",
        files={'hello.txt': blob_hash},
        parent=repo.refs.head_commit(),
        timestamp=1700000000
    )


@pytest.fixture
def repo_with_commits(repo):
    """Repository with a couple of commits on master."""
    commit_files(repo, "First commit", {'file1.txt': "Hello, World!"})
    commit_files(repo, "Second commit", {'file2.txt': "Second file"})
    return repo


@pytest.fixture
def cli_repo(repo, monkeypatch):
    """Initialized repository that is also the current directory."""
    monkeypatch.chdir(repo.work_tree)
    return repo

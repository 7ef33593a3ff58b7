"""Unit tests for status computation."""

from twig.operations.status import DELETED, MODIFIED, compute_status


def stage(repo, name):
    index = repo.load_index()
    index.stage_for_addition(repo, name)
    index.write(repo.index_file)


def test_clean_repository(repo):
    status = compute_status(repo)
    assert status.current_branch == 'master'
    assert status.branches == ['master']
    assert status.is_clean


def test_branches_listed(repo):
    repo.refs.create_branch('other', repo.refs.head_commit())
    assert compute_status(repo).branches == ['master', 'other']


def test_staged_and_removed(repo_with_commits, put_file):
    repo = repo_with_commits
    put_file(repo, 'new.txt', 'n')
    stage(repo, 'new.txt')
    index = repo.load_index()
    index.stage_for_removal(repo, 'file2.txt')
    index.write(repo.index_file)

    status = compute_status(repo)
    assert status.staged == ['new.txt']
    assert status.removed == ['file2.txt']
    assert status.modified == []


def test_tracked_file_modified_or_deleted(repo_with_commits):
    repo = repo_with_commits
    (repo.work_tree / 'file1.txt').write_text('edited')
    (repo.work_tree / 'file2.txt').unlink()

    status = compute_status(repo)
    assert status.modified == [('file1.txt', MODIFIED), ('file2.txt', DELETED)]


def test_staged_file_changed_again(repo, put_file):
    put_file(repo, 'a.txt', 'one')
    stage(repo, 'a.txt')
    put_file(repo, 'a.txt', 'two')

    assert compute_status(repo).modified == [('a.txt', MODIFIED)]


def test_staged_file_deleted(repo, put_file):
    path = put_file(repo, 'a.txt', 'one')
    stage(repo, 'a.txt')
    path.unlink()

    assert compute_status(repo).modified == [('a.txt', DELETED)]


def test_untracked_files(repo_with_commits, put_file):
    repo = repo_with_commits
    put_file(repo, 'loose.txt', 'x')
    put_file(repo, 'staged.txt', 's')
    stage(repo, 'staged.txt')
    put_file(repo, 'Makefile', 'all:')

    assert compute_status(repo).untracked == ['loose.txt']

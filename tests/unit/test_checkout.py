"""Unit tests for checkout and reset."""

import pytest
from twig.core.errors import (ActiveBranchError, BranchNotFoundError, CommitNotFoundError,
                              CorruptObjectError, FileNotInCommitError,
                              UntrackedFileConflictError)
from twig.core.objects import Commit
from twig.operations.checkout import checkout_branch, checkout_file, reset


def test_checkout_file_from_head(repo_with_commits):
    repo = repo_with_commits
    (repo.work_tree / 'file1.txt').write_text('scribbled')

    checkout_file(repo, 'file1.txt')

    assert (repo.work_tree / 'file1.txt').read_text() == 'Hello, World!'


def test_checkout_file_unstages_it(repo_with_commits):
    repo = repo_with_commits
    (repo.work_tree / 'file1.txt').write_text('scribbled')
    index = repo.load_index()
    index.stage_for_addition(repo, 'file1.txt')
    index.write(repo.index_file)

    checkout_file(repo, 'file1.txt')

    assert repo.load_index().is_empty()


def test_checkout_file_from_abbreviated_commit(repo, make_commit):
    first = make_commit(repo, "v1", {'a.txt': 'one'})
    make_commit(repo, "v2", {'a.txt': 'two'})

    assert checkout_file(repo, 'a.txt', first[:6]) == first
    assert (repo.work_tree / 'a.txt').read_text() == 'one'


def test_checkout_file_keeps_blobs_with_shifted_names_apart(repo, make_commit):
    make_commit(repo, "me", {'ME': 'READ'})
    make_commit(repo, "readme", {'README': ''})
    (repo.work_tree / 'README').write_text('scribbled')

    checkout_file(repo, 'README')

    assert (repo.work_tree / 'README').read_text() == ''


def test_checkout_file_not_in_commit(repo_with_commits):
    with pytest.raises(FileNotInCommitError, match="File does not exist in that commit."):
        checkout_file(repo_with_commits, 'missing.txt')


def test_checkout_file_unknown_commit(repo_with_commits):
    with pytest.raises(CommitNotFoundError, match="No commit with that id exists."):
        checkout_file(repo_with_commits, 'file1.txt', 'abcdef12')


def test_checkout_branch_switches_tree(repo, make_commit):
    make_commit(repo, "shared", {'shared.txt': 's'})
    repo.refs.create_branch('feature', repo.refs.head_commit())
    make_commit(repo, "master only", {'m.txt': 'm'})

    checkout_branch(repo, 'feature')

    assert repo.refs.current_branch() == 'feature'
    assert (repo.work_tree / 'shared.txt').exists()
    assert not (repo.work_tree / 'm.txt').exists()


def test_checkout_branch_removes_empty_directories(repo, make_commit):
    repo.refs.create_branch('feature', repo.refs.head_commit())
    make_commit(repo, "nested", {'dir/sub/n.txt': 'n'})

    checkout_branch(repo, 'feature')

    assert not (repo.work_tree / 'dir').exists()


def test_checkout_branch_leaves_protected_files(repo, make_commit, put_file):
    repo.refs.create_branch('feature', repo.refs.head_commit())
    make_commit(repo, "m", {'m.txt': 'm'})
    put_file(repo, 'Makefile', 'all:')

    checkout_branch(repo, 'feature')

    assert (repo.work_tree / 'Makefile').read_text() == 'all:'


def test_checkout_branch_clears_index(repo, make_commit, put_file):
    repo.refs.create_branch('feature', repo.refs.head_commit())
    put_file(repo, 'staged.txt', 's')
    index = repo.load_index()
    index.stage_for_addition(repo, 'staged.txt')
    index.write(repo.index_file)

    checkout_branch(repo, 'feature')

    assert repo.load_index().is_empty()


def test_checkout_missing_branch(repo):
    with pytest.raises(BranchNotFoundError, match="No such branch exists."):
        checkout_branch(repo, 'nope')


def test_checkout_current_branch(repo):
    with pytest.raises(ActiveBranchError, match="No need to checkout the current branch."):
        checkout_branch(repo, 'master')


def test_checkout_branch_refuses_untracked_overwrite(repo, make_commit, put_file):
    repo.refs.create_branch('feature', repo.refs.head_commit())
    checkout_branch(repo, 'feature')
    make_commit(repo, "feature file", {'f.txt': 'feature'})
    checkout_branch(repo, 'master')
    put_file(repo, 'f.txt', 'local')

    with pytest.raises(UntrackedFileConflictError, match="untracked file in the way"):
        checkout_branch(repo, 'feature')

    assert repo.refs.current_branch() == 'master'
    assert (repo.work_tree / 'f.txt').read_text() == 'local'


def test_reset_scenario(repo, make_commit):
    c1 = make_commit(repo, "C1", {'a.txt': 'a'})
    make_commit(repo, "C2", {'b.txt': 'b'})

    assert reset(repo, c1) == c1

    assert not (repo.work_tree / 'b.txt').exists()
    assert (repo.work_tree / 'a.txt').read_text() == 'a'
    assert repo.refs.head_commit() == c1
    assert repo.load_index().is_empty()


def test_reset_keeps_untracked_files(repo, make_commit, put_file):
    c1 = make_commit(repo, "C1", {'a.txt': 'a'})
    make_commit(repo, "C2", {'b.txt': 'b'})
    put_file(repo, 'scratch.txt', 'mine')

    reset(repo, c1)

    assert (repo.work_tree / 'scratch.txt').read_text() == 'mine'


def test_reset_refuses_untracked_overwrite(repo, make_commit, put_file):
    c1 = make_commit(repo, "C1", {'a.txt': 'a'})
    tip = make_commit(repo, "C2", remove=['a.txt'])
    put_file(repo, 'a.txt', 'local')

    with pytest.raises(UntrackedFileConflictError):
        reset(repo, c1)
    assert repo.refs.head_commit() == tip


def test_reset_unknown_commit(repo):
    with pytest.raises(CommitNotFoundError):
        reset(repo, 'deadbeef')


def test_checkout_branch_removes_hidden_tracked_file(repo, make_commit):
    repo.refs.create_branch('feature', repo.refs.head_commit())
    checkout_branch(repo, 'feature')
    make_commit(repo, "add env", {'.env': 'SECRET=1'})

    checkout_branch(repo, 'master')

    assert not (repo.work_tree / '.env').exists()


def test_checkout_branch_refuses_untracked_hidden_overwrite(repo, make_commit, put_file):
    repo.refs.create_branch('feature', repo.refs.head_commit())
    checkout_branch(repo, 'feature')
    make_commit(repo, "add env", {'.env': 'SECRET=1'})
    checkout_branch(repo, 'master')
    put_file(repo, '.env', 'LOCAL=1')

    with pytest.raises(UntrackedFileConflictError):
        checkout_branch(repo, 'feature')

    assert (repo.work_tree / '.env').read_text() == 'LOCAL=1'


def test_checkout_file_pointing_at_non_blob(repo):
    head = repo.refs.head_commit()
    broken = repo.write_object(Commit.create("broken", {'a.txt': head}, parent=head))

    with pytest.raises(CorruptObjectError, match="is not a blob"):
        checkout_file(repo, 'a.txt', broken)

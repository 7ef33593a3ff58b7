"""Checkout and reset operations for Twig VCS.

These are the only operations besides merge and rm that rewrite the
work tree. Each one runs its pre-flight checks before touching any file.
"""

import logging
from typing import Optional
from twig.core.errors import (ActiveBranchError, BranchNotFoundError, CorruptObjectError,
                              FileNotInCommitError, UntrackedFileConflictError)
from twig.core.index import Index
from twig.core.objects import Blob, Commit

logger = logging.getLogger(__name__)


def check_untracked(repo, target: Commit, index: Optional[Index] = None) -> None:
    """
    Refuse to continue if writing target would clobber an untracked file.

    A working file is untracked when the head commit does not track it and
    it is not staged for addition.

    Raises:
        UntrackedFileConflictError: If target tracks an untracked file
    """
    if index is None:
        index = repo.load_index()
    head = repo.head_commit()

    for filename in repo.working_files():
        if head.contains_file(filename) or index.tracks_addition(filename):
            continue
        if target.contains_file(filename):
            raise UntrackedFileConflictError()


def write_file(repo, filename: str, blob_hash: str) -> None:
    """Overwrite a working file with the content of a stored blob."""
    if repo.protected.is_protected(filename):
        logger.debug("Skipping protected file %s", filename)
        return

    blob = repo.read_object(blob_hash)
    if not isinstance(blob, Blob):
        raise CorruptObjectError(f"Object {blob_hash} is not a blob")

    path = repo.working_path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(blob.data)


def remove_file(repo, filename: str) -> None:
    """Delete a working file and any directories it leaves empty."""
    if repo.protected.is_protected(filename):
        return

    path = repo.working_path(filename)
    if not path.is_file():
        return
    path.unlink()

    parent = path.parent
    while parent != repo.work_tree and not any(parent.iterdir()):
        parent.rmdir()
        parent = parent.parent


def checkout_commit_files(repo, commit: Commit) -> int:
    """
    Write every file of a commit into the work tree.

    Returns:
        Number of files written
    """
    for filename, blob_hash in commit.files.items():
        write_file(repo, filename, blob_hash)
    return len(commit.files)


def checkout_file(repo, filename: str, commit_id: Optional[str] = None) -> str:
    """
    Restore one file from a commit (the head commit by default).

    The file is also taken out of the pending additions.

    Args:
        repo: Repository instance
        filename: Path relative to the work tree
        commit_id: Full or abbreviated commit id

    Returns:
        str: Digest of the commit the file came from

    Raises:
        CommitNotFoundError: If commit_id matches no commit
        FileNotInCommitError: If the commit does not track filename
    """
    if commit_id is None:
        commit_hash = repo.refs.head_commit()
    else:
        commit_hash = repo.resolve_commit(commit_id)

    commit = repo.read_commit(commit_hash)
    if not commit.contains_file(filename):
        raise FileNotInCommitError()

    write_file(repo, filename, commit.file_hash(filename))

    index = repo.load_index()
    index.unstage(filename)
    index.write(repo.index_file)

    logger.debug("Checked out %s from %s", filename, commit_hash[:7])
    return commit_hash


def checkout_tree(repo, commit: Commit) -> int:
    """
    Make the work tree match a commit exactly.

    Files of the commit are written; every other working file is deleted
    unless protected.

    Returns:
        Number of files written
    """
    count = checkout_commit_files(repo, commit)
    for filename in repo.working_files():
        if not commit.contains_file(filename):
            remove_file(repo, filename)
            logger.debug("Removed %s", filename)
    return count


def checkout_branch(repo, branch_name: str) -> int:
    """
    Switch the work tree and HEAD to another branch.

    Args:
        repo: Repository instance
        branch_name: Branch to switch to

    Returns:
        Number of files written

    Raises:
        BranchNotFoundError: If the branch does not exist
        ActiveBranchError: If the branch is already active
        UntrackedFileConflictError: If an untracked file is in the way
    """
    if not repo.refs.branch_exists(branch_name):
        raise BranchNotFoundError("No such branch exists.")
    if repo.refs.current_branch() == branch_name:
        raise ActiveBranchError("No need to checkout the current branch.")

    index = repo.load_index()
    target = repo.read_commit(repo.refs.read_branch(branch_name))
    check_untracked(repo, target, index)

    count = checkout_tree(repo, target)

    index.clear()
    index.write(repo.index_file)
    repo.refs.set_head(branch_name)

    logger.info("Switched to branch %s", branch_name)
    return count


def reset(repo, commit_id: str) -> str:
    """
    Move the active branch to a commit and check it out.

    Files tracked by the old head but not by the target are deleted;
    other untracked files are left alone. The index is cleared.

    Args:
        repo: Repository instance
        commit_id: Full or abbreviated commit id

    Returns:
        str: Full digest of the target commit

    Raises:
        CommitNotFoundError: If commit_id matches no commit
        UntrackedFileConflictError: If an untracked file is in the way
    """
    commit_hash = repo.resolve_commit(commit_id)
    target = repo.read_commit(commit_hash)

    index = repo.load_index()
    check_untracked(repo, target, index)

    old_head = repo.head_commit()
    checkout_commit_files(repo, target)
    for filename in old_head.files:
        if not target.contains_file(filename):
            remove_file(repo, filename)

    index.clear()
    index.write(repo.index_file)
    repo.refs.update_branch(repo.refs.current_branch(), commit_hash)

    logger.info("Reset %s to %s", repo.refs.current_branch(), commit_hash[:7])
    return commit_hash

"""Commit creation."""

import logging
from typing import Optional
from twig.core.errors import UsageError
from twig.core.index import Index
from twig.core.objects import Commit

logger = logging.getLogger(__name__)


def create_commit(
    repo,
    message: str,
    timestamp: Optional[int] = None,
    second_parent: str = '',
    index: Optional[Index] = None
) -> str:
    """
    Record the staged changes as a new commit on the active branch.

    The new commit's files are the head commit's files with the index
    folded in. The index is cleared and written back afterwards.

    Args:
        repo: Repository instance
        message: Commit message
        timestamp: Unix timestamp (defaults to current time)
        second_parent: Digest of the merged-in tip, for merge commits
        index: Already-loaded index; read from disk when omitted

    Returns:
        str: Digest of the new commit

    Raises:
        UsageError: If the message is blank
        NoChangesError: If nothing is staged (ordinary commits only)
    """
    if not message or not message.strip():
        raise UsageError("Please enter a commit message.")

    if index is None:
        index = repo.load_index()

    branch = repo.refs.current_branch()
    parent_hash = repo.refs.head_commit()
    parent = repo.read_commit(parent_hash)

    files = index.fold_into(parent.files, allow_empty=bool(second_parent))

    commit = Commit.create(
        message=message,
        files=files,
        parent=parent_hash,
        second_parent=second_parent,
        timestamp=timestamp
    )
    commit_hash = repo.write_object(commit)
    repo.refs.update_branch(branch, commit_hash)

    index.clear()
    index.write(repo.index_file)

    logger.info("Committed %s on %s", commit_hash[:7], branch)
    return commit_hash

"""Working tree status computation."""

from dataclasses import dataclass, field
from typing import List, Tuple
from twig.core.objects import Blob

MODIFIED = 'modified'
DELETED = 'deleted'


@dataclass
class RepoStatus:
    """Snapshot of branches, staged changes and working tree drift."""
    current_branch: str
    branches: List[str] = field(default_factory=list)
    staged: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    modified: List[Tuple[str, str]] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.removed or self.modified or self.untracked)


def _working_digest(repo, filename: str):
    path = repo.working_path(filename)
    if not path.is_file():
        return None
    return Blob.from_file(str(path), filename).hash


def compute_status(repo) -> RepoStatus:
    """
    Compare the head commit, the index and the work tree.

    A file is reported as modified but not staged when:
    - it is tracked, unstaged, and its working content differs
    - it is staged for addition with content other than the working copy
    - it is staged for addition but missing from the work tree
    - it is tracked, not staged for removal, and missing from the work tree

    Protected files are never reported.

    Args:
        repo: Repository instance

    Returns:
        RepoStatus with every list sorted
    """
    index = repo.load_index()
    head = repo.head_commit()

    status = RepoStatus(current_branch=repo.refs.current_branch())
    status.branches = [name for name, _ in repo.refs.list_branches()]
    status.staged = sorted(index.additions)
    status.removed = sorted(index.removals)

    modified = {}
    for filename, staged_digest in index.additions.items():
        if repo.protected.is_protected(filename):
            continue
        digest = _working_digest(repo, filename)
        if digest is None:
            modified[filename] = DELETED
        elif digest != staged_digest:
            modified[filename] = MODIFIED

    for filename, tracked_digest in head.files.items():
        if (filename in index.additions or filename in index.removals
                or repo.protected.is_protected(filename)):
            continue
        digest = _working_digest(repo, filename)
        if digest is None:
            modified[filename] = DELETED
        elif digest != tracked_digest:
            modified[filename] = MODIFIED

    status.modified = sorted(modified.items())

    status.untracked = [
        filename for filename in repo.working_files()
        if not head.contains_file(filename) and not index.tracks_addition(filename)
    ]
    return status

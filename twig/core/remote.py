"""Remote repository operations for Twig VCS."""

import logging
import shutil
from pathlib import Path
from typing import Dict
from .errors import (BranchNotFoundError, PushRejectedError, RemoteExistsError,
                     RemoteNotFoundError)
from .repository import STORAGE_DIR, Repository

logger = logging.getLogger(__name__)


class RemoteManager:
    """
    Manages remote repository operations.

    A remote is a name bound to a filesystem path: either another
    repository's storage root or the work tree that contains one. Each
    binding is a file under .twig/remotes holding the path.
    """

    def __init__(self, repo: Repository):
        """Initialize remote manager."""
        self.repo = repo

    def _remote_file(self, name: str) -> Path:
        return self.repo.remotes_dir / name

    def add_remote(self, name: str, path: str) -> None:
        """
        Add a remote repository.

        Args:
            name: Remote name (e.g., 'origin')
            path: Path to the remote's storage root or work tree

        Raises:
            RemoteExistsError: If the name is already bound
        """
        remote_file = self._remote_file(name)
        if remote_file.exists():
            raise RemoteExistsError()

        self.repo.remotes_dir.mkdir(parents=True, exist_ok=True)
        remote_file.write_text(path + '\n')
        logger.debug("Added remote %s -> %s", name, path)

    def remove_remote(self, name: str) -> None:
        """
        Remove a remote.

        Raises:
            RemoteNotFoundError: If the name is not bound
        """
        remote_file = self._remote_file(name)
        if not remote_file.is_file():
            raise RemoteNotFoundError()
        remote_file.unlink()
        logger.debug("Removed remote %s", name)

    def list_remotes(self) -> Dict[str, str]:
        """
        List all configured remotes.

        Returns:
            Dict mapping remote names to paths
        """
        if not self.repo.remotes_dir.exists():
            return {}
        return {
            remote_file.name: remote_file.read_text().strip()
            for remote_file in sorted(self.repo.remotes_dir.iterdir())
            if remote_file.is_file()
        }

    def remote_storage(self, name: str) -> Path:
        """
        Resolve a remote to its storage root.

        Relative paths are taken from the local work tree.

        Raises:
            RemoteNotFoundError: If the name is unbound or the directory
                is missing
        """
        remote_file = self._remote_file(name)
        if not remote_file.is_file():
            raise RemoteNotFoundError()

        path = Path(remote_file.read_text().strip())
        if not path.is_absolute():
            path = self.repo.work_tree / path
        path = path.resolve()

        if (path / STORAGE_DIR).is_dir():
            return path / STORAGE_DIR
        if (path / 'objects').is_dir() and (path / 'branches').is_dir():
            return path
        raise RemoteNotFoundError("Remote directory not found.")

    def open_remote(self, name: str) -> Repository:
        """Open a remote as a Repository handle over its storage root."""
        storage = self.remote_storage(name)
        return Repository(str(storage.parent), storage=str(storage))

    def push(self, remote_name: str, branch: str) -> str:
        """
        Push the active branch's head to a branch of a remote.

        The remote branch is created if absent. Otherwise its tip must be
        in the history of the local head.

        Args:
            remote_name: Name of remote to push to
            branch: Remote branch to update

        Returns:
            str: Digest the remote branch now points to

        Raises:
            RemoteNotFoundError: If the remote is unknown or missing
            PushRejectedError: If the remote has commits the local head lacks
            BranchExistsError: If branch clashes with a remote branch
        """
        remote = self.open_remote(remote_name)
        remote.refs.check_name(branch)
        head = self.repo.refs.head_commit()

        if remote.refs.branch_exists(branch):
            remote_tip = remote.refs.read_branch(branch)
            if remote_tip not in self.repo.graph.history(head):
                raise PushRejectedError()

        copied = copy_reachable(self.repo, remote, head)
        remote.refs.update_branch(branch, head)

        logger.info("Pushed %s to %s/%s (%d objects)", head[:7], remote_name, branch, copied)
        return head

    def fetch(self, remote_name: str, branch: str) -> str:
        """
        Copy a remote branch into the local repository.

        The remote's commits and blobs are copied into the local store and
        the local branch <remote_name>/<branch> is set to the remote tip.
        The work tree is left alone.

        Returns:
            str: Digest of the fetched tip

        Raises:
            RemoteNotFoundError: If the remote is unknown or missing
            BranchNotFoundError: If the remote has no such branch
            BranchExistsError: If the tracking branch clashes with a local one
        """
        remote = self.open_remote(remote_name)
        if not remote.refs.branch_exists(branch):
            raise BranchNotFoundError("That remote does not have that branch.")

        tip = remote.refs.read_branch(branch)
        self.repo.refs.check_name(f"{remote_name}/{branch}")
        copied = copy_reachable(remote, self.repo, tip)
        self.repo.refs.update_branch(f"{remote_name}/{branch}", tip)

        logger.info("Fetched %s/%s at %s (%d objects)", remote_name, branch, tip[:7], copied)
        return tip

    def pull(self, remote_name: str, branch: str):
        """
        Fetch a remote branch, then merge it into the active branch.

        Returns:
            MergeResult of the merge step
        """
        self.fetch(remote_name, branch)
        return self.repo.merge.merge(f"{remote_name}/{branch}")


def copy_reachable(source: Repository, dest: Repository, tip: str) -> int:
    """
    Copy every commit reachable from tip, and the blobs they reference,
    from one object store to another.

    Objects already present in dest are skipped. Records are copied as
    whole files, so digests and compression are preserved.

    Returns:
        Number of object files copied
    """
    copied = 0
    for commit_hash in source.graph.history(tip):
        commit = source.read_commit(commit_hash)
        for digest in [commit_hash, *commit.files.values()]:
            dest_file = dest.object_path(digest)
            if dest_file.exists():
                continue
            dest_file.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source.object_path(digest), dest_file)
            copied += 1
    return copied

"""Reference management for Twig VCS."""

import logging
from pathlib import Path
from typing import List, Tuple
from .errors import (ActiveBranchError, BranchExistsError, BranchNotFoundError,
                     InvalidBranchNameError)

logger = logging.getLogger(__name__)


class RefManager:
    """
    Manages branch pointers and HEAD.

    Each branch is a file under .twig/branches holding a commit digest.
    HEAD holds the name of the active branch; there is no detached state.
    """

    def __init__(self, repo):
        """
        Initialize reference manager.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.branches_dir = repo.branches_dir
        self.head_file = repo.head_file

    def branch_path(self, branch_name: str) -> Path:
        return self.branches_dir / branch_name

    @staticmethod
    def is_valid_name(branch_name: str) -> bool:
        """True if no slash-separated component is empty or a dot path."""
        return all(
            part not in ('', '.', '..') and '\\' not in part
            for part in branch_name.split('/')
        )

    def branch_exists(self, branch_name: str) -> bool:
        return self.is_valid_name(branch_name) and self.branch_path(branch_name).is_file()

    def read_branch(self, branch_name: str) -> str:
        """
        Read the commit digest a branch points to.

        Args:
            branch_name: Branch name

        Returns:
            Commit digest

        Raises:
            BranchNotFoundError: If the branch does not exist
        """
        if not self.branch_exists(branch_name):
            raise BranchNotFoundError()
        return self.branch_path(branch_name).read_text().strip()

    def current_branch(self) -> str:
        """Return the name of the active branch."""
        return self.head_file.read_text().strip()

    def head_commit(self) -> str:
        """Return the digest at the tip of the active branch."""
        return self.read_branch(self.current_branch())

    def set_head(self, branch_name: str) -> None:
        """
        Make branch_name the active branch.

        Raises:
            BranchNotFoundError: If the branch does not exist
        """
        if not self.branch_exists(branch_name):
            raise BranchNotFoundError("No such branch exists.")
        self.head_file.write_text(branch_name + '\n')
        logger.debug("HEAD now on %s", branch_name)

    def create_branch(self, branch_name: str, commit_hash: str) -> None:
        """
        Create a new branch.

        Args:
            branch_name: Branch name
            commit_hash: Commit digest to point to

        Raises:
            InvalidBranchNameError: If the name is malformed
            BranchExistsError: If the branch, or a clashing one, already exists
        """
        if self.branch_exists(branch_name):
            raise BranchExistsError()
        self._write(branch_name, commit_hash)
        logger.debug("Created branch %s at %s", branch_name, commit_hash[:7])

    def update_branch(self, branch_name: str, commit_hash: str) -> None:
        """
        Point a branch at a new commit, creating the file if needed.

        An empty digest leaves the branch untouched.
        """
        if not commit_hash:
            return
        self._write(branch_name, commit_hash)
        logger.debug("Moved %s to %s", branch_name, commit_hash[:7])

    def delete_branch(self, branch_name: str) -> None:
        """
        Delete a branch.

        Raises:
            BranchNotFoundError: If the branch does not exist
            ActiveBranchError: If the branch is the active one
        """
        if not self.branch_exists(branch_name):
            raise BranchNotFoundError()
        if self.current_branch() == branch_name:
            raise ActiveBranchError()

        path = self.branch_path(branch_name)
        path.unlink()
        parent = path.parent
        while parent != self.branches_dir and not any(parent.iterdir()):
            parent.rmdir()
            parent = parent.parent
        logger.debug("Deleted branch %s", branch_name)

    def list_branches(self) -> List[Tuple[str, str]]:
        """
        List all branches.

        Returns:
            List of (branch_name, commit_hash) tuples
        """
        if not self.branches_dir.exists():
            return []

        branches = []
        for branch_file in self.branches_dir.rglob('*'):
            if branch_file.is_file():
                branch_name = branch_file.relative_to(self.branches_dir).as_posix()
                branches.append((branch_name, branch_file.read_text().strip()))

        return sorted(branches, key=lambda x: x[0])

    def check_name(self, branch_name: str) -> None:
        """
        Make sure branch_name can be stored under the branches directory.

        A branch file cannot share its path with a directory of nested
        branches, so 'origin' and 'origin/master' exclude each other.

        Raises:
            InvalidBranchNameError: If the name is malformed
            BranchExistsError: If the name clashes with an existing branch
        """
        if not self.is_valid_name(branch_name):
            raise InvalidBranchNameError(branch_name)

        if self.branch_path(branch_name).is_dir():
            raise BranchExistsError(
                f"Branches under '{branch_name}/' already exist.")

        parts = branch_name.split('/')
        for i in range(1, len(parts)):
            prefix = '/'.join(parts[:i])
            if self.branch_path(prefix).is_file():
                raise BranchExistsError(
                    f"Branch '{prefix}' already exists; cannot create '{branch_name}'.")

    def _write(self, branch_name: str, commit_hash: str) -> None:
        self.check_name(branch_name)
        path = self.branch_path(branch_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(commit_hash + '\n')

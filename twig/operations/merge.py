"""Merge operations for Twig VCS."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
from twig.core.errors import (BranchNotFoundError, SelfMergeError,
                              UncommittedChangesError)
from twig.core.graph import AncestorKind
from twig.core.index import Index
from twig.core.objects import Commit
from twig.operations.checkout import check_untracked, checkout_tree, write_file
from twig.operations.commit import create_commit

logger = logging.getLogger(__name__)

CONFLICT_START = '<<<<<<< HEAD\n'
CONFLICT_SEP = '=======\n'
CONFLICT_END = '>>>>>>>\n'


class MergeOutcome(Enum):
    """What a merge ended up doing."""
    MERGED = 'merged'
    FAST_FORWARD = 'fast-forward'
    ALREADY_MERGED = 'already-merged'


@dataclass
class MergeConflict:
    """Represents a merge conflict in a file."""
    path: str
    ours_content: str
    theirs_content: str

    def __repr__(self) -> str:
        """String representation."""
        return f"MergeConflict({self.path})"


@dataclass
class MergeResult:
    """Result of a merge operation."""
    outcome: MergeOutcome
    commit_hash: Optional[str] = None
    conflicts: List[MergeConflict] = field(default_factory=list)
    message: str = ""

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    def __repr__(self) -> str:
        """String representation."""
        return f"MergeResult({self.outcome.value}, conflicts={len(self.conflicts)})"


def generate_conflict_markers(ours_content: str, theirs_content: str) -> str:
    """
    Build the working-tree content for a conflicting file.

    Both sides are inserted verbatim; a side missing from its commit
    contributes an empty string.
    """
    return (CONFLICT_START + ours_content + CONFLICT_SEP
            + theirs_content + CONFLICT_END)


class MergeEngine:
    """
    Merges another branch into the active one.

    Supports:
    - Fast-forward when the active branch is behind the other one
    - Three-way merge against the nearest common ancestor
    - Conflict markers for files both sides changed differently
    """

    def __init__(self, repo):
        """
        Initialize merge engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def merge(self, given_branch: str) -> MergeResult:
        """
        Merge given_branch into the active branch.

        Args:
            given_branch: Name of the branch to merge in

        Returns:
            MergeResult describing what happened

        Raises:
            UncommittedChangesError: If anything is staged
            BranchNotFoundError: If given_branch does not exist
            SelfMergeError: If given_branch is the active branch
            UntrackedFileConflictError: If an untracked file is in the way
        """
        refs = self.repo.refs
        index = self.repo.load_index()

        if not index.is_empty():
            raise UncommittedChangesError()
        if not refs.branch_exists(given_branch):
            raise BranchNotFoundError()
        current_branch = refs.current_branch()
        if current_branch == given_branch:
            raise SelfMergeError()

        current_hash = refs.read_branch(current_branch)
        given_hash = refs.read_branch(given_branch)
        given = self.repo.read_commit(given_hash)

        check_untracked(self.repo, given, index)

        result = self.repo.graph.find_common_ancestor(current_hash, given_hash)

        if result.kind is AncestorKind.ALREADY_ANCESTOR:
            return MergeResult(
                outcome=MergeOutcome.ALREADY_MERGED,
                message="Given branch is an ancestor of the current branch."
            )

        if result.kind is AncestorKind.FAST_FORWARD:
            return self.fast_forward(current_branch, given_hash, index)

        current = self.repo.read_commit(current_hash)
        ancestor = self.repo.read_commit(result.commit_hash)

        conflicts = self.three_way_merge(ancestor, current, given, index)

        commit_hash = create_commit(
            self.repo,
            f"Merged {given_branch} into {current_branch}.",
            second_parent=given_hash,
            index=index
        )

        return MergeResult(
            outcome=MergeOutcome.MERGED,
            commit_hash=commit_hash,
            conflicts=conflicts,
            message=f"Merged {given_branch} into {current_branch}."
        )

    def fast_forward(self, current_branch: str, given_hash: str, index: Index) -> MergeResult:
        """
        Move the active branch up to given_hash and check it out.

        No commit is created.
        """
        checkout_tree(self.repo, self.repo.read_commit(given_hash))
        self.repo.refs.update_branch(current_branch, given_hash)

        index.clear()
        index.write(self.repo.index_file)

        logger.info("Fast-forwarded %s to %s", current_branch, given_hash[:7])
        return MergeResult(
            outcome=MergeOutcome.FAST_FORWARD,
            commit_hash=given_hash,
            message="Current branch fast-forwarded."
        )

    def three_way_merge(
        self,
        ancestor: Commit,
        current: Commit,
        given: Commit,
        index: Index
    ) -> List[MergeConflict]:
        """
        Stage the merged state of current and given into index.

        Files are resolved in four passes whose order matters: a file
        can qualify for more than one pass and later passes win.

        1. Changed only in given: added files are taken from given;
           files the ancestor had are restaged from current.
        2. Removed in given, untouched in current: staged for removal.
        3. Changed in given and changed differently or removed in
           current: conflict.
        4. Changed in current: conflict if removed in given, otherwise
           restaged from current.

        Returns:
            List of conflicts written to the work tree
        """
        graph = self.repo.graph
        changed_current = graph.changed_files(current, ancestor)
        changed_given = graph.changed_files(given, ancestor)
        removed_current = graph.removed_files(current, ancestor)
        removed_given = graph.removed_files(given, ancestor)

        conflicts: List[MergeConflict] = []

        for filename in sorted(changed_given):
            if filename in changed_current:
                continue
            if not ancestor.contains_file(filename):
                if not current.contains_file(filename):
                    self._take(given, filename, index)
            elif current.contains_file(filename):
                self._take(current, filename, index)

        for filename in sorted(removed_given):
            if filename not in changed_current and filename not in removed_current:
                index.stage_for_removal(self.repo, filename)

        for filename in sorted(changed_given):
            if filename in changed_current:
                if given.file_hash(filename) != current.file_hash(filename):
                    conflicts.append(self._conflict(current, given, filename, index))
            if filename in removed_current:
                conflicts.append(self._conflict(current, given, filename, index))

        for filename in sorted(changed_current):
            if filename in removed_given:
                conflicts.append(self._conflict(current, given, filename, index))
            elif filename not in changed_given:
                self._take(current, filename, index)

        return conflicts

    def _take(self, source: Commit, filename: str, index: Index) -> None:
        """Write source's version of filename and stage it."""
        write_file(self.repo, filename, source.file_hash(filename))
        index.stage_for_addition(self.repo, filename)

    def _conflict(self, current: Commit, given: Commit, filename: str,
                  index: Index) -> MergeConflict:
        """Write conflict markers for filename and stage the result."""
        ours = self._blob_text(current.file_hash(filename))
        theirs = self._blob_text(given.file_hash(filename))

        path = self.repo.working_path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(generate_conflict_markers(ours, theirs).encode('utf-8'))
        index.stage_for_addition(self.repo, filename)

        logger.warning("Encountered a merge conflict in %s", filename)
        return MergeConflict(path=filename, ours_content=ours, theirs_content=theirs)

    def _blob_text(self, blob_hash: Optional[str]) -> str:
        blob = self.repo.read_blob(blob_hash)
        return blob.text if blob is not None else ''

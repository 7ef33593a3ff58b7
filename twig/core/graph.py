"""Read-only queries over the commit graph."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set
from .errors import NoCommonAncestorError
from .objects import Commit

logger = logging.getLogger(__name__)


class AncestorKind(Enum):
    """How two branch tips relate to each other."""
    ANCESTOR = 'ancestor'
    FAST_FORWARD = 'fast-forward'
    ALREADY_ANCESTOR = 'already-ancestor'


@dataclass
class AncestorResult:
    """Outcome of a common-ancestor search."""
    kind: AncestorKind
    commit_hash: Optional[str] = None

    def __repr__(self) -> str:
        """String representation."""
        if self.commit_hash:
            return f"AncestorResult({self.kind.value}, {self.commit_hash[:7]})"
        return f"AncestorResult({self.kind.value})"


class CommitGraph:
    """
    Traversals over the DAG formed by commits and their parent links.

    Both the primary and the second parent are followed unless a method
    says otherwise.
    """

    def __init__(self, repo):
        """
        Initialize commit graph.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def history(self, commit_hash: str) -> List[str]:
        """
        All commits reachable from commit_hash, each listed once.

        Depth-first over both parent links; the starting commit is
        included.
        """
        history = []
        visited: Set[str] = set()
        stack = [commit_hash]

        while stack:
            current = stack.pop()
            if not current or current in visited:
                continue

            visited.add(current)
            history.append(current)

            commit = self.repo.read_commit(current)
            for parent in commit.parents:
                if parent not in visited:
                    stack.append(parent)

        return history

    def ancestors(self, commit_hash: str) -> List[str]:
        """
        All commits reachable from commit_hash, nearest first.

        Breadth-first over both parent links; the starting commit comes
        first.
        """
        ancestors = []
        visited: Set[str] = set()
        to_visit = [commit_hash]

        while to_visit:
            current = to_visit.pop(0)
            if not current or current in visited:
                continue

            visited.add(current)
            ancestors.append(current)

            commit = self.repo.read_commit(current)
            for parent in commit.parents:
                if parent not in visited:
                    to_visit.append(parent)

        return ancestors

    def first_parent_chain(self, commit_hash: str) -> List[str]:
        """Commits from commit_hash back to the root along primary parents."""
        chain = []
        current = commit_hash
        while current:
            chain.append(current)
            current = self.repo.read_commit(current).parent
        return chain

    @staticmethod
    def changed_files(target: Commit, ancestor: Commit) -> Set[str]:
        """Files in target that are new or differ from ancestor."""
        return {
            filename for filename, digest in target.files.items()
            if ancestor.file_hash(filename) != digest
        }

    @staticmethod
    def removed_files(target: Commit, ancestor: Commit) -> Set[str]:
        """Files in ancestor that target no longer tracks."""
        return {
            filename for filename in ancestor.files
            if not target.contains_file(filename)
        }

    def find_common_ancestor(self, tip_a: str, tip_b: str) -> AncestorResult:
        """
        Find the merge base of two branch tips.

        Args:
            tip_a: Tip of the branch being merged into
            tip_b: Tip of the branch being merged in

        Returns:
            AncestorResult: ALREADY_ANCESTOR when tip_b is reachable from
            tip_a, FAST_FORWARD when tip_a is reachable from tip_b,
            otherwise ANCESTOR with the first commit of tip_a's ancestor
            list that tip_b can also reach

        Raises:
            NoCommonAncestorError: If the histories never meet
        """
        ancestors_a = self.ancestors(tip_a)
        ancestors_b = set(self.ancestors(tip_b))

        if tip_b in ancestors_a:
            return AncestorResult(AncestorKind.ALREADY_ANCESTOR, tip_b)

        if tip_a in ancestors_b:
            return AncestorResult(AncestorKind.FAST_FORWARD, tip_a)

        for commit_hash in ancestors_a:
            if commit_hash in ancestors_b:
                logger.debug("Merge base of %s and %s is %s",
                             tip_a[:7], tip_b[:7], commit_hash[:7])
                return AncestorResult(AncestorKind.ANCESTOR, commit_hash)

        raise NoCommonAncestorError()

    def find_by_message(self, message: str) -> List[str]:
        """Digests of every stored commit whose message equals message."""
        return [
            digest for digest, commit in self.repo.iter_commits()
            if commit.message == message
        ]

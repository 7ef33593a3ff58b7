"""Matching of protected filenames.

Protected files are never deleted, overwritten or reported by checkout,
reset and status. Patterns come from the core.protected config key and
from a .twigprotect file at the work tree root, one pattern per line.
"""

import fnmatch
from pathlib import Path
from typing import Dict, List

PROTECT_FILE = '.twigprotect'


class ProtectedPattern:
    """A single glob pattern for protected files."""

    def __init__(self, pattern: str):
        """
        Initialize a pattern.

        Args:
            pattern: Glob pattern; patterns containing '/' match the whole
                relative path, others match the final component only
        """
        self.original = pattern
        self.anchored = '/' in pattern
        self.pattern = pattern.lstrip('/')

    def matches(self, path: str) -> bool:
        """
        Check if a path matches this pattern.

        Args:
            path: Posix path relative to the work tree
        """
        if self.anchored:
            return fnmatch.fnmatchcase(path, self.pattern)
        return fnmatch.fnmatchcase(path.rsplit('/', 1)[-1], self.pattern)

    def __repr__(self) -> str:
        return f"ProtectedPattern({self.original})"


class ProtectedMatcher:
    """Matches paths against a set of protected patterns."""

    def __init__(self):
        """Initialize empty matcher."""
        self.patterns: List[ProtectedPattern] = []
        self._cache: Dict[str, bool] = {}

    def add_pattern(self, pattern: str) -> None:
        """
        Add a pattern to the matcher.

        Empty lines and comments are skipped.
        """
        pattern = pattern.strip()
        if not pattern or pattern.startswith('#'):
            return
        self.patterns.append(ProtectedPattern(pattern))
        self._cache.clear()

    def add_patterns(self, patterns: List[str]) -> None:
        """Add multiple patterns."""
        for pattern in patterns:
            self.add_pattern(pattern)

    def load_file(self, path: Path) -> bool:
        """
        Load patterns from a file.

        Returns:
            True if the file existed
        """
        if not path.is_file():
            return False
        for line in path.read_text().splitlines():
            self.add_pattern(line)
        return True

    def is_protected(self, path: str) -> bool:
        """Check if a path must be left alone."""
        path = path.replace('\\', '/')
        if path.startswith('./'):
            path = path[2:]

        if path not in self._cache:
            self._cache[path] = any(p.matches(path) for p in self.patterns)
        return self._cache[path]


def get_protected_matcher(repo) -> ProtectedMatcher:
    """
    Create a ProtectedMatcher for a repository.

    Loads patterns from:
    1. The core.protected config value (defaults to Makefile)
    2. The .twigprotect file in the work tree root

    Args:
        repo: Repository instance

    Returns:
        Configured ProtectedMatcher instance
    """
    matcher = ProtectedMatcher()
    matcher.add_patterns(repo.config.protected_names())
    matcher.load_file(repo.work_tree / PROTECT_FILE)
    return matcher

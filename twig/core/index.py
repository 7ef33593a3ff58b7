"""Index (staging area) implementation."""

import hashlib
import logging
import struct
from pathlib import Path
from typing import Dict, Union
from .errors import (CorruptIndexError, NoChangesError, NothingToRemoveError,
                     WorkingFileNotFoundError)
from .objects import Blob

logger = logging.getLogger(__name__)

SIGNATURE = b'TWIX'
VERSION = 1

ADDITION = b'A'
REMOVAL = b'R'


class Index:
    """
    Twig index (staging area) implementation.

    The index records what the next commit changes relative to the
    current one: files to add or update (filename -> blob digest) and
    files to stop tracking. A filename is never in both mappings.

    An operation loads the index once, mutates it in memory and writes
    it back once when it is done.
    """

    def __init__(self):
        """Initialize empty index."""
        self.additions: Dict[str, str] = {}
        self.removals: Dict[str, str] = {}
        self.version: int = VERSION

    def stage_for_addition(self, repo, filename: str) -> str:
        """
        Stage a working file for the next commit.

        The blob is written to the object store. A file whose content
        matches what the head commit already tracks is taken out of the
        additions instead of being staged as a no-op.

        Args:
            repo: Repository instance
            filename: Path relative to the work tree

        Returns:
            str: Digest of the file's blob

        Raises:
            WorkingFileNotFoundError: If the file is not in the work tree
        """
        file_path = repo.working_path(filename)
        if not file_path.is_file():
            raise WorkingFileNotFoundError()

        blob = Blob.from_file(str(file_path), filename)
        digest = repo.write_object(blob)

        if repo.head_commit().file_hash(filename) == digest:
            self.additions.pop(filename, None)
            logger.debug("%s unchanged since last commit; nothing staged", filename)
        else:
            self.additions[filename] = digest
            logger.debug("Staged %s as %s", filename, digest[:7])

        self.removals.pop(filename, None)
        return digest

    def stage_for_removal(self, repo, filename: str) -> None:
        """
        Unstage a pending addition, or mark a tracked file for removal.

        A tracked file marked for removal is also deleted from the work
        tree.

        Args:
            repo: Repository instance
            filename: Path relative to the work tree

        Raises:
            NothingToRemoveError: If the file is neither staged nor tracked
        """
        if filename in self.additions:
            del self.additions[filename]
            logger.debug("Unstaged %s", filename)
            return

        if not repo.head_commit().contains_file(filename):
            raise NothingToRemoveError()

        self.removals[filename] = filename
        file_path = repo.working_path(filename)
        if file_path.is_file():
            file_path.unlink()
        logger.debug("Staged removal of %s", filename)

    def unstage(self, filename: str) -> None:
        """Drop a pending addition, if any."""
        self.additions.pop(filename, None)

    def clear(self) -> None:
        """Clear all entries from index."""
        self.additions.clear()
        self.removals.clear()

    def is_empty(self) -> bool:
        return not self.additions and not self.removals

    def contains(self, filename: str) -> bool:
        """True if filename is staged for addition or removal."""
        return filename in self.additions or filename in self.removals

    def tracks_addition(self, filename: str) -> bool:
        return filename in self.additions

    def fold_into(self, parent_files: Dict[str, str], allow_empty: bool = False) -> Dict[str, str]:
        """
        Apply the staged changes to a parent commit's file mapping.

        Args:
            parent_files: The parent commit's filename -> digest mapping
            allow_empty: Accept an empty index (merge commits)

        Returns:
            dict: New filename -> digest mapping

        Raises:
            NoChangesError: If nothing is staged and allow_empty is False
        """
        if self.is_empty() and not allow_empty:
            raise NoChangesError()

        files = dict(parent_files)
        files.update(self.additions)
        for filename in self.removals:
            files.pop(filename, None)
        return files

    def write(self, index_path: Union[str, Path]) -> None:
        """
        Write index to disk.

        Format:
        - Header: 'TWIX' + version (4 bytes) + addition count + removal count
        - Additions sorted by path: 'A' + 20-byte digest + path + NUL
        - Removals sorted by path: 'R' + path + NUL
        - Checksum: SHA-1 of everything before it

        Args:
            index_path: Path to index file
        """
        content = bytearray()

        content.extend(SIGNATURE)
        content.extend(struct.pack('>III', self.version,
                                   len(self.additions), len(self.removals)))

        for path in sorted(self.additions):
            content.extend(ADDITION)
            content.extend(bytes.fromhex(self.additions[path]))
            content.extend(path.encode('utf-8'))
            content.extend(b'\x00')

        for path in sorted(self.removals):
            content.extend(REMOVAL)
            content.extend(path.encode('utf-8'))
            content.extend(b'\x00')

        content.extend(hashlib.sha1(content).digest())

        Path(index_path).write_bytes(bytes(content))

    def read(self, index_path: Union[str, Path]) -> None:
        """
        Read index from disk.

        A missing or empty file reads as an empty index.

        Args:
            index_path: Path to index file

        Raises:
            CorruptIndexError: On a bad signature or checksum
        """
        self.clear()
        path = Path(index_path)

        if not path.exists():
            return

        data = path.read_bytes()
        if not data:
            return

        content = data[:-20]
        checksum = data[-20:]
        if hashlib.sha1(content).digest() != checksum:
            raise CorruptIndexError("Index checksum mismatch")

        if content[0:4] != SIGNATURE:
            raise CorruptIndexError(f"Invalid index signature: {content[0:4]!r}")

        self.version, add_count, remove_count = struct.unpack('>III', content[4:16])
        offset = 16

        for _ in range(add_count + remove_count):
            kind = content[offset:offset + 1]
            offset += 1

            digest = None
            if kind == ADDITION:
                digest = content[offset:offset + 20].hex()
                offset += 20
            elif kind != REMOVAL:
                raise CorruptIndexError(f"Unknown index entry kind: {kind!r}")

            path_end = content.index(b'\x00', offset)
            name = content[offset:path_end].decode('utf-8')
            offset = path_end + 1

            if digest is None:
                self.removals[name] = name
            else:
                self.additions[name] = digest

    @classmethod
    def load(cls, index_path: Union[str, Path]) -> 'Index':
        """Create an index populated from disk."""
        index = cls()
        index.read(index_path)
        return index

    def __len__(self) -> int:
        """Number of staged changes."""
        return len(self.additions) + len(self.removals)

    def __repr__(self) -> str:
        """String representation."""
        return f"Index(additions={len(self.additions)}, removals={len(self.removals)})"

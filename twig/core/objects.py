"""Twig objects: the records kept in the object store."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, Union
from .hash import hash_parts


class TwigObject(ABC):
    """Base class for all stored Twig objects."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Serialized object data
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Serialized object data
        """
        pass

    @abstractmethod
    def digest_parts(self) -> Tuple[Union[bytes, str], ...]:
        """Return the fields the object's digest is computed over."""
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_parts(*self.digest_parts())
        return self._hash

    @property
    def hash(self) -> str:
        """
        Get object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        return self.compute_hash()


class Blob(TwigObject):
    """
    Represents one file's content together with its name.

    The name takes part in the digest, so identical bytes stored under
    two different names are two different blobs.
    """

    def __init__(self, name: str = '', data: Optional[bytes] = None):
        """
        Initialize a blob.

        Args:
            name: Path of the file relative to the work tree
            data: File content as bytes
        """
        super().__init__()
        self.name = name
        self.data = data or b''
        self._text: Optional[str] = None

    @property
    def text(self) -> str:
        """UTF-8 view of the content, decoded once."""
        if self._text is None:
            self._text = self.data.decode('utf-8', errors='replace')
        return self._text

    def digest_parts(self) -> Tuple[Union[bytes, str], ...]:
        return (self.data, self.name)

    def serialize(self) -> bytes:
        """
        Serialize blob to bytes.

        Format: <name>\0<raw content>

        Returns:
            bytes: Serialized blob
        """
        return self.name.encode('utf-8') + b'\0' + self.data

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize blob from bytes.

        Args:
            data: Serialized blob
        """
        null_pos = data.index(b'\0')
        self.name = data[:null_pos].decode('utf-8')
        self.data = data[null_pos + 1:]
        self._text = None
        self._hash = None

    @classmethod
    def from_file(cls, filepath: str, name: str) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file on disk
            name: Name recorded in the blob

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(name, f.read())

    def __repr__(self) -> str:
        """String representation of blob."""
        return f"Blob(hash={self.hash[:7]}, name={self.name}, size={len(self.data)})"


class Commit(TwigObject):
    """
    Represents a snapshot of every tracked file.

    A commit captures:
    - Log message and timestamp
    - Primary parent (empty for the root commit)
    - Second parent (set only on merge commits)
    - The complete filename -> blob digest mapping
    """

    def __init__(self):
        """Initialize empty commit."""
        super().__init__()
        self.message: str = ''
        self.timestamp: int = 0
        self.parent: str = ''
        self.second_parent: str = ''
        self.files: Dict[str, str] = {}

    @property
    def parents(self) -> list:
        """Non-empty parent digests, primary first."""
        return [p for p in (self.parent, self.second_parent) if p]

    @property
    def is_merge(self) -> bool:
        return bool(self.second_parent)

    def contains_file(self, filename: str) -> bool:
        return filename in self.files

    def file_hash(self, filename: str) -> Optional[str]:
        """Return the blob digest tracked for filename, or None."""
        return self.files.get(filename)

    def serialize_files(self) -> bytes:
        """Canonical form of the file mapping: sorted name\\0digest records."""
        return b''.join(
            name.encode('utf-8') + b'\0' + digest.encode() + b'\n'
            for name, digest in sorted(self.files.items())
        )

    def digest_parts(self) -> Tuple[Union[bytes, str], ...]:
        return (self.message, str(self.timestamp), self.parent,
                self.second_parent, self.serialize_files())

    def serialize(self) -> bytes:
        """
        Serialize commit to Twig format.

        Format:
        parent <parent-hash>   (absent on the root commit)
        merge <second-parent>  (merge commits only)
        time <timestamp>
        file <blob-hash> <name>  (zero or more)

        <commit message>

        Returns:
            bytes: Serialized commit data
        """
        lines = []

        if self.parent:
            lines.append(f'parent {self.parent}')
        if self.second_parent:
            lines.append(f'merge {self.second_parent}')

        lines.append(f'time {self.timestamp}')

        for name, digest in sorted(self.files.items()):
            lines.append(f'file {digest} {name}')

        lines.append('')
        lines.append(self.message)

        return '\n'.join(lines).encode('utf-8')

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from Twig format.

        Args:
            data: Serialized commit data
        """
        content = data.decode('utf-8')
        lines = content.split('\n')

        self.parent = ''
        self.second_parent = ''
        self.files = {}

        message_start = len(lines)
        for i, line in enumerate(lines):
            if not line:
                message_start = i + 1
                break

            if line.startswith('parent '):
                self.parent = line[7:]

            elif line.startswith('merge '):
                self.second_parent = line[6:]

            elif line.startswith('time '):
                self.timestamp = int(line[5:])

            elif line.startswith('file '):
                digest, name = line[5:].split(' ', 1)
                self.files[name] = digest

        self.message = '\n'.join(lines[message_start:])
        self._hash = None

    @classmethod
    def create(
        cls,
        message: str,
        files: Dict[str, str],
        parent: str = '',
        second_parent: str = '',
        timestamp: Optional[int] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            message: Commit message
            files: Complete filename -> blob digest mapping
            parent: Primary parent digest ('' for the root commit)
            second_parent: Second parent digest ('' unless merging)
            timestamp: Unix timestamp (defaults to current time)

        Returns:
            Commit: New commit object
        """
        import time

        commit = cls()
        commit.message = message
        commit.files = dict(files)
        commit.parent = parent
        commit.second_parent = second_parent
        commit.timestamp = int(time.time()) if timestamp is None else int(timestamp)
        return commit

    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parents={len(self.parents)}" if self.parents else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"

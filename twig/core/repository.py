"""Repository management for Twig VCS."""

import logging
import zlib
from pathlib import Path
from typing import Iterator, List, Optional, Tuple
from .errors import (CommitNotFoundError, CorruptObjectError, NotARepositoryError,
                     ObjectNotFoundError, RepositoryExistsError)
from .objects import TwigObject, Blob, Commit

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = 'master'
INITIAL_MESSAGE = 'initial commit'
STORAGE_DIR = '.twig'

# Shortest abbreviated commit id accepted by resolve_commit
MIN_PREFIX = 4

OBJECT_TYPES = {
    'blob': Blob,
    'commit': Commit,
}


class Repository:
    """
    Represents a Twig repository.

    A repository is the handle every operation receives: it knows where
    the work tree and the .twig storage root live, and it owns the
    content-addressed object store.
    """

    def __init__(self, path: str = '.', storage: Optional[str] = None):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
            storage: Explicit storage root, for repositories opened through
                a remote whose storage directory is not named .twig
        """
        self.work_tree = Path(path).resolve()
        if storage is not None:
            self.twig_dir = Path(storage).resolve()
        else:
            self.twig_dir = self.work_tree / STORAGE_DIR
        self.objects_dir = self.twig_dir / 'objects'
        self.branches_dir = self.twig_dir / 'branches'
        self.remotes_dir = self.twig_dir / 'remotes'
        self.head_file = self.twig_dir / 'HEAD'
        self.index_file = self.twig_dir / 'index'
        self.config_file = self.twig_dir / 'config'

        # Managers are created lazily to avoid circular imports
        self._ref_manager = None
        self._commit_graph = None
        self._merge_engine = None
        self._remote_manager = None
        self._config = None
        self._protected = None

    @property
    def refs(self):
        """Get RefManager instance."""
        if self._ref_manager is None:
            from .refs import RefManager
            self._ref_manager = RefManager(self)
        return self._ref_manager

    @property
    def graph(self):
        """Get CommitGraph instance."""
        if self._commit_graph is None:
            from .graph import CommitGraph
            self._commit_graph = CommitGraph(self)
        return self._commit_graph

    @property
    def merge(self):
        """Get MergeEngine instance."""
        if self._merge_engine is None:
            from twig.operations.merge import MergeEngine
            self._merge_engine = MergeEngine(self)
        return self._merge_engine

    @property
    def remote(self):
        """Get RemoteManager instance."""
        if self._remote_manager is None:
            from .remote import RemoteManager
            self._remote_manager = RemoteManager(self)
        return self._remote_manager

    @property
    def config(self):
        """Get Config instance bound to this repository."""
        if self._config is None:
            from .config import get_config
            self._config = get_config(self)
        return self._config

    @property
    def protected(self):
        """Get the matcher for filenames Twig must never touch."""
        if self._protected is None:
            from twig.utils.ignore import get_protected_matcher
            self._protected = get_protected_matcher(self)
        return self._protected

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .twig directory structure:
        .twig/
        ├── objects/       # Object database
        ├── branches/      # One pointer file per branch
        ├── remotes/       # One path file per remote
        ├── HEAD           # Name of the active branch
        ├── index          # Staging area
        └── config         # Repository configuration

        and records the initial commit on the master branch.

        Returns:
            Repository: self for method chaining

        Raises:
            RepositoryExistsError: If repository already exists
        """
        if self.twig_dir.exists():
            raise RepositoryExistsError()

        self.twig_dir.mkdir(parents=True)
        self.objects_dir.mkdir()
        self.branches_dir.mkdir()
        self.remotes_dir.mkdir()
        self.index_file.write_bytes(b'')

        config_content = '[core]\nrepositoryformatversion = 0\n'
        self.config_file.write_text(config_content)

        initial = Commit.create(INITIAL_MESSAGE, {}, timestamp=0)
        commit_hash = self.write_object(initial)

        (self.branches_dir / DEFAULT_BRANCH).write_text(commit_hash + '\n')
        self.head_file.write_text(DEFAULT_BRANCH + '\n')

        logger.debug("Initialized repository at %s", self.twig_dir)
        return self

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / STORAGE_DIR).is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    @classmethod
    def require(cls, path: str = '.') -> 'Repository':
        """Like find_repository, but raise NotARepositoryError on failure."""
        repo = cls.find_repository(path)
        if repo is None:
            raise NotARepositoryError()
        return repo

    def object_path(self, hash: str) -> Path:
        """
        Get filesystem path for an object.

        Objects are stored in subdirectories named by the first 2 characters
        of the hash, with the remaining 38 characters as the filename.

        Args:
            hash: 40-character SHA-1 hash

        Returns:
            Path: Full path to object file
        """
        return self.objects_dir / hash[:2] / hash[2:]

    def write_object(self, obj: TwigObject) -> str:
        """
        Write object to repository.

        Objects are stored compressed with zlib. The format is:
        <type> <size>\0<content>

        Args:
            obj: Twig object to write

        Returns:
            str: SHA-1 hash of the object
        """
        hash = obj.hash
        path = self.object_path(hash)

        # Object already exists
        if path.exists():
            return hash

        data = obj.serialize()
        header = f"{obj.type} {len(data)}\0".encode()

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(zlib.compress(header + data))

        logger.debug("Wrote %s %s", obj.type, hash[:7])
        return hash

    def read_object(self, hash: str) -> TwigObject:
        """
        Read object from repository.

        Args:
            hash: 40-character SHA-1 hash

        Returns:
            TwigObject: Deserialized object (Blob or Commit)

        Raises:
            ObjectNotFoundError: If the object is not stored
            CorruptObjectError: If the stored record is malformed
        """
        if not hash:
            raise ObjectNotFoundError(hash)

        path = self.object_path(hash)

        if not path.exists():
            raise ObjectNotFoundError(hash)

        try:
            content = zlib.decompress(path.read_bytes())
        except zlib.error as e:
            raise CorruptObjectError(f"Object {hash} is corrupt: {e}") from e

        # Parse header: <type> <size>\0
        null_idx = content.find(b'\0')
        if null_idx < 0:
            raise CorruptObjectError(f"Object {hash} has no header")
        header = content[:null_idx].decode()
        data = content[null_idx + 1:]

        try:
            obj_type, size_str = header.split(' ', 1)
            size = int(size_str)
        except ValueError:
            raise CorruptObjectError(f"Invalid object header: {header}")

        if len(data) != size:
            raise CorruptObjectError(
                f"Object size mismatch: expected {size}, got {len(data)}")

        if obj_type not in OBJECT_TYPES:
            raise CorruptObjectError(f"Unknown object type: {obj_type}")

        obj = OBJECT_TYPES[obj_type]()
        obj.deserialize(data)
        return obj

    def read_object_type(self, hash: str) -> str:
        """Return the type tag of a stored object without deserializing it."""
        path = self.object_path(hash)
        if not path.exists():
            raise ObjectNotFoundError(hash)
        content = zlib.decompress(path.read_bytes())
        return content[:content.index(b' ')].decode()

    def object_exists(self, hash: str) -> bool:
        """
        Check if object exists in repository.

        Args:
            hash: 40-character SHA-1 hash

        Returns:
            bool: True if object exists
        """
        return bool(hash) and self.object_path(hash).exists()

    def iter_objects(self) -> Iterator[str]:
        """Yield the digest of every stored object."""
        if not self.objects_dir.exists():
            return
        for obj_dir in sorted(self.objects_dir.iterdir()):
            if obj_dir.is_dir() and len(obj_dir.name) == 2:
                for obj_file in sorted(obj_dir.iterdir()):
                    yield obj_dir.name + obj_file.name

    def iter_commits(self) -> Iterator[Tuple[str, Commit]]:
        """Yield (digest, Commit) for every commit in the store."""
        for digest in self.iter_objects():
            if self.read_object_type(digest) == 'commit':
                yield digest, self.read_object(digest)

    def read_commit(self, hash: str) -> Commit:
        """
        Read a commit, refusing other object types.

        Raises:
            CommitNotFoundError: If no commit is stored under hash
        """
        try:
            obj = self.read_object(hash)
        except ObjectNotFoundError:
            raise CommitNotFoundError()
        if not isinstance(obj, Commit):
            raise CommitNotFoundError()
        return obj

    def read_blob(self, hash: Optional[str]) -> Optional[Blob]:
        """Read a blob, returning None if hash is empty or not stored."""
        if not hash or not self.object_exists(hash):
            return None
        obj = self.read_object(hash)
        return obj if isinstance(obj, Blob) else None

    def resolve_commit(self, commit_id: str) -> str:
        """
        Expand a full or abbreviated commit id to a full digest.

        Args:
            commit_id: 40-character digest or unique prefix

        Returns:
            str: Full commit digest

        Raises:
            CommitNotFoundError: If no single commit matches
        """
        commit_id = commit_id.strip().lower()
        if len(commit_id) < MIN_PREFIX or any(c not in '0123456789abcdef' for c in commit_id):
            raise CommitNotFoundError()

        if len(commit_id) == 40:
            self.read_commit(commit_id)
            return commit_id

        matches = [
            digest for digest, _ in self.iter_commits()
            if digest.startswith(commit_id)
        ]
        if len(matches) != 1:
            raise CommitNotFoundError()
        return matches[0]

    def head_commit(self) -> Commit:
        """Return the commit at the tip of the active branch."""
        return self.read_commit(self.refs.head_commit())

    def load_index(self):
        """Load the staging index from disk."""
        from .index import Index
        return Index.load(self.index_file)

    def working_path(self, filename: str) -> Path:
        return self.work_tree / filename

    def working_files(self) -> List[str]:
        """
        List candidate files in the work tree.

        Returns every regular file as a posix path relative to the work
        tree, skipping the storage root and protected names. Hidden files
        are ordinary candidates, since they can be staged like any other.
        """
        files = []
        for path in self.work_tree.rglob('*'):
            if not path.is_file() or self.twig_dir in path.parents:
                continue
            rel_path = path.relative_to(self.work_tree)
            name = rel_path.as_posix()
            if self.protected.is_protected(name):
                continue
            files.append(name)
        return sorted(files)

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"

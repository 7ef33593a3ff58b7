"""Core functionality for Twig.

This module contains the core data structures:
- Twig objects (Blob, Commit)
- Repository management and the object store
- Index/staging area
- Branch references and the commit graph
- Remote transport
- Configuration management
- Hashing utilities

For operations like commit, checkout, merge and status, see twig.operations
For protected filename matching, see twig.utils
"""

from twig.core.objects import TwigObject, Blob, Commit
from twig.core.repository import Repository
from twig.core.hash import hash_parts
from twig.core.index import Index
from twig.core.refs import RefManager
from twig.core.graph import AncestorKind, AncestorResult, CommitGraph
from twig.core.remote import RemoteManager
from twig.core.config import Config, get_config

__all__ = [
    'TwigObject',
    'Blob',
    'Commit',
    'Repository',
    'Index',
    'RefManager',
    'AncestorKind',
    'AncestorResult',
    'CommitGraph',
    'RemoteManager',
    'Config',
    'get_config',
    'hash_parts',
]

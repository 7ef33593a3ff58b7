"""Operations module for high-level Twig operations.

This module contains the business logic for Twig operations like:
- Commit creation
- Checkout and reset
- Merge algorithms
- Status computation
"""

from twig.operations.commit import create_commit
from twig.operations.checkout import checkout_branch, checkout_file, reset
from twig.operations.merge import MergeEngine, MergeResult, MergeConflict, MergeOutcome
from twig.operations.status import RepoStatus, compute_status

__all__ = [
    'create_commit',
    'checkout_branch', 'checkout_file', 'reset',
    'MergeEngine', 'MergeResult', 'MergeConflict', 'MergeOutcome',
    'RepoStatus', 'compute_status',
]

"""Utilities module for common helper functions.

This module contains:
- Protected filename matching (core.protected, .twigprotect)
"""

from twig.utils.ignore import ProtectedMatcher, ProtectedPattern, get_protected_matcher

__all__ = [
    'ProtectedMatcher', 'ProtectedPattern', 'get_protected_matcher',
]

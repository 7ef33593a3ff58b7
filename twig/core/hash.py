"""Hash utilities for Twig."""

import hashlib
from typing import Union


def hash_parts(*parts: Union[bytes, str]) -> str:
    """
    Compute SHA-1 hash over a sequence of fields.

    Strings are UTF-8 encoded. Each field is fed to the digest as
    ``<length>:<bytes>`` so that no two distinct field sequences share
    an input.

    Args:
        parts: Fields to hash

    Returns:
        40-character hex string
    """
    digest = hashlib.sha1()
    for part in parts:
        if isinstance(part, str):
            part = part.encode('utf-8')
        digest.update(b'%d:' % len(part))
        digest.update(part)
    return digest.hexdigest()

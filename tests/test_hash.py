"""Hash utilities tests."""

import hashlib
from twig.core.hash import hash_parts
from twig.core.objects import Blob, Commit


def test_hash_parts_length():
    assert len(hash_parts(b'')) == 40


def test_hash_parts_length_prefixes_fields():
    """Each field is hashed as <length>:<bytes>."""
    expected = hashlib.sha1(b'2:ab2:cd').hexdigest()
    assert hash_parts(b'ab', 'cd') == expected


def test_hash_parts_field_boundaries_matter():
    assert hash_parts('ab', 'cd') != hash_parts('abc', 'd')
    assert hash_parts('abcd', '') != hash_parts('ab', 'cd')


def test_hash_parts_encodes_strings_as_utf8():
    assert hash_parts('héllo') == hash_parts('héllo'.encode('utf-8'))


def test_hash_parts_order_matters():
    assert hash_parts('a', 'b') != hash_parts('b', 'a')


def test_blobs_with_shifted_name_and_content_differ():
    """Moving bytes between content and name yields a different blob."""
    assert Blob('ME', b'READ').hash != Blob('README', b'').hash


def test_commits_with_shifted_message_and_timestamp_differ():
    parent = 'p' * 40
    first = Commit.create('x1', {}, parent=parent, timestamp=23)
    second = Commit.create('x', {}, parent=parent, timestamp=123)
    assert first.hash != second.hash

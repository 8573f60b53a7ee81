"""Tests for metadata formatting utilities."""

import pytest

from server.apps.media.infrastructure.metadata import readable_size


@pytest.mark.parametrize(('size_bytes', 'expected'), [
    (0, '0 B'),
    (1, '1 B'),
    (1023, '1023 B'),
    (1024, '1 KB'),
    (1536, '1.5 KB'),
    (1024 * 1024, '1 MB'),
    (5 * 1024 ** 3, '5 GB'),
    (1024 ** 5, '1 PB'),
])
def test_readable_size(size_bytes, expected):
    """Test byte counts are formatted with 1024-based units."""
    assert readable_size(size_bytes) == expected


def test_readable_size_precision():
    """Test precision controls decimal places."""
    assert readable_size(1234567, precision=2) == '1.18 MB'
    assert readable_size(1234567, precision=0) == '1 MB'


def test_readable_size_caps_at_largest_unit():
    """Test sizes above the largest unit stay in PB."""
    assert readable_size(2048 * 1024 ** 5) == '2048 PB'

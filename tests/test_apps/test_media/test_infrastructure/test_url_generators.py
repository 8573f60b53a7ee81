"""Tests for URL generators and their registry."""

from pathlib import Path

import pytest

from server.apps.media.exceptions import MediaUrlError
from server.apps.media.infrastructure.url_generators import (
    LocalUrlGenerator,
    NullUrlGenerator,
    S3UrlGenerator,
    UrlGeneratorRegistry,
    get_url_generators,
)
from server.apps.media.models import Media


def _unsaved_media(disk: str) -> Media:
    return Media(
        disk=disk,
        directory='docs',
        filename='report',
        extension='pdf',
        size=10,
        mime_type='application/pdf',
    )


class TestLocalUrlGenerator:
    """Tests for LocalUrlGenerator."""

    def test_public_disk_url(self, disk_root):
        """Test public disk builds URL under base_url."""
        generator = LocalUrlGenerator(_unsaved_media('public'), public=True)

        assert generator.is_publicly_accessible() is True
        assert generator.get_url() == '/media/docs/report.pdf'

    def test_private_disk_url_rejected(self, disk_root):
        """Test private disk raises MediaUrlError."""
        generator = LocalUrlGenerator(_unsaved_media('local'), public=False)

        assert generator.is_publicly_accessible() is False
        with pytest.raises(MediaUrlError) as exc_info:
            generator.get_url()

        assert exc_info.value.disk == 'local'

    def test_absolute_path(self, disk_root):
        """Test absolute path points inside the disk location."""
        generator = LocalUrlGenerator(_unsaved_media('local'))

        result = generator.get_absolute_path()

        assert Path(result) == disk_root / 'local' / 'docs' / 'report.pdf'


class TestS3UrlGenerator:
    """Tests for S3UrlGenerator."""

    def test_url_from_storage(self, mock_s3):
        """Test S3 URL contains bucket and key."""
        generator = S3UrlGenerator(_unsaved_media('s3'))

        url = generator.get_url()

        assert generator.is_publicly_accessible() is True
        assert 'media-library' in url
        assert 'docs/report.pdf' in url
        assert generator.get_absolute_path().split('?')[0] == url.split('?')[0]

    def test_can_be_configured_private(self, mock_s3):
        """Test public option disables URLs."""
        generator = S3UrlGenerator(_unsaved_media('s3'), public=False)

        with pytest.raises(MediaUrlError):
            generator.get_url()


class TestNullUrlGenerator:
    """Tests for NullUrlGenerator."""

    def test_never_public(self):
        """Test fallback generator rejects URLs without a storage."""
        generator = NullUrlGenerator(_unsaved_media('ftp'))

        assert generator.is_publicly_accessible() is False
        assert generator.get_absolute_path() == 'docs/report.pdf'
        with pytest.raises(MediaUrlError):
            generator.get_url()


class TestUrlGeneratorRegistry:
    """Tests for UrlGeneratorRegistry."""

    def test_unregistered_disk_uses_null_generator(self):
        """Test disks without generator fall back to NullUrlGenerator."""
        registry = UrlGeneratorRegistry()

        generator = registry.create(_unsaved_media('local'))

        assert isinstance(generator, NullUrlGenerator)
        assert registry.has_generator('local') is False

    def test_register_passes_options(self):
        """Test registered options reach generator instances."""
        registry = UrlGeneratorRegistry()
        registry.register('public', LocalUrlGenerator, public=True)

        generator = registry.create(_unsaved_media('public'))

        assert isinstance(generator, LocalUrlGenerator)
        assert generator.options == {'public': True}

    def test_from_config(self):
        """Test registry is built from settings-style config."""
        registry = UrlGeneratorRegistry.from_config({
            's3': {
                'BACKEND': (
                    'server.apps.media.infrastructure.url_generators'
                    '.S3UrlGenerator'
                ),
            },
        })

        assert isinstance(registry.create(_unsaved_media('s3')), S3UrlGenerator)

    def test_settings_registry(self):
        """Test default registry follows MEDIA_URL_GENERATORS."""
        registry = get_url_generators()

        assert registry.has_generator('local')
        assert registry.has_generator('public')
        assert registry.has_generator('s3')

    def test_settings_change_resets_registry(self, settings):
        """Test cached registry is rebuilt when the setting changes."""
        get_url_generators()

        settings.MEDIA_URL_GENERATORS = {}

        assert get_url_generators().has_generator('local') is False

"""Shared fixtures for media app tests."""

from pathlib import Path

import boto3
import pytest
from django.contrib.auth import get_user_model
from django.core.files.base import ContentFile
from moto import mock_aws

from server.apps.media.infrastructure.paths import build_disk_path
from server.apps.media.infrastructure.storage import get_disk
from server.apps.media.models import Media, MediaType

User = get_user_model()

_LOCAL_BACKEND = 'server.apps.media.infrastructure.storage.MediaFileSystemStorage'
_S3_BACKEND = 'server.apps.media.infrastructure.storage.MediaS3Storage'
_STATIC_BACKEND = 'django.contrib.staticfiles.storage.StaticFilesStorage'

TEST_BUCKET = 'media-library'


def _disks_config(root: Path) -> dict[str, dict]:
    return {
        'default': {
            'BACKEND': _LOCAL_BACKEND,
            'OPTIONS': {'location': str(root / 'local')},
        },
        'local': {
            'BACKEND': _LOCAL_BACKEND,
            'OPTIONS': {'location': str(root / 'local')},
        },
        'public': {
            'BACKEND': _LOCAL_BACKEND,
            'OPTIONS': {
                'location': str(root / 'public'),
                'base_url': '/media/',
            },
        },
        'staticfiles': {
            'BACKEND': _STATIC_BACKEND,
        },
    }


@pytest.fixture
def user(db):
    """Create test user.

    Returns:
        User instance for testing.
    """
    return User.objects.create_user(
        username='testuser',
        password='testpass123',
        email='test@example.com',
    )


@pytest.fixture
def disk_root(settings, tmp_path):
    """Point the local disks at a temporary directory.

    Returns:
        Root directory holding the `local` and `public` disks.
    """
    settings.STORAGES = _disks_config(tmp_path)
    return tmp_path


@pytest.fixture
def mock_s3(settings, disk_root):
    """Mock S3 service and configure the `s3` disk against it.

    Yields:
        boto3 S3 resource with media-library bucket created.
    """
    with mock_aws():
        conn = boto3.resource('s3', region_name='us-east-1')
        conn.create_bucket(Bucket=TEST_BUCKET)

        # Storage instance is created lazily, inside the mock
        storages_config = _disks_config(disk_root)
        storages_config['s3'] = {
            'BACKEND': _S3_BACKEND,
            'OPTIONS': {
                'bucket_name': TEST_BUCKET,
                'access_key': 'testing',
                'secret_key': 'testing',
                'region_name': 'us-east-1',
                'file_overwrite': False,
            },
        }
        settings.STORAGES = storages_config

        yield conn


@pytest.fixture
def make_media(db, disk_root):
    """Factory storing a file on a disk and creating its Media record.

    Returns:
        Callable creating Media instances.
    """
    def factory(  # noqa: WPS211
        directory: str = 'docs',
        filename: str = 'report',
        extension: str = 'pdf',
        content: bytes = b'test file content',
        disk: str = 'local',
        mime_type: str = 'application/pdf',
        aggregate_type: str = MediaType.PDF,
    ) -> Media:
        storage = get_disk(disk)
        storage.save(
            build_disk_path(directory, filename, extension),
            ContentFile(content),
        )
        return Media.objects.create(
            disk=disk,
            directory=directory,
            filename=filename,
            extension=extension,
            size=len(content),
            mime_type=mime_type,
            aggregate_type=aggregate_type,
        )

    return factory

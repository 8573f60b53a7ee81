"""Django storage configuration for media disks.

Every ``STORAGES`` alias except ``staticfiles`` is a disk that
``Media.disk`` may refer to:
- ``local``: private files on the local filesystem
- ``public``: local files served below ``MEDIA_URL``
- ``s3``: S3-compatible bucket (MinIO for development, R2/S3 in production)
"""

from typing import Any, Final

from server.settings.components import BASE_DIR, config

_LOCAL_BACKEND: Final = (
    'server.apps.media.infrastructure.storage.MediaFileSystemStorage'
)

STORAGES: Final[dict[str, dict[str, Any]]] = {
    'default': {
        'BACKEND': _LOCAL_BACKEND,
        'OPTIONS': {
            'location': config(
                'MEDIA_LOCAL_ROOT',
                default=str(BASE_DIR.joinpath('storage', 'local')),
            ),
        },
    },
    'local': {
        'BACKEND': _LOCAL_BACKEND,
        'OPTIONS': {
            'location': config(
                'MEDIA_LOCAL_ROOT',
                default=str(BASE_DIR.joinpath('storage', 'local')),
            ),
        },
    },
    'public': {
        'BACKEND': _LOCAL_BACKEND,
        'OPTIONS': {
            'location': config(
                'MEDIA_PUBLIC_ROOT',
                default=str(BASE_DIR.joinpath('media')),
            ),
            'base_url': config('DJANGO_MEDIA_URL', default='/media/'),
        },
    },
    's3': {
        'BACKEND': 'server.apps.media.infrastructure.storage.MediaS3Storage',
        'OPTIONS': {
            'bucket_name': config(
                'AWS_STORAGE_BUCKET_NAME',
                default='media-library',
            ),
            'access_key': config('AWS_ACCESS_KEY_ID', default='minioadmin'),
            'secret_key': config(
                'AWS_SECRET_ACCESS_KEY',
                default='minioadmin',
            ),
            'endpoint_url': config(
                'AWS_S3_ENDPOINT_URL',
                default=None,
            ),
            'region_name': config(
                'AWS_S3_REGION_NAME',
                default='us-east-1',
            ),
            'file_overwrite': False,  # Prevent accidental overwrites
            'default_acl': None,  # Inherit bucket ACL
        },
    },
    'staticfiles': {
        # Keep static files separate from media disks
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

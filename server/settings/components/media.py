"""Media library settings."""

from typing import Any, Final

_URL_GENERATORS_MODULE: Final = 'server.apps.media.infrastructure.url_generators'

# Disk alias -> URL generator used to build public URLs and paths.
# Disks missing here are never publicly accessible.
MEDIA_URL_GENERATORS: Final[dict[str, dict[str, Any]]] = {
    'local': {
        'BACKEND': f'{_URL_GENERATORS_MODULE}.LocalUrlGenerator',
        'OPTIONS': {'public': False},
    },
    'public': {
        'BACKEND': f'{_URL_GENERATORS_MODULE}.LocalUrlGenerator',
        'OPTIONS': {'public': True},
    },
    's3': {
        'BACKEND': f'{_URL_GENERATORS_MODULE}.S3UrlGenerator',
    },
}

# Aliases in STORAGES that are not media disks.
# `default` shares the root of `local`.
MEDIA_EXCLUDED_DISKS: Final = ('default', 'staticfiles')

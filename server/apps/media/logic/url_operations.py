"""Business logic for resolving media URLs and paths.

Each function takes an optional registry; when omitted the registry
configured by ``MEDIA_URL_GENERATORS`` is used.
"""

import logging

from server.apps.media.exceptions import MediaUrlError
from server.apps.media.infrastructure.url_generators import (
    UrlGeneratorRegistry,
    get_url_generators,
)
from server.apps.media.models import Media

logger = logging.getLogger(__name__)


def is_publicly_accessible(
    media: Media,
    registry: UrlGeneratorRegistry | None = None,
) -> bool:
    """Check if a media file can be reached through a public URL.

    Args:
        media: Media to check.
        registry: URL generators to use.

    Returns:
        True if the media's disk is publicly accessible.
    """
    registry = registry or get_url_generators()
    return registry.create(media).is_publicly_accessible()


def get_url(
    media: Media,
    registry: UrlGeneratorRegistry | None = None,
) -> str:
    """Get the public URL of a media file.

    Args:
        media: Media to resolve.
        registry: URL generators to use.

    Returns:
        URL of the file.

    Raises:
        MediaUrlError: If the media's disk is not publicly accessible.
    """
    registry = registry or get_url_generators()
    try:
        return registry.create(media).get_url()
    except MediaUrlError:
        logger.warning(
            'URL requested for non-public media %s on disk %s',
            media.pk,
            media.disk,
        )
        raise


def get_absolute_path(
    media: Media,
    registry: UrlGeneratorRegistry | None = None,
) -> str:
    """Get the absolute path of a media file.

    Local disks give a filesystem path; other disks give whatever their
    generator considers absolute (a URL for S3).

    Args:
        media: Media to resolve.
        registry: URL generators to use.

    Returns:
        Absolute path of the file.
    """
    registry = registry or get_url_generators()
    return registry.create(media).get_absolute_path()

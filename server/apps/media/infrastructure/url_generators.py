"""URL generators: per-disk strategies for public URLs and paths.

Each disk alias maps to one generator class. Disks without a generator
fall back to ``NullUrlGenerator`` and are never publicly accessible.
"""

import abc
import functools
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, final

from typing_extensions import override

from django.conf import settings
from django.core.files.storage import Storage
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.module_loading import import_string

from server.apps.media.exceptions import MediaUrlError
from server.apps.media.infrastructure.paths import disk_path
from server.apps.media.infrastructure.storage import get_disk

if TYPE_CHECKING:
    from server.apps.media.models import Media

logger = logging.getLogger(__name__)


class UrlGenerator(abc.ABC):
    """Resolves URLs and paths for one media file on one disk."""

    def __init__(self, media: 'Media', **options: Any) -> None:
        """Initialize the generator.

        Args:
            media: Media to resolve.
            options: Generator options from ``MEDIA_URL_GENERATORS``.
        """
        self.media = media
        self.options = options

    @functools.cached_property
    def storage(self) -> Storage:
        """Disk holding the media file."""
        return get_disk(self.media.disk)

    @abc.abstractmethod
    def is_publicly_accessible(self) -> bool:
        """Check if the file can be reached from the web."""

    @abc.abstractmethod
    def get_absolute_path(self) -> str:
        """Get the absolute path to the file."""

    def get_url(self) -> str:
        """Get the public URL of the file.

        Returns:
            Absolute URL or URL path.

        Raises:
            MediaUrlError: If the disk is not publicly accessible.
        """
        if not self.is_publicly_accessible():
            raise MediaUrlError(self.media.disk)
        return self.build_url()

    def build_url(self) -> str:
        """Build the URL for a publicly accessible file."""
        return self.storage.url(disk_path(self.media))


@final
class LocalUrlGenerator(UrlGenerator):
    """Generator for local filesystem disks.

    The disk is public only when configured with ``public: True``;
    it is then served under the storage ``base_url``.
    """

    @override
    def is_publicly_accessible(self) -> bool:
        return bool(self.options.get('public', False))

    @override
    def get_absolute_path(self) -> str:
        return self.storage.path(disk_path(self.media))


@final
class S3UrlGenerator(UrlGenerator):
    """Generator for S3-compatible disks.

    URLs come from the storage, so they are signed when the storage uses
    query string authentication.
    """

    @override
    def is_publicly_accessible(self) -> bool:
        return bool(self.options.get('public', True))

    @override
    def get_absolute_path(self) -> str:
        return self.storage.url(disk_path(self.media))


@final
class NullUrlGenerator(UrlGenerator):
    """Fallback for disks without a generator; never public."""

    @override
    def is_publicly_accessible(self) -> bool:
        return False

    @override
    def get_absolute_path(self) -> str:
        # No physical location is known, use the logical one
        return disk_path(self.media)


class UrlGeneratorRegistry:
    """Maps disk aliases to URL generator classes.

    Built once from settings (see ``get_url_generators``) or explicitly,
    then passed to the URL operations.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._generators: dict[str, tuple[type[UrlGenerator], dict[str, Any]]] = {}

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Mapping[str, Any]],
    ) -> 'UrlGeneratorRegistry':
        """Build a registry from ``MEDIA_URL_GENERATORS``-style config.

        Args:
            config: Disk alias -> {'BACKEND': dotted path, 'OPTIONS': {...}}.

        Returns:
            Populated registry.
        """
        registry = cls()
        for disk, generator_config in config.items():
            registry.register(
                disk,
                import_string(generator_config['BACKEND']),
                **generator_config.get('OPTIONS', {}),
            )
        return registry

    def register(
        self,
        disk: str,
        generator_class: type[UrlGenerator],
        **options: Any,
    ) -> None:
        """Register a generator for a disk, replacing any previous one.

        Args:
            disk: Disk alias.
            generator_class: Generator to use for the disk.
            options: Options passed to each generator instance.
        """
        logger.debug(
            'Registering URL generator %s for disk %s',
            generator_class.__name__,
            disk,
        )
        self._generators[disk] = (generator_class, options)

    def has_generator(self, disk: str) -> bool:
        """Check if a disk has a registered generator.

        Args:
            disk: Disk alias.

        Returns:
            True if a generator is registered.
        """
        return disk in self._generators

    def create(self, media: 'Media') -> UrlGenerator:
        """Create the generator for a media file.

        Args:
            media: Media to resolve.

        Returns:
            Generator registered for the media's disk, or a
            ``NullUrlGenerator`` if there is none.
        """
        generator_class, options = self._generators.get(
            media.disk,
            (NullUrlGenerator, {}),
        )
        return generator_class(media, **options)


@functools.cache
def get_url_generators() -> UrlGeneratorRegistry:
    """Get the registry configured by ``MEDIA_URL_GENERATORS``.

    Returns:
        Shared registry instance.
    """
    return UrlGeneratorRegistry.from_config(settings.MEDIA_URL_GENERATORS)


@receiver(setting_changed)
def reset_url_generators(*, setting: str, **kwargs: object) -> None:
    """Drop the cached registry when its setting changes.

    Args:
        setting: Name of the changed setting.
        **kwargs: Additional signal arguments.
    """
    if setting == 'MEDIA_URL_GENERATORS':
        get_url_generators.cache_clear()

"""Database models for media app."""

from typing import Any, Final, Self, final

from typing_extensions import override

from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models

from server.apps.media.exceptions import MediaImmutableFieldError
from server.apps.media.infrastructure import paths
from server.apps.media.infrastructure.metadata import readable_size

# Constants for field max lengths
_DISK_MAX_LENGTH: Final = 64
_PATH_MAX_LENGTH: Final = 255
_EXTENSION_MAX_LENGTH: Final = 32
_MIME_TYPE_MAX_LENGTH: Final = 255
_TYPE_MAX_LENGTH: Final = 32
_TAG_MAX_LENGTH: Final = 100

# Fields fixed when the record is created
IMMUTABLE_FIELDS: Final = (
    'disk',
    'extension',
    'size',
    'mime_type',
    'aggregate_type',
)


class MediaType(models.TextChoices):
    """Logical classification of a media file.

    Assigned at creation for filtering; never checked against content.
    """

    IMAGE = 'image', 'Image'
    VECTOR = 'vector', 'Vector image'
    PDF = 'pdf', 'PDF'
    VIDEO = 'video', 'Video'
    AUDIO = 'audio', 'Audio'
    ARCHIVE = 'archive', 'Archive'
    DOCUMENT = 'document', 'Document'
    SPREADSHEET = 'spreadsheet', 'Spreadsheet'
    OTHER = 'other', 'Other'


class MediaQuerySet(models.QuerySet['Media']):
    """Location based lookups for media."""

    def in_directory(
        self,
        disk: str,
        directory: str,
        *,
        recursive: bool = False,
    ) -> Self:
        """Find media in a directory of a disk.

        Args:
            disk: Disk alias to search.
            directory: Directory relative to disk root.
            recursive: Also include media in subdirectories.

        Returns:
            Filtered queryset.
        """
        directory = directory.strip('/')
        queryset = self.filter(disk=disk)
        if not recursive:
            return queryset.filter(directory=directory)
        if not directory:
            return queryset
        return queryset.filter(
            models.Q(directory=directory)
            | models.Q(directory__startswith=f'{directory}/'),
        )

    def in_or_under_directory(self, disk: str, directory: str) -> Self:
        """Find media in a directory or any of its subdirectories."""
        return self.in_directory(disk, directory, recursive=True)

    def where_basename(self, basename: str) -> Self:
        """Find media by filename and extension, e.g. 'report.pdf'."""
        filename, extension = paths.split_basename(basename)
        return self.filter(filename=filename, extension=extension)

    def for_path_on_disk(self, disk: str, path: str) -> Self:
        """Find media at a path relative to a disk root.

        Args:
            disk: Disk alias.
            path: Directory, filename and extension, e.g. 'docs/report.pdf'.

        Returns:
            Filtered queryset (at most one row).
        """
        directory, filename, extension = paths.split_path(path)
        return self.filter(
            disk=disk,
            directory=directory,
            filename=filename,
            extension=extension,
        )


@final
class Media(models.Model):
    """Metadata of a file stored on one of the configured disks.

    The location is split into ``disk``, ``directory``, ``filename`` and
    ``extension``; ``directory`` has no leading or trailing slash and is
    empty for files at the disk root. Only ``directory`` and ``filename``
    may change after creation, and only by moving the file.
    """

    disk = models.CharField(
        max_length=_DISK_MAX_LENGTH,
        help_text='Alias of the storage in STORAGES',
    )

    directory = models.CharField(
        max_length=_PATH_MAX_LENGTH,
        blank=True,
        default='',
        help_text='Directory relative to disk root',
    )

    filename = models.CharField(
        max_length=_PATH_MAX_LENGTH,
        help_text='Filename without extension',
    )

    extension = models.CharField(
        max_length=_EXTENSION_MAX_LENGTH,
        help_text='Extension without leading dot',
    )

    mime_type = models.CharField(
        max_length=_MIME_TYPE_MAX_LENGTH,
    )

    aggregate_type = models.CharField(
        max_length=_TYPE_MAX_LENGTH,
        choices=MediaType.choices,
        default=MediaType.OTHER,
        db_index=True,
    )

    size = models.PositiveBigIntegerField(
        help_text='File size in bytes',
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = MediaQuerySet.as_manager()

    class Meta:
        """Model metadata."""

        verbose_name = 'Media'  # type: ignore[mutable-override]
        verbose_name_plural = 'Media'  # type: ignore[mutable-override]
        ordering = ['disk', 'directory', 'filename']

        indexes = [
            # Optimize directory listing queries
            models.Index(
                fields=['disk', 'directory'],
                name='media_disk_directory_idx',
            ),
        ]

        constraints = [
            # One record per location on a disk
            models.UniqueConstraint(
                fields=['disk', 'directory', 'filename', 'extension'],
                name='media_disk_path_unique',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.disk}:{self.get_disk_path()}'

    @override
    @classmethod
    def from_db(
        cls,
        db: str | None,
        field_names: Any,
        values: Any,
    ) -> 'Media':
        """Remember loaded values to detect immutable field changes."""
        instance = super().from_db(db, field_names, values)
        instance._loaded_values = {  # noqa: WPS437
            name: value
            for name, value in zip(field_names, values, strict=True)
            if name in IMMUTABLE_FIELDS
        }
        return instance

    @override
    def save(self, *args: Any, **kwargs: Any) -> None:
        """Save the record, refusing changes to immutable fields.

        Raises:
            MediaImmutableFieldError: If an immutable field was changed
                on an already persisted record.
        """
        changed = self._changed_immutable_fields()
        if changed:
            raise MediaImmutableFieldError(changed)
        super().save(*args, **kwargs)
        deferred = self.get_deferred_fields()
        self._loaded_values = {
            name: getattr(self, name)
            for name in IMMUTABLE_FIELDS
            if name not in deferred
        }

    @property
    def basename(self) -> str:
        """Filename with extension, e.g. 'report.pdf'."""
        return paths.basename(self)

    def get_disk_path(self) -> str:
        """Get the path to the file relative to the root of the disk.

        Example: directory='docs', filename='report', extension='pdf'
        -> 'docs/report.pdf'

        Returns:
            Disk path without leading slash.
        """
        return paths.disk_path(self)

    def get_absolute_path(self) -> str:
        """Get the absolute path to the file (see URL generators)."""
        from server.apps.media.logic.url_operations import get_absolute_path

        return get_absolute_path(self)

    def is_publicly_accessible(self) -> bool:
        """Check if the file can be reached through a public URL."""
        from server.apps.media.logic.url_operations import (
            is_publicly_accessible,
        )

        return is_publicly_accessible(self)

    def get_url(self) -> str:
        """Get the public URL of the file.

        Raises:
            MediaUrlError: If the media's disk is not publicly accessible.
        """
        from server.apps.media.logic.url_operations import get_url

        return get_url(self)

    def file_exists(self) -> bool:
        """Check if the file exists on its disk."""
        from server.apps.media.logic.media_operations import media_file_exists

        return media_file_exists(self)

    def contents(self) -> bytes:
        """Read the file contents from its disk."""
        from server.apps.media.logic.media_operations import (
            get_media_contents,
        )

        return get_media_contents(self)

    def readable_size(self, precision: int = 1) -> str:
        """Get the file size in human-readable notation, e.g. '1.5 MB'."""
        return readable_size(self.size, precision)

    def move(self, destination: str, filename: str | None = None) -> 'Media':
        """Move the file to another directory, optionally renaming it.

        See ``server.apps.media.logic.media_operations.move_media``.
        """
        from server.apps.media.logic.media_operations import move_media

        return move_media(self, destination, filename)

    def rename(self, filename: str) -> 'Media':
        """Rename the file in place, keeping its extension."""
        from server.apps.media.logic.media_operations import rename_media

        return rename_media(self, filename)

    def _changed_immutable_fields(self) -> list[str]:
        loaded = getattr(self, '_loaded_values', None)
        if self._state.adding or loaded is None:
            return []
        return [
            name
            for name, loaded_value in loaded.items()
            if getattr(self, name) != loaded_value
        ]


@final
class Mediable(models.Model):
    """Association between a media file and any other model instance.

    The same media may be attached to many objects under different tags
    (e.g. 'thumbnail', 'gallery'). Only the media id is stored here.
    """

    media = models.ForeignKey(
        Media,
        on_delete=models.CASCADE,
        related_name='attachments',
    )

    # Generic relation to the owning object
    content_type = models.ForeignKey(
        ContentType,
        on_delete=models.CASCADE,
    )
    object_id = models.PositiveBigIntegerField()
    content_object = GenericForeignKey('content_type', 'object_id')

    tag = models.CharField(
        max_length=_TAG_MAX_LENGTH,
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'Media attachment'  # type: ignore[mutable-override]
        verbose_name_plural = 'Media attachments'  # type: ignore[mutable-override]
        ordering = ['created_at', 'id']

        indexes = [
            models.Index(
                fields=['content_type', 'object_id', 'tag'],
                name='mediable_owner_tag_idx',
            ),
        ]

        constraints = [
            models.UniqueConstraint(
                fields=['media', 'content_type', 'object_id', 'tag'],
                name='mediable_unique_attachment',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.content_type_id}:{self.object_id}:{self.tag}'

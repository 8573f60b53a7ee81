"""Business logic for media file operations.

Storage is the source of truth for file existence. Every operation
touches the disk first and commits the record only after the disk
operation succeeded, so a crash leaves bytes at the new location with a
stale record (detectable) rather than a record pointing at nothing.
"""

import logging
from typing import Final

from django.db import transaction

from server.apps.media.exceptions import (
    BackendMoveError,
    DestinationExistsError,
    MediaFileNotFoundError,
    PostMovePersistError,
)
from server.apps.media.infrastructure.paths import (
    build_disk_path,
    disk_path,
    strip_known_extension,
)
from server.apps.media.infrastructure.storage import get_disk, move_on_disk
from server.apps.media.models import Media

logger = logging.getLogger(__name__)

_LOCATION_FIELDS: Final = ('directory', 'filename', 'updated_at')


def move_media(
    media: Media,
    destination: str,
    filename: str | None = None,
) -> Media:
    """Move a media file to another directory on its disk.

    The extension never changes: ``filename`` may be given with or
    without it ('photo' and 'photo.jpg' are equivalent for a jpg).

    Steps, in order:
    1. Refuse if another file exists at the target path.
    2. Move the bytes on the disk.
    3. Update and save the record.

    Args:
        media: Media to move.
        destination: Target directory relative to disk root.
        filename: New filename. Defaults to the current one.

    Returns:
        The same Media instance, pointing at the new location.

    Raises:
        DestinationExistsError: If the target path is occupied.
        BackendMoveError: If the disk failed to move the file.
        PostMovePersistError: If the file moved but the record was not saved.
    """
    if filename:
        filename = strip_known_extension(filename, media.extension)
    else:
        filename = media.filename

    destination = destination.strip('/')
    source_path = disk_path(media)
    target_path = build_disk_path(destination, filename, media.extension)
    storage = get_disk(media.disk)

    # Step 1: Never overwrite another file
    if storage.exists(target_path):
        logger.warning(
            'Move refused, destination exists: %s:%s',
            media.disk,
            target_path,
        )
        raise DestinationExistsError(target_path)

    logger.info(
        'Moving media %s from %s to %s on disk %s',
        media.pk,
        source_path,
        target_path,
        media.disk,
    )

    # Step 2: Move the bytes, record stays untouched on failure
    try:
        move_on_disk(storage, source_path, target_path)
    except Exception as error:
        logger.exception(
            'Failed to move file on disk %s: %s -> %s',
            media.disk,
            source_path,
            target_path,
        )
        raise BackendMoveError(source_path, target_path) from error

    # Step 3: Commit the new location
    media.directory = destination
    media.filename = filename
    try:
        with transaction.atomic():
            media.save(update_fields=_LOCATION_FIELDS)
    except Exception as error:
        logger.exception(
            'File moved but media %s was not saved, reconcile to %s',
            media.pk,
            target_path,
        )
        raise PostMovePersistError(media.pk, source_path, target_path) from error

    logger.info('Media %s moved to %s', media.pk, target_path)
    return media


def rename_media(media: Media, filename: str) -> Media:
    """Rename a media file in its current directory.

    Args:
        media: Media to rename.
        filename: New filename, with or without the current extension.

    Returns:
        The renamed Media instance.
    """
    return move_media(media, media.directory, filename)


def reconcile_media_location(
    media: Media,
    directory: str,
    filename: str,
) -> Media:
    """Point a record at the location its file already occupies.

    Recovery path after ``PostMovePersistError``: the bytes are never
    moved here, only the record is updated, and only when the file is
    really present at the given location.

    Args:
        media: Media whose record is stale.
        directory: Directory where the file now lives.
        filename: Filename (extension is kept) where the file now lives.

    Returns:
        Updated Media instance.

    Raises:
        MediaFileNotFoundError: If no file exists at the given location.
    """
    directory = directory.strip('/')
    filename = strip_known_extension(filename, media.extension)
    target_path = build_disk_path(directory, filename, media.extension)

    if not get_disk(media.disk).exists(target_path):
        raise MediaFileNotFoundError(media.disk, target_path)

    with transaction.atomic():
        media.directory = directory
        media.filename = filename
        media.save(update_fields=_LOCATION_FIELDS)

    logger.info(
        'Media %s reconciled to %s on disk %s',
        media.pk,
        target_path,
        media.disk,
    )
    return media


def delete_media(media_id: int) -> None:
    """Delete media record and its file.

    The record is deleted here; the file is removed from the disk by
    the post_delete signal handler in signals.py.

    Args:
        media_id: ID of media to delete.

    Raises:
        Media.DoesNotExist: If media doesn't exist.
    """
    try:
        media = Media.objects.get(id=media_id)
    except Media.DoesNotExist:
        logger.exception('Media not found: ID=%d', media_id)
        raise

    logger.info(
        'Deleting media: ID=%d, path=%s:%s',
        media_id,
        media.disk,
        media.get_disk_path(),
    )

    try:
        with transaction.atomic():
            media.delete()
            logger.info('Media record deleted from database: ID=%d', media_id)
    except Exception:
        logger.exception('Failed to delete media from database: ID=%d', media_id)
        raise


def media_file_exists(media: Media) -> bool:
    """Check if the file of a media record exists on its disk.

    Args:
        media: Media to check.

    Returns:
        True if the disk has the file.
    """
    return get_disk(media.disk).exists(disk_path(media))


def get_media_contents(media: Media) -> bytes:
    """Read the contents of a media file.

    Args:
        media: Media to read.

    Returns:
        File contents.

    Raises:
        MediaFileNotFoundError: If the file is missing from its disk.
    """
    storage = get_disk(media.disk)
    path = disk_path(media)
    try:
        with storage.open(path, 'rb') as media_file:
            return media_file.read()
    except FileNotFoundError as error:
        raise MediaFileNotFoundError(media.disk, path) from error

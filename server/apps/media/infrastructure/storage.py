"""Storage backends (disks) for media files.

A disk is any entry of Django's ``STORAGES`` setting. Django storages
already cover ``exists``/``open``/``delete``; this module adds ``move``
and the lookup of a disk by alias.
"""

import logging
from pathlib import Path
from typing import final

from typing_extensions import override

from django.conf import settings
from django.core.files.move import file_move_safe
from django.core.files.storage import (
    FileSystemStorage,
    InvalidStorageError,
    Storage,
    storages,
)
from storages.backends.s3 import S3Storage
from storages.utils import clean_name

from server.apps.media.exceptions import MediaDiskNotFoundError

logger = logging.getLogger(__name__)


def copy_then_delete(storage: Storage, source: str, destination: str) -> None:
    """Move a file using only the generic Django storage API.

    Used for storages that have no native ``move``.

    Args:
        storage: Django storage holding the file.
        source: Current path of the file.
        destination: New path of the file.

    Raises:
        FileExistsError: If the storage saved the copy under another name.
    """
    with storage.open(source, 'rb') as source_file:
        saved_name = storage.save(destination, source_file)

    if saved_name != destination:
        # Storage picked an alternative name, destination is taken
        storage.delete(saved_name)
        raise FileExistsError(destination)

    storage.delete(source)


def move_on_disk(storage: Storage, source: str, destination: str) -> None:
    """Move a file on a disk, natively when the storage supports it.

    Args:
        storage: Django storage holding the file.
        source: Current path of the file.
        destination: New path of the file.
    """
    native_move = getattr(storage, 'move', None)
    if native_move is None:
        copy_then_delete(storage, source, destination)
    else:
        native_move(source, destination)


def get_disk(disk: str) -> Storage:
    """Get the storage configured for a disk alias.

    Args:
        disk: Alias from the ``STORAGES`` setting.

    Returns:
        Django storage instance.

    Raises:
        MediaDiskNotFoundError: If the alias is not a configured disk.
    """
    if disk in settings.MEDIA_EXCLUDED_DISKS:
        raise MediaDiskNotFoundError(disk)
    try:
        return storages[disk]
    except InvalidStorageError as error:
        raise MediaDiskNotFoundError(disk) from error


@final
class MediaFileSystemStorage(FileSystemStorage):
    """Local filesystem disk with move support."""

    def move(self, source: str, destination: str) -> None:
        """Move a file within this disk without overwriting.

        Args:
            source: Current path of the file.
            destination: New path of the file.

        Raises:
            FileExistsError: If destination already exists.
            OSError: If the filesystem move fails.
        """
        source_path = self.path(source)
        destination_path = self.path(destination)
        try:
            logger.info('Moving file: %s -> %s', source, destination)
            Path(destination_path).parent.mkdir(parents=True, exist_ok=True)
            file_move_safe(source_path, destination_path)
            logger.info('Moved file: %s -> %s', source, destination)
        except Exception:
            logger.exception('Move failed: %s -> %s', source, destination)
            raise


@final
class MediaS3Storage(S3Storage):
    """S3-compatible disk with move support and logging."""

    @override
    def delete(self, name: str) -> None:
        """Delete an object, logging failures before re-raising.

        Args:
            name: Key of the object on this disk.
        """
        try:
            super().delete(name)
        except Exception:
            logger.exception(
                'Failed to delete object %s from bucket %s',
                name,
                self.bucket_name,
            )
            raise
        logger.info(
            'Deleted object %s from bucket %s',
            name,
            self.bucket_name,
        )

    def move(self, source: str, destination: str) -> None:
        """Move/rename an object in S3 storage.

        S3 doesn't support native rename, so this performs a server-side
        copy followed by deletion of the source.

        Note: This operation is not atomic. If copy succeeds but delete
        fails, both objects exist and the source becomes an orphan.

        Args:
            source: Source storage path.
            destination: Destination storage path.

        Raises:
            Exception: If copy or delete fails.
        """
        try:
            logger.info('Moving file: %s -> %s', source, destination)
            copy_source = {
                'Bucket': self.bucket_name,
                'Key': self._normalize_name(clean_name(source)),
            }
            self.bucket.copy(
                copy_source,
                self._normalize_name(clean_name(destination)),
            )
            self.delete(source)
            logger.info('Moved file: %s -> %s', source, destination)
        except Exception:
            logger.exception('Move failed: %s -> %s', source, destination)
            raise

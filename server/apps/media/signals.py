"""Signals and signal handlers for media app."""

import logging

from django.db.models.signals import post_delete
from django.dispatch import Signal, receiver

from server.apps.media.infrastructure.storage import get_disk
from server.apps.media.models import Media

logger = logging.getLogger(__name__)

# Sent once when a deleted record's file could not be removed from its disk.
# Arguments: media (deleted instance), path (disk path), error (exception).
media_file_orphaned = Signal()


@receiver(post_delete, sender=Media)
def delete_media_from_disk(
    sender: type[Media],
    instance: Media,
    **kwargs: object,
) -> None:
    """Delete the file from its disk when a Media record is deleted.

    This signal handler ensures that when a Media record is deleted
    (via admin, ORM, or any other method), the file on the disk is also
    cleaned up.

    Disk failures never block the record deletion. They are logged and
    reported through ``media_file_orphaned`` so the orphaned file can be
    swept later.

    Args:
        sender: The Media model class.
        instance: The Media instance being deleted.
        **kwargs: Additional signal arguments.
    """
    disk_path = instance.get_disk_path()
    logger.info(
        'Deleting file from disk after DB delete: %s:%s',
        instance.disk,
        disk_path,
    )

    try:
        storage = get_disk(instance.disk)
        if storage.exists(disk_path):
            storage.delete(disk_path)
            logger.info('File deleted from disk: %s:%s', instance.disk, disk_path)
        else:
            logger.warning(
                'File not found on disk (already deleted?): %s:%s',
                instance.disk,
                disk_path,
            )
    except Exception as error:
        # DB delete already succeeded, the file is now an orphan
        logger.exception(
            'Failed to delete file from disk (orphaned): %s:%s',
            instance.disk,
            disk_path,
        )
        media_file_orphaned.send_robust(
            sender=sender,
            media=instance,
            path=disk_path,
            error=error,
        )

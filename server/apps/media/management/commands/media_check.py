"""Management command to find media records whose files are missing."""

import logging
from typing import Any, Final

from django.core.management.base import BaseCommand

from server.apps.media.logic.media_operations import (
    delete_media,
    media_file_exists,
)
from server.apps.media.models import Media

_DEFAULT_BATCH_SIZE: Final = 1000

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Report media records that point at files missing from their disk."""

    help = 'Find media records whose files are missing from their disk'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--disk',
            default=None,
            help='Only check media on this disk',
        )
        parser.add_argument(
            '--batch-size',
            type=int,
            default=_DEFAULT_BATCH_SIZE,
            help=f'Max records to check (default: {_DEFAULT_BATCH_SIZE})',
        )
        parser.add_argument(
            '--delete-missing',
            action='store_true',
            help='Delete records whose files are missing',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the check command.

        Args:
            args: Positional arguments (unused).
            options: Command options.
        """
        delete_missing = options['delete_missing']
        batch_size = options['batch_size']

        queryset = Media.objects.order_by('id')
        if options['disk']:
            queryset = queryset.filter(disk=options['disk'])

        checked = 0
        missing = 0
        failed = 0

        for media in queryset[:batch_size]:
            checked += 1
            try:
                if media_file_exists(media):
                    continue
            except Exception as exc:
                self.stderr.write(f'Failed to check {media}: {exc}')
                logger.exception('Failed to check media: %d', media.id)
                failed += 1
                continue

            missing += 1
            self.stdout.write(f'Missing file: {media} (ID: {media.id})')
            if delete_missing:
                delete_media(media.id)
                logger.info('Deleted dangling media record: %d', media.id)

        summary = f'Checked {checked} media, {missing} missing, {failed} failed'
        if delete_missing:
            summary = f'{summary}, {missing} deleted'
        self.stdout.write(self.style.SUCCESS(summary))

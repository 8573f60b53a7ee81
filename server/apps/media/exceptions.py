"""Exceptions for media app."""

from collections.abc import Iterable


class MediaError(Exception):
    """Base class for media library errors."""


class MediaMoveError(MediaError):
    """Raised when a media file cannot be moved or renamed."""


class DestinationExistsError(MediaMoveError):
    """Raised when another file already occupies the move target.

    Nothing has been changed when this is raised. Callers should pick
    another destination; retrying the same call will fail again.
    """

    def __init__(self, target_path: str) -> None:
        """Initialize DestinationExistsError.

        Args:
            target_path: Disk path that is already occupied.
        """
        self.target_path = target_path
        super().__init__(
            f'Another file already exists at `{target_path}`',
        )


class BackendMoveError(MediaMoveError):
    """Raised when the storage backend fails to move the bytes.

    The media record is left unchanged, so the whole move may be retried.
    """

    def __init__(self, source: str, destination: str) -> None:
        """Initialize BackendMoveError.

        Args:
            source: Disk path the file was being moved from.
            destination: Disk path the file was being moved to.
        """
        self.source = source
        self.destination = destination
        super().__init__(
            f'Storage failed to move `{source}` to `{destination}`',
        )


class PostMovePersistError(MediaMoveError):
    """Raised when bytes were moved but the record could not be saved.

    The file now lives at ``destination`` while the database still points
    at ``source``. Retrying the move is not safe; the record has to be
    re-pointed at ``destination`` instead.
    """

    def __init__(self, media_id: int | None, source: str, destination: str) -> None:
        """Initialize PostMovePersistError.

        Args:
            media_id: ID of the media record that failed to save.
            source: Disk path stored in the database.
            destination: Disk path where the bytes now live.
        """
        self.media_id = media_id
        self.source = source
        self.destination = destination
        super().__init__(
            f'File moved from `{source}` to `{destination}` but media '
            f'record {media_id} could not be saved; reconcile required',
        )


class MediaUrlError(MediaError):
    """Raised when a URL is requested for a disk that is not public."""

    def __init__(self, disk: str) -> None:
        """Initialize MediaUrlError.

        Args:
            disk: Disk alias that is not publicly accessible.
        """
        self.disk = disk
        super().__init__(
            f'Media file is not publicly accessible on disk `{disk}`',
        )


class MediaDiskNotFoundError(MediaError):
    """Raised when a disk alias is not configured in STORAGES."""

    def __init__(self, disk: str) -> None:
        """Initialize MediaDiskNotFoundError.

        Args:
            disk: Unknown disk alias.
        """
        self.disk = disk
        super().__init__(f'Disk `{disk}` is not configured')


class MediaFileNotFoundError(MediaError):
    """Raised when the bytes for a media record are missing from its disk."""

    def __init__(self, disk: str, path: str) -> None:
        """Initialize MediaFileNotFoundError.

        Args:
            disk: Disk alias that was searched.
            path: Disk path that was not found.
        """
        self.disk = disk
        self.path = path
        super().__init__(f'File `{path}` not found on disk `{disk}`')


class MediaImmutableFieldError(MediaError):
    """Raised when saving changes to fields fixed at creation."""

    def __init__(self, fields: Iterable[str]) -> None:
        """Initialize MediaImmutableFieldError.

        Args:
            fields: Names of the changed immutable fields.
        """
        self.fields = tuple(fields)
        super().__init__(
            'Cannot change immutable media fields: {0}'.format(
                ', '.join(self.fields),
            ),
        )

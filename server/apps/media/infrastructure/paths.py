"""Path helpers for media records.

Every function is pure and works on the location fields alone
(``directory``, ``filename``, ``extension``), so it can be used both
with saved ``Media`` instances and with locations that do not exist yet.
"""

from typing import Final, Protocol

_PATH_SEPARATOR: Final = '/'
_EXTENSION_SEPARATOR: Final = '.'


class Locatable(Protocol):
    """Anything carrying a disk location."""

    directory: str
    filename: str
    extension: str


def basename(record: Locatable) -> str:
    """Get filename with extension.

    Example: filename='report', extension='pdf' -> 'report.pdf'

    Args:
        record: Object with location fields.

    Returns:
        Basename without directory.
    """
    return f'{record.filename}{_EXTENSION_SEPARATOR}{record.extension}'


def disk_path(record: Locatable) -> str:
    """Get the path to the file relative to the root of its disk.

    Example: directory='docs/2024', basename='report.pdf'
    -> 'docs/2024/report.pdf'. An empty directory gives 'report.pdf'.

    Args:
        record: Object with location fields.

    Returns:
        Disk path with no leading slash.
    """
    directory = record.directory.strip(_PATH_SEPARATOR)
    name = basename(record).strip(_PATH_SEPARATOR)
    joined = f'{directory}{_PATH_SEPARATOR}{name}'
    return joined.lstrip(_PATH_SEPARATOR)


def build_disk_path(directory: str, filename: str, extension: str) -> str:
    """Compute a disk path for a location without a record.

    Args:
        directory: Directory relative to disk root.
        filename: Filename without extension.
        extension: Extension without dot.

    Returns:
        Disk path with no leading slash.
    """
    return disk_path(_Location(directory, filename, extension))


def strip_known_extension(candidate: str, extension: str) -> str:
    """Remove one trailing ``.extension`` from a filename.

    Lets callers pass either 'photo' or 'photo.jpg' as a new name.
    Matching is case-sensitive and only the last suffix is removed:
    'photo.jpg.jpg' -> 'photo.jpg'.

    Args:
        candidate: Proposed filename, with or without extension.
        extension: Extension to strip, without dot.

    Returns:
        Filename without the extension suffix.
    """
    suffix = f'{_EXTENSION_SEPARATOR}{extension}'
    if candidate.endswith(suffix):
        return candidate[:len(candidate) - len(suffix)]
    return candidate


def split_basename(name: str) -> tuple[str, str]:
    """Split a basename into filename and extension.

    Example: 'archive.tar.gz' -> ('archive.tar', 'gz')

    Args:
        name: Filename with extension.

    Returns:
        Tuple of filename and extension ('' if there is none).
    """
    filename, separator, extension = name.rpartition(_EXTENSION_SEPARATOR)
    if not separator or not filename:
        return name, ''
    return filename, extension


def split_path(path: str) -> tuple[str, str, str]:
    """Split a disk path into directory, filename and extension.

    Example: 'docs/2024/report.pdf' -> ('docs/2024', 'report', 'pdf')

    Args:
        path: Disk path relative to disk root.

    Returns:
        Tuple of directory ('' at disk root), filename and extension.
    """
    normalized = path.strip(_PATH_SEPARATOR)
    directory, _, name = normalized.rpartition(_PATH_SEPARATOR)
    filename, extension = split_basename(name)
    return directory, filename, extension


class _Location:
    __slots__ = ('directory', 'filename', 'extension')

    def __init__(self, directory: str, filename: str, extension: str) -> None:
        self.directory = directory
        self.filename = filename
        self.extension = extension

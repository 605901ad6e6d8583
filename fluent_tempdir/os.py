"""
Pure path helpers for the temporary directory builder.

Nothing here touches the filesystem, except system_temp_dir() which may ask the
tempfile module to probe for a usable temporary directory on first use.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import os
import tempfile

# Local ----------------------------------------------------------------------------------------------------------------
from .exceptions import InvalidDirectoryName

# Constants ------------------------------------------------------------------------------------------------------------
FORBIDDEN_NAME_CHARS = frozenset('\\/?%*:|"<>')

# Separators stripped from path edges; os.altsep is '/' on Windows and None elsewhere
_SEPARATORS = os.sep + (os.altsep or "")


# Methods --------------------------------------------------------------------------------------------------------------

def sanitize_path(path: str | os.PathLike[str]) -> str:
    """
    Normalize a base location: strip surrounding whitespace and trailing path separators.

    Args:
        path: Directory path as a string or PathLike object.

    Returns:
        str: The sanitized path. A path made only of separators (e.g. "/") collapses to "".

    Raises:
        TypeError: If path is neither str nor PathLike[str].

    Examples:
        >>> sanitize_path("  /tmp/work//  ")
        '/tmp/work'
        >>> sanitize_path("")
        ''
    """
    path = _as_str(path, "path")
    return path.strip().rstrip(_SEPARATORS)


def is_valid_dir_name(name: str) -> bool:
    """Return True if name holds none of the characters in FORBIDDEN_NAME_CHARS."""
    return FORBIDDEN_NAME_CHARS.isdisjoint(name)


def sanitize_name(name: str | os.PathLike[str]) -> str:
    """
    Validate a leaf directory name and return it trimmed.

    Validation runs on the name as given, before trimming, so the error message
    shows exactly what the caller passed.

    Raises:
        InvalidDirectoryName: If the name contains any of \\ / ? % * : | " < >
        TypeError: If name is neither str nor PathLike[str].
    """
    name = _as_str(name, "name")
    if not is_valid_dir_name(name):
        raise InvalidDirectoryName.create(name)
    return name.strip()


def is_file_path(path: str) -> bool:
    """
    Guess whether a path points at a file: its final segment contains a dot.

    Directories with a dot in their name (e.g. "v1.2") are reported as files.
    """
    return "." in _last_segment(path)


def strip_filename(path: str) -> str:
    """
    Return the directory part of path when it looks like a file path, else path unchanged.

    Examples:
        >>> strip_filename("/tmp/x/a/b/file.txt")
        '/tmp/x/a/b'
        >>> strip_filename("/tmp/x/a/b")
        '/tmp/x/a/b'
    """
    if not is_file_path(path):
        return path
    cut = max(path.rfind(sep) for sep in _SEPARATORS)
    return path[:cut] if cut > 0 else path[:cut + 1]


def join_path(base: str, relative: str) -> str:
    """
    Join a relative path or filename onto base.

    The relative part is trimmed of whitespace and of separators on both ends, so
    "sub/dir/", "/sub/dir" and " sub/dir " all join the same way.
    """
    relative = relative.strip().strip(_SEPARATORS)
    if not relative:
        return base
    if not base:
        return relative
    return base + os.sep + relative


def system_temp_dir() -> str:
    """
    Return the system temporary directory without a trailing separator.

    Follows tempfile.gettempdir(), so TMPDIR, TEMP, TMP and tempfile.tempdir are honored.
    """
    return sanitize_path(tempfile.gettempdir())


# Private methods ------------------------------------------------------------------------------------------------------

def _as_str(value: str | os.PathLike[str], arg_name: str) -> str:
    try:
        value = os.fspath(value)
    except TypeError:
        raise TypeError(f"{arg_name} must be str or os.PathLike[str], but found {type(value).__name__}") from None
    if not isinstance(value, str):
        raise TypeError(f"{arg_name} must be str or os.PathLike[str], but found {type(value).__name__}")
    return value


def _last_segment(path: str) -> str:
    cut = max(path.rfind(sep) for sep in _SEPARATORS)
    return path[cut + 1:]

"""
Best-effort recursive deletion and directory creation.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import os
from typing import Callable

# Constants ------------------------------------------------------------------------------------------------------------
DEFAULT_DIR_MODE = 0o777

logger = logging.getLogger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------

def delete_tree(
        path: str | os.PathLike[str],
        on_error: Callable[[str, Exception], None] | None = None,
) -> bool:
    """
    Recursively delete a file, symlink or directory tree without raising.

    Unlike shutil.rmtree(), this never raises and accepts any kind of entry:

    - A symlink is unlinked itself; its target is never followed or touched.
    - A missing path counts as success, so repeated calls are safe.
    - A regular file (or any other non-directory entry) is unlinked.
    - A directory has each child deleted the same way, then is removed. The walk
      stops at the first child that cannot be removed.

    Args:
        path: Entry to delete.
        on_error: Optional callback invoked as on_error(path, exc) with the entry that
            failed and the exception that was caught. Use it for diagnostics; it does not
            change the return value. Exceptions raised by the callback itself propagate.

    Returns:
        bool: True if nothing is left at path, False if any removal failed.

    Examples:
        >>> delete_tree("/tmp/build")
        True
        >>> delete_tree("/tmp/never-existed")
        True
        >>> errors = []
        >>> delete_tree("/root-owned/dir", on_error=lambda p, e: errors.append(e))
        False
    """
    try:
        path = os.fspath(path)
    except TypeError as exc:
        _report(str(path), exc, on_error)
        return False
    return _delete(path, on_error)


def make_dirs(path: str | os.PathLike[str], mode: int = DEFAULT_DIR_MODE) -> None:
    """
    Create path and any missing parents; an existing directory is left as is.

    Raises:
        FileExistsError: If path exists and is not a directory.
        PermissionError: If lacking permission to create a component.
        OSError: If creation fails for other reasons (disk full, read-only filesystem, etc.).
    """
    os.makedirs(path, mode=mode, exist_ok=True)


# Private methods ------------------------------------------------------------------------------------------------------

def _delete(path: str, on_error: Callable[[str, Exception], None] | None) -> bool:
    try:
        if os.path.islink(path):
            os.unlink(path)
            return True

        if not os.path.exists(path):
            return True

        if not os.path.isdir(path):
            os.unlink(path)
            return True

        with os.scandir(path) as entries:
            children = [entry.path for entry in entries]

        for child in children:
            if not _delete(child, on_error):
                return False

        os.rmdir(path)
        return True
    except Exception as exc:
        _report(path, exc, on_error)
        return False


def _report(path: str, exc: Exception, on_error: Callable[[str, Exception], None] | None) -> None:
    logger.debug("Failed to delete %s: %s", path, exc)
    if on_error is not None:
        on_error(path, exc)

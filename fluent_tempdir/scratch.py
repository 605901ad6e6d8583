"""
Fluent temporary directory builder.

Example:
    >>> tmp = TempDirectory().with_name("build").force().create()
    >>> tmp.path("reports/summary.txt")   # creates .../build/reports
    '/tmp/build/reports/summary.txt'
    >>> tmp.delete()
    True
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import os
from contextlib import contextmanager
from typing import Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .exceptions import PathAlreadyExists
from .os import join_path, sanitize_name, sanitize_path, strip_filename, system_temp_dir
from .random import random_dir_name
from .shutil import DEFAULT_DIR_MODE, delete_tree, make_dirs

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

class TempDirectory:
    """
    Builder and handle for a temporary directory.

    Configure with the chainable with_location(), with_name(), force() and
    delete_on_destruction(), then call create(). Until create() is called the
    handle is only a description; afterwards full_path is an existing directory.

    Cleanup tied to the handle's lifetime runs at most once, from whichever comes
    first: close(), leaving a `with` block, or garbage collection (__del__). Garbage
    collection is only a backstop; do not rely on it when the directory must be gone
    at a known point.

    Cleanup targets full_path whether or not this handle created it. A handle flagged
    with delete_on_destruction() whose create() raised PathAlreadyExists still deletes
    that pre-existing directory when closed or collected. Set the flag after create()
    succeeds, or use temp_dir(), to avoid that.

    Args:
        location: Base directory. Defaults to the system temporary directory at create() time.

    Attributes:
        location: Sanitized base directory, no trailing separator.
        name: Leaf directory name. Random at create() time when left empty.
        force_create: Delete an existing entry at the target path before creating it.
        delete_when_destroyed: Delete the directory when the handle is closed or collected.
        last_error: Exception that made the most recent recursive delete fail, or None.
    """

    location: str
    name: str
    force_create: bool
    delete_when_destroyed: bool
    last_error: Exception | None

    def __init__(self, location: str | os.PathLike[str] = "") -> None:
        self._closed = False
        self._created = False
        self.name = ""
        self.force_create = False
        self.delete_when_destroyed = False
        self.last_error = None
        self.location = sanitize_path(location)

    # Configuration ----------------------------------------------------------------------------------------------------

    def with_location(self, location: str | os.PathLike[str]) -> "TempDirectory":
        self.location = sanitize_path(location)
        return self

    def with_name(self, name: str | os.PathLike[str]) -> "TempDirectory":
        """
        Set the leaf directory name.

        Raises:
            InvalidDirectoryName: If name contains any of \\ / ? % * : | " < >
        """
        self.name = sanitize_name(name)
        return self

    def force(self) -> "TempDirectory":
        self.force_create = True
        return self

    def delete_on_destruction(self, flag: bool = True) -> "TempDirectory":
        self.delete_when_destroyed = flag
        return self

    # Operations -------------------------------------------------------------------------------------------------------

    @classmethod
    def make(cls, location: str | os.PathLike[str] = "") -> "TempDirectory":
        """Shortcut for TempDirectory(location).create()."""
        return cls(location).create()

    @property
    def full_path(self) -> str:
        """Location joined with name. Relative to the working directory while location is empty."""
        if not self.name:
            return self.location
        if not self.location:
            return self.name
        return self.location + os.sep + self.name

    def create(self) -> "TempDirectory":
        """
        Create the directory, filling in a default location and a random name where unset.

        Returns:
            TempDirectory: This handle.

        Raises:
            PathAlreadyExists: If something exists at the target path and force() was not set,
                or the forced deletion of it failed.
            PermissionError: If lacking permission to create the directory.
            OSError: If the directory cannot be created for other reasons.
        """
        if not self.location:
            self.location = system_temp_dir()

        if not self.name:
            self.name = random_dir_name()

        path = self.full_path

        if self.force_create and os.path.lexists(path):
            logger.debug("Removing existing path %s before create", path)
            self._delete_tree()

        # lexists() also catches a dangling symlink, which makedirs() would fail on
        if os.path.lexists(path):
            raise PathAlreadyExists.create(path)

        os.makedirs(path, mode=DEFAULT_DIR_MODE)
        self._created = True
        logger.debug("Created temporary directory %s", path)
        return self

    def path(self, relative: str | os.PathLike[str] = "") -> str:
        """
        Return the full path, or a path inside it, creating the directories it needs.

        When the last segment of relative contains a dot it is taken as a filename: its
        parent directories are created but the file is not. Otherwise the whole path is
        created as a directory. A directory named like "v1.2" is therefore treated as a file.

        Args:
            relative: Path or filename relative to the directory. Surrounding whitespace
                and leading or trailing separators are ignored.

        Returns:
            str: The joined path, without a trailing separator.

        Raises:
            PermissionError: If lacking permission to create a directory.
            OSError: If a directory cannot be created for other reasons.

        Examples:
            >>> tmp.path()
            '/tmp/1804289383-17297348001234560098765'
            >>> tmp.path("a/b/")
            '/tmp/1804289383-17297348001234560098765/a/b'
            >>> tmp.path("a/b/file.txt")
            '/tmp/1804289383-17297348001234560098765/a/b/file.txt'
        """
        relative = os.fspath(relative)
        if not relative.strip():
            return self.full_path

        joined = join_path(self.full_path, relative)

        directory = strip_filename(joined)
        if directory and not os.path.exists(directory):
            make_dirs(directory)

        return joined

    def exists(self) -> bool:
        return os.path.exists(self.full_path)

    def empty(self) -> "TempDirectory":
        """
        Delete everything under the directory and leave it existing and empty.

        If some entries cannot be removed they stay in place; a warning is logged and the
        cause is kept in last_error.
        """
        logger.debug("Emptying temporary directory %s", self.full_path)
        if not self._delete_tree():
            logger.warning("Could not empty temporary directory %s: %s", self.full_path, self.last_error)
        make_dirs(self.full_path)
        return self

    def delete(self) -> bool:
        """
        Recursively delete the directory.

        Returns:
            bool: True if nothing is left at full_path (including when it never existed),
                False if anything could not be removed. The cause is kept in last_error.
        """
        deleted = self._delete_tree()
        logger.debug("Deleted temporary directory %s: %s", self.full_path, deleted)
        return deleted

    def close(self) -> None:
        """Run lifetime cleanup now. Later calls, and the one from __del__, do nothing."""
        if self._closed:
            return
        self._closed = True

        if not self.delete_when_destroyed:
            return

        if self._delete_tree():
            logger.debug("Cleaned up temporary directory %s", self.full_path)
        else:
            logger.warning("Could not clean up temporary directory %s: %s", self.full_path, self.last_error)

    # Protocols --------------------------------------------------------------------------------------------------------

    def __enter__(self) -> "TempDirectory":
        if not self._created:
            self.create()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __del__(self) -> None:
        # __init__ may have failed before _closed was set
        if getattr(self, "_closed", True):
            return
        self.close()

    def __fspath__(self) -> str:
        return self.full_path

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(full_path={self.full_path!r}, force_create={self.force_create}, "
                f"delete_when_destroyed={self.delete_when_destroyed})")

    # Private methods --------------------------------------------------------------------------------------------------

    def _delete_tree(self) -> bool:
        self.last_error = None
        return delete_tree(self.full_path, on_error=self._record_error)

    def _record_error(self, path: str, exc: Exception) -> None:
        self.last_error = exc


# Methods --------------------------------------------------------------------------------------------------------------

@contextmanager
def temp_dir(location: str | os.PathLike[str] = "", name: str = "", *,
             force: bool = False, delete: bool = True) -> Iterator[TempDirectory]:
    """
    Context manager that yields a created TempDirectory.

    The directory and its contents are removed upon exiting the 'with' block unless delete=False.

    Example:
        >>> with temp_dir(name="job") as tmp:
        ...     open(tmp.path("out/result.json"), "w").write("{}")
    """
    tmp = TempDirectory(location).with_name(name)
    if force:
        tmp.force()
    # Flag only after create() succeeds, so a refused path is never cleaned up
    with tmp.create().delete_on_destruction(delete):
        yield tmp

"""
Exceptions raised by the temporary directory builder.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import os


# Classes --------------------------------------------------------------------------------------------------------------

class InvalidDirectoryName(ValueError):
    """
    Raised when a directory name contains a character that is not allowed in a path segment.

    Attributes:
        name: The rejected directory name, exactly as it was supplied.
    """

    def __init__(self, message: str, name: str = "") -> None:
        super().__init__(message)
        self.name = name

    @classmethod
    def create(cls, name: str) -> "InvalidDirectoryName":
        return cls(f"The directory name `{name}` contains invalid characters.", name)


class PathAlreadyExists(FileExistsError):
    """
    Raised by TempDirectory.create() when the target path exists and force() was not requested.

    Attributes:
        path: The existing path.
    """

    def __init__(self, message: str, path: str | os.PathLike[str] = "") -> None:
        super().__init__(message)
        self.path = os.fspath(path)

    @classmethod
    def create(cls, path: str | os.PathLike[str]) -> "PathAlreadyExists":
        return cls(f"Path `{os.fspath(path)}` already exists.", path)

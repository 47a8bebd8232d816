"""Base abstract class for search contexts.

A search context is the capability that turns a classpath-style path into
bytes. It plays the part a class loader plays for JVM resource lookup:
the loader hands it to every classpath resource it creates and never owns
its lifecycle.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Iterator


class ResourceNotFoundError(FileNotFoundError):
    """Raised when a search context has no resource at the requested path."""

    def __init__(self, path: str, context: "SearchContext") -> None:
        self.path = path
        self.context = context
        super().__init__(f"'{path}' not found in {context.description}")


def strip_root(path: str) -> str:
    """Drop leading separators; contexts treat every path as root-relative."""
    return path.lstrip("/")


class SearchContext(ABC):
    """Abstract base class for every search context.

    Subclasses resolve a ``/``-separated path to a readable byte stream and
    can enumerate the entries below a directory-like path.
    """

    @abstractmethod
    def open(self, path: str) -> BinaryIO:
        """Open the resource at *path* for binary reading.

        Args:
            path: ``/``-separated resource path.

        Returns:
            Readable binary stream. The caller closes it.

        Raises:
            ResourceNotFoundError: If no resource exists at *path*.
        """
        ...

    @abstractmethod
    def iter_children(self, path: str) -> Iterator[str]:
        """Yield the names of entries directly below *path*.

        Yields nothing when *path* does not name a directory.
        """
        ...

    def exists(self, path: str) -> bool:
        """Return whether *path* can be opened."""
        try:
            stream = self.open(path)
        except ResourceNotFoundError:
            return False
        stream.close()
        return True

    @property
    def description(self) -> str:
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"<{self.description}>"

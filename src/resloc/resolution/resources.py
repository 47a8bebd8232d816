"""Resource handles produced by :class:`~resloc.resolution.loader.ResourceLoader`.

A :data:`Resource` is one of two frozen models, told apart by their
``kind`` tag:

* :class:`UrlResource` (``ResourceKind.URL``) wraps an absolute URL.
* :class:`ClassPathResource` wraps a path plus the
  :class:`~resloc.context.base.SearchContext` it is read through. Its
  ``kind`` is ``ResourceKind.CLASSPATH`` for explicit ``classpath:``
  locations and ``ResourceKind.CLASSPATH_CONTEXT`` for plain paths the
  loader interpreted relative to the context root.

Handles are immutable. :func:`derive_relative` always builds a new one.
"""

from enum import Enum
from pathlib import Path
from typing import BinaryIO, Literal, Optional, Union, cast
from urllib.parse import urljoin, urlsplit
from urllib.request import url2pathname, urlopen

from pydantic import BaseModel, Field

from resloc.context.base import SearchContext
from resloc.resolution.config import DEFAULT_URL_TIMEOUT
from resloc.resolution.paths import SEPARATOR, combine


class ResourceKind(str, Enum):
    """Variant tag carried by every resource."""

    URL = "url"
    CLASSPATH = "classpath"
    CLASSPATH_CONTEXT = "classpath_context"


def _last_segment(path: str) -> Optional[str]:
    name = path.rsplit(SEPARATOR, 1)[-1]
    return name or None


class UrlResource(BaseModel):
    """Resource backed by an absolute URL."""

    model_config = {
        "frozen": True,
    }

    kind: Literal[ResourceKind.URL] = ResourceKind.URL
    url: str = Field(..., description="Absolute URL, stored verbatim")
    timeout: float = Field(
        default=DEFAULT_URL_TIMEOUT,
        gt=0,
        description="Seconds to wait for a remote connection",
    )

    @property
    def path(self) -> str:
        """Path component of the URL."""
        return urlsplit(self.url).path

    @property
    def filename(self) -> Optional[str]:
        return _last_segment(self.path)

    @property
    def description(self) -> str:
        return f"URL [{self.url}]"

    @property
    def root_relative(self) -> bool:
        return False

    def exists(self) -> bool:
        """Check the filesystem for ``file:`` URLs, else try to connect."""
        parts = urlsplit(self.url)
        if parts.scheme.lower() == "file":
            return Path(url2pathname(parts.path)).exists()
        try:
            stream = urlopen(self.url, timeout=self.timeout)
        except (OSError, ValueError):
            return False
        stream.close()
        return True

    def open(self) -> BinaryIO:
        """Open the URL for reading.

        Raises:
            urllib.error.URLError: If the URL cannot be retrieved.
            ValueError: If the URL is malformed for its scheme
                (e.g. a ``data:`` URL without a comma).
        """
        return cast(BinaryIO, urlopen(self.url, timeout=self.timeout))

    def read_bytes(self) -> bytes:
        with self.open() as stream:
            return stream.read()

    def read_text(self, encoding: str = "utf-8") -> str:
        return self.read_bytes().decode(encoding)

    def derive_relative(self, relative_path: str) -> "Resource":
        return derive_relative(self, relative_path)


class ClassPathResource(BaseModel):
    """Resource read through a search context."""

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    kind: Literal[ResourceKind.CLASSPATH, ResourceKind.CLASSPATH_CONTEXT] = (
        ResourceKind.CLASSPATH
    )
    path: str = Field(..., description="Path inside the search context")
    context: SearchContext = Field(..., exclude=True, repr=False)

    @property
    def root_relative(self) -> bool:
        """True for plain paths the loader resolved against the context root."""
        return self.kind is ResourceKind.CLASSPATH_CONTEXT

    @property
    def path_within_context(self) -> Optional[str]:
        return self.path if self.root_relative else None

    @property
    def filename(self) -> Optional[str]:
        return _last_segment(self.path)

    @property
    def description(self) -> str:
        return f"class path resource [{self.path}]"

    def exists(self) -> bool:
        return self.context.exists(self.path)

    def open(self) -> BinaryIO:
        """Open the resource through its search context.

        Raises:
            ResourceNotFoundError: If the context has no such resource.
        """
        return self.context.open(self.path)

    def read_bytes(self) -> bytes:
        with self.open() as stream:
            return stream.read()

    def read_text(self, encoding: str = "utf-8") -> str:
        return self.read_bytes().decode(encoding)

    def derive_relative(self, relative_path: str) -> "Resource":
        return derive_relative(self, relative_path)


Resource = Union[UrlResource, ClassPathResource]


def derive_relative(resource: Resource, relative_path: str) -> Resource:
    """Build the resource at *relative_path* as seen from *resource*.

    Classpath variants keep their context and ``kind`` tag and combine
    paths with :func:`~resloc.resolution.paths.combine`. URL variants drop
    a leading ``/`` from *relative_path* and join it onto the URL.

    Args:
        resource: Resource to derive from. Left untouched.
        relative_path: Relative path expression.

    Returns:
        A new resource of the same variant.
    """
    if resource.kind is ResourceKind.URL:
        source = cast(UrlResource, resource)
        if relative_path.startswith(SEPARATOR):
            relative_path = relative_path[1:]
        return UrlResource(
            url=urljoin(source.url, relative_path), timeout=source.timeout
        )

    base = cast(ClassPathResource, resource)
    return ClassPathResource(
        kind=base.kind,
        path=combine(base.path, relative_path),
        context=base.context,
    )

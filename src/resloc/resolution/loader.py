"""Location-string resolution.

:class:`ResourceLoader` turns an opaque location string into a
:data:`~resloc.resolution.resources.Resource`. Every location falls into
exactly one bucket, checked in this order:

1. It starts with the configured prefix (``classpath:``): a
   ``CLASSPATH`` resource over the remainder.
2. It parses as a URL with a recognised scheme: a ``URL`` resource.
3. Anything else goes to the fallback strategy, which by default builds a
   root-relative ``CLASSPATH_CONTEXT`` resource.

Resolution never fails for a string location; a location that does not
parse as a URL simply lands in the fallback bucket.
"""

import logging
import re
from typing import Callable, Optional
from urllib.parse import SplitResult, urlsplit

from resloc.context.ambient import default_search_context
from resloc.context.base import SearchContext
from resloc.resolution.config import LoaderConfig
from resloc.resolution.resources import (
    ClassPathResource,
    Resource,
    ResourceKind,
    UrlResource,
)
from resloc.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)

FallbackStrategy = Callable[[str, SearchContext], Resource]

_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


def context_relative(path: str, context: SearchContext) -> Resource:
    """Default fallback: *path* relative to the root of *context*."""
    return ClassPathResource(
        kind=ResourceKind.CLASSPATH_CONTEXT,
        path=path,
        context=context,
    )


def parse_url(location: str, schemes: list[str]) -> Optional[SplitResult]:
    """Parse *location* as an absolute URL.

    Args:
        location: Candidate URL.
        schemes: Accepted schemes, lower-case.

    Returns:
        The split URL, or ``None`` when *location* has no accepted scheme
        or is malformed (bad port, unbalanced IPv6 brackets, ...).
    """
    match = _SCHEME.match(location)
    if match is None or match.group(1).lower() not in schemes:
        return None
    try:
        parts = urlsplit(location)
        _ = parts.port
    except ValueError as e:
        logger.debug(f"Malformed URL [bold]{location!r}[/bold]: {e}")
        return None
    return parts


class ResourceLoader:
    """Resolve location strings to resource handles.

    The loader holds an optional search context. Without one, classpath
    resources use :func:`~resloc.context.ambient.default_search_context`
    as it stands at the time of each lookup.
    """

    def __init__(
        self,
        context: Optional[SearchContext] = None,
        config: Optional[LoaderConfig] = None,
        fallback: Optional[FallbackStrategy] = None,
    ) -> None:
        """Initialize the loader.

        Args:
            context: Search context for classpath resources. ``None`` means
                the ambient or process-wide default.
            config: Prefix, URL scheme and timeout settings. Defaults to
                :class:`LoaderConfig` defaults.
            fallback: Strategy for locations that are neither prefixed nor
                URLs. Defaults to :func:`context_relative`.
        """
        self.config = config or LoaderConfig()
        self.fallback: FallbackStrategy = fallback or context_relative
        self._context = context

    def get_context(self) -> SearchContext:
        """Return the configured search context, or the default.

        Without a configured context the ambient context is read on every
        call, so a :func:`~resloc.context.ambient.use_context` block only
        affects lookups made inside it. The static fallback is built once
        per process.
        """
        if self._context is not None:
            return self._context
        return default_search_context()

    def set_context(self, context: Optional[SearchContext]) -> None:
        """Replace the configured search context; ``None`` restores the default."""
        self._context = context

    def resolve(self, location: str) -> Resource:
        """Resolve *location* to a resource handle.

        Args:
            location: ``classpath:`` location, absolute URL, or plain path.

        Returns:
            A ``CLASSPATH``, ``URL`` or fallback resource.

        Raises:
            TypeError: If *location* is not a string.
        """
        if not isinstance(location, str):
            raise TypeError(
                f"location must be a string, not {type(location).__name__}"
            )

        prefix = self.config.prefix
        if location.startswith(prefix):
            path = location[len(prefix) :]
            logger.debug(f"[cyan]classpath[/cyan] {path!r}")
            return ClassPathResource(path=path, context=self.get_context())

        if parse_url(location, self.config.url_schemes) is not None:
            logger.debug(f"[cyan]url[/cyan] {location!r}")
            return UrlResource(url=location, timeout=self.config.url_timeout)

        logger.debug(f"[cyan]fallback[/cyan] {location!r}")
        return self.fallback(location, self.get_context())

"""Ambient and process-wide default search contexts.

Code that wants classpath resources resolved against a particular context
without threading a loader through every call can install one for the
duration of a block::

    with use_context(PackageSearchContext("myapp")):
        loader.resolve("templates/index.html")

Outside such a block :func:`default_search_context` falls back to the
process-wide :class:`SysPathSearchContext`.
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from resloc.context.base import SearchContext
from resloc.context.directory import SysPathSearchContext
from resloc.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)

_CURRENT_CONTEXT: ContextVar[Optional[SearchContext]] = ContextVar(
    "resloc_current_context", default=None
)

_STATIC_DEFAULT: Optional[SearchContext] = None


def current_context() -> Optional[SearchContext]:
    """Return the context installed by the innermost :func:`use_context`."""
    return _CURRENT_CONTEXT.get()


@contextmanager
def use_context(context: SearchContext) -> Iterator[SearchContext]:
    """Install *context* as the ambient search context for a block."""
    token = _CURRENT_CONTEXT.set(context)
    try:
        yield context
    finally:
        _CURRENT_CONTEXT.reset(token)


def static_default_context() -> SearchContext:
    """Return the process-wide :class:`SysPathSearchContext`, built once."""
    global _STATIC_DEFAULT

    if _STATIC_DEFAULT is None:
        _STATIC_DEFAULT = SysPathSearchContext()
    return _STATIC_DEFAULT


def default_search_context() -> SearchContext:
    """Return the ambient context, or the static default when there is none.

    Never raises: a failing ambient lookup is logged and replaced by the
    static default.
    """
    context: Optional[SearchContext] = None
    try:
        context = current_context()
    except Exception as e:
        logger.debug(f"Ambient context unavailable ({e}); using static default")

    if context is None:
        context = static_default_context()
    return context

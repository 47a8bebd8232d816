"""Search contexts: the capability classpath resources read through.

Provides the :class:`SearchContext` abstract base class, filesystem and
package-backed implementations, and the ambient default lookup.
"""

from resloc.context.ambient import (
    current_context,
    default_search_context,
    static_default_context,
    use_context,
)
from resloc.context.base import ResourceNotFoundError, SearchContext
from resloc.context.directory import DirectorySearchContext, SysPathSearchContext
from resloc.context.package import PackageSearchContext

__all__ = [
    "DirectorySearchContext",
    "PackageSearchContext",
    "ResourceNotFoundError",
    "SearchContext",
    "SysPathSearchContext",
    "current_context",
    "default_search_context",
    "static_default_context",
    "use_context",
]

from typing import Optional

from resloc._version import __version__
from resloc.context import (
    DirectorySearchContext,
    PackageSearchContext,
    ResourceNotFoundError,
    SearchContext,
    SysPathSearchContext,
    default_search_context,
    use_context,
)
from resloc.resolution import (
    ClassPathResource,
    LoaderConfig,
    Resource,
    ResourceKind,
    ResourceLoader,
    UrlResource,
    combine,
    derive_relative,
    load_config,
)

__all__ = [
    "__version__",
    "ClassPathResource",
    "DirectorySearchContext",
    "LoaderConfig",
    "PackageSearchContext",
    "Resource",
    "ResourceKind",
    "ResourceLoader",
    "ResourceNotFoundError",
    "SearchContext",
    "SysPathSearchContext",
    "UrlResource",
    "combine",
    "default_search_context",
    "derive_relative",
    "get_loader",
    "load_config",
    "resolve",
    "use_context",
]

_LOADER_INSTANCE: Optional[ResourceLoader] = None


def get_loader(config: Optional[LoaderConfig] = None) -> ResourceLoader:
    """Get or create the process-wide ResourceLoader.

    When called without arguments, returns a singleton built from
    :func:`load_config`. With an explicit *config* a dedicated loader is
    returned instead.

    A non-empty ``search_path`` in the configuration gives the loader an
    explicit :class:`DirectorySearchContext` over those directories.

    Args:
        config: Optional loader configuration.

    Returns:
        ResourceLoader instance.
    """
    global _LOADER_INSTANCE

    if config is None:
        if _LOADER_INSTANCE is None:
            _LOADER_INSTANCE = _build_loader(load_config())
        return _LOADER_INSTANCE
    return _build_loader(config)


def _build_loader(config: LoaderConfig) -> ResourceLoader:
    context: Optional[SearchContext] = None
    if config.search_path:
        context = DirectorySearchContext(config.search_path)
    return ResourceLoader(context=context, config=config)


def resolve(location: str) -> Resource:
    """Resolve *location* with the process-wide loader.

    Args:
        location: ``classpath:`` location, absolute URL, or plain path.

    Returns:
        Resource handle.
    """
    return get_loader().resolve(location)

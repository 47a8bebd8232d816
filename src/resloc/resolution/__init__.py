"""Resolution of location strings into resource handles."""

from resloc.resolution.config import LoaderConfig, load_config
from resloc.resolution.loader import (
    FallbackStrategy,
    ResourceLoader,
    context_relative,
    parse_url,
)
from resloc.resolution.paths import combine, normalize
from resloc.resolution.resources import (
    ClassPathResource,
    Resource,
    ResourceKind,
    UrlResource,
    derive_relative,
)

__all__ = [
    "ClassPathResource",
    "FallbackStrategy",
    "LoaderConfig",
    "Resource",
    "ResourceKind",
    "ResourceLoader",
    "UrlResource",
    "combine",
    "context_relative",
    "derive_relative",
    "load_config",
    "normalize",
    "parse_url",
]

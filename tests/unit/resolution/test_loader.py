"""Test cases for ResourceLoader."""

from unittest.mock import Mock, patch

import pytest

from resloc.context.ambient import use_context
from resloc.context.base import SearchContext
from resloc.context.directory import SysPathSearchContext
from resloc.resolution.config import LoaderConfig
from resloc.resolution.loader import ResourceLoader, context_relative, parse_url
from resloc.resolution.resources import (
    ClassPathResource,
    Resource,
    ResourceKind,
    UrlResource,
)


@pytest.fixture
def context() -> Mock:
    """Create a mock search context."""
    return Mock(spec=SearchContext)


@pytest.fixture
def loader(context: Mock) -> ResourceLoader:
    """Create a loader bound to the mock context."""
    return ResourceLoader(context=context)


class TestResolvePrefix:
    """Test cases for explicit classpath locations."""

    @pytest.mark.parametrize("path", ["foo/bar", "", "/abs/path", "http://x/y"])
    def test_prefix_stripped(
        self, loader: ResourceLoader, context: Mock, path: str
    ) -> None:
        """Test that the remainder after the prefix becomes the path."""
        resource = loader.resolve("classpath:" + path)

        assert isinstance(resource, ClassPathResource)
        assert resource.kind is ResourceKind.CLASSPATH
        assert resource.path == path
        assert resource.context is context

    def test_derive_from_prefixed(self, loader: ResourceLoader) -> None:
        """Test deriving a sibling of a prefixed location."""
        resource = loader.resolve("classpath:foo/bar").derive_relative("baz")
        assert isinstance(resource, ClassPathResource)
        assert resource.path == "foo/baz"

    def test_custom_prefix(self, context: Mock) -> None:
        """Test a loader configured with another pseudo-scheme."""
        loader = ResourceLoader(context=context, config=LoaderConfig(prefix="res:"))

        assert loader.resolve("res:a/b").kind is ResourceKind.CLASSPATH
        assert loader.resolve("classpath:a/b").kind is ResourceKind.CLASSPATH_CONTEXT


class TestResolveUrl:
    """Test cases for URL locations."""

    @pytest.mark.parametrize(
        "location",
        [
            "http://example.com/a.txt",
            "https://example.com:8443/path?q=1#frag",
            "file:///etc/hosts",
            "file:relative.txt",
            "ftp://mirror.example.org/pub/file.tar.gz",
            "data:text/plain;base64,SGVsbG8=",
            "HTTP://EXAMPLE.COM/",
            "http:",
        ],
    )
    def test_urls(self, loader: ResourceLoader, location: str) -> None:
        """Test that well-formed URLs become URL resources."""
        resource = loader.resolve(location)

        assert isinstance(resource, UrlResource)
        assert resource.kind is ResourceKind.URL
        assert resource.url == location

    def test_configured_timeout(self, context: Mock) -> None:
        """Test that URL resources carry the loader timeout."""
        loader = ResourceLoader(context=context, config=LoaderConfig(url_timeout=4.0))
        resource = loader.resolve("https://example.com/a")

        assert isinstance(resource, UrlResource)
        assert resource.timeout == 4.0


class TestResolveFallback:
    """Test cases for locations handled by the fallback strategy."""

    @pytest.mark.parametrize(
        "location",
        [
            "not a url at all",
            "templates/index.html",
            "/absolute/path.txt",
            "C:/windows/path.ini",
            "mailto:someone@example.com",
            "http://example.com:notaport/",
            "http://[::1/",
            "",
            "classpath",
        ],
    )
    def test_fallback(
        self, loader: ResourceLoader, context: Mock, location: str
    ) -> None:
        """Test that non-URL locations become root-relative resources."""
        resource = loader.resolve(location)

        assert isinstance(resource, ClassPathResource)
        assert resource.kind is ResourceKind.CLASSPATH_CONTEXT
        assert resource.root_relative is True
        assert resource.path == location
        assert resource.context is context

    def test_custom_fallback_strategy(self, context: Mock) -> None:
        """Test that a pluggable strategy replaces the default."""
        calls: list[tuple[str, SearchContext]] = []

        def to_file_url(path: str, ctx: SearchContext) -> Resource:
            calls.append((path, ctx))
            return UrlResource(url=f"file:///srv/www/{path}")

        loader = ResourceLoader(context=context, fallback=to_file_url)
        resource = loader.resolve("index.html")

        assert isinstance(resource, UrlResource)
        assert resource.url == "file:///srv/www/index.html"
        assert calls == [("index.html", context)]

    def test_strategy_not_used_for_prefix_or_url(self, context: Mock) -> None:
        """Test that the strategy only sees fallback locations."""
        strategy = Mock(side_effect=context_relative)
        loader = ResourceLoader(context=context, fallback=strategy)

        loader.resolve("classpath:a")
        loader.resolve("https://example.com/")
        strategy.assert_not_called()

    def test_non_string_rejected(self, loader: ResourceLoader) -> None:
        """Test that non-string locations are a programming error."""
        with pytest.raises(TypeError):
            loader.resolve(None)  # type: ignore[arg-type]


class TestContext:
    """Test cases for search context selection."""

    def test_configured_context(self, context: Mock) -> None:
        """Test that an explicit context wins."""
        assert ResourceLoader(context=context).get_context() is context

    def test_static_default_reused(self) -> None:
        """Test that the sys.path default is shared across lookups."""
        loader = ResourceLoader()

        first = loader.get_context()
        assert isinstance(first, SysPathSearchContext)
        assert loader.get_context() is first
        assert ResourceLoader().get_context() is first

    def test_ambient_context_scoped_to_block(self, context: Mock) -> None:
        """Test that a loader used inside a block does not keep its context."""
        loader = ResourceLoader()
        with use_context(context):
            inside = loader.resolve("a.txt")
        outside = loader.resolve("b.txt")

        assert isinstance(inside, ClassPathResource)
        assert isinstance(outside, ClassPathResource)
        assert inside.context is context
        assert isinstance(outside.context, SysPathSearchContext)

    def test_ambient_context_after_first_lookup(self, context: Mock) -> None:
        """Test that a block entered after earlier lookups still applies."""
        loader = ResourceLoader()
        loader.resolve("warm.txt")
        with use_context(context):
            resource = loader.resolve("a.txt")

        assert isinstance(resource, ClassPathResource)
        assert resource.context is context

    def test_ambient_context_used_by_default(self, context: Mock) -> None:
        """Test that an installed ambient context becomes the default."""
        with use_context(context):
            resource = ResourceLoader().resolve("x.txt")

        assert isinstance(resource, ClassPathResource)
        assert resource.context is context

    def test_set_context(self, context: Mock) -> None:
        """Test replacing and clearing the configured context."""
        other = Mock(spec=SearchContext)
        loader = ResourceLoader(context=context)

        loader.set_context(other)
        assert loader.get_context() is other

        with patch(
            "resloc.resolution.loader.default_search_context", return_value=context
        ):
            loader.set_context(None)
            assert loader.get_context() is context


class TestParseUrl:
    """Test cases for parse_url function."""

    def test_accepted(self) -> None:
        """Test a URL with an accepted scheme."""
        parts = parse_url("https://example.com:8080/a", ["https"])
        assert parts is not None
        assert parts.hostname == "example.com"
        assert parts.port == 8080

    def test_unknown_scheme(self) -> None:
        """Test that schemes outside the accepted list are rejected."""
        assert parse_url("gopher://example.com/", ["http"]) is None

    def test_no_scheme(self) -> None:
        """Test that scheme-less strings are rejected."""
        assert parse_url("example.com/a", ["http"]) is None

    def test_invalid_port(self) -> None:
        """Test that a malformed port is rejected rather than raised."""
        assert parse_url("http://example.com:99999/", ["http"]) is None

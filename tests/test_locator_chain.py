"""Tests for locator strategies and the chain."""

import io
from unittest.mock import MagicMock, patch

import pytest
import requests

from errors import RemoteResourceError, ResourceIOError, ResourceNotFoundError
from locator.base import UriLocator
from locator.chain import LocatorChain, default_locator_chain
from locator.classpath import ClasspathUriLocator
from locator.context import ContextUriLocator
from locator.filesystem import FileSystemUriLocator
from locator.url import UrlUriLocator


class _Declining(UriLocator):
    name = "declining"

    def accepts(self, uri):
        return False

    def locate(self, uri):  # pragma: no cover - never called
        raise AssertionError("declined URIs must not be located")


class _Broken(UriLocator):
    name = "broken"

    def accepts(self, uri):
        return True

    def locate(self, uri):
        raise ResourceIOError("permission denied")


class TestLocatorChain:
    """First successful strategy wins."""

    def test_first_success_wins(self, memory_locator):
        """Later strategies are not consulted after a success."""
        first = memory_locator({"a.css": "first"})
        second = memory_locator({"a.css": "second"})
        chain = LocatorChain([_Declining(), first, second])
        assert chain.read_text("a.css", "utf-8") == "first"
        assert second.calls == []

    def test_not_found_falls_through(self, memory_locator):
        """Not-found from one strategy tries the next."""
        first = memory_locator({})
        second = memory_locator({"a.css": "second"})
        chain = LocatorChain([first, second])
        assert chain.read_text("a.css", "utf-8") == "second"
        assert first.calls == ["a.css"]

    def test_all_decline(self, memory_locator):
        """The error carries the requested URI."""
        chain = LocatorChain([_Declining(), memory_locator({})])
        with pytest.raises(ResourceNotFoundError) as excinfo:
            chain.locate("x.css")
        assert excinfo.value.uri == "x.css"

    def test_empty_chain(self):
        """An empty chain finds nothing."""
        with pytest.raises(ResourceNotFoundError):
            LocatorChain().locate("x.css")

    def test_read_error_propagates(self, memory_locator):
        """I/O errors other than not-found stop the chain."""
        chain = LocatorChain([_Broken(), memory_locator({"a.css": "x"})])
        with pytest.raises(ResourceIOError):
            chain.locate("a.css")

    def test_decode_error(self, memory_locator):
        """Undecodable bytes raise ResourceIOError."""
        chain = LocatorChain([memory_locator({"a.css": b"\xff\xfe\xfa"})])
        with pytest.raises(ResourceIOError):
            chain.read_text("a.css", "utf-8")

    def test_add_locator_appends(self, memory_locator):
        """add_locator appends and returns the chain."""
        fallback = memory_locator({"a.css": "late"})
        chain = LocatorChain().add_locator(_Declining()).add_locator(fallback)
        assert chain.locators[-1] is fallback
        assert chain.read_text("a.css", "utf-8") == "late"

    def test_default_chain_order(self):
        """Context, classpath, url, then filesystem."""
        chain = default_locator_chain(context_root="/srv/www", base_dir="/tmp")
        assert [l.name for l in chain.locators] == ["context", "classpath", "url", "filesystem"]


class TestFileSystemUriLocator:
    """Plain paths relative to a base directory."""

    def test_relative_path(self, write_tree):
        """Relative paths resolve under the base directory."""
        root = write_tree({"css/a.css": ".a{}"})
        with FileSystemUriLocator(root).locate("css/a.css") as stream:
            assert stream.read() == b".a{}"

    def test_absolute_path(self, write_tree):
        """Absolute paths ignore the base directory."""
        root = write_tree({"a.css": ".a{}"})
        with FileSystemUriLocator("/nonexistent").locate(str(root / "a.css")) as stream:
            assert stream.read() == b".a{}"

    def test_missing(self, tmp_path):
        """A missing file is not-found."""
        with pytest.raises(ResourceNotFoundError):
            FileSystemUriLocator(tmp_path).locate("missing.css")

    def test_declines_urls(self):
        """URIs with a scheme are left to other strategies."""
        locator = FileSystemUriLocator()
        assert not locator.accepts("http://example.com/a.css")
        assert not locator.accepts("classpath:pkg/a.css")
        assert locator.accepts("css/a.css")


class TestContextUriLocator:
    """Root-relative URIs under a context root."""

    def test_locates_under_root(self, write_tree):
        """'/'-rooted URIs are read from the context root."""
        root = write_tree({"static/a.css": ".a{}"})
        locator = ContextUriLocator(root)
        assert locator.accepts("/static/a.css")
        with locator.locate("/static/a.css") as stream:
            assert stream.read() == b".a{}"

    def test_cannot_escape_root(self, write_tree):
        """'..' cannot leave the context root."""
        root = write_tree({"www/a.css": ".a{}", "secret.css": "x"})
        with pytest.raises(ResourceNotFoundError):
            ContextUriLocator(root / "www").locate("/../secret.css")

    def test_declines_without_root(self):
        """Without a root nothing is accepted."""
        locator = ContextUriLocator()
        assert not locator.accepts("/static/a.css")
        with pytest.raises(ResourceNotFoundError):
            locator.locate("/static/a.css")

    def test_declines_relative_and_protocol_relative(self, tmp_path):
        """Only single-slash rooted URIs are accepted."""
        locator = ContextUriLocator(tmp_path)
        assert not locator.accepts("static/a.css")
        assert not locator.accepts("//cdn.example.com/a.css")


class TestClasspathUriLocator:
    """Resources bundled inside importable packages."""

    def test_reads_package_data(self, tmp_path, monkeypatch):
        """Package data is readable; missing entries are not-found."""
        pkg = tmp_path / "skinpkg_locator_test"
        (pkg / "static").mkdir(parents=True)
        (pkg / "__init__.py").write_text("", encoding="utf-8")
        (pkg / "static" / "site.css").write_text(".site{}", encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))

        locator = ClasspathUriLocator()
        assert locator.accepts("classpath:skinpkg_locator_test/static/site.css")
        with locator.locate("classpath:skinpkg_locator_test/static/site.css") as stream:
            assert stream.read() == b".site{}"
        with pytest.raises(ResourceNotFoundError):
            locator.locate("classpath:skinpkg_locator_test/static/missing.css")

    def test_unknown_package(self):
        """An unimportable package is not-found."""
        with pytest.raises(ResourceNotFoundError):
            ClasspathUriLocator().locate("classpath:no_such_package_xyz/a.css")

    def test_malformed(self):
        """A classpath URI without a package is not-found."""
        with pytest.raises(ResourceNotFoundError):
            ClasspathUriLocator().locate("classpath:")


class TestUrlUriLocator:
    """Absolute URLs."""

    def test_accepts(self):
        """http, https and file URLs are accepted."""
        locator = UrlUriLocator()
        assert locator.accepts("https://example.com/a.css")
        assert locator.accepts("file:///tmp/a.css")
        assert not locator.accepts("css/a.css")
        assert not locator.accepts("classpath:pkg/a.css")

    @patch("common.http_client.requests.get")
    def test_http_fetch(self, mock_get):
        """The response body is returned as a stream."""
        mock_get.return_value = MagicMock(status_code=200, ok=True, content=b".remote{}")
        with UrlUriLocator().locate("https://cdn.example.com/a.css") as stream:
            assert stream.read() == b".remote{}"
        assert mock_get.call_args[0][0] == "https://cdn.example.com/a.css"

    @patch("common.http_client.requests.get")
    def test_http_not_found(self, mock_get):
        """HTTP 404 maps to not-found."""
        mock_get.return_value = MagicMock(status_code=404, ok=False, content=b"")
        with pytest.raises(ResourceNotFoundError):
            UrlUriLocator().locate("https://cdn.example.com/missing.css")

    @patch("common.http_client.requests.get")
    def test_http_server_error(self, mock_get):
        """Other error statuses raise RemoteResourceError."""
        mock_get.return_value = MagicMock(status_code=503, ok=False, content=b"")
        with pytest.raises(RemoteResourceError):
            UrlUriLocator().locate("https://cdn.example.com/a.css")

    @patch("common.http_client.requests.get", side_effect=requests.ConnectionError("refused"))
    def test_connection_error(self, _mock_get):
        """Connection failures raise RemoteResourceError."""
        with pytest.raises(RemoteResourceError):
            UrlUriLocator().locate("https://cdn.example.com/a.css")

    @patch("common.http_client.requests.get", side_effect=requests.Timeout())
    def test_timeout(self, _mock_get):
        """Timeouts raise RemoteResourceError."""
        with pytest.raises(RemoteResourceError):
            UrlUriLocator().locate("https://cdn.example.com/a.css")

    def test_file_url(self, write_tree):
        """file:// URLs are read from disk."""
        root = write_tree({"a.css": ".a{}"})
        with UrlUriLocator().locate((root / "a.css").as_uri()) as stream:
            assert stream.read() == b".a{}"

    def test_default_chain_reads_relative_files(self, write_tree):
        """The default chain falls back to the filesystem."""
        root = write_tree({"a.css": ".local{}"})
        chain = default_locator_chain(base_dir=root)
        assert chain.read_text("a.css", "utf-8") == ".local{}"
        with chain.locate("a.css") as stream:
            assert isinstance(stream, io.BufferedReader)

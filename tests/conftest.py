"""Shared fixtures: an in-memory locator and minimal pipelines."""

import io
import os
import sys
import time

import pytest

SRC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# pylint: disable=wrong-import-position
from errors import ResourceNotFoundError
from locator.base import UriLocator
from locator.chain import LocatorChain
from model.resource import ResourceType
from processor.executor import ProcessorExecutor
from processor.factory import ProcessorsFactory
from processor.impl.css_import import CssImportPreProcessor


class MemoryLocator(UriLocator):
    """Serves URIs from a dict; values may be str (UTF-8 encoded) or bytes."""

    name = "memory"

    def __init__(self, files, delays=None):
        self.files = dict(files)
        self.delays = dict(delays or {})
        self.calls = []

    def accepts(self, uri):
        return True

    def locate(self, uri):
        self.calls.append(uri)
        if uri in self.delays:
            time.sleep(self.delays[uri])
        if uri not in self.files:
            raise ResourceNotFoundError(uri)
        data = self.files[uri]
        if isinstance(data, str):
            data = data.encode("utf-8")
        return io.BytesIO(data)


def build_import_pipeline(files, delays=None, extra_pre=None):
    """Executor whose only CSS step is the import resolver (plus optional extras).

    Returns:
        tuple: (executor, resolver, locator)
    """
    locator = MemoryLocator(files, delays)
    chain = LocatorChain([locator])
    resolver = CssImportPreProcessor()
    factory = ProcessorsFactory().add_pre_processor(resolver, applies_to=ResourceType.CSS)
    for processor, kwargs in extra_pre or []:
        factory.add_pre_processor(processor, **kwargs)
    executor = ProcessorExecutor(chain, factory.pre_processors, factory.post_processors)
    resolver.bind(locator_chain=chain, executor=executor)
    return executor, resolver, locator


@pytest.fixture
def import_pipeline():
    """Factory fixture returning (executor, resolver, locator) for a file mapping."""
    return build_import_pipeline


@pytest.fixture
def write_tree(tmp_path):
    """Write a {relative_path: text} mapping under tmp_path and return tmp_path."""
    def _write(files, encoding="utf-8"):
        for rel, text in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding=encoding)
        return tmp_path
    return _write


@pytest.fixture
def memory_locator():
    """The MemoryLocator class, for tests building their own chains."""
    return MemoryLocator

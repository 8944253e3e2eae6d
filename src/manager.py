"""Wires locators, processors and the executor into a ready-to-use merger."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Union

from config.context import config_scope
from config.settings import MergeConfiguration
from locator.chain import LocatorChain, default_locator_chain
from model.resource import Resource, ResourceType
from processor.context import ProcessingContext
from processor.executor import ProcessorExecutor
from processor.factory import ProcessorsFactory
from processor.impl import (
    BomStripperPreProcessor,
    CssCompressorProcessor,
    CssDataUriPreProcessor,
    CssImportPreProcessor,
    CssUrlRewritingProcessor,
    CssVariablesProcessor,
    JsMinProcessor,
    SemicolonAppenderPreProcessor,
)

logger = logging.getLogger(__name__)


def new_processors_factory(
    import_resolver: CssImportPreProcessor,
    locator_chain: Optional[LocatorChain] = None,
) -> ProcessorsFactory:
    """Standard chain: data URIs, BOM, url rewriting, imports, semicolons, minifiers.

    The post chain expands ``@variables`` once over each merged stylesheet group.
    """
    return (
        ProcessorsFactory()
        .add_pre_processor(CssDataUriPreProcessor(locator_chain), applies_to=ResourceType.CSS)
        .add_pre_processor(BomStripperPreProcessor())
        .add_pre_processor(CssUrlRewritingProcessor(), applies_to=ResourceType.CSS)
        .add_pre_processor(import_resolver, applies_to=ResourceType.CSS)
        .add_pre_processor(SemicolonAppenderPreProcessor(), applies_to=ResourceType.JS)
        .add_pre_processor(JsMinProcessor(), applies_to=ResourceType.JS, minimize=True)
        .add_pre_processor(CssCompressorProcessor(), applies_to=ResourceType.CSS, minimize=True)
        .add_post_processor(CssVariablesProcessor(), applies_to=ResourceType.CSS)
    )


class MergeManager:
    """Merges groups of resources with one shared, stateless pipeline."""

    def __init__(self, config: MergeConfiguration, executor: ProcessorExecutor):
        self._config = config
        self._executor = executor

    @property
    def config(self) -> MergeConfiguration:
        return self._config

    @property
    def executor(self) -> ProcessorExecutor:
        return self._executor

    def merge(
        self,
        resources: Sequence[Union[str, Resource]],
        minimize: Optional[bool] = None,
        context: Optional[ProcessingContext] = None,
    ) -> str:
        """Process and merge one group.

        Args:
            resources: URIs (type inferred from extension) or Resource objects.
            minimize: Overrides the configured minimize flag when given.
            context: Optional per-call context, e.g. to inspect warnings afterwards.

        Returns:
            The merged, processed group content.
        """
        group = [r if isinstance(r, Resource) else Resource.from_uri(r) for r in resources]
        effective_minimize = self._config.minimize if minimize is None else minimize
        logger.info("Merging %d resource(s), minimize=%s", len(group), effective_minimize)
        with config_scope(self._config):
            if context is None:
                context = ProcessingContext.create()
            return self._executor.process_and_merge(group, effective_minimize, context)


def build_manager(
    config: Optional[MergeConfiguration] = None,
    locator_chain: Optional[LocatorChain] = None,
    processors: Optional[ProcessorsFactory] = None,
    import_resolver: Optional[CssImportPreProcessor] = None,
) -> MergeManager:
    """Assemble a MergeManager.

    A custom ``processors`` factory that contains an import resolver must
    pass the same instance as ``import_resolver`` so it gets wired to the
    executor.
    """
    config = config or MergeConfiguration()
    chain = locator_chain or default_locator_chain(config.context_root, config.base_dir)
    resolver = import_resolver or CssImportPreProcessor()
    factory = processors or new_processors_factory(resolver, chain)
    executor = ProcessorExecutor(chain, factory.pre_processors, factory.post_processors)
    resolver.bind(locator_chain=chain, executor=executor)
    return MergeManager(config, executor)


def resources_from_uris(uris: Iterable[str]) -> List[Resource]:
    """Turn URIs into resources, inferring types from extensions."""
    return [Resource.from_uri(uri) for uri in uris]

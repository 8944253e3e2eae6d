"""JavaScript minifier backed by ``rjsmin``."""

from __future__ import annotations

from rjsmin import jsmin

from processor.base import ResourcePostProcessor, ResourcePreProcessor


class JsMinProcessor(ResourcePreProcessor, ResourcePostProcessor):
    """Minifies scripts; register it with ``minimize=True``."""

    def process(self, resource, content, context):
        return self.process_merged(content, context)

    def process_merged(self, content, context):
        return jsmin(content)

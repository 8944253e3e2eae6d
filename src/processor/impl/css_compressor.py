"""CSS minifier backed by the ``cssmin`` library."""

from __future__ import annotations

import cssmin

from processor.base import ResourcePostProcessor, ResourcePreProcessor


class CssCompressorProcessor(ResourcePreProcessor, ResourcePostProcessor):
    """Compresses stylesheets; register it with ``minimize=True``."""

    def process(self, resource, content, context):
        return self.process_merged(content, context)

    def process_merged(self, content, context):
        if not content.strip():
            return ""
        return cssmin.cssmin(content)

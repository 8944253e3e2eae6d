"""Strips the byte order mark some editors put at the start of a file."""

from __future__ import annotations

from processor.base import ResourcePreProcessor

BOM = "\ufeff"


class BomStripperPreProcessor(ResourcePreProcessor):
    """Removes a leading BOM so it does not end up in the middle of merged output."""

    def process(self, resource, content, context):
        if content.startswith(BOM):
            return content[len(BOM):]
        return content

"""Terminates scripts with a semicolon so concatenated files stay separate statements."""

from __future__ import annotations

from processor.base import ResourcePreProcessor


class SemicolonAppenderPreProcessor(ResourcePreProcessor):
    """Appends ``;`` to non-empty scripts that do not already end with one."""

    def process(self, resource, content, context):
        stripped = content.rstrip()
        if not stripped or stripped.endswith(";"):
            return content
        return stripped + ";\n"

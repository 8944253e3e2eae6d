"""Removes ``//`` single-line comments together with their leading blanks."""

from __future__ import annotations

import re

from processor.base import ResourcePostProcessor, ResourcePreProcessor

# "//" right after ":", "(" or a quote starts a URL (http://host, url(//cdn/x.png)), not a comment.
PATTERN = re.compile(r"""[\t ]*(?<![:("'])//.*?$""", re.MULTILINE)
EMPTY_LINE_PATTERN = re.compile(r"^[\t ]*$\r?\n", re.MULTILINE)


def strip_single_line_comments(content: str) -> str:
    """Drop single-line comments, then the lines left empty."""
    result = PATTERN.sub("", content)
    return EMPTY_LINE_PATTERN.sub("", result)


class SingleLineCommentStripperProcessor(ResourcePreProcessor, ResourcePostProcessor):
    """Usable as pre- or post-processor; the resource identity does not matter."""

    def process(self, resource, content, context):
        return strip_single_line_comments(content)

    def process_merged(self, content, context):
        return strip_single_line_comments(content)

"""Concrete processors."""

from .bom_stripper import BomStripperPreProcessor
from .comment_stripper import SingleLineCommentStripperProcessor
from .css_compressor import CssCompressorProcessor
from .css_data_uri import CssDataUriPreProcessor
from .css_import import CssImportPreProcessor
from .css_url_rewriting import CssUrlRewritingProcessor
from .css_variables import CssVariablesProcessor
from .js_min import JsMinProcessor
from .semicolon_appender import SemicolonAppenderPreProcessor

__all__ = [
    "BomStripperPreProcessor",
    "SingleLineCommentStripperProcessor",
    "CssCompressorProcessor",
    "CssDataUriPreProcessor",
    "CssImportPreProcessor",
    "CssUrlRewritingProcessor",
    "CssVariablesProcessor",
    "JsMinProcessor",
    "SemicolonAppenderPreProcessor",
]

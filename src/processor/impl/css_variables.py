"""Expands ``@variables`` blocks in merged stylesheets.

A block such as::

    @variables { brand: #c00; gutter: 4px }

defines names that ``var(brand)`` references anywhere in the merged group
are replaced with. Blocks are removed from the output; later definitions of a
name win. References to names that were never defined (native
``var(--custom)`` properties included) are left as they are.
"""

from __future__ import annotations

import logging
import re
from typing import Dict

from processor.base import ResourcePostProcessor

logger = logging.getLogger(__name__)

VARIABLES_BLOCK = re.compile(r"@variables\b[^{]*\{(?P<body>[^}]*)\}\s*", re.IGNORECASE)
VARIABLE_HOLDER = re.compile(r"var\(\s*(?P<name>[^)\s]+)\s*\)")


def parse_variables(css: str) -> Dict[str, str]:
    """Collect ``name: value`` declarations from every ``@variables`` block, in order."""
    variables: Dict[str, str] = {}
    for block in VARIABLES_BLOCK.finditer(css):
        for declaration in block.group("body").split(";"):
            name, sep, value = declaration.partition(":")
            if not sep or not name.strip():
                continue
            variables[name.strip()] = value.strip()
    return variables


class CssVariablesProcessor(ResourcePostProcessor):
    """Replaces ``var(name)`` with values declared in ``@variables`` blocks."""

    def process_merged(self, content, context):
        variables = parse_variables(content)
        if not variables:
            return content
        result = VARIABLES_BLOCK.sub("", content)

        def _replace(m: re.Match) -> str:
            name = m.group("name")
            if name not in variables:
                logger.debug("Undefined css variable left in place: %s", name)
                return m.group(0)
            return variables[name]

        logger.debug("Expanding %d css variable(s)", len(variables))
        return VARIABLE_HOLDER.sub(_replace, result)

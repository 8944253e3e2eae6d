"""Processor contracts, registration and the chain executor."""

from .base import ResourcePostProcessor, ResourcePreProcessor
from .context import ProcessingContext
from .descriptor import ProcessorDescriptor
from .executor import ProcessorExecutor
from .factory import ProcessorsFactory

__all__ = [
    "ResourcePreProcessor",
    "ResourcePostProcessor",
    "ProcessingContext",
    "ProcessorDescriptor",
    "ProcessorExecutor",
    "ProcessorsFactory",
]

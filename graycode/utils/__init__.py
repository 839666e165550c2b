"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Parameter and config validation (validators)
    - Atomic I/O and YAML loading (fs)
    - Wall-clock timing (profiler)
    - Unified logging (logging_config)

No module in utils/ may import from the generator, serializer or CLI.

Convenience imports:
    from graycode.utils import fs, profiler, validators
    from graycode.utils.logging_config import setup_logging, get_logger
"""

from . import fs
from . import logging_config
from . import profiler
from . import validators

from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    # Modules
    'fs',
    'logging_config',
    'profiler',
    'validators',
    # Direct exports
    'setup_logging',
    'get_logger',
    'push_context',
]

"""Errors with status codes, causes and creation stacks.

Logging is disabled for this package by default, call
``logger.enable("coded_errors")`` to see its records. Loguru filters on
the module name of each record (``coded_errors.*``); the ``name`` bound
by the modules is only an ``extra`` field for sinks.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from loguru import logger

from .base import CodedError
from .config import Settings, get_settings
from .constructors import new, new_with_code, wrap, wrap_with_code
from .contracts import HasErrorCode, grpc_status_code
from .enums import ErrorStatusCodes
from .inspection import cause, code, iter_chain, root_cause, unwrap
from .stack import Frame, StackSnapshot, capture_stack

logger.disable(__name__)

__all__ = [
    "CodedError",
    "ErrorStatusCodes",
    "Frame",
    "HasErrorCode",
    "Settings",
    "StackSnapshot",
    "capture_stack",
    "cause",
    "code",
    "get_settings",
    "grpc_status_code",
    "iter_chain",
    "new",
    "new_with_code",
    "root_cause",
    "unwrap",
    "wrap",
    "wrap_with_code",
]

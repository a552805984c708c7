"""Status code constants used by the library itself.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum


class ErrorStatusCodes(IntEnum):
    """Status codes the library assigns on its own."""

    UNSET = 0
    INTERNAL_SERVER_ERROR = 500

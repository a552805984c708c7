"""Module with settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
from functools import cache
from typing import ClassVar

from pydantic import BaseModel, Field

from .enums import ErrorStatusCodes


class Settings(BaseModel):
    """Library settings."""

    ENV_PREFIX: ClassVar[str] = "CODED_ERRORS_"

    STACK_DEPTH: int = Field(32, gt=0)
    FALLBACK_CODE: int = int(ErrorStatusCodes.INTERNAL_SERVER_ERROR)

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ, stripping the ``CODED_ERRORS_`` prefix."""
        return cls(
            **{
                key.removeprefix(cls.ENV_PREFIX): value
                for key, value in os.environ.items()
                if key.startswith(cls.ENV_PREFIX)
            },
        )


@cache
def get_settings() -> Settings:
    """Return settings loaded once from the environment."""
    return Settings.from_os()

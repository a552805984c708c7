"""Call stack snapshots.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import sys
import traceback
from dataclasses import dataclass
from types import FrameType
from typing import Iterator

from loguru import logger as loguru_logger

from .config import get_settings

_PACKAGE = __name__.rpartition(".")[0]

log = loguru_logger.bind(name=_PACKAGE)


@dataclass(frozen=True, slots=True)
class Frame:
    """Single call site."""

    file: str
    line: int
    function: str

    def render(self) -> str:
        """Render frame as function name and indented location."""
        return f"\n{self.function}\n\t{self.file}:{self.line}"


@dataclass(frozen=True, slots=True)
class StackSnapshot:
    """Immutable call stack, innermost frame first."""

    frames: tuple[Frame, ...] = ()

    def __iter__(self) -> Iterator[Frame]:
        """Iterate frames innermost first."""
        return iter(self.frames)

    def __len__(self) -> int:
        """Return number of retained frames."""
        return len(self.frames)

    def render(self) -> str:
        """Render every frame, one call site per entry."""
        return "".join(frame.render() for frame in self.frames)


def _is_internal(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(f"{_PACKAGE}.")


def _to_frame(frame: FrameType, lineno: int | None) -> Frame | None:
    code = frame.f_code
    filename = code.co_filename
    qualname = getattr(code, "co_qualname", code.co_name)
    if not filename or not qualname or lineno is None:
        return None

    module = frame.f_globals.get("__name__")
    function = f"{module}.{qualname}" if module else qualname
    return Frame(file=filename, line=lineno, function=function)


def capture_stack(depth: int | None = None) -> StackSnapshot:
    """Capture the current call stack.

    Frames of this package are skipped, so the first frame is the one
    that called into the library.

    :param int | None depth: max frames to keep, defaults to settings
    :return StackSnapshot: snapshot of the caller's stack
    """
    if depth is None:
        depth = get_settings().STACK_DEPTH

    frames: list[Frame] = []
    for frame, lineno in traceback.walk_stack(sys._getframe(1)):
        if not frames and _is_internal(frame):
            continue

        captured = _to_frame(frame, lineno)
        if captured is None:
            log.trace("Frame without metadata dropped: {}", frame)
            continue

        frames.append(captured)
        if len(frames) >= depth:
            break

    return StackSnapshot(tuple(frames))

"""Coded error.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .stack import StackSnapshot


class CodedError(Exception):
    """Error carrying a status code, a message, a cause and a stack.

    Values are never changed after construction: wrapping builds a new
    ``CodedError`` whose cause is the wrapped error. The cause is also
    set as ``__cause__`` so interpreter tracebacks show the chain.

    Supported format specs:
        ``"+v"``: causes first, then message and stack of every layer.
        anything else: same as ``str()``.
    """

    def __init__(
        self,
        message: str,
        *,
        code: int = 0,
        cause: BaseException | None = None,
        stack: StackSnapshot | None = None,
    ) -> None:
        """Create error from already formatted message."""
        super().__init__(message)
        self._message = message
        self._code = code
        self._cause = cause
        self._stack = stack if stack is not None else StackSnapshot()
        self.__cause__ = cause

    @property
    def message(self) -> str:
        """Return message of this layer only."""
        return self._message

    @property
    def code(self) -> int:
        """Return status code."""
        return self._code

    @property
    def cause(self) -> BaseException | None:
        """Return wrapped error."""
        return self._cause

    @property
    def stack(self) -> StackSnapshot:
        """Return stack captured at construction."""
        return self._stack

    def get_error_code(self) -> int:
        """Return status code."""
        return self._code

    def unwrap(self) -> BaseException | None:
        """Return wrapped error, same as ``cause``."""
        return self._cause

    def __str__(self) -> str:
        """Return messages of every layer joined with colons."""
        if self._cause is not None:
            return f"{self._message}: {self._cause}"
        return self._message

    def __repr__(self) -> str:
        """Return code and message of this layer."""
        return (
            f"{type(self).__name__}("
            f"code={self._code!r}, message={self._message!r})"
        )

    def __format__(self, format_spec: str) -> str:
        """Render short form or, with ``+v``, the full trace."""
        if format_spec == "+v":
            return self._verbose()
        return str(self)

    def _verbose(self) -> str:
        parts: list[str] = []
        if isinstance(self._cause, CodedError):
            parts.append(f"{self._cause:+v}\n")
        elif self._cause is not None:
            parts.append(f"{self._cause}\n")

        parts.append(self._message)
        parts.append(self._stack.render())
        return "".join(parts)

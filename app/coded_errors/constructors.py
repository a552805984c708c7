"""Constructors for coded errors.

Messages use ``%``-style positional formatting. A template without
arguments is taken verbatim.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Any

from .base import CodedError
from .inspection import code as get_code
from .stack import capture_stack


def _format(template: str, args: tuple[Any, ...]) -> str:
    return template % args if args else template


def new(template: str, *args: Any) -> CodedError:
    """Create an error without code.

    :param str template: message template
    :return CodedError: error with code 0 and no cause
    """
    return CodedError(_format(template, args), stack=capture_stack())


def new_with_code(code: int, template: str, *args: Any) -> CodedError:
    """Create an error with status code.

    :param int code: status code
    :param str template: message template
    :return CodedError: error without cause
    """
    return CodedError(
        _format(template, args),
        code=code,
        stack=capture_stack(),
    )


def wrap(
    err: BaseException | None,
    template: str,
    *args: Any,
) -> CodedError | None:
    """Wrap an error, keeping its status code.

    :param BaseException | None err: error to wrap
    :param str template: message template
    :return CodedError | None: new error or None if err is None
    """
    if err is None:
        return None
    return wrap_with_code(err, get_code(err), template, *args)


def wrap_with_code(
    err: BaseException | None,
    code: int,
    template: str,
    *args: Any,
) -> CodedError | None:
    """Wrap an error with a new status code.

    Overrides any code carried by ``err``.

    :param BaseException | None err: error to wrap
    :param int code: status code
    :param str template: message template
    :return CodedError | None: new error or None if err is None
    """
    if err is None:
        return None

    return CodedError(
        _format(template, args),
        code=code,
        cause=err,
        stack=capture_stack(),
    )

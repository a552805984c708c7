"""Code extraction and cause chain traversal.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterator

from loguru import logger as loguru_logger

from .base import CodedError
from .config import get_settings
from .contracts import HasErrorCode, grpc_status_code
from .enums import ErrorStatusCodes

log = loguru_logger.bind(name="coded_errors")


def _carried_code(err: HasErrorCode) -> int | None:
    try:
        value = err.get_error_code()
    except Exception as exc:  # noqa: BLE001
        log.debug("get_error_code of {!r} raised: {!r}", err, exc)
        return None

    if not isinstance(value, int):
        log.debug("Non integer code {!r} on {!r}", value, err)
        return None
    return int(value)


def code(err: BaseException | None) -> int:
    """Extract status code of an error.

    Never raises: errors without a recognizable code get the fallback.

    :param BaseException | None err: error
    :return int: status code, 0 for None
    """
    if err is None:
        return int(ErrorStatusCodes.UNSET)

    if isinstance(err, HasErrorCode):
        carried = _carried_code(err)
        if carried is not None:
            return carried

    status = grpc_status_code(err)
    if status is not None:
        return status

    fallback = get_settings().FALLBACK_CODE
    log.debug("No code on {!r}, using {}", err, fallback)
    return fallback


def unwrap(err: BaseException | None) -> BaseException | None:
    """Return the error wrapped by ``err``."""
    if err is None:
        return None

    if isinstance(err, CodedError):
        return err.unwrap()
    return err.__cause__


def cause(err: BaseException | None) -> BaseException | None:
    """Return the error wrapped by ``err``, same as ``unwrap``."""
    return unwrap(err)


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Iterate ``err`` and its causes down to the root.

    Stops on an error already seen, so a self-containing chain ends.
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = unwrap(err)


def root_cause(err: BaseException | None) -> BaseException | None:
    """Return the innermost error of the chain."""
    chain = list(iter_chain(err))
    return chain[-1] if chain else None

"""Error code contracts.

Defines a protocol for errors that carry their own status code and an
adapter for gRPC status errors raised by the networking layer.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Protocol, runtime_checkable

import grpc


@runtime_checkable
class HasErrorCode(Protocol):
    """Errors that expose a status code."""

    def get_error_code(self) -> int:
        """Return status code."""


def grpc_status_code(err: BaseException) -> int | None:
    """Get numeric status of a gRPC error.

    Only ``grpc.RpcError`` instances whose ``code()`` returns a
    ``grpc.StatusCode`` are recognized.

    :param BaseException err: any error
    :return int | None: gRPC status number or None if not a status error
    """
    if not isinstance(err, grpc.RpcError):
        return None

    get_code = getattr(err, "code", None)
    if not callable(get_code):
        return None

    try:
        status = get_code()
    except Exception:  # noqa: BLE001
        return None

    if not isinstance(status, grpc.StatusCode):
        return None

    return status.value[0]

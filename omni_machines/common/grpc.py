import base64
import logging
from contextlib import contextmanager
from typing import Any, Sequence, Tuple

import grpc
from grpc import StatusCode

from omni_machines.common.exceptions import (
    ConfigurationError,
    ConnectionError,
    ErrorKind,
    ResourceAlreadyExistsError,
    ResourceConflictError,
    ResourceError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)


def ssl_channel_credentials(tls_config) -> grpc.ChannelCredentials:
    """Get SSL channel credentials for gRPC connection."""
    if tls_config.ca != "":
        try:
            ca_certificate = base64.b64decode(tls_config.ca, validate=True)
        except ValueError as e:
            raise ConfigurationError("tls.ca is not valid base64") from e
        return grpc.ssl_channel_credentials(ca_certificate)
    return grpc.ssl_channel_credentials()


def aio_secure_channel(target: str, credentials: grpc.ChannelCredentials, grpc_options: dict[str, Any] | None):
    return grpc.aio.secure_channel(
        target,
        credentials,
        options=_override_default_grpc_options(grpc_options),
    )


def aio_insecure_channel(target: str, grpc_options: dict[str, Any] | None):
    return grpc.aio.insecure_channel(
        target,
        options=_override_default_grpc_options(grpc_options),
    )


def _override_default_grpc_options(grpc_options: dict[str, str | int] | None) -> Sequence[Tuple[str, Any]]:
    defaults = (
        ("grpc.lb_policy_name", "round_robin"),
        # we keep a low keepalive time to avoid idle timeouts on cloud load balancers
        ("grpc.keepalive_time_ms", 20000),
        ("grpc.keepalive_timeout_ms", 180000),
        ("grpc.http2.max_pings_without_data", 0),
        ("grpc.keepalive_permit_without_calls", 1),
    )
    options = dict(defaults)
    options.update(grpc_options or {})
    return tuple(options.items())


@contextmanager
def translate_grpc_exceptions():
    """Translate grpc exceptions to typed resource errors."""
    try:
        yield
    except grpc.aio.AioRpcError as e:
        match e.code():
            case StatusCode.NOT_FOUND:
                raise ResourceNotFoundError(e.details()) from None
            case StatusCode.ALREADY_EXISTS:
                raise ResourceAlreadyExistsError(e.details()) from None
            case StatusCode.FAILED_PRECONDITION | StatusCode.ABORTED:
                raise ResourceConflictError(e.details()) from None
            case StatusCode.UNAVAILABLE:
                # tls or other connection errors
                raise ConnectionError(f"grpc error: {e.details()}") from None
            case _:
                logger.debug("unmapped grpc status %s: %s", e.code(), e.details())
                raise ResourceError(f"grpc error: {e.details()}", ErrorKind.OTHER) from e
    except grpc.RpcError as e:
        raise ConnectionError("grpc error") from e

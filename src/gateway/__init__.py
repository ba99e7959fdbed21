"""Gateway module - Fizzy request construction and response handling.

The Gateway class lives in `src.gateway.service`; it is not re-exported
here because the registry imports this package's exceptions.
"""

from .schemas import (
    RemoteRequest,
    MoveTarget,
    ToColumn,
    ToDone,
    ToNotNow,
    parse_move_target,
)
from .exceptions import (
    FizzyGatewayError,
    RegistryConfigError,
    UnknownOperationError,
    ArgumentValidationError,
    InvalidIdentifierError,
    RemoteAPIError,
    RemoteUnavailableError,
)


__all__ = [
    # Schemas
    "RemoteRequest",
    "MoveTarget",
    "ToColumn",
    "ToDone",
    "ToNotNow",
    "parse_move_target",
    # Exceptions
    "FizzyGatewayError",
    "RegistryConfigError",
    "UnknownOperationError",
    "ArgumentValidationError",
    "InvalidIdentifierError",
    "RemoteAPIError",
    "RemoteUnavailableError",
]

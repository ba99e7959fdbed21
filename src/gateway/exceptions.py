"""Custom exceptions for the Fizzy gateway."""


class FizzyGatewayError(Exception):
    """Base exception for all gateway errors.

    Attributes:
        message: Human-readable error message.
        code: Stable machine-readable error code.
    """

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class RegistryConfigError(FizzyGatewayError):
    """Raised when the operation table cannot be loaded or is inconsistent."""

    def __init__(self, message: str):
        super().__init__(message=message, code="REGISTRY_CONFIG")


class UnknownOperationError(FizzyGatewayError):
    """Raised when requested operation is not in the registry.

    Attributes:
        operation: Name of the operation that was not found.
    """

    def __init__(self, operation: str):
        super().__init__(
            message=f"Unknown tool: {operation}",
            code="UNKNOWN_OPERATION"
        )
        self.operation = operation


class ArgumentValidationError(FizzyGatewayError):
    """Raised when tool arguments do not match the declared schema.

    Every violation found is reported, not just the first one.

    Attributes:
        operation: Operation whose schema was violated.
        missing: Names of required fields that were absent.
        wrong_types: (field, actual type, expected type) for mistyped fields.
        reason: Set instead of the lists when the argument bag itself is unusable.
    """

    def __init__(
        self,
        operation: str,
        missing: list[str] | None = None,
        wrong_types: list[tuple[str, str, str]] | None = None,
        reason: str | None = None,
    ):
        self.operation = operation
        self.missing = list(missing or [])
        self.wrong_types = list(wrong_types or [])
        self.reason = reason

        problems: list[str] = []
        if reason:
            problems.append(reason)
        if self.missing:
            problems.append(f"missing required field(s): {', '.join(self.missing)}")
        if self.wrong_types:
            details = ", ".join(
                f"{field} (expected {expected}, got {actual})"
                for field, actual, expected in self.wrong_types
            )
            problems.append(f"wrong type for field(s): {details}")

        super().__init__(
            message=f"Invalid arguments for '{operation}': {'; '.join(problems)}",
            code="VALIDATION_ERROR"
        )


class InvalidIdentifierError(FizzyGatewayError):
    """Raised when an identifier argument is not plain ASCII alphanumeric.

    Attributes:
        parameter: Argument name carrying the identifier.
        value: The rejected value.
    """

    def __init__(self, parameter: str, value: str):
        super().__init__(
            message=f"Invalid identifier for '{parameter}': {value!r} (expected letters and digits only)",
            code="INVALID_IDENTIFIER"
        )
        self.parameter = parameter
        self.value = value


class RemoteAPIError(FizzyGatewayError):
    """Raised when the Fizzy API returns a non-2xx response.

    Attributes:
        status_code: HTTP status code from the API.
        body: Raw response body text.
    """

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(
            message=f"Fizzy API error ({status_code}): {body}",
            code="REMOTE_ERROR"
        )
        self.status_code = status_code
        self.body = body


class RemoteUnavailableError(FizzyGatewayError):
    """Raised when the Fizzy API cannot be reached at all.

    Attributes:
        url: URL of the failed request.
        reason: Description of the connection failure.
    """

    def __init__(self, url: str, reason: str = "Connection failed"):
        super().__init__(
            message=f"Fizzy API at '{url}' is unavailable: {reason}",
            code="REMOTE_UNAVAILABLE"
        )
        self.url = url
        self.reason = reason

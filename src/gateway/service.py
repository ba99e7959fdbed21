"""Service layer for the Fizzy gateway: validation, dispatch and error wrapping."""

import json
import time
from typing import Any

import httpx
from structlog import get_logger

from src.config import RemoteEndpoint
from src.mcp_transport.schemas import MCPContent, MCPTool, MCPToolCallResult
from src.registry.service import OperationRegistry

from .bindings import BINDINGS, Binding
from .exceptions import FizzyGatewayError, RegistryConfigError
from .proxy import normalize_response, send_request
from .validation import validate_arguments, validate_identifiers


logger = get_logger("gateway")


class Gateway:
    """Translates named operations into Fizzy API calls.

    Holds no mutable state; concurrent calls are independent.

    Attributes:
        endpoint: Fizzy location and credentials.
        client: Shared HTTP client.
        registry: Declared operations.
    """

    def __init__(
        self,
        endpoint: RemoteEndpoint,
        client: httpx.AsyncClient,
        registry: OperationRegistry,
        bindings: dict[str, Binding] | None = None,
    ) -> None:
        """Initialize the gateway and check every operation has a binding.

        Raises:
            RegistryConfigError: If declared operations and bindings differ.
        """
        bindings = BINDINGS if bindings is None else bindings

        unbound = sorted(set(registry.names()) - set(bindings))
        undeclared = sorted(set(bindings) - set(registry.names()))
        if unbound:
            raise RegistryConfigError(f"operations without a request binding: {', '.join(unbound)}")
        if undeclared:
            raise RegistryConfigError(f"bindings without a declared operation: {', '.join(undeclared)}")

        self.endpoint = endpoint
        self.client = client
        self.registry = registry
        self._bindings = dict(bindings)

    def list_tools(self) -> list[MCPTool]:
        """Describe every operation as an MCP tool."""
        return [
            MCPTool(name=spec.name, description=spec.description, inputSchema=spec.input_schema())
            for spec in self.registry
        ]

    async def call(self, name: str, raw_args: Any) -> Any:
        """Run one operation and return its normalized result.

        Steps: look up the operation, validate arguments and identifiers,
        bind to a request, send it, normalize the response.

        Args:
            name: Operation name.
            raw_args: Argument bag as decoded from the wire.

        Returns:
            JSON-serializable result.

        Raises:
            UnknownOperationError: If the operation is not declared.
            ArgumentValidationError: If arguments do not match the schema.
            InvalidIdentifierError: If an identifier is not alphanumeric.
            RemoteAPIError: If Fizzy answers with a non-2xx status.
            RemoteUnavailableError: If Fizzy cannot be reached.
        """
        spec = self.registry.lookup(name)
        arguments = validate_arguments(raw_args, spec)
        validate_identifiers(arguments, spec)
        request = self._bindings[name](arguments)

        start = time.perf_counter()
        response = await send_request(self.client, self.endpoint, request)
        logger.info(
            "operation_call",
            operation=name,
            method=request.method,
            path=request.path,
            status=response.status_code,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )

        result = normalize_response(response)
        if request.transform is not None:
            result = request.transform(result)
        return result

    async def invoke(self, name: str, raw_args: Any) -> MCPToolCallResult:
        """Run one operation and wrap the outcome as an MCP tool result.

        Never raises for gateway failures; they become an error result
        whose text is "Error: <message>".
        """
        try:
            result = await self.call(name, raw_args)
        except FizzyGatewayError as e:
            logger.warning("operation_failed", operation=name, error_code=e.code, error=e.message)
            return MCPToolCallResult(
                content=[MCPContent(type="text", text=f"Error: {e.message}")],
                isError=True,
            )

        return MCPToolCallResult(
            content=[MCPContent(type="text", text=json.dumps(result, indent=2))],
            isError=False,
        )

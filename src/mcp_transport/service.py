"""Business logic for MCP protocol handlers."""

import json
from typing import Any

from pydantic import ValidationError
from structlog import get_logger

from src.config import get_settings
from src.gateway.service import Gateway

from .schemas import (
    PROTOCOL_VERSION,
    MCPErrorCodes,
    MCPInitializeParams,
    MCPJSONRPCRequest,
    MCPJSONRPCResponse,
    MCPToolCallParams,
    MCPToolCallResult,
    MCPToolListResult,
)


logger = get_logger("mcp")


async def handle_initialize(params: MCPInitializeParams) -> dict[str, Any]:
    """Handle initialize request.

    Args:
        params: Initialize parameters from client.

    Returns:
        Server initialization response.
    """
    settings = get_settings()
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {
            "tools": {
                "listChanged": False  # Static operation table
            }
        },
        "serverInfo": {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }
    }


async def handle_tools_list(gateway: Gateway) -> MCPToolListResult:
    """Handle tools/list request."""
    return MCPToolListResult(tools=gateway.list_tools())


async def handle_tools_call(gateway: Gateway, params: MCPToolCallParams) -> MCPToolCallResult:
    """Handle tools/call request.

    Args:
        gateway: Gateway that runs the operation.
        params: Tool name and raw arguments.

    Returns:
        Tool execution result; failures are reported with isError set.
    """
    return await gateway.invoke(params.name, params.arguments)


def _error(request_id: str | int | None, code: int, message: str) -> MCPJSONRPCResponse:
    return MCPJSONRPCResponse(id=request_id, error={"code": code, "message": message})


async def handle_message(gateway: Gateway, body: Any) -> MCPJSONRPCResponse | None:
    """Dispatch one decoded JSON-RPC message.

    Args:
        gateway: Gateway used for tool calls.
        body: Decoded JSON message.

    Returns:
        The response to send back, or None for notifications.
    """
    request_id = body.get("id") if isinstance(body, dict) else None
    try:
        jsonrpc_request = MCPJSONRPCRequest.model_validate(body)
    except ValidationError as e:
        return _error(request_id, MCPErrorCodes.INVALID_REQUEST, f"Invalid request: {e}")

    method = jsonrpc_request.method
    params = jsonrpc_request.params or {}

    try:
        if method == "initialize":
            result = await handle_initialize(MCPInitializeParams(**params))
        elif method.startswith("notifications/"):
            # Client notifications (e.g. initialized) need no reply
            return None
        elif method == "ping":
            result = {}
        elif method == "tools/list":
            result = (await handle_tools_list(gateway)).model_dump(exclude_none=True)
        elif method == "tools/call":
            call_result = await handle_tools_call(gateway, MCPToolCallParams(**params))
            result = call_result.model_dump(exclude_none=True)
        elif jsonrpc_request.is_notification:
            # Notifications are never answered, even for unknown methods
            return None
        else:
            return _error(jsonrpc_request.id, MCPErrorCodes.METHOD_NOT_FOUND, f"Method not found: {method}")
    except ValidationError as e:
        return _error(jsonrpc_request.id, MCPErrorCodes.INVALID_PARAMS, f"Invalid params: {e}")
    except Exception as e:
        logger.error("internal_error", method=method, error=str(e), exc_info=True)
        return _error(jsonrpc_request.id, MCPErrorCodes.INTERNAL_ERROR, f"Internal error: {str(e)}")

    if jsonrpc_request.is_notification:
        return None
    return MCPJSONRPCResponse(id=jsonrpc_request.id, result=result)


async def handle_line(gateway: Gateway, line: str | bytes) -> MCPJSONRPCResponse | None:
    """Decode and dispatch one newline-delimited JSON-RPC message.

    Raw bytes are decoded as UTF-8; undecodable input is a parse error.
    """
    line = line.strip()
    if not line:
        return None
    try:
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        body = json.loads(line)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("parse_error", error=str(e))
        return _error(None, MCPErrorCodes.PARSE_ERROR, f"Parse error: {e}")
    return await handle_message(gateway, body)

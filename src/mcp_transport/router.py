"""HTTP transport for MCP: JSON-RPC messages posted to /mcp."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from src.dependencies import get_gateway
from src.gateway.service import Gateway

from .schemas import MCPErrorCodes, MCPJSONRPCResponse
from .service import handle_message


router = APIRouter(prefix="", tags=["mcp"])


@router.post("/mcp", operation_id="mcp_endpoint_post")
async def mcp_post_endpoint(
    request: Request,
    gateway: Annotated[Gateway, Depends(get_gateway)],
):
    """Handle one JSON-RPC 2.0 message."""
    try:
        body = await request.json()
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        return JSONResponse(
            content=MCPJSONRPCResponse(
                id=None,
                error={"code": MCPErrorCodes.PARSE_ERROR, "message": f"Parse error: {e}"},
            ).to_wire(),
        )

    response = await handle_message(gateway, body)
    if response is None:
        return Response(status_code=202)
    return JSONResponse(content=response.to_wire())

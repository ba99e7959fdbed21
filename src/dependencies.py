"""Global dependencies for the application."""

from fastapi import Request

from src.gateway.service import Gateway


async def get_gateway(request: Request) -> Gateway:
    """Dependency to get the global gateway.

    The gateway and its shared HTTP client are created in the main.py
    lifespan so connections are pooled across requests.

    Args:
        request: The FastAPI request object.

    Returns:
        The application's Gateway instance.
    """
    return request.app.state.gateway

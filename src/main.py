import httpx
from fastapi import FastAPI
from contextlib import asynccontextmanager
from .config import get_settings, get_remote_endpoint
from .gateway.service import Gateway
from .logging_config import configure_logging
from .registry.service import get_registry
from src.mcp_transport.router import router as mcp_router

settings = get_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)

    # Shared HTTP client for connection pooling
    # timeout=None leaves timeouts to the network stack
    app.state.http_client = httpx.AsyncClient(timeout=None)
    app.state.gateway = Gateway(
        endpoint=get_remote_endpoint(settings),
        client=app.state.http_client,
        registry=get_registry(),
    )

    yield

    # Shutdown: Close HTTP client
    await app.state.http_client.aclose()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME}

# Include routers
app.include_router(mcp_router)

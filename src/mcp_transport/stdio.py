"""stdio transport: newline-delimited JSON-RPC on stdin/stdout."""

import asyncio
import json
import sys
from collections.abc import AsyncIterator, Callable

import httpx
from structlog import get_logger

from src.config import get_remote_endpoint, get_settings
from src.gateway.service import Gateway
from src.logging_config import configure_logging
from src.registry.service import get_registry

from .service import handle_line


logger = get_logger("mcp.stdio")


async def _stdin_lines() -> AsyncIterator[bytes]:
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), sys.stdin)
    while True:
        line = await reader.readline()
        if not line:
            return
        yield line


def _write_stdout(message: str) -> None:
    sys.stdout.write(message + "\n")
    sys.stdout.flush()


async def serve(
    gateway: Gateway,
    lines: AsyncIterator[str | bytes],
    write: Callable[[str], None],
) -> None:
    """Answer each incoming message until the input is exhausted.

    Messages are handled concurrently; replies are written as they finish
    and carry the request id for correlation.

    Args:
        gateway: Gateway used for tool calls.
        lines: Incoming raw lines, decoded as UTF-8 if given as bytes.
        write: Sink for one serialized reply.
    """
    pending: set[asyncio.Task] = set()

    async def answer(line: str | bytes) -> None:
        response = await handle_line(gateway, line)
        if response is not None:
            write(json.dumps(response.to_wire()))

    async for line in lines:
        task = asyncio.create_task(answer(line))
        pending.add(task)
        task.add_done_callback(pending.discard)

    if pending:
        await asyncio.gather(*pending)


async def run() -> None:
    """Build the gateway from settings and serve stdin until EOF."""
    settings = get_settings()
    endpoint = get_remote_endpoint(settings)

    async with httpx.AsyncClient(timeout=None) as client:
        gateway = Gateway(endpoint=endpoint, client=client, registry=get_registry())
        logger.info("stdio_server_started", base_url=endpoint.base_url, account_id=endpoint.account_id)
        await serve(gateway, _stdin_lines(), _write_stdout)
    logger.info("stdio_server_stopped")


def main() -> None:
    """Console entry point for `fizzy-mcp`."""
    configure_logging(get_settings().LOG_LEVEL)
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.error("fatal_error", error=str(e), exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

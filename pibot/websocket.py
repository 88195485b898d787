"""A WebSocket server that passes each message to a callback and sends back its reply."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosed

ROUTE = "/"


@dataclass
class WebSocketServerConfig:
    """Port and event callbacks; callbacks left as None are skipped."""

    server_port: int
    on_server_start: Callable[[bool], None] | None = None
    on_open: Callable[[], None] | None = None
    on_close: Callable[[], None] | None = None
    on_message: Callable[[str], str] | None = None
    host: str | None = None


def _make_handler(config: WebSocketServerConfig) -> Callable[[Any], Any]:
    async def handler(ws: Any) -> None:
        request = getattr(ws, "request", None)
        path = request.path if request is not None else getattr(ws, "path", ROUTE)
        if path != ROUTE:
            await ws.close(1008, "unknown route")
            return
        if config.on_open:
            config.on_open()
        try:
            async for message in ws:
                if config.on_message is None:
                    continue
                is_binary = isinstance(message, bytes)
                response = config.on_message(
                    message.decode("utf-8", "replace") if is_binary else message
                )
                if response:
                    await ws.send(response.encode("utf-8") if is_binary else response)
        except ConnectionClosed:
            pass
        finally:
            if config.on_close:
                config.on_close()

    return handler


async def serve(config: WebSocketServerConfig) -> None:
    """Serve clients until cancelled; report whether the port could be bound."""
    try:
        server = await websockets.serve(
            _make_handler(config), config.host, config.server_port
        )
    except OSError:
        if config.on_server_start:
            config.on_server_start(False)
        return
    async with server:
        if config.on_server_start:
            config.on_server_start(True)
        await asyncio.Future()


def websocket_server_start(config: WebSocketServerConfig) -> None:
    """Run the server in a fresh event loop until it stops."""
    asyncio.run(serve(config))
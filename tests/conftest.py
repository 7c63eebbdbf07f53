import contextlib

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer


@pytest.fixture
def api_server():
    """
    Serve a canned response for one endpoint on a local aiohttp server.

    Usage inside a coroutine:
        async with api_server("orders", payload, received=queries) as api_url:
            ...
    Every incoming request appends its (query pairs, headers) to `received`.
    """

    @contextlib.asynccontextmanager
    async def serve(path, payload, status=200, received=None):
        async def handler(request):
            if received is not None:
                received.append((list(request.query.items()), request.headers.copy()))
            if isinstance(payload, bytes):
                return web.Response(body=payload, status=status, content_type="application/json", charset="utf-8")
            if isinstance(payload, str):
                return web.Response(text=payload, status=status, content_type="application/json")
            return web.json_response(payload, status=status)

        app = web.Application()
        app.router.add_get(f"/api/v1/{path}", handler)
        server = TestServer(app)
        await server.start_server()
        try:
            yield str(server.make_url("/api/v1"))
        finally:
            await server.close()

    return serve

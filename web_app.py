# -*- coding: utf-8 -*-
"""FastAPI app that serves the bundled frontend.

Usage (after installing the project):

    freedom-bridge --port 4173

The bundle directory is mounted at ``/`` with ``StaticFiles`` in html mode:
files come back with their content type, ETag/Last-Modified validators and
range support, a directory serves its ``index.html``, and anything else is a
plain 404. There is no single-page-application fallback.
"""

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from asset_bundle import AssetBundle


def create_app(bundle: AssetBundle) -> FastAPI:
    app = FastAPI(
        title="Freedom Bridge",
        description="Local server for the bundled Freedom Bridge frontend.",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.bundle = bundle

    @app.exception_handler(StarletteHTTPException)
    async def plain_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        """Plain-text errors instead of FastAPI's JSON ``detail`` body."""
        if exc.status_code == 404:
            return PlainTextResponse("404 page not found", status_code=404)
        return PlainTextResponse(f"{exc.status_code} {exc.detail}", status_code=exc.status_code)

    app.mount("/", StaticFiles(directory=str(bundle.root), html=True), name="static")
    return app

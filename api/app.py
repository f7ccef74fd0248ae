from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from api.routes import sessions as session_routes
from repcount import __version__


def create_app() -> FastAPI:
    app = FastAPI(
        title="Rep Counter API",
        description="REST API feeding pose frames to repcount's overhead-press counter.",
        version=__version__,
    )
    app.include_router(session_routes.router)

    @app.get("/", include_in_schema=False)
    async def redirect_to_docs() -> RedirectResponse:
        return RedirectResponse(url="/docs")

    return app


app = create_app()

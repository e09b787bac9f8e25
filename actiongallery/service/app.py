"""FastAPI application entrypoint for actiongallery service mode."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from ..pipeline import GalleryPipeline
from ..remote.client import GalleryError, RemoteApiError


class CardModel(BaseModel):
    title: str
    path: str
    type: str
    description: str
    tags: List[str]
    url: Optional[str] = None


class ActionsResponse(BaseModel):
    total: int
    filters: List[str]
    actions: List[CardModel]


class HealthResponse(BaseModel):
    status: str


def _default_pipeline() -> GalleryPipeline:
    return GalleryPipeline()


def create_app(
    pipeline_factory: Callable[[], GalleryPipeline] = _default_pipeline,
) -> FastAPI:
    """Create the FastAPI application serving the live gallery."""

    app = FastAPI(title="Action Gallery", version="1.0.0")

    async def get_pipeline() -> GalleryPipeline:
        # Every request is a fresh render pass against the remote tree.
        return pipeline_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/", response_class=HTMLResponse)
    async def gallery(pipeline: GalleryPipeline = Depends(get_pipeline)) -> HTMLResponse:
        outcome = await pipeline.render_page()
        return HTMLResponse(outcome.html)

    @app.get("/api/actions", response_model=ActionsResponse)
    async def actions(pipeline: GalleryPipeline = Depends(get_pipeline)) -> ActionsResponse:
        view = await pipeline.build_view()
        if view is None:
            return ActionsResponse(total=0, filters=[], actions=[])
        return ActionsResponse(
            total=view.total,
            filters=list(view.filter_labels),
            actions=[
                CardModel(
                    title=card.title,
                    path=card.path,
                    type=card.type_label,
                    description=card.description,
                    tags=list(card.tags),
                    url=card.url,
                )
                for card in view.cards
            ],
        )

    @app.exception_handler(GalleryError)
    async def gallery_error_handler(_: Any, exc: GalleryError) -> JSONResponse:
        content: dict[str, Any] = {"detail": str(exc)}
        if isinstance(exc, RemoteApiError):
            content["upstream_status"] = exc.status_code
        return JSONResponse(status_code=502, content=content)

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    pipeline_factory: Callable[[], GalleryPipeline] = _default_pipeline,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(pipeline_factory)
    uvicorn.run(app, host=host, port=port)

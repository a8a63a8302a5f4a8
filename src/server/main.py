"""FastAPI application for outline2mm."""

from fastapi import FastAPI

from server.routers import keywords, mindmap

app = FastAPI(
    title="outline2mm",
    description="Keyword extraction and outline to Freemind mind-map conversion.",
)
app.include_router(keywords.router)
app.include_router(mindmap.router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}

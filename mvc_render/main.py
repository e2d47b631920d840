"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from mvc_render.config import get_settings
from mvc_render.core.app_factory import create_app
from mvc_render.logging_config import setup_logging

load_dotenv(Path(__file__).parent.parent / ".env")

settings = get_settings()
setup_logging(settings.log_level)

app = create_app(settings)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "MVC Render", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mvc_render.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )

"""
FastAPI application entrypoint.

``uvicorn dogs_api.main:app`` serves the app built from ``.env``.
"""
from dogs_api.application import create_app
from dogs_api.utils import get_logger

app = create_app()

logger = get_logger(__name__)

# Development server configuration
if __name__ == "__main__":
    import uvicorn

    logger.info("Starting development server")

    uvicorn.run(
        "dogs_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["dogs_api"],
        log_level="info",
        access_log=True
    )

"""Main entrypoint and application factory for the finview API.

This module initializes the FastAPI application, configures logging and exposes the Scalar API reference
endpoint for interactive OpenAPI documentation. It also includes the main entrypoint for running the app
with Uvicorn.
"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from scalar_fastapi import get_scalar_api_reference

from finview.api.routes import router
from finview.core.settings import get_settings
from finview.core.utils import get_logger


# --- Logging Setup ---
def setup_logging() -> None:
    """Configure the package logger, adding a file handler when ``log_file`` is set."""
    logger = get_logger("finview")
    logger.setLevel(logging.INFO)
    log_file = get_settings().log_file
    # Add file handler for persistent logs (not colorized)
    if log_file and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(file_handler)
    logger.propagate = False


setup_logging()


app = FastAPI(
    docs_url="/docs",
    redoc_url="/redoc",
    title="finview API",
    description="""
    The finview API serves the transaction dashboard and the file import screen of a personal finance tracker.

    **Endpoints:**
    - `GET /dashboard`: Load transactions and balance from the finance backend.
    - `POST /dashboard/sort/{{key}}`: Reorder the table by `title`, `value`, `category` or `date`.
    - `GET /import`: List the files staged for import.
    - `POST /import/files`: Stage files for import.
    - `DELETE /import/files`: Clear the staged files.
    - `POST /import/submit`: Import every staged file, all or nothing.
    - `GET /health`: Health check endpoint.
    - `GET /scalar`: Interactive Scalar OpenAPI documentation.
    """,
    version="1.0.0",
)
app.include_router(router)


@app.get("/scalar", include_in_schema=False)
async def scalar_docs() -> JSONResponse:
    """Return Scalar API reference."""
    return get_scalar_api_reference(openapi_url=app.openapi_url, title=app.title)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.server_host, port=settings.server_port, reload=True)

"""
FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.routes import health, verify, hashing
from api.errors import APIError, api_error_handler, generic_error_handler


# Configure logging - respects CELLGUARD_LOG_LEVEL env var
logging.basicConfig(
    level=getattr(logging, os.getenv("CELLGUARD_LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Cellguard API",
        description="""
HTTP API for the secp256k1 signature lock.

## Endpoints

- **POST /verify** - Check a witness signature against a public key fingerprint
- **POST /hash** - Digest bytes with the lock hasher
- **POST /fingerprint** - Fingerprint of a public key
- **GET /health** - Health check

All byte values are exchanged as hex strings. A rejected signature is
not an HTTP error: `/verify` answers 200 with `ok=false` and the
rejection code.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    app.include_router(health.router)
    app.include_router(verify.router)
    app.include_router(hashing.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

"""
FastAPI Application
===================
Main entry point for the blog writer API.

Run with:
    uvicorn blog_writer.web.main:app --reload
    blog-writer-server
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_writer import __version__
from blog_writer.common.config import Settings, settings
from blog_writer.common.logging import setup_logging
from blog_writer.web.routers import generate, health

logger = setup_logging(module_name="web")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app with CORS and the API routers."""
    app_settings = app_settings or settings
    debug = app_settings.server.debug

    app = FastAPI(
        title="Side Hustle Blog Writer API",
        description="Streams LLM-written blog posts from templated prompts",
        version=__version__,
        docs_url="/docs" if debug else None,
        redoc_url="/redoc" if debug else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(generate.router, prefix="/api", tags=["Generate"])
    return app


app = create_app()


def main() -> None:
    """Run the API under uvicorn using host/port from settings."""
    import uvicorn

    logger.info(
        "Starting blog writer API on %s:%d (provider: %s)",
        settings.server.host,
        settings.server.port,
        settings.llm.provider,
    )
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)


# For running directly: python -m blog_writer.web.main
if __name__ == "__main__":
    main()

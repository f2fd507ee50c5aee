from fastapi import FastAPI

from pokedex_lite.entrypoints.http.exception_handlers import register_exception_handlers
from pokedex_lite.entrypoints.http.routes.health import router as health_router
from pokedex_lite.entrypoints.http.routes.roster import router as roster_router
from pokedex_lite.entrypoints.http.routes.species import router as species_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Pokedex Lite API",
        description="""
        Species catalog browsing and per-trainer team rosters.

        ## Features
        - Search the species catalog by generation, type and name
        - Get species details
        - Capture, update and release roster entries (6 per team, one of each species)

        ## Authentication
        Caller identity is supplied by the upstream auth layer in the `X-User-Id` header.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(species_router, prefix="/v1")
    app.include_router(roster_router, prefix="/v1")

    return app


app = build_app()

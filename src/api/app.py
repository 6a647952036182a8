from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from src.adapter.seed import seed_sandbox
        from src.depends import AsyncSessionLocal, engine

        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        if ApplicationConfig.SEED_ON_STARTUP:
            async with AsyncSessionLocal() as session:
                await seed_sandbox(session)

        yield
        await engine.dispose()

    app = FastAPI(title="Group Membership Decision API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import group, health_check, membership, sandbox, user

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(user.router, tags=["User"])
    app.include_router(group.router, tags=["Group"])
    app.include_router(membership.router, tags=["Membership"])
    app.include_router(sandbox.router, tags=["Sandbox"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gradebook.api.v1.router import api_router
from gradebook.core.config import settings
from gradebook.core.database import init_db
from gradebook.core.handlers import register_exception_handlers
from gradebook.core.logging import logger
from gradebook.seed import run_seed


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if settings.SEED_ON_STARTUP:
        run_seed()
    logger.info(f"{settings.PROJECT_NAME} {settings.APP_VERSION} started")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """
    Health check endpoint
    """
    return {
        "message": "Welcome to the Gradebook API",
        "docs": "/docs",
        "version": settings.APP_VERSION
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("gradebook.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)

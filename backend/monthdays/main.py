from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .logger import setup_logging
from .months import router as months_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger = setup_logging()
    logger.info("%s starting", settings.app_name)
    yield
    logger.info("%s stopped", settings.app_name)


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.include_router(months_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}

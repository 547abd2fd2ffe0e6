import asyncio
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import menu_router, orders_router
from config import settings
from errors import register_exception_handlers
from repositories.menu_repository import MenuRepository
from schemas import HealthResponse
from supabase_client import get_supabase

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("good-hamburger")

app = FastAPI(title="Good Hamburger API")

if settings.allowed_origins == ["*"]:
    allow_origins = ["*"]
else:
    allow_origins = settings.allowed_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(menu_router)
app.include_router(orders_router)


@app.on_event("startup")
async def _on_startup() -> None:
    try:
        await asyncio.to_thread(MenuRepository(get_supabase()).ping)
    except Exception as exc:
        logger.error("Unable to connect to the database: %s", exc)
        raise
    logger.info("Database connection established successfully.")
    logger.info("Environment: %s", settings.environment)
    if allow_origins == ["*"]:
        logger.warning(
            "CORS is set to allow all origins with credentials; set ALLOWED_ORIGINS to explicit values outside local dev."
        )


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="OK", message="Good Hamburger API is running")


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)

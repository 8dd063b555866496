import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from car_rental.api.dependencies import in_memory_bundle
from car_rental.api.errors import register_exception_handlers
from car_rental.api.routers.bookings import router as bookings_router
from car_rental.api.routers.cars import router as cars_router
from car_rental.api.routers.health import router as health_router
from car_rental.api.routers.users import router as users_router
from car_rental.config import get_settings
from car_rental.infrastructure.db.engine import create_tables, engine
from car_rental.infrastructure.seed import seed_demo_data

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.use_in_memory:
        bundle = in_memory_bundle()
        if settings.seed_demo_data and not await bundle["car_repo"].list_all():
            await seed_demo_data(bundle["car_repo"], bundle["user_repo"], bundle["id_generator"])
    else:
        await create_tables()
    logger.info(
        "Car rental API started",
        extra={
            "in_memory": settings.use_in_memory,
            "availability_mode": settings.availability_mode.value,
        },
    )
    yield
    await engine.dispose()

app = FastAPI(
    title="Car Rental API",
    version="0.1.0",
    lifespan=lifespan
)

register_exception_handlers(app)

app.include_router(health_router, tags=["Health"])
app.include_router(cars_router, prefix="/api", tags=["Cars"])
app.include_router(bookings_router, prefix="/api", tags=["Bookings"])
app.include_router(users_router, prefix="/api", tags=["Users"])

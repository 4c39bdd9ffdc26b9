import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from app.api.exceptions import register_exception_handlers
from app.api.routes import api_router
from app.config import settings
from app.database import Base, engine, get_db
from app.seed import run_seed

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

DB_INIT_ATTEMPTS = 30


async def _init_db():
    """Retry DB connection and create tables."""
    for attempt in range(DB_INIT_ATTEMPTS):
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database initialized successfully")
            return
        except Exception as e:
            if attempt + 1 == DB_INIT_ATTEMPTS:
                logger.error("Database initialization failed after %d attempts", DB_INIT_ATTEMPTS)
                raise
            wait = min(2**attempt, 30)
            logger.warning(
                "DB init failed (attempt %d/%d), retrying in %ds: %s",
                attempt + 1, DB_INIT_ATTEMPTS, wait, e,
            )
            await asyncio.sleep(wait)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await _init_db()
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="ATM deposits and withdrawals with per-type fees, and per-account transaction history.",
    lifespan=lifespan,
)
app.include_router(api_router, prefix="/api/v1")
register_exception_handlers(app)


@app.post("/seed", summary="Seed database")
async def seed_db(db=Depends(get_db)):
    """Create the demo accounts. Idempotent."""
    msg = await run_seed(db)
    return {"status": "ok", "message": msg}


@app.get("/health")
def health():
    return {"status": "ok"}

from fastapi import FastAPI
from cpu_listings.db import Base, engine
import cpu_listings.models  # noqa: F401 ensure models are imported so tables are known
from cpu_listings.api.routes import router as api_router
from cpu_listings.utils import logger

# create FastAPI instance
app = FastAPI()
app.include_router(api_router)


@app.on_event("startup")
def on_startup_create_tables():
    # Ensure database tables are created on startup
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        # migrations may own the schema; keep serving
        logger.exception("Table creation failed: %s", e)

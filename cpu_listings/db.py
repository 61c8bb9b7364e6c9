# cpu_listings/db.py
"""Engine and session wiring for the listing store.

The URL comes from POSTGRES_URL. Request handlers never touch the engine
directly; they receive a session through `get_db`, which tests override.
"""
import os
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

load_dotenv()

def database_url(raw):
    if not raw:
        raise RuntimeError("POSTGRES_URL not set")
    # SQLAlchemy 2.x rejects the bare 'postgres://' scheme
    if raw.startswith("postgres://"):
        return raw.replace("postgres://", "postgresql+psycopg2://", 1)
    return raw

def engine_options(url, env=os.environ):
    """Pool settings for `url`. SQLite pools take no size or overflow."""
    options = {"pool_pre_ping": True}
    if not url.startswith("sqlite"):
        options["pool_size"] = int(env.get("DB_POOL_SIZE", 5))
        options["max_overflow"] = int(env.get("DB_MAX_OVERFLOW", 10))
    return options

DATABASE_URL = database_url(os.getenv("POSTGRES_URL"))
engine = create_engine(DATABASE_URL, **engine_options(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """Yield one session per request and close it afterwards."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

import json
import argparse
from dotenv import load_dotenv
from pydantic import ValidationError

# Load environment variables from .env
load_dotenv()


def load_seed_file(path):
    """Read a JSON array of listings (prices in cents) and validate each entry."""
    with open(path, "r", encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a JSON array of listings")
    from cpu_listings.schemas import SeedListing

    return [SeedListing.model_validate(item) for item in raw]


def seed(db, items):
    from cpu_listings import crud

    created = 0
    for it in items:
        cpu_model = crud.get_or_create_cpu_model(db, it.name)
        supplier = crud.get_or_create_supplier(db, it.supplier)
        crud.create_listing(
            db,
            cpu_model_id=cpu_model.id,
            supplier_id=supplier.id,
            price=it.price,
            shipping_cost=it.shipping_cost,
            url=it.url,
        )
        created += 1
    return created


if __name__ == "__main__":
    p = argparse.ArgumentParser(description="Load CPU listings from a JSON file into the database.")
    p.add_argument("path", help="JSON file: [{name, supplier, price, shippingCost, url}]")
    args = p.parse_args()

    from cpu_listings.db import Base, SessionLocal, engine
    from cpu_listings.utils import logger

    try:
        items = load_seed_file(args.path)
    except (OSError, ValueError, ValidationError) as e:
        raise SystemExit(f"Failed to read {args.path}: {e}")

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        count = seed(db, items)
    finally:
        db.close()
    logger.info("Seeded %d listings from %s", count, args.path)

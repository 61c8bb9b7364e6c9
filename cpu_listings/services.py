# cpu_listings/services.py
from sqlalchemy.orm import Session
from typing import List
from . import crud, schemas

def convert_cents_to_euros(cents: int) -> float:
    return cents / 100

def convert_listing_prices(listings: List[schemas.ListingWithDetails]) -> List[schemas.ListingOut]:
    # not safe to apply twice; input must be cents
    return [
        schemas.ListingOut(
            id=listing.id,
            name=listing.name,
            price=convert_cents_to_euros(listing.price),
            shipping_cost=convert_cents_to_euros(listing.shipping_cost),
            supplier=listing.supplier,
            url=listing.url,
        )
        for listing in listings
    ]

def filter_by_budget(listings: List[schemas.ListingOut], budget: float) -> List[schemas.ListingOut]:
    """Keep listings priced at or below budget. Shipping is not counted."""
    return [listing for listing in listings if listing.price <= budget]

def load_listings(db: Session) -> List[schemas.ListingOut]:
    """Fetch joined listings ordered by price and convert them to euros."""
    return convert_listing_prices(crud.get_cpu_listings(db))

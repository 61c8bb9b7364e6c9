# cpu_listings/crud.py
"""Read query and insert helpers for CPU listings.

`get_cpu_listings` is the only query the request handlers run; the insert
helpers exist for seeding the store.
"""
from sqlalchemy import select
from sqlalchemy.orm import Session
from typing import List
from .models import CpuModel, Supplier, Listing
from .schemas import ListingWithDetails

def get_cpu_listings(db: Session) -> List[ListingWithDetails]:
    stmt = (
        select(
            Listing.id,
            CpuModel.name.label("name"),
            Listing.price,
            Listing.shipping_cost,
            Supplier.name.label("supplier"),
            Listing.url,
        )
        .join(CpuModel, Listing.cpu_model_id == CpuModel.id)
        .join(Supplier, Listing.supplier_id == Supplier.id)
        .order_by(Listing.price)
    )
    rows = db.execute(stmt).mappings().all()
    # raises pydantic.ValidationError on a malformed row
    return [ListingWithDetails.model_validate(dict(row)) for row in rows]

def get_or_create_cpu_model(db: Session, name: str) -> CpuModel:
    obj = db.query(CpuModel).filter(CpuModel.name == name).first()
    if obj:
        return obj
    obj = CpuModel(name=name)
    db.add(obj)
    db.flush()
    return obj

def get_or_create_supplier(db: Session, name: str) -> Supplier:
    obj = db.query(Supplier).filter(Supplier.name == name).first()
    if obj:
        return obj
    obj = Supplier(name=name)
    db.add(obj)
    db.flush()
    return obj

def create_listing(db: Session, cpu_model_id: int, supplier_id: int, price: int,
                   shipping_cost: int, url: str) -> Listing:
    obj = Listing(
        cpu_model_id=cpu_model_id,
        supplier_id=supplier_id,
        price=price,
        shipping_cost=shipping_cost,
        url=url,
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj

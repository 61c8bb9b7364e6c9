# cpu_listings/schemas.py
from pydantic import BaseModel, Field
from typing import List

class ListingWithDetails(BaseModel):
    """One joined listing row as stored, monetary fields in cents."""
    id: int
    name: str
    price: int = Field(..., ge=0)
    shipping_cost: int = Field(..., ge=0, alias="shippingCost")
    supplier: str
    url: str
    class Config:
        populate_by_name = True

class ListingOut(BaseModel):
    """A listing with monetary fields converted to euros."""
    id: int
    name: str
    price: float
    shipping_cost: float = Field(..., alias="shippingCost")
    supplier: str
    url: str
    class Config:
        populate_by_name = True

class ListingPage(BaseModel):
    all_listings: List[ListingOut] = Field(..., alias="allListings")
    listings: List[ListingOut]
    class Config:
        populate_by_name = True

class ActionSuccess(BaseModel):
    type: str = "success"
    status: int = 200
    data: str

class ActionFailure(BaseModel):
    error: str

class SeedListing(BaseModel):
    name: str
    supplier: str
    price: int = Field(..., ge=0)
    shipping_cost: int = Field(0, ge=0, alias="shippingCost")
    url: str
    class Config:
        populate_by_name = True

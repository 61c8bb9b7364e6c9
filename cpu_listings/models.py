# cpu_listings/models.py
"""SQLAlchemy ORM models for the CPU listing store.

Listings reference one CPU model and one supplier. Monetary columns hold
integer cents.
"""
from sqlalchemy import Column, Integer, Text, ForeignKey, Index
from .db import Base

class CpuModel(Base):
    __tablename__ = "cpu_models"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False, unique=True)

class Supplier(Base):
    __tablename__ = "suppliers"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False, unique=True)

class Listing(Base):
    __tablename__ = "listings"
    id = Column(Integer, primary_key=True, index=True)
    cpu_model_id = Column(Integer, ForeignKey("cpu_models.id"), nullable=False)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False)
    price = Column(Integer, nullable=False)
    shipping_cost = Column(Integer, nullable=False)
    url = Column(Text, nullable=False)

Index("idx_listings_price", Listing.price)

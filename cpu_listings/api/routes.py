# cpu_listings/api/routes.py
import json
from fastapi import APIRouter, Depends, Form, HTTPException, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session
from .. import schemas, services
from ..db import get_db
from ..utils import coerce_number, json_number, logger

router = APIRouter()

ACTION_ERROR_MESSAGE = "An error occurred while processing your request."

def _first_param(request: Request, name: str):
    # repeated keys resolve to the first occurrence
    values = request.query_params.getlist(name)
    return values[0] if values else None

def _listing_json(listing: schemas.ListingOut) -> dict:
    data = listing.model_dump(by_alias=True)
    data["price"] = json_number(data["price"])
    data["shippingCost"] = json_number(data["shippingCost"])
    return data

@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/cpu-listings", response_model=schemas.ListingPage)
def cpu_listings(request: Request, db: Session = Depends(get_db)):
    budget_value = coerce_number(_first_param(request, "budget"))
    show_all = _first_param(request, "enhanced") == "true"
    try:
        all_listings = services.load_listings(db)
        visible = all_listings if show_all else services.filter_by_budget(all_listings, budget_value)
    except ValidationError as e:
        logger.warning("Listing validation failed: %s", e)
        raise HTTPException(status_code=400, detail=f"Invalid data: {e}")
    except Exception as e:
        logger.exception("Fetching listings failed: %s", e)
        if str(e):
            raise HTTPException(status_code=500, detail=f"An error occurred while fetching listings: {e}")
        raise HTTPException(status_code=500, detail="An unknown error occurred while fetching listings")
    logger.info("Budget %s (enhanced=%s): %d of %d listings visible",
                budget_value, show_all, len(visible), len(all_listings))
    return schemas.ListingPage(all_listings=all_listings, listings=visible)

@router.post("/cpu-listings")
def cpu_listings_action(budget: str | None = Form(None), db: Session = Depends(get_db)):
    logger.info("Server action triggered")
    try:
        budget_value = coerce_number(budget)
        logger.info("Received budget: %s", budget_value)
        all_listings = services.load_listings(db)
        logger.info("Fetched %d listings", len(all_listings))
        visible = services.filter_by_budget(all_listings, budget_value)
        logger.info("Filtered listings: %d", len(visible))
        data = json.dumps({
            "budget": json_number(budget_value),
            "Listings": [_listing_json(l) for l in visible],
            "allListings": [_listing_json(l) for l in all_listings],
        }, separators=(",", ":"), ensure_ascii=False)
        return schemas.ActionSuccess(data=data)
    except Exception as e:
        logger.exception("Server-side error: %s", e)
        return schemas.ActionFailure(error=ACTION_ERROR_MESSAGE)

from fastapi import APIRouter, Depends, HTTPException

from ..errors import IdentifierCollisionError, ReceiptNotFoundError, ReceiptValidationError
from ..schemas import IdResponse, PointsResponse, ReceiptIn
from ..services.receipts import lookup_points, process_receipt
from ..store import ScoreStore, get_store
from ..utils.logging import logger


router = APIRouter(prefix="/receipts", tags=["receipts"])

# plain `def` handlers: FastAPI runs each request on its thread pool

@router.post("/process", response_model=IdResponse)
def submit_receipt(payload: ReceiptIn, store: ScoreStore = Depends(get_store)):
    try:
        receipt_id = process_receipt(payload, store)
    except ReceiptValidationError as e:
        logger.info("The receipt is invalid: %s", e)
        raise HTTPException(status_code=400, detail=f"The receipt is invalid. {e}")
    except IdentifierCollisionError:
        logger.exception("Could not store receipt")
        raise HTTPException(status_code=500, detail="Could not store the receipt, please retry.")
    return IdResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse)
@router.get("/{receipt_id}/process", response_model=PointsResponse, include_in_schema=False)
def get_points(receipt_id: str, store: ScoreStore = Depends(get_store)):
    try:
        points = lookup_points(receipt_id, store)
    except ReceiptNotFoundError:
        logger.info("No receipt found for id %s", receipt_id)
        raise HTTPException(status_code=404, detail="No receipt found for that ID.")
    return PointsResponse(points=points)

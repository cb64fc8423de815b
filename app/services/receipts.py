# app/services/receipts.py
from app.receipts.validator import validate_receipt
from app.schemas import ReceiptIn
from app.services.scoring import score_receipt
from app.store import ScoreStore
from app.utils.logging import logger

def process_receipt(receipt_in: ReceiptIn, store: ScoreStore) -> str:
    """Validate, score and store a receipt; returns the new receipt id.

    ReceiptValidationError propagates before anything is stored.
    """
    receipt = validate_receipt(receipt_in)
    breakdown = score_receipt(receipt)
    logger.debug("Receipt from %r scored %s", receipt.retailer, breakdown.as_dict())

    receipt_id = store.put(breakdown.points)
    logger.info("Stored receipt %s (%s points)", receipt_id, breakdown.points)
    return receipt_id

def lookup_points(receipt_id: str, store: ScoreStore) -> int:
    return store.get(receipt_id)

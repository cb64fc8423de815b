# app/utils/ids.py
import uuid

def generate_receipt_id() -> str:
    # opaque to the store; UUID4 strings are just the convention
    return str(uuid.uuid4())

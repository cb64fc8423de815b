
from pydantic import BaseModel, ConfigDict, Field, StrictStr
from typing import List

# Wire shapes only: decoding checks presence and types, the format
# rules live in app.receipts.validator
class ItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    short_description: StrictStr = Field(alias="shortDescription")
    price: StrictStr

class ReceiptIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    retailer: StrictStr
    purchase_date: StrictStr = Field(alias="purchaseDate")
    purchase_time: StrictStr = Field(alias="purchaseTime")
    total: StrictStr
    items: List[ItemIn]

class IdResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int

from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, Optional

MAX_ID = 2**63 - 1 # signed 64-bit INTEGER column

RowId = Annotated[int, Field(ge=1, le=MAX_ID)]

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class AccountRequest(CamelModel):
    name: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be blank")
        return v

class CategoryRequest(AccountRequest):
    type: str = Field(min_length=1)
    archived: Optional[bool] = None

class MerchantRequest(AccountRequest):
    note: Optional[str] = None
    category: Optional[str] = None # older clients send the tag as "category"

class TransactionRequest(CamelModel):
    description: str = Field(min_length=1)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    type: str = Field(min_length=1)
    date: str = Field(min_length=1)
    category_id: Optional[RowId] = None
    merchant_id: Optional[RowId] = None
    account_id: Optional[RowId] = None
    account: Optional[str] = None

    @field_validator("category_id", "merchant_id", "account_id", "account", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        # forms post "" for an empty select
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v

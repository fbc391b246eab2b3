from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any

def parse_cents(value: Any) -> Any:
    """Truncate numeric strings and floats to whole cents; leave anything else for pydantic to reject."""
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value.strip()))
        except ValueError:
            return value
    return value

class EstimateResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    total_cost_in_usd_cents: int
    slug: str

    @field_validator("total_cost_in_usd_cents", mode="before")
    @classmethod
    def _cents(cls, value: Any) -> Any:
        return parse_cents(value)

class PurchaseResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    total_cost_in_usd_cents: int

    @field_validator("total_cost_in_usd_cents", mode="before")
    @classmethod
    def _cents(cls, value: Any) -> Any:
        return parse_cents(value)

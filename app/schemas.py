"""
Pydantic Schemas for Request/Response Validation

Request payloads are validated here before an Order is ever built:
size and crust must come from the enumerated sets, contact fields
must be non-empty, toppings must be a list of strings.

Version: 1.0.0
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models import CrustType, OrderStatus, PizzaSize


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class OrderCreate(BaseModel):
    """Request schema for creating a new order."""

    size: PizzaSize = Field(..., examples=["medium"])
    toppings: List[str] = Field(default_factory=list, examples=[["pepperoni", "mushrooms"]])
    crust: CrustType = Field(..., examples=["thin"])

    # Customer Info
    customer_name: str = Field(..., min_length=1, examples=["John Doe"])
    delivery_address: str = Field(..., min_length=1, examples=["123 Main St"])
    phone: str = Field(..., min_length=1, examples=["555-0123"])

    @field_validator("customer_name", "delivery_address", "phone")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("must not be blank")
        return cleaned


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class OrderResponse(BaseModel):
    """Response schema for a single order."""
    id: str
    size: PizzaSize
    toppings: List[str]
    crust: CrustType
    customer_name: str
    delivery_address: str
    phone: str
    status: OrderStatus
    created_at: datetime
    estimated_delivery: str

    model_config = ConfigDict(from_attributes=True)


class SizeOptionResponse(BaseModel):
    """Price in cents and slice count for one size."""
    price: int
    slices: int


class MenuResponse(BaseModel):
    """Static menu."""
    sizes: Dict[str, SizeOptionResponse]
    toppings: List[str]
    crusts: List[str]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: str
    detail: Optional[str] = None
    fields: List[str] = Field(default_factory=list)

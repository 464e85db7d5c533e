"""Pydantic schemas used across the HTTP layer."""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignUpRequest(BaseModel):
    email: EmailStr
    full_names: str = Field(..., min_length=1, max_length=100)
    phone_no: Optional[str] = Field(default=None, max_length=20)
    location: Optional[str] = None
    password: str = Field(..., min_length=6)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    account_id: str
    role: str


class AccountResponse(BaseModel):
    id: str
    email: str
    full_names: str
    phone_no: Optional[str] = None
    location: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    price: int = Field(..., gt=0, description="Price in the smallest currency unit")
    description: Optional[str] = None
    category_id: Optional[str] = None
    location: Optional[str] = None


class ProductResponse(BaseModel):
    id: str
    owner_id: str
    title: str
    price: int
    description: Optional[str] = None
    category_id: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentRequest(BaseModel):
    """Purchase body. Only the payer number is read; any amount is ignored."""

    number: str = Field(..., min_length=10, max_length=15, pattern=r"^\+?\d+$")


class WithdrawRequest(BaseModel):
    number: str = Field(..., min_length=10, max_length=15, pattern=r"^\+?\d+$")
    amount: int = Field(..., gt=0)


class ProductSnapshot(BaseModel):
    id: str
    price: int
    owner_id: str


class PaymentResponse(BaseModel):
    status: str
    data: Any = None
    product: ProductSnapshot


class ProviderDataResponse(BaseModel):
    status: str
    data: Any = None


class MessageCreate(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000)
    product_id: str = Field(..., min_length=1, max_length=36)


class MessageResponse(BaseModel):
    id: str
    message: str
    product_id: str
    status: str
    date_created: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MessageSentResponse(BaseModel):
    status: str
    message: MessageResponse

from typing import Optional, List
from uuid import UUID
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, HttpUrl


class ProductFeatureIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=255)


class ProductImageIn(BaseModel):
    url: HttpUrl
    description: str = Field(..., min_length=1, max_length=255)


class ProductFeatureOut(BaseModel):
    name: str
    description: str

    model_config = ConfigDict(from_attributes=True)


class ProductImageOut(BaseModel):
    url: str
    description: str

    model_config = ConfigDict(from_attributes=True)


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    price: int = Field(..., gt=0, description="Precio en la unidad mínima de la moneda")
    available_quantity: int = Field(..., ge=1)
    description: str = Field(..., min_length=1, max_length=1000)
    category: str = Field(..., min_length=1, max_length=100)


class ProductCreate(ProductBase):
    user_id: UUID
    features: List[ProductFeatureIn] = Field(..., min_length=3)
    images: List[ProductImageIn] = Field(..., min_length=1)


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    price: Optional[int] = Field(None, gt=0)
    available_quantity: Optional[int] = Field(None, ge=0)
    description: Optional[str] = Field(None, min_length=1, max_length=1000)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    features: Optional[List[ProductFeatureIn]] = Field(None, min_length=3)
    images: Optional[List[ProductImageIn]] = Field(None, min_length=1)


class ProductResponse(ProductBase):
    id: UUID
    user_id: UUID
    available_quantity: int
    features: List[ProductFeatureOut]
    images: List[ProductImageOut]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductSummary(BaseModel):
    id: UUID
    name: str
    features: List[ProductFeatureOut]
    images: List[ProductImageOut]

    model_config = ConfigDict(from_attributes=True)


class ProductMessage(BaseModel):
    message: str
    product: ProductResponse

"""
Voice API Pydantic Models

Request/Response models for the voice endpoints.
Used for:
- Input validation
- Response serialization
- API documentation (OpenAPI/Swagger)
"""

from pydantic import BaseModel, Field
from typing import Optional, List


# =============================================================================
# Requests
# =============================================================================

class TranscriptRequest(BaseModel):
    """Raw speech-to-text output from the browser"""
    transcript: str = Field(..., description="Transcript in any supported script")

    class Config:
        json_schema_extra = {
            "example": {"transcript": "2 kilo aloo"}
        }


class MarketplaceProduct(BaseModel):
    """Supplier catalogue entry"""
    id: str = Field(..., description="Product identifier")
    product_name: str = Field(..., description="English product name")
    product_name_hi: Optional[str] = Field(default=None, description="Hindi product name")
    product_name_bn: Optional[str] = Field(default=None, description="Bengali product name")
    category: str = Field(default="vegetables")
    unit: str = Field(default="kg")
    price_per_unit: float = Field(..., ge=0, description="Price in INR per unit")
    online_store_url: Optional[str] = Field(default=None)
    supplier_name: Optional[str] = Field(default=None)


class MatchProductRequest(BaseModel):
    query: str = Field(..., description="Product name as spoken")
    products: List[MarketplaceProduct] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "query": "aloo",
                "products": [
                    {
                        "id": "PROD-001",
                        "product_name": "Fresh Potato",
                        "product_name_hi": "आलू",
                        "category": "vegetables",
                        "unit": "kg",
                        "price_per_unit": 30.0,
                        "online_store_url": "https://www.bigbasket.com/pd/10000181/fresho-potato-500-g/",
                        "supplier_name": "BigBasket Fresh"
                    }
                ]
            }
        }


# =============================================================================
# Responses
# =============================================================================

class LanguageResponse(BaseModel):
    language: str
    speech_locale: str


class ItemResponse(BaseModel):
    item: Optional[str] = None


class ParsedOrderModel(BaseModel):
    quantity: float
    unit: str
    product: str


class ParseOrderResponse(BaseModel):
    order: Optional[ParsedOrderModel] = None


class VoiceOrderProductModel(BaseModel):
    name: str
    platform: str
    translated_name: Optional[str] = None


class VoiceOrderResponse(BaseModel):
    success: bool
    message: str
    language: str
    redirect_url: Optional[str] = None
    product: Optional[VoiceOrderProductModel] = None
    order: Optional[ParsedOrderModel] = None


class PriceInquiryResponse(BaseModel):
    language: str
    item: Optional[str] = None
    message: str
    speech_locale: str


class ConfirmationResponse(BaseModel):
    message: str


class PlatformModel(BaseModel):
    name: str
    search_url_template: str
    priority: float


class MatchProductResponse(BaseModel):
    product: Optional[MarketplaceProduct] = None

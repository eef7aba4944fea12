"""
Voice API endpoints
- Language detection and item extraction for price inquiries
- Voice order parsing and platform redirect
- Localized confirmations and marketplace matching

Handlers are thin adapters over the voice services; all interpretation logic
lives in bhashabazaar.nlp and bhashabazaar.services.
"""

from fastapi import APIRouter, Query
from typing import List, Optional
import logging

from bhashabazaar.core.config import settings
from bhashabazaar.core.exceptions import raise_not_found, raise_validation_error
from bhashabazaar.core.logging_config import transcript_preview
from bhashabazaar.models.voice import (
    ConfirmationResponse,
    ItemResponse,
    LanguageResponse,
    MatchProductRequest,
    MatchProductResponse,
    ParsedOrderModel,
    ParseOrderResponse,
    PlatformModel,
    PriceInquiryResponse,
    TranscriptRequest,
    VoiceOrderResponse,
)
from bhashabazaar.nlp.item_extractor import extract_item
from bhashabazaar.nlp.language_detector import detect_language
from bhashabazaar.nlp.order_parser import parse_order
from bhashabazaar.nlp.voice_patterns import SUPPORTED_LANGUAGES
from bhashabazaar.services.product_matcher import find_best_product_match
from bhashabazaar.services.voice_messages import get_speech_locale, get_voice_confirmation_message
from bhashabazaar.services.voice_shopping_service import get_voice_shopping_service

router = APIRouter(prefix="/voice", tags=["voice"])
logger = logging.getLogger(__name__)


def _validated_transcript(transcript: str, field: str = "transcript") -> str:
    """Reject blank or oversized transcripts before they reach the parsers"""
    if not transcript or not transcript.strip():
        raise_validation_error(field, "must not be blank", transcript)
    if len(transcript) > settings.MAX_TRANSCRIPT_LENGTH:
        raise_validation_error(
            field,
            f"must be at most {settings.MAX_TRANSCRIPT_LENGTH} characters",
            len(transcript)
        )
    return transcript


# ==================== PRICE INQUIRY ====================

@router.post("/detect-language", response_model=LanguageResponse)
async def detect_transcript_language(request: TranscriptRequest):
    """Detect the language of a transcript (hi, en, bn, mr, ta, te)"""
    transcript = _validated_transcript(request.transcript)
    language = detect_language(transcript)
    return LanguageResponse(language=language, speech_locale=get_speech_locale(language))


@router.post("/extract-item", response_model=ItemResponse)
async def extract_transcript_item(request: TranscriptRequest):
    """Canonical English commodity named in the transcript, or null"""
    transcript = _validated_transcript(request.transcript)
    return ItemResponse(item=extract_item(transcript))


@router.post("/price-inquiry", response_model=PriceInquiryResponse)
async def price_inquiry(request: TranscriptRequest):
    """
    Interpret a spoken price question.

    **Example**:
    ```
    POST /api/v1/voice/price-inquiry {"transcript": "pyaj ka rate kya hai"}
    ```

    **Response**:
    ```json
    {
      "language": "hi",
      "item": "Onion",
      "message": "Onion की कीमतों की तुलना शुरू कर रहे हैं। पूरा ऐप हिंदी में बदल गया।",
      "speech_locale": "hi-IN"
    }
    ```
    """
    transcript = _validated_transcript(request.transcript)
    result = get_voice_shopping_service().interpret_price_inquiry(transcript)
    return PriceInquiryResponse(**result.to_dict())


@router.get("/confirmation", response_model=ConfirmationResponse)
async def voice_confirmation(
    language: Optional[str] = Query(None, description="Language tag (hi, en, bn, mr, ta, te); defaults to DEFAULT_LANGUAGE"),
    item: Optional[str] = Query(None, description="Canonical item name")
):
    """Localized confirmation message for the price comparison flow"""
    language = language or settings.DEFAULT_LANGUAGE
    if language not in SUPPORTED_LANGUAGES:
        raise_validation_error("language", f"must be one of {', '.join(SUPPORTED_LANGUAGES)}", language)
    return ConfirmationResponse(message=get_voice_confirmation_message(language, item))


# ==================== VOICE ORDERS ====================

@router.post("/parse-order", response_model=ParseOrderResponse)
async def parse_voice_order(request: TranscriptRequest):
    """Quantity, unit and product of a spoken order, or null"""
    transcript = _validated_transcript(request.transcript)
    order = parse_order(transcript)
    if order is None:
        return ParseOrderResponse(order=None)
    return ParseOrderResponse(order=ParsedOrderModel(**order.to_dict()))


@router.post("/order", response_model=VoiceOrderResponse)
async def voice_order(request: TranscriptRequest):
    """
    Turn a spoken order into a search redirect on a quick-commerce platform.

    **Example**:
    ```
    POST /api/v1/voice/order {"transcript": "2 kilo aloo"}
    ```

    **Response**:
    ```json
    {
      "success": true,
      "message": "Blinkit पर potato खोज रहे हैं...",
      "language": "hi",
      "redirect_url": "https://blinkit.com/s/?q=potato",
      "product": {"name": "aloo", "platform": "Blinkit", "translated_name": "potato"},
      "order": {"quantity": 2.0, "unit": "kg", "product": "aloo"}
    }
    ```
    """
    transcript = _validated_transcript(request.transcript)
    result = get_voice_shopping_service().process_voice_order(transcript)
    return VoiceOrderResponse(**result.to_dict())


@router.get("/platforms", response_model=List[PlatformModel])
async def list_platforms():
    """Configured e-commerce platforms and their selection weights"""
    return [
        PlatformModel(
            name=platform.name,
            search_url_template=platform.search_url_template,
            priority=platform.priority,
        )
        for platform in get_voice_shopping_service().platforms
    ]


@router.get("/platforms/{name}", response_model=PlatformModel)
async def get_platform(name: str):
    """Single platform by name (case-insensitive)"""
    for platform in get_voice_shopping_service().platforms:
        if platform.name.lower() == name.lower():
            return PlatformModel(
                name=platform.name,
                search_url_template=platform.search_url_template,
                priority=platform.priority,
            )
    raise_not_found("Platform", name)


@router.post("/match-product", response_model=MatchProductResponse)
async def match_product(request: MatchProductRequest):
    """Best catalogue match for a spoken product name, or null"""
    query = _validated_transcript(request.query, field="query")
    product = find_best_product_match(query, request.products)
    logger.info(f"Marketplace match for {transcript_preview(query)}: {product.id if product else None}")
    return MatchProductResponse(product=product)

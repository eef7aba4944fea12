"""
Voice Shopping Service
Turns a spoken order into a search redirect on a quick-commerce platform,
and a spoken price inquiry into a language + item pair.

Pipeline for orders:
    transcript -> language tag (reported via callback)
               -> ParsedOrder
               -> English search term
               -> weighted-random platform
               -> redirect URL

No network I/O happens here; the caller opens the URL.
"""

import math
import random
import logging
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Optional, Sequence
from urllib.parse import quote

from bhashabazaar.core.exceptions import ConfigurationError
from bhashabazaar.core.logging_config import transcript_preview
from bhashabazaar.nlp.item_extractor import extract_item
from bhashabazaar.nlp.language_detector import detect_language
from bhashabazaar.nlp.order_parser import ParsedOrder, parse_order
from bhashabazaar.nlp.voice_patterns import PLATFORMS, PRODUCT_TRANSLATIONS, Platform
from bhashabazaar.services.voice_messages import (
    get_order_error_message,
    get_order_failure_message,
    get_order_success_message,
    get_speech_locale,
    get_voice_confirmation_message,
)

logger = logging.getLogger(__name__)

LanguageCallback = Callable[[str], None]


@dataclass
class VoiceOrderProduct:
    name: str
    platform: str
    translated_name: Optional[str] = None


@dataclass
class VoiceOrderResult:
    """Outcome of one voice order, produced once per invocation"""
    success: bool
    message: str
    language: str
    redirect_url: Optional[str] = None
    product: Optional[VoiceOrderProduct] = None
    order: Optional[ParsedOrder] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PriceInquiryResult:
    language: str
    item: Optional[str]
    message: str
    speech_locale: str = "hi-IN"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def validate_platforms(platforms: Sequence[Platform]) -> None:
    """Platform weights must each be in (0, 1] and sum to 1.0"""
    if not platforms:
        raise ConfigurationError("No e-commerce platforms configured")

    for platform in platforms:
        if not 0 < platform.priority <= 1:
            raise ConfigurationError(
                f"Platform '{platform.name}' has invalid priority {platform.priority}",
                details={"platform": platform.name, "priority": platform.priority}
            )

    total = sum(platform.priority for platform in platforms)
    if not math.isclose(total, 1.0, abs_tol=1e-9):
        raise ConfigurationError(
            f"Platform priorities must sum to 1.0, got {total}",
            details={"total": total}
        )


class VoiceShoppingService:
    """Translator, platform selector and order composition"""

    def __init__(self, platforms: Sequence[Platform] = PLATFORMS, rng: Optional[random.Random] = None):
        validate_platforms(platforms)
        self.platforms = tuple(platforms)
        # Module-level random unless a seeded generator is supplied
        self.rng = rng or random

    # =========================================================================
    # Translation
    # =========================================================================

    def translate_product(self, name: str) -> str:
        """
        Map a spoken product name to an English search term.

        Exact (lower-cased) lookup first, then substring containment either
        way across the table in order. Unknown names are assumed to already
        be English and are returned unchanged.
        """
        key = (name or "").lower().strip()
        if not key:
            return name

        if key in PRODUCT_TRANSLATIONS:
            return PRODUCT_TRANSLATIONS[key]

        for surface_form, english in PRODUCT_TRANSLATIONS.items():
            if surface_form in key or key in surface_form:
                logger.debug(f"Partial translation match: {name!r} ~ {surface_form!r} -> {english}")
                return english

        return name

    # =========================================================================
    # Platform selection
    # =========================================================================

    def select_platform(self) -> Platform:
        """Weighted random choice, independent across calls"""
        draw = self.rng.random()
        cumulative = 0.0
        for platform in self.platforms:
            cumulative += platform.priority
            if draw <= cumulative:
                return platform
        # Float rounding can leave the cumulative sum a hair under 1.0
        return self.platforms[-1]

    @staticmethod
    def build_redirect_url(platform: Platform, search_term: str) -> str:
        return platform.search_url_template + quote(search_term, safe="")

    # =========================================================================
    # Composition
    # =========================================================================

    def process_voice_order(
        self,
        transcript: str,
        on_language_detected: Optional[LanguageCallback] = None
    ) -> VoiceOrderResult:
        """
        Interpret a spoken order and build the platform search redirect.

        Args:
            transcript: Raw speech-to-text output
            on_language_detected: Called with the detected language tag so the
                UI can switch language

        Returns:
            VoiceOrderResult; failures carry a localized message, never raise
        """
        logger.info(f"Processing voice order: {transcript_preview(transcript)}")
        language = detect_language(transcript)

        try:
            if on_language_detected is not None:
                on_language_detected(language)

            order = parse_order(transcript)
            if order is None:
                logger.warning(f"Could not parse voice order: {transcript_preview(transcript)}")
                return VoiceOrderResult(
                    success=False,
                    message=get_order_failure_message(language),
                    language=language,
                )

            translated = self.translate_product(order.product)
            platform = self.select_platform()
            redirect_url = self.build_redirect_url(platform, translated)

            logger.info(
                f"Voice order resolved: {order.quantity} {order.unit} {order.product!r} "
                f"-> {translated!r} on {platform.name}"
            )

            return VoiceOrderResult(
                success=True,
                message=get_order_success_message(language, translated, platform.name),
                language=language,
                redirect_url=redirect_url,
                product=VoiceOrderProduct(
                    name=order.product,
                    platform=platform.name,
                    translated_name=translated if translated != order.product else None,
                ),
                order=order,
            )

        except Exception:
            logger.exception("Error processing voice order")
            return VoiceOrderResult(
                success=False,
                message=get_order_error_message(language),
                language=language,
            )

    def interpret_price_inquiry(self, transcript: str) -> PriceInquiryResult:
        """Detect language and commodity of a spoken price question"""
        language = detect_language(transcript)
        item = extract_item(transcript)
        logger.info(f"Price inquiry: language={language}, item={item}")

        return PriceInquiryResult(
            language=language,
            item=item,
            message=get_voice_confirmation_message(language, item),
            speech_locale=get_speech_locale(language),
        )


# Singleton instance
_voice_shopping_service = None


def get_voice_shopping_service() -> VoiceShoppingService:
    """Get or create singleton instance of VoiceShoppingService"""
    global _voice_shopping_service
    if _voice_shopping_service is None:
        _voice_shopping_service = VoiceShoppingService()
    return _voice_shopping_service


def translate_product(name: str) -> str:
    return get_voice_shopping_service().translate_product(name)


def select_platform() -> Platform:
    return get_voice_shopping_service().select_platform()


def process_voice_order(
    transcript: str,
    on_language_detected: Optional[LanguageCallback] = None
) -> VoiceOrderResult:
    return get_voice_shopping_service().process_voice_order(transcript, on_language_detected)

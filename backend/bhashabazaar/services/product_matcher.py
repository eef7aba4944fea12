"""
Marketplace product matching for voice orders

Scores a spoken product name against a supplier catalogue (English, Hindi and
Bengali product names plus a small synonym table) and returns the closest
product above a confidence floor.
"""

import re
import logging
from typing import Dict, List, Optional, Sequence

from bhashabazaar.core.logging_config import transcript_preview
from bhashabazaar.models.voice import MarketplaceProduct

logger = logging.getLogger(__name__)

MIN_MATCH_SCORE = 0.4
SYNONYM_MATCH_THRESHOLD = 0.7
KEY_TERM_MATCH_THRESHOLD = 0.5

# Key English term -> spoken variants
PRODUCT_SYNONYMS: Dict[str, List[str]] = {
    "potato": ["potato", "aloo", "आलू"],
    "onion": ["onion", "pyaz", "pyaaz", "प्याज"],
    "tomato": ["tomato", "tamatar", "टमाटर"],
    "ginger": ["ginger", "adrak", "अदरक"],
    "garlic": ["garlic", "lahsun", "लहसुन"],
    "capsicum": ["capsicum", "bell pepper", "shimla mirch", "शिमला मिर्च"],
    "turmeric": ["turmeric", "haldi", "हल्दी"],
    "chili": ["chili", "mirch", "मिर्च", "red chili"],
    "coriander": ["coriander", "dhania", "धनिया"],
    "oil": ["oil", "tel", "तेल"],
    "milk": ["milk", "doodh", "दूध"],
    "paneer": ["paneer", "cottage cheese", "पनीर"],
    "chicken": ["chicken", "murga", "मुर्गा"],
    "mutton": ["mutton", "bakra", "बकरा"],
}


def normalize_product_name(name: str) -> str:
    """Lower-case, drop punctuation, collapse whitespace"""
    normalized = re.sub(r"[^\w\s\u0900-\u0963\u0966-\u0DFF]", "", name.lower())
    return re.sub(r"\s+", " ", normalized).strip()


def calculate_similarity(first: str, second: str) -> float:
    """
    Similarity of two product names in [0, 1].

    1.0 for identical names, 0.8 when one contains the other, otherwise
    0.6 scaled by the share of words that overlap.
    """
    normalized_first = normalize_product_name(first)
    normalized_second = normalize_product_name(second)

    if not normalized_first or not normalized_second:
        return 0.0

    if normalized_first == normalized_second:
        return 1.0

    if normalized_first in normalized_second or normalized_second in normalized_first:
        return 0.8

    words_first = normalized_first.split(" ")
    words_second = normalized_second.split(" ")

    matched_words = 0
    for word_first in words_first:
        for word_second in words_second:
            if word_first == word_second or word_first in word_second or word_second in word_first:
                matched_words += 1
                break

    if matched_words > 0:
        return matched_words / max(len(words_first), len(words_second)) * 0.6

    return 0.0


def find_best_product_match(
    voice_product: str,
    products: Sequence[MarketplaceProduct]
) -> Optional[MarketplaceProduct]:
    """
    Find the catalogue product that best matches a spoken product name.

    Args:
        voice_product: Product as parsed from the voice order
        products: Candidate marketplace products

    Returns:
        Best matching product, or None if no score reaches MIN_MATCH_SCORE
    """
    best_match: Optional[MarketplaceProduct] = None
    best_score = 0.0

    for product in products:
        names_to_check = [
            name for name in (product.product_name, product.product_name_hi, product.product_name_bn)
            if name
        ]

        for product_name in names_to_check:
            score = calculate_similarity(voice_product, product_name)
            if score > best_score:
                best_score = score
                best_match = product

        for key_term, synonyms in PRODUCT_SYNONYMS.items():
            for synonym in synonyms:
                score = calculate_similarity(voice_product, synonym)
                if score <= SYNONYM_MATCH_THRESHOLD or score <= best_score:
                    continue
                if calculate_similarity(key_term, product.product_name) > KEY_TERM_MATCH_THRESHOLD:
                    best_score = score
                    best_match = product

    if best_score >= MIN_MATCH_SCORE:
        logger.debug(f"Best match for {transcript_preview(voice_product)}: {best_match.product_name} (score {best_score:.2f})")
        return best_match

    logger.debug(f"No good match for {transcript_preview(voice_product)}, best score {best_score:.2f}")
    return None

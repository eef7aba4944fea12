"""
Commodity extraction from price-inquiry transcripts.
Maps any spoken surface form (English, Devanagari, romanized Hindi) to a
canonical English item name such as "Potato" or "Bitter Gourd".
"""

import re
import logging
from typing import List, Mapping, Optional, Tuple

from .voice_patterns import ENGLISH_ITEM_SYNONYMS, REGIONAL_ITEM_SYNONYMS, WORD_END, WORD_START

logger = logging.getLogger(__name__)


class ItemExtractor:
    """Whole-word synonym lookup over ordered tables, first hit wins"""

    def __init__(self, tables: Tuple[Mapping[str, str], ...] = (ENGLISH_ITEM_SYNONYMS, REGIONAL_ITEM_SYNONYMS)):
        # One compiled pattern per surface form, kept in table order
        self.tables: List[List[Tuple[str, re.Pattern, str]]] = [
            [
                (term, re.compile(f"{WORD_START}{re.escape(term)}{WORD_END}", re.IGNORECASE), item)
                for term, item in table.items()
            ]
            for table in tables
        ]

    def extract(self, transcript: str) -> Optional[str]:
        """Return the canonical item named in the transcript, or None"""
        lowered = (transcript or "").lower()

        for table in self.tables:
            for term, pattern, item in table:
                if pattern.search(lowered):
                    logger.debug(f"Found item match: {term} -> {item}")
                    return item

        logger.debug("No item found in transcript")
        return None


# Global instance
item_extractor = ItemExtractor()


def extract_item(transcript: str) -> Optional[str]:
    return item_extractor.extract(transcript)

"""
Voice Order Parser
Extracts quantity, unit and product from spoken orders such as
"2 kilo aloo", "do kilo pyaz", "3 टमाटर किलो" or "5 tamatar".

Patterns are tried top to bottom against the lower-cased transcript and the
first one that yields a positive quantity and a non-empty product wins.
A product that is only a unit word ("2 kg") is not a product, so such
transcripts do not parse.
Transcripts with two numbers ("2 bags of 5 kg rice") bind to whatever the
first successful pattern captures; there is no further disambiguation.
"""

import re
import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence

from .voice_patterns import (
    DEFAULT_UNIT, ENGLISH_UNIT_WORDS, HINDI_UNIT_WORDS, NUMBER_WORDS,
    UNIT_NORMALIZATION, WORD_END, WORD_START,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedOrder:
    """Structured voice order"""
    quantity: float
    unit: str
    product: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class QuantityPattern:
    """Regex plus the capture groups holding quantity, unit and product"""
    name: str
    regex: re.Pattern
    quantity_group: int
    product_group: int
    unit_group: Optional[int] = None


def _alternation(words: Sequence[str]) -> str:
    return "|".join(re.escape(word) for word in sorted(words, key=len, reverse=True))


NUMBER = r"(\d+(?:\.\d+)?)"
NUMBER_WORD = f"{WORD_START}({_alternation(list(NUMBER_WORDS))}){WORD_END}"
ENGLISH_UNIT = f"({_alternation(ENGLISH_UNIT_WORDS)}){WORD_END}"
HINDI_UNIT = f"({_alternation(HINDI_UNIT_WORDS)}){WORD_END}"
ANY_UNIT = f"({_alternation(ENGLISH_UNIT_WORDS + HINDI_UNIT_WORDS)}){WORD_END}"


def _pattern(name: str, regex: str, quantity: int, product: int, unit: Optional[int] = None) -> QuantityPattern:
    return QuantityPattern(
        name=name,
        regex=re.compile(regex, re.IGNORECASE),
        quantity_group=quantity,
        product_group=product,
        unit_group=unit,
    )


# Priority order matters: see module docstring
QUANTITY_PATTERNS: List[QuantityPattern] = [
    # "2 kg tomato" / "2 tomato kg"
    _pattern("number_unit_product", rf"{NUMBER}\s*{ENGLISH_UNIT}\s+(.+)", quantity=1, unit=2, product=3),
    _pattern("number_product_unit", rf"{NUMBER}\s+(.+?)\s+{ENGLISH_UNIT}", quantity=1, product=2, unit=3),

    # "2 किलो आलू" / "2 आलू किलो"
    _pattern("number_hindi_unit_product", rf"{NUMBER}\s*{HINDI_UNIT}\s+(.+)", quantity=1, unit=2, product=3),
    _pattern("number_product_hindi_unit", rf"{NUMBER}\s+(.+?)\s+{HINDI_UNIT}", quantity=1, product=2, unit=3),

    # "do kilo pyaz" / "दो प्याज किलो"
    _pattern("word_unit_product", rf"{NUMBER_WORD}\s+{ANY_UNIT}\s+(.+)", quantity=1, unit=2, product=3),
    _pattern("word_product_unit", rf"{NUMBER_WORD}\s+(.+?)\s+{ANY_UNIT}", quantity=1, product=2, unit=3),

    # No unit spoken, assume kg
    _pattern("number_product", rf"{NUMBER}\s+(.+)", quantity=1, product=2),
    _pattern("word_product", rf"{NUMBER_WORD}\s+(.+)", quantity=1, product=2),
]


class OrderParser:
    """Ordered regex cascade for voice orders"""

    def __init__(self, patterns: Optional[List[QuantityPattern]] = None):
        self.patterns = patterns if patterns is not None else QUANTITY_PATTERNS

    @staticmethod
    def parse_quantity(token: str) -> float:
        """Numeral ("2", "1.5") or number word ("do", "पांच") to a number"""
        if token in NUMBER_WORDS:
            return float(NUMBER_WORDS[token])
        return float(token)

    @staticmethod
    def normalize_unit(token: Optional[str]) -> str:
        if not token:
            return DEFAULT_UNIT
        return UNIT_NORMALIZATION.get(token, token)

    def parse(self, transcript: str) -> Optional[ParsedOrder]:
        """
        Parse a spoken order.

        Args:
            transcript: Raw speech-to-text output

        Returns:
            ParsedOrder, or None when no pattern yields a usable order
        """
        text = (transcript or "").lower().strip()
        logger.debug(f"Parsing voice order: {text!r}")

        for pattern in self.patterns:
            match = pattern.regex.search(text)
            if not match:
                continue

            quantity = self.parse_quantity(match.group(pattern.quantity_group))
            unit_token = match.group(pattern.unit_group) if pattern.unit_group else None
            product = match.group(pattern.product_group).strip()

            if quantity > 0 and product and product not in UNIT_NORMALIZATION:
                order = ParsedOrder(quantity=quantity, unit=self.normalize_unit(unit_token), product=product)
                logger.debug(f"Pattern '{pattern.name}' parsed order: {order}")
                return order

        logger.debug("Could not parse voice order")
        return None


# Global instance
order_parser = OrderParser()


def parse_order(transcript: str) -> Optional[ParsedOrder]:
    return order_parser.parse(transcript)

"""
Transcript Language Detection
Heuristic classifier for speech transcripts in Hindi, English, Bengali,
Marathi, Tamil and Telugu.

Rules form an ordered cascade and the first rule that fires decides the
language. Later rules are fallbacks, so their order must not change.

Known limitation: Marathi markers are whole words, and "का" is also an
everyday Hindi postposition, so "मुझे चीनी का पैकेट चाहिए" is tagged Marathi.
"""

import re
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .voice_patterns import (
    DEFAULT_LANGUAGE, ENGLISH_PRICE_WORDS, ENGLISH_VEGETABLE_WORDS,
    ENGLISH_WORDS, ENGLISH_WORDS_DEVANAGARI, HINDI_PRICE_INQUIRY_PATTERNS,
    HINDI_ROMAN_WORDS, LANGUAGE_NAME_KEYWORDS, LATIN_RATIO_THRESHOLD,
    MARATHI_MARKERS, SCRIPT_RANGES, WORD_END, WORD_START, LanguageTag,
)

logger = logging.getLogger(__name__)

# A rule receives the transcript as spoken and lower-cased
LanguageRule = Callable[[str, str], Optional[LanguageTag]]


def compile_word_pattern(words: Sequence[str]) -> re.Pattern:
    """Compile an alternation that only matches the given words as whole words"""
    alternation = "|".join(re.escape(word) for word in sorted(words, key=len, reverse=True))
    return re.compile(f"{WORD_START}(?:{alternation}){WORD_END}", re.IGNORECASE)


class LanguageDetector:
    """
    Ordered rule cascade for transcript language detection.
    Never fails: falls back to Hindi, the dominant language of the vendors.
    """

    def __init__(self):
        """Initialize detector with compiled patterns"""
        self._compile_patterns()
        self.rules: List[Tuple[str, LanguageRule]] = [
            ("hindi_price_inquiry", self._match_hindi_price_inquiry),
            ("language_name", self._match_language_name),
            ("script", self._match_script),
            ("english_words", self._match_english_words),
            ("english_price_inquiry", self._match_english_price_inquiry),
            ("hindi_words", self._match_hindi_words),
            ("latin_ratio", self._match_latin_ratio),
        ]

    def _compile_patterns(self):
        """Compile regex patterns for performance"""
        self.script_patterns = [
            (language, re.compile(f"[{char_range}]"))
            for language, char_range in SCRIPT_RANGES
        ]
        self.marathi_pattern = compile_word_pattern(MARATHI_MARKERS)
        self.english_word_pattern = compile_word_pattern(ENGLISH_WORDS)
        self.english_devanagari_pattern = compile_word_pattern(ENGLISH_WORDS_DEVANAGARI)
        self.english_price_pattern = compile_word_pattern(ENGLISH_PRICE_WORDS)
        self.english_vegetable_pattern = compile_word_pattern(ENGLISH_VEGETABLE_WORDS)
        self.hindi_word_pattern = compile_word_pattern(HINDI_ROMAN_WORDS)
        self.latin_letter_pattern = re.compile(r"[a-zA-Z]")

    def detect(self, transcript: str) -> LanguageTag:
        """
        Detect the language of a transcript.

        Args:
            transcript: Raw speech-to-text output in any supported script

        Returns:
            The first language tag produced by the rule cascade, or Hindi
        """
        transcript = transcript or ""
        lowered = transcript.lower()

        for rule_name, rule in self.rules:
            language = rule(transcript, lowered)
            if language is not None:
                logger.debug(f"Language rule '{rule_name}' matched: {language.value}")
                return language

        logger.debug(f"No language rule matched, defaulting to {DEFAULT_LANGUAGE.value}")
        return DEFAULT_LANGUAGE

    # -------------------------------------------------------------------------
    # Rules, in cascade order
    # -------------------------------------------------------------------------

    def _match_hindi_price_inquiry(self, transcript: str, lowered: str) -> Optional[LanguageTag]:
        # Common real queries, must never be routed anywhere else
        if any(pattern in lowered for pattern in HINDI_PRICE_INQUIRY_PATTERNS):
            return LanguageTag.HINDI
        return None

    def _match_language_name(self, transcript: str, lowered: str) -> Optional[LanguageTag]:
        for language, names in LANGUAGE_NAME_KEYWORDS:
            if any(name in lowered for name in names):
                return language
        return None

    def _match_script(self, transcript: str, lowered: str) -> Optional[LanguageTag]:
        for language, pattern in self.script_patterns:
            if not pattern.search(transcript):
                continue
            if language is LanguageTag.HINDI and self.marathi_pattern.search(transcript):
                return LanguageTag.MARATHI
            return language
        return None

    def _match_english_words(self, transcript: str, lowered: str) -> Optional[LanguageTag]:
        if self.english_word_pattern.search(lowered) or self.english_devanagari_pattern.search(transcript):
            return LanguageTag.ENGLISH
        return None

    def _match_english_price_inquiry(self, transcript: str, lowered: str) -> Optional[LanguageTag]:
        if self.english_price_pattern.search(lowered) and self.english_vegetable_pattern.search(lowered):
            return LanguageTag.ENGLISH
        return None

    def _match_hindi_words(self, transcript: str, lowered: str) -> Optional[LanguageTag]:
        if self.hindi_word_pattern.search(lowered):
            return LanguageTag.HINDI
        return None

    def _match_latin_ratio(self, transcript: str, lowered: str) -> Optional[LanguageTag]:
        total_chars = len(re.sub(r"\s", "", transcript))
        if total_chars == 0:
            return None
        latin_chars = len(self.latin_letter_pattern.findall(transcript))
        if latin_chars / total_chars > LATIN_RATIO_THRESHOLD:
            return LanguageTag.ENGLISH
        return None


# Global instance
language_detector = LanguageDetector()


def detect_language(transcript: str) -> str:
    """Detect the language tag ('hi', 'en', 'bn', 'mr', 'ta', 'te') of a transcript"""
    return language_detector.detect(transcript).value

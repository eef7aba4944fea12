"""
Unit Tests for Transcript Language Detection

Tests for:
- Hindi price-inquiry idioms winning over every later rule
- Explicit language names
- Script detection (Bengali, Tamil, Telugu, Devanagari split into Hindi / Marathi)
- English and romanized Hindi word lists
- Latin-ratio fallback and the Hindi default
"""

import pytest

from bhashabazaar.nlp.language_detector import (
    LanguageDetector,
    compile_word_pattern,
    detect_language,
)
from bhashabazaar.nlp.voice_patterns import SUPPORTED_LANGUAGES, LanguageTag


# ============================================================================
# TEST: Defaults and totality
# ============================================================================

class TestDetectLanguageDefaults:
    """detect_language never fails and always returns a supported tag"""

    @pytest.mark.unit
    def test_empty_transcript_is_hindi(self):
        assert detect_language("") == "hi"

    @pytest.mark.unit
    def test_none_transcript_is_hindi(self):
        assert detect_language(None) == "hi"

    @pytest.mark.unit
    def test_digits_only_falls_back_to_hindi(self):
        """No letters at all: latin ratio is 0, default applies"""
        assert detect_language("12345") == "hi"

    @pytest.mark.unit
    @pytest.mark.parametrize("transcript", [
        "", "hello", "आलू", "আলু", "தக்காளி", "ఉల్లిపాయ", "मी आहे", "!!!", "   ", "xyz 123",
    ])
    def test_result_is_always_supported(self, transcript):
        assert detect_language(transcript) in SUPPORTED_LANGUAGES

    @pytest.mark.unit
    def test_detector_returns_language_tag(self):
        assert LanguageDetector().detect("hello") is LanguageTag.ENGLISH


# ============================================================================
# TEST: Rule cascade
# ============================================================================

class TestHindiPriceInquiry:
    """Rule 1: common Hindi price questions"""

    @pytest.mark.unit
    @pytest.mark.parametrize("transcript", [
        "aloo ka rate kya hai",
        "pyaj ka rate",
        "आलू का भाव क्या है",
        "mandi mein kya chal raha hai",
        "sabse sasta kaun hai",
    ])
    def test_price_idioms_are_hindi(self, transcript):
        assert detect_language(transcript) == "hi"

    @pytest.mark.unit
    def test_price_idiom_beats_language_name(self):
        """The idiom rule runs before the language-name rule"""
        assert detect_language("english mein aloo ka rate batao") == "hi"


class TestLanguageNames:
    """Rule 2: the speaker names a language"""

    @pytest.mark.unit
    @pytest.mark.parametrize("transcript,expected", [
        ("I want to speak English", "en"),
        ("मुझे हिंदी में बात करनी है", "hi"),
        ("bangla bolun", "bn"),
        ("marathi madhe bola", "mr"),
        ("tamil mein bolo", "ta"),
        ("telugu lo cheppandi", "te"),
    ])
    def test_language_name_selects_language(self, transcript, expected):
        assert detect_language(transcript) == expected

    @pytest.mark.unit
    def test_language_name_beats_english_word_rules(self):
        """'hindi' wins although the rest of the sentence is an English price question"""
        assert detect_language("hindi please potato price") == "hi"


class TestScriptDetection:
    """Rule 3: script blocks"""

    @pytest.mark.unit
    def test_bengali_script(self):
        assert detect_language("আমি আলু কিনতে চাই") == "bn"

    @pytest.mark.unit
    def test_tamil_script(self):
        assert detect_language("எனக்கு தக்காளி வேண்டும்") == "ta"

    @pytest.mark.unit
    def test_telugu_script(self):
        assert detect_language("నాకు ఉల్లిపాయ కావాలి") == "te"

    @pytest.mark.unit
    def test_devanagari_without_marathi_markers_is_hindi(self):
        assert detect_language("मुझे आलू चाहिए") == "hi"

    @pytest.mark.unit
    @pytest.mark.parametrize("transcript", [
        "मी बाजारात जात आहे",
        "तुम्ही कसे आहात",
    ])
    def test_devanagari_with_marathi_markers_is_marathi(self, transcript):
        assert detect_language(transcript) == "mr"

    @pytest.mark.unit
    def test_marathi_marker_inside_word_is_ignored(self):
        """'ते' at the end of नमस्ते follows a virama, so it is not a word"""
        assert detect_language("नमस्ते") == "hi"

    @pytest.mark.unit
    @pytest.mark.parametrize("transcript", [
        "मुझे चीनी का पैकेट चाहिए",
        "दो किलो चीनी का पैकेट",
    ])
    def test_hindi_postposition_ka_reads_as_marathi(self, transcript):
        """The Marathi marker ka is also a Hindi postposition"""
        assert detect_language(transcript) == "mr"


class TestWordLists:
    """Rules 4 to 6: English words, English price questions, romanized Hindi"""

    @pytest.mark.unit
    def test_common_english_words(self):
        assert detect_language("hello how are you") == "en"

    @pytest.mark.unit
    def test_english_words_are_case_insensitive(self):
        assert detect_language("YES") == "en"

    @pytest.mark.unit
    def test_english_price_question(self):
        assert detect_language("potato price") == "en"

    @pytest.mark.unit
    def test_english_question_with_function_words(self):
        assert detect_language("what is the rate of tomato") == "en"

    @pytest.mark.unit
    def test_romanized_hindi(self):
        assert detect_language("mujhe tel chahiye") == "hi"

    @pytest.mark.unit
    def test_english_word_inside_hindi_word_is_ignored(self):
        """'hi' inside 'bhai' must not trigger the English rule"""
        assert detect_language("bhai kaise ho") == "hi"


class TestLatinRatio:
    """Rule 7: mostly-Latin text with no known words"""

    @pytest.mark.unit
    def test_unknown_latin_text_is_english(self):
        assert detect_language("xyz qwerty") == "en"

    @pytest.mark.unit
    def test_threshold_is_strict(self):
        """7 Latin letters out of 10 characters is exactly 0.7, not above it"""
        assert detect_language("abcdefg123") == "hi"

    @pytest.mark.unit
    def test_whitespace_is_ignored_in_ratio(self):
        assert detect_language("  zzz   qqq  ") == "en"


# ============================================================================
# TEST: Word pattern helper
# ============================================================================

class TestCompileWordPattern:

    @pytest.mark.unit
    def test_matches_whole_words_only(self):
        pattern = compile_word_pattern(["tel"])
        assert pattern.search("mujhe tel chahiye")
        assert not pattern.search("hotel chahiye")

    @pytest.mark.unit
    def test_devanagari_boundaries_respect_vowel_signs(self):
        pattern = compile_word_pattern(["आलू"])
        assert pattern.search("आलू का भाव")
        assert not pattern.search("आलूबुखारा")

    @pytest.mark.unit
    def test_prefers_longest_alternative(self):
        pattern = compile_word_pattern(["kilo", "kilogram"])
        assert pattern.search("5 kilogram").group(0) == "kilogram"

"""
Unit Tests for Commodity Extraction
"""

import pytest

from bhashabazaar.nlp.item_extractor import ItemExtractor, extract_item
from bhashabazaar.nlp.voice_patterns import ENGLISH_ITEM_SYNONYMS, REGIONAL_ITEM_SYNONYMS


class TestExtractItem:
    """Surface forms in any script resolve to a canonical English item"""

    @pytest.mark.unit
    @pytest.mark.parametrize("transcript,expected", [
        ("aloo ka rate kya hai", "Potato"),
        ("प्याज का भाव", "Onion"),
        ("pyaj kitne ka hai", "Onion"),
        ("टोमेटो price", "Tomato"),
        ("karela kitne ka", "Bitter Gourd"),
        ("mujhe tel chahiye", "Oil"),
        ("rice kitne ka hai", "Rice"),
        ("What is the price of GARLIC", "Garlic"),
    ])
    def test_known_items(self, transcript, expected):
        assert extract_item(transcript) == expected

    @pytest.mark.unit
    def test_multi_word_synonym(self):
        """'hari mirch' is listed before plain 'mirch'"""
        assert extract_item("hari mirch ka bhav") == "Green Chili"

    @pytest.mark.unit
    def test_substring_of_longer_word_does_not_match(self):
        """'tel' must not be found inside 'hotel'"""
        assert extract_item("hotel chahiye") is None

    @pytest.mark.unit
    def test_devanagari_substring_does_not_match(self):
        assert extract_item("आलूबुखारा") is None

    @pytest.mark.unit
    @pytest.mark.parametrize("transcript", ["", None, "hello how are you", "12345"])
    def test_no_item(self, transcript):
        assert extract_item(transcript) is None

    @pytest.mark.unit
    def test_result_is_canonical_value(self):
        canonical = set(ENGLISH_ITEM_SYNONYMS.values()) | set(REGIONAL_ITEM_SYNONYMS.values())
        for transcript in ("aloo", "भिंडी", "haldi", "chawal", "capsicum"):
            assert extract_item(transcript) in canonical


class TestItemExtractorTables:

    @pytest.mark.unit
    def test_custom_tables(self):
        extractor = ItemExtractor(tables=({"foo": "Foo"},))
        assert extractor.extract("FOO bar") == "Foo"
        assert extractor.extract("food") is None

    @pytest.mark.unit
    def test_earlier_table_wins(self):
        extractor = ItemExtractor(tables=({"aloo": "First"}, {"aloo": "Second"}))
        assert extractor.extract("aloo") == "First"

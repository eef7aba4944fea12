"""
Voice Patterns - static lookup tables for BhashaBazaar voice processing
Read-only data structures shared by the language detector, item extractor,
order parser and product translator.

Key normalization: Latin-script keys are stored lower-case and transcripts are
lower-cased before lookup. Devanagari, Bengali, Tamil and Telugu have no case
and are compared as-is.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class LanguageTag(str, Enum):
    """Languages the voice pipeline can detect"""
    HINDI = "hi"
    ENGLISH = "en"
    BENGALI = "bn"
    MARATHI = "mr"
    TAMIL = "ta"
    TELUGU = "te"


DEFAULT_LANGUAGE = LanguageTag.HINDI

SUPPORTED_LANGUAGES: Tuple[str, ...] = tuple(tag.value for tag in LanguageTag)

# =============================================================================
# SCRIPT RANGES AND WORD BOUNDARIES
# =============================================================================

BENGALI_RANGE = r"\u0980-\u09FF"
DEVANAGARI_RANGE = r"\u0900-\u097F"
TAMIL_RANGE = r"\u0B80-\u0BFF"
TELUGU_RANGE = r"\u0C00-\u0C7F"

# Indic vowel signs and viramas are combining marks, which `\w` does not
# cover, so they are added explicitly. The dandas (U+0964, U+0965) stay
# punctuation.
WORD_CHAR_CLASS = r"[\w\u0900-\u0963\u0966-\u0DFF]"
WORD_START = f"(?<!{WORD_CHAR_CLASS})"
WORD_END = f"(?!{WORD_CHAR_CLASS})"

# =============================================================================
# LANGUAGE DETECTION (in cascade order)
# =============================================================================

# Rule 1: Hindi price-inquiry idioms, matched as substrings
HINDI_PRICE_INQUIRY_PATTERNS: Tuple[str, ...] = (
    # Direct rate inquiries
    "kya rate", "क्या रेट", "kya bhav", "क्या भाव", "kitna rate", "कितना रेट",
    "kitne ka", "कितने का", "price kya hai", "प्राइस क्या है",
    "bhav kya hai", "भाव क्या है", "rate chal raha", "रेट चल रहा",
    "rate chl rha", "kitne mein", "कितने में",
    "kimat kitni", "कीमत कितनी", "ki kimat", "की कीमत", "kimat kya", "कीमत क्या",

    # Vegetable specific
    "pyaaz ka rate", "प्याज का रेट", "pyaj ka bhav", "प्याज का भाव",
    "pyaj ka rate", "pyaj ka", "pyaaz ka", "प्याज का",
    "aloo ka rate", "आलू का रेट", "aloo ka", "आलू का",
    "tamatar ka rate", "टमाटर का रेट", "tamatar ka", "टमाटर का",
    "adrak ka rate", "अदरक का रेट", "adrak ka", "अदरक का",
    "jeera ka rate", "जीरा का रेट", "jeera ka", "जीरा का",
    "haldi ka rate", "हल्दी का रेट", "haldi ka", "हल्दी का",

    # Market inquiries
    "mandi mein", "मंडी में", "market mein", "मार्केट में",
    "sabzi ka rate", "सब्जी का रेट", "masala ka rate", "मसाला का रेट",
    "suppliers ka rate", "suppliers का रेट",
    "bhav bata", "भाव बता", "rate bata", "रेट बता",
    "kya chal raha", "क्या चल रहा", "chal raha hai", "चल रहा है",

    # Comparison
    "compare karo", "कंपेयर करो", "tulna karo", "तुलना करो",
    "sabse sasta", "सबसे सस्ता", "best rate", "बेस्ट रेट",
)

# Rule 2: explicit language names, checked in this order
LANGUAGE_NAME_KEYWORDS: Tuple[Tuple[LanguageTag, Tuple[str, ...]], ...] = (
    (LanguageTag.ENGLISH, ("english", "अंग्रेजी", "इंग्लिश")),
    (LanguageTag.HINDI, ("hindi", "हिंदी", "हिन्दी")),
    (LanguageTag.BENGALI, ("bengali", "বাংলা", "बंगाली", "bangla")),
    (LanguageTag.MARATHI, ("marathi", "मराठी")),
    (LanguageTag.TAMIL, ("tamil", "தமிழ்", "तमिल")),
    (LanguageTag.TELUGU, ("telugu", "తెలుగు", "तेलुगु")),
)

# Rule 3: script blocks, checked in this order. Devanagari goes last and is
# split into Marathi / Hindi by MARATHI_MARKERS.
SCRIPT_RANGES: Tuple[Tuple[LanguageTag, str], ...] = (
    (LanguageTag.BENGALI, BENGALI_RANGE),
    (LanguageTag.TELUGU, TELUGU_RANGE),
    (LanguageTag.TAMIL, TAMIL_RANGE),
    (LanguageTag.HINDI, DEVANAGARI_RANGE),
)

MARATHI_MARKERS: Tuple[str, ...] = ("आहे", "तुम्ही", "आम्ही", "होते", "आले", "का", "ते", "मी")

# Rule 4: common English words, plus English words as a Hindi speech engine
# spells them in Devanagari
ENGLISH_WORDS: Tuple[str, ...] = (
    "hello", "hi", "yes", "no", "the", "and", "for", "with", "this", "that",
    "what", "how", "where", "when", "why", "good", "bad", "ok", "okay",
    "english", "speak", "language", "order", "book", "manage", "can",
    "should", "will", "please", "thank", "you", "my", "your", "our", "app",
    "application",
)

ENGLISH_WORDS_DEVANAGARI: Tuple[str, ...] = (
    "हाउ", "व्हाट", "व्हेयर", "व्हेन", "प्लीज", "थैंक", "ऑर्डर", "बुक", "मैनेज",
    "कैन", "शुड", "विल", "यू", "माई", "योर", "आवर", "ऐप", "एप्लिकेशन",
)

# Rule 5: English price question = one of these words AND a vegetable name
ENGLISH_PRICE_WORDS: Tuple[str, ...] = (
    "what", "is", "the", "price", "of", "cost", "rate", "how", "much",
    "does", "tell", "me", "about",
)

ENGLISH_VEGETABLE_WORDS: Tuple[str, ...] = (
    "potato", "tomato", "onion", "ginger", "garlic", "spinach", "carrot",
    "cabbage", "rice", "wheat", "oil", "salt", "sugar",
    "पोटैटो", "टोमेटो", "ओनियन", "जिंजर", "गार्लिक", "स्पिनच", "कैरोट",
    "कैबेज", "राइस", "व्हीट", "ऑयल", "साल्ट", "शुगर",
)

# Rule 6: common Hindi words in roman script
HINDI_ROMAN_WORDS: Tuple[str, ...] = (
    "namaste", "namaskar", "kaise", "kya", "hai", "hain", "aap", "hum", "main",
    "tum", "accha", "bura", "theek", "hindi", "bol", "baat", "kaam", "bhai",
    "bhav", "bata", "rate", "chal", "raha", "pyaj", "pyaaz", "aloo", "tamatar",
    "kimat", "kitni", "kitna", "bhindi", "karela", "karele", "lauki", "gobhi",
    "palak", "methi", "gajar", "mooli", "mirch", "adrak", "lahsun", "jeera",
    "haldi", "chana", "arhar", "tel", "atta", "chawal", "namak",
)

# Rule 7: share of Latin letters above which text is treated as English
LATIN_RATIO_THRESHOLD = 0.7

# =============================================================================
# ITEM SYNONYMS (surface form -> canonical English item name)
# =============================================================================

# Checked first so English words the speech engine wrote in Devanagari
# still resolve
ENGLISH_ITEM_SYNONYMS: Mapping[str, str] = MappingProxyType({
    "potato": "Potato", "aloo": "Potato", "aalu": "Potato", "aaloo": "Potato", "alu": "Potato",
    "पोटैटो": "Potato", "पोटेटो": "Potato",
    "tomato": "Tomato", "टोमेटो": "Tomato", "टमाटो": "Tomato",
    "onion": "Onion", "ओनियन": "Onion",
    "ginger": "Ginger", "जिंजर": "Ginger",
    "garlic": "Garlic", "गार्लिक": "Garlic",
    "spinach": "Spinach", "स्पिनच": "Spinach",
    "carrot": "Carrot", "कैरोट": "Carrot",
    "cabbage": "Cabbage", "कैबेज": "Cabbage",
    "cauliflower": "Cauliflower", "कॉलीफ्लावर": "Cauliflower",
    "broccoli": "Broccoli", "ब्रोकली": "Broccoli",
    "okra": "Okra", "ओकरा": "Okra",
    "cucumber": "Cucumber", "कुकुंबर": "Cucumber",
    "beetroot": "Beetroot", "बीटरूट": "Beetroot",
    "radish": "Radish", "रेडिश": "Radish",
    "capsicum": "Bell Pepper", "कैप्सिकम": "Bell Pepper",
    "mushroom": "Mushroom", "मशरूम": "Mushroom",
    "pumpkin": "Pumpkin", "पंपकिन": "Pumpkin",
    "rice": "Rice", "राइस": "Rice",
    "wheat": "Wheat", "व्हीट": "Wheat",
    "oil": "Oil", "ऑयल": "Oil",
    "salt": "Salt", "साल्ट": "Salt",
    "sugar": "Sugar", "शुगर": "Sugar",
})

REGIONAL_ITEM_SYNONYMS: Mapping[str, str] = MappingProxyType({
    # Common vegetables
    "pyaaz": "Onion", "pyaj": "Onion", "pyaz": "Onion", "प्याज": "Onion", "onion": "Onion",
    "aloo": "Potato", "aalu": "Potato", "aaloo": "Potato", "alu": "Potato", "आलू": "Potato", "potato": "Potato",
    "tamatar": "Tomato", "टमाटर": "Tomato", "tomato": "Tomato",
    "bhindi": "Okra", "भिंडी": "Okra", "okra": "Okra",
    "karela": "Bitter Gourd", "करेला": "Bitter Gourd", "karele": "Bitter Gourd", "bitter gourd": "Bitter Gourd",
    "lauki": "Bottle Gourd", "लौकी": "Bottle Gourd", "bottle gourd": "Bottle Gourd",
    "kaddu": "Pumpkin", "कद्दू": "Pumpkin", "pumpkin": "Pumpkin",
    "tori": "Ridge Gourd", "तोरी": "Ridge Gourd", "ridge gourd": "Ridge Gourd",
    "gilki": "Sponge Gourd", "गिल्की": "Sponge Gourd", "sponge gourd": "Sponge Gourd",
    "nenua": "Snake Gourd", "नेनुआ": "Snake Gourd", "snake gourd": "Snake Gourd",
    "parwal": "Pointed Gourd", "परवल": "Pointed Gourd", "pointed gourd": "Pointed Gourd",

    # Leafy vegetables
    "palak": "Spinach", "पालक": "Spinach", "spinach": "Spinach",
    "methi": "Fenugreek Leaves", "मेथी": "Fenugreek Leaves", "fenugreek": "Fenugreek Leaves",
    "dhania patta": "Coriander", "धनिया पत्ता": "Coriander", "coriander leaves": "Coriander",
    "pudina": "Mint", "पुदीना": "Mint", "mint": "Mint",
    "sarson ka saag": "Mustard Greens", "सरसों का साग": "Mustard Greens", "mustard greens": "Mustard Greens",
    "bathua": "Chenopodium", "बथुआ": "Chenopodium", "chenopodium": "Chenopodium",

    # Root vegetables
    "gajar": "Carrot", "गाजर": "Carrot", "carrot": "Carrot",
    "mooli": "Radish", "मूली": "Radish", "radish": "Radish",
    "shalgam": "Turnip", "शलगम": "Turnip", "turnip": "Turnip",
    "chukandar": "Beetroot", "चुकंदर": "Beetroot", "beetroot": "Beetroot",
    "arvi": "Colocasia", "अरवी": "Colocasia", "colocasia": "Colocasia",
    "shakarkand": "Sweet Potato", "शकरकंद": "Sweet Potato", "sweet potato": "Sweet Potato",

    # Beans and pods
    "sem": "Broad Beans", "सेम": "Broad Beans", "broad beans": "Broad Beans",
    "farasbi": "French Beans", "फरासबी": "French Beans", "french beans": "French Beans",
    "lobhia": "Black Eyed Peas", "लोभिया": "Black Eyed Peas", "black eyed peas": "Black Eyed Peas",
    "gawar": "Cluster Beans", "गवार": "Cluster Beans", "cluster beans": "Cluster Beans",
    "barbati": "Long Beans", "बरबटी": "Long Beans", "long beans": "Long Beans",

    # Brassicas
    "gobhi": "Cauliflower", "गोभी": "Cauliflower", "cauliflower": "Cauliflower",
    "patta gobhi": "Cabbage", "पत्ता गोभी": "Cabbage", "cabbage": "Cabbage",
    "broccoli": "Broccoli", "ब्रोकली": "Broccoli",

    # Chilies and peppers
    "hari mirch": "Green Chili", "हरी मिर्च": "Green Chili", "green chili": "Green Chili",
    "mirch": "Chili", "मिर्च": "Chili", "chili": "Chili",
    "lal mirch": "Red Chili", "लाल मिर्च": "Red Chili", "red chili": "Red Chili",
    "shimla mirch": "Bell Pepper", "शिमला मिर्च": "Bell Pepper", "bell pepper": "Bell Pepper",

    # Spices and seasonings
    "adrak": "Ginger", "अदरक": "Ginger", "ginger": "Ginger",
    "lahsun": "Garlic", "लहसुन": "Garlic", "garlic": "Garlic",
    "jeera": "Cumin", "जीरा": "Cumin", "cumin": "Cumin",
    "dhaniya": "Coriander Seeds", "धनिया": "Coriander Seeds", "coriander seeds": "Coriander Seeds",
    "haldi": "Turmeric", "हल्दी": "Turmeric", "turmeric": "Turmeric",
    "kali mirch": "Black Pepper", "काली मिर्च": "Black Pepper", "black pepper": "Black Pepper",
    "hing": "Asafoetida", "हींग": "Asafoetida", "asafoetida": "Asafoetida",
    "ajwain": "Carom Seeds", "अजवाइन": "Carom Seeds", "carom seeds": "Carom Seeds",
    "til": "Sesame Seeds", "तिल": "Sesame Seeds", "sesame": "Sesame Seeds",
    "sarson ke beej": "Mustard Seeds", "सरसों के बीज": "Mustard Seeds", "mustard seeds": "Mustard Seeds",
    "kalonji": "Nigella Seeds", "कलौंजी": "Nigella Seeds", "nigella": "Nigella Seeds",
    "elaichi": "Cardamom", "इलायची": "Cardamom", "cardamom": "Cardamom",
    "laung": "Cloves", "लौंग": "Cloves", "cloves": "Cloves",
    "dalchini": "Cinnamon", "दालचीनी": "Cinnamon", "cinnamon": "Cinnamon",
    "jaiphal": "Nutmeg", "जायफल": "Nutmeg", "nutmeg": "Nutmeg",
    "javitri": "Mace", "जावित्री": "Mace", "mace": "Mace",
    "tej patta": "Bay Leaves", "तेज पत्ता": "Bay Leaves", "bay leaves": "Bay Leaves",

    # Pulses and lentils
    "arhar": "Pigeon Pea", "अरहर": "Pigeon Pea", "pigeon pea": "Pigeon Pea",
    "toor": "Toor Dal", "तूर": "Toor Dal", "toor dal": "Toor Dal",
    "chana": "Chickpeas", "चना": "Chickpeas", "chickpeas": "Chickpeas",
    "masoor": "Red Lentils", "मसूर": "Red Lentils", "masoor dal": "Red Lentils",
    "moong": "Mung Beans", "मूंग": "Mung Beans", "moong dal": "Mung Beans",
    "urad": "Black Gram", "उड़द": "Black Gram", "urad dal": "Black Gram",
    "rajma": "Kidney Beans", "राजमा": "Kidney Beans", "kidney beans": "Kidney Beans",
    "kala chana": "Black Chickpeas", "काला चना": "Black Chickpeas", "black chickpeas": "Black Chickpeas",

    # Oils and cooking media
    "tel": "Oil", "तेल": "Oil", "oil": "Oil",
    "sarson ka tel": "Mustard Oil", "सरसों का तेल": "Mustard Oil", "mustard oil": "Mustard Oil",
    "til ka tel": "Sesame Oil", "तिल का तेल": "Sesame Oil", "sesame oil": "Sesame Oil",
    "nariyal tel": "Coconut Oil", "नारियल तेल": "Coconut Oil", "coconut oil": "Coconut Oil",
    "ghee": "Clarified Butter", "घी": "Clarified Butter", "clarified butter": "Clarified Butter",

    # Street-food staples
    "atta": "Wheat Flour", "आटा": "Wheat Flour", "wheat flour": "Wheat Flour",
    "maida": "All Purpose Flour", "मैदा": "All Purpose Flour", "all purpose flour": "All Purpose Flour",
    "besan": "Gram Flour", "बेसन": "Gram Flour", "gram flour": "Gram Flour",
    "suji": "Semolina", "सूजी": "Semolina", "semolina": "Semolina",
    "poha": "Flattened Rice", "पोहा": "Flattened Rice", "flattened rice": "Flattened Rice",
    "chawal": "Rice", "चावल": "Rice", "rice": "Rice",
    "namak": "Salt", "नमक": "Salt", "salt": "Salt",
    "cheeni": "Sugar", "चीनी": "Sugar", "sugar": "Sugar",
    "gud": "Jaggery", "गुड़": "Jaggery", "jaggery": "Jaggery",
})

# =============================================================================
# ORDER PARSING: NUMBERS AND UNITS
# =============================================================================

NUMBER_WORDS: Mapping[str, int] = MappingProxyType({
    "एक": 1, "ek": 1,
    "दो": 2, "do": 2,
    "तीन": 3, "teen": 3,
    "चार": 4, "char": 4,
    "पांच": 5, "पाँच": 5, "panch": 5, "paanch": 5,
    "छह": 6, "cheh": 6,
    "सात": 7, "saat": 7,
    "आठ": 8, "aath": 8,
    "नौ": 9, "nau": 9,
    "दस": 10, "das": 10,
})

DEFAULT_UNIT = "kg"

# Surface form -> canonical unit. Pounds fold into kg; the conversion is lossy.
UNIT_NORMALIZATION: Mapping[str, str] = MappingProxyType({
    "kg": "kg", "kilo": "kg", "kilos": "kg", "kilogram": "kg", "kilograms": "kg",
    "किलो": "kg", "किग्रा": "kg",
    "g": "g", "gram": "g", "grams": "g", "ग्राम": "g",
    "lb": "kg", "lbs": "kg", "pound": "kg", "pounds": "kg",
    "piece": "piece", "pieces": "piece", "pcs": "piece", "पीस": "piece",
    "packet": "packet", "packets": "packet", "पैकेट": "packet",
    "bottle": "bottle", "bottles": "bottle", "बोतल": "bottle",
    "l": "liter", "liter": "liter", "liters": "liter", "litre": "liter", "litres": "liter",
    "लीटर": "liter",
})

ENGLISH_UNIT_WORDS: Tuple[str, ...] = tuple(
    unit for unit in UNIT_NORMALIZATION if unit.isascii()
)
HINDI_UNIT_WORDS: Tuple[str, ...] = tuple(
    unit for unit in UNIT_NORMALIZATION if not unit.isascii()
)

# =============================================================================
# PRODUCT TRANSLATION (spoken product name -> English search term)
# =============================================================================

_PRODUCT_SYNONYMS = {
    # Vegetables
    "aloo": "potato", "aalu": "potato", "aaloo": "potato", "alu": "potato", "आलू": "potato",
    "pyaz": "onion", "pyaaz": "onion", "pyaj": "onion", "kanda": "onion", "प्याज": "onion",
    "tamatar": "tomato", "टमाटर": "tomato",
    "bhindi": "okra", "भिंडी": "okra",
    "baingan": "brinjal", "बैंगन": "brinjal",
    "gobhi": "cauliflower", "phool gobhi": "cauliflower", "गोभी": "cauliflower",
    "patta gobhi": "cabbage", "पत्ता गोभी": "cabbage",
    "gajar": "carrot", "गाजर": "carrot",
    "mooli": "radish", "मूली": "radish",
    "palak": "spinach", "पालक": "spinach",
    "methi": "fenugreek", "मेथी": "fenugreek",
    "lauki": "bottle gourd", "लौकी": "bottle gourd",
    "karela": "bitter gourd", "करेला": "bitter gourd",
    "kheera": "cucumber", "खीरा": "cucumber",
    "matar": "green peas", "मटर": "green peas",
    "shimla mirch": "capsicum", "शिमला मिर्च": "capsicum",
    "hari mirch": "green chilli", "हरी मिर्च": "green chilli",
    "nimbu": "lemon", "नींबू": "lemon",
    "dhaniya": "coriander", "dhania": "coriander", "धनिया": "coriander",
    "pudina": "mint", "पुदीना": "mint",
    "adrak": "ginger", "अदरक": "ginger",
    "lahsun": "garlic", "लहसुन": "garlic",

    # Bengali / Tamil / Telugu surface forms
    "আলু": "potato", "পেঁয়াজ": "onion", "টমেটো": "tomato",
    "உருளைக்கிழங்கு": "potato", "வெங்காயம்": "onion", "தக்காளி": "tomato",
    "బంగాళాదుంప": "potato", "ఉల్లిపాయ": "onion", "టమాటా": "tomato",

    # Spices
    "haldi": "turmeric", "हल्दी": "turmeric",
    "jeera": "cumin", "जीरा": "cumin",
    "lal mirch": "red chilli powder", "लाल मिर्च": "red chilli powder",
    "garam masala": "garam masala", "गरम मसाला": "garam masala",
    "namak": "salt", "नमक": "salt",

    # Staples
    "chawal": "rice", "चावल": "rice",
    "atta": "wheat flour", "आटा": "wheat flour",
    "maida": "maida flour", "मैदा": "maida flour",
    "besan": "gram flour", "बेसन": "gram flour",
    "cheeni": "sugar", "chini": "sugar", "चीनी": "sugar",
    "dal": "lentils", "दाल": "lentils",
    "tel": "cooking oil", "तेल": "cooking oil",
    "sarson ka tel": "mustard oil", "सरसों का तेल": "mustard oil",

    # Dairy
    "doodh": "milk", "दूध": "milk",
    "dahi": "curd", "दही": "curd",
    "paneer": "paneer", "पनीर": "paneer",
    "makhan": "butter", "मक्खन": "butter",
    "ghee": "ghee", "घी": "ghee",

    # Bakery
    "pav": "pav bread", "पाव": "pav bread",
    "anda": "eggs", "ande": "eggs", "अंडा": "eggs", "अंडे": "eggs",
}

# Every English target also maps to itself so translating English is a no-op
PRODUCT_TRANSLATIONS: Mapping[str, str] = MappingProxyType({
    **_PRODUCT_SYNONYMS,
    **{english: english for english in _PRODUCT_SYNONYMS.values()},
})

# =============================================================================
# E-COMMERCE PLATFORMS
# =============================================================================

@dataclass(frozen=True)
class Platform:
    """Quick-commerce destination for voice-order search redirects"""
    name: str
    search_url_template: str
    priority: float


PLATFORMS: Tuple[Platform, ...] = (
    Platform(name="Blinkit", search_url_template="https://blinkit.com/s/?q=", priority=0.35),
    Platform(name="Zepto", search_url_template="https://www.zeptonow.com/search?query=", priority=0.30),
    Platform(name="BigBasket", search_url_template="https://www.bigbasket.com/ps/?q=", priority=0.20),
    Platform(name="JioMart", search_url_template="https://www.jiomart.com/search/", priority=0.15),
)

# =============================================================================
# SPEECH LOCALES
# =============================================================================

SPEECH_LOCALES: Mapping[str, str] = MappingProxyType({
    "hi": "hi-IN",
    "en": "en-US",
    "bn": "bn-BD",
    "mr": "mr-IN",
    "ta": "ta-IN",
    "te": "te-IN",
})

DEFAULT_SPEECH_LOCALE = "hi-IN"

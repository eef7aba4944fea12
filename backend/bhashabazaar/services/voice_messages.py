"""
Localized voice messages and speech locales

Templates for every supported language tag. Unknown tags fall back to
English for messages and to hi-IN for speech locales.
"""

from typing import Dict, Optional

from bhashabazaar.nlp.voice_patterns import DEFAULT_SPEECH_LOCALE, SPEECH_LOCALES

FALLBACK_LANGUAGE = "en"

# Price comparison started for an item
_ITEM_CONFIRMATIONS: Dict[str, str] = {
    "hi": "{item} की कीमतों की तुलना शुरू कर रहे हैं। पूरा ऐप हिंदी में बदल गया।",
    "en": "Starting price comparison for {item}. Language switched to English.",
    "bn": "{item} এর দাম তুলনা শুরু হচ্ছে। ভাষা বাংলায় পরিবর্তিত হয়েছে।",
    "mr": "{item} च्या किमतींची तुलना सुरू करत आहे। भाषा मराठीत बदलली.",
    "ta": "{item} விலை ஒப்பீடு தொடங்குகிறது. மொழி தமிழுக்கு மாற்றப்பட்டது.",
    "te": "{item} ధరల పోలిక ప్రారంభమవుతోంది. భాష తెలుగులోకి మార్చబడింది.",
}

# Language switched, no item recognized
_LANGUAGE_CONFIRMATIONS: Dict[str, str] = {
    "hi": "हिंदी चुनी गई - पूरा ऐप हिंदी में बदल गया।",
    "en": "English selected - App language switched to English.",
    "bn": "বাংলা নির্বাচিত - অ্যাপের ভাষা বাংলায় পরিবর্তিত হয়েছে।",
    "mr": "मराठी निवडली - अॅपची भाषा मराठीत बदलली.",
    "ta": "தமிழ் தேர்ந்தெடுக்கப்பட்டது - பயன்பாட்டின் மொழி தமிழுக்கு மாற்றப்பட்டது.",
    "te": "తెలుగు ఎంచుకోబడింది - యాప్ భాష తెలుగులోకి మార్చబడింది.",
}

_ORDER_FAILURES: Dict[str, str] = {
    "hi": 'ऑर्डर समझ नहीं आया। कृपया "1 किलो आलू" या "2 किलो प्याज" जैसा बोलें।',
    "en": 'Could not understand the order. Please try saying something like "1 kg potato" or "2 kilo onion".',
    "bn": 'অর্ডার বোঝা যায়নি। অনুগ্রহ করে "১ কেজি আলু" বা "২ কেজি পেঁয়াজ" এর মতো বলুন।',
    "mr": 'ऑर्डर समजली नाही. कृपया "1 किलो बटाटा" किंवा "2 किलो कांदा" असे बोला.',
    "ta": 'ஆர்டர் புரியவில்லை. "1 கிலோ உருளைக்கிழங்கு" அல்லது "2 கிலோ வெங்காயம்" என்று சொல்லுங்கள்.',
    "te": 'ఆర్డర్ అర్థం కాలేదు. "1 కిలో బంగాళాదుంప" లేదా "2 కిలో ఉల్లిపాయ" అని చెప్పండి.',
}

_ORDER_ERRORS: Dict[str, str] = {
    "hi": "ऑर्डर प्रोसेस करने में त्रुटि हुई। कृपया फिर से कोशिश करें।",
    "en": "Error processing order. Please try again.",
    "bn": "অর্ডার প্রক্রিয়া করতে ত্রুটি হয়েছে। আবার চেষ্টা করুন।",
    "mr": "ऑर्डर प्रक्रिया करताना त्रुटी आली. कृपया पुन्हा प्रयत्न करा.",
    "ta": "ஆர்டரை செயலாக்குவதில் பிழை. மீண்டும் முயற்சிக்கவும்.",
    "te": "ఆర్డర్ ప్రాసెస్ చేయడంలో లోపం. దయచేసి మళ్ళీ ప్రయత్నించండి.",
}

_ORDER_SUCCESSES: Dict[str, str] = {
    "hi": "{platform} पर {product} खोज रहे हैं...",
    "en": "Searching for {product} on {platform}...",
    "bn": "{platform}-এ {product} খোঁজা হচ্ছে...",
    "mr": "{platform} वर {product} शोधत आहे...",
    "ta": "{platform} இல் {product} தேடுகிறது...",
    "te": "{platform} లో {product} వెతుకుతోంది...",
}


def _localized(templates: Dict[str, str], language: Optional[str]) -> str:
    return templates.get(language or FALLBACK_LANGUAGE, templates[FALLBACK_LANGUAGE])


def get_voice_confirmation_message(language: str, item_name: Optional[str] = None) -> str:
    """Confirmation spoken back after a price inquiry"""
    if item_name:
        return _localized(_ITEM_CONFIRMATIONS, language).format(item=item_name)
    return _localized(_LANGUAGE_CONFIRMATIONS, language)


def get_speech_locale(language: str) -> str:
    """BCP-47 locale for the browser speech recognition / synthesis APIs"""
    return SPEECH_LOCALES.get(language, DEFAULT_SPEECH_LOCALE)


def get_order_failure_message(language: str) -> str:
    return _localized(_ORDER_FAILURES, language)


def get_order_error_message(language: str) -> str:
    return _localized(_ORDER_ERRORS, language)


def get_order_success_message(language: str, product: str, platform: str) -> str:
    return _localized(_ORDER_SUCCESSES, language).format(product=product, platform=platform)

"""
Integration Tests for the Voice API

Exercises the FastAPI app end to end through TestClient:
- Health and root endpoints
- Every /api/v1/voice endpoint, success and error paths
- Standard error body and request ID propagation
"""

from urllib.parse import urlparse

import pytest

from bhashabazaar.nlp.voice_patterns import PLATFORMS

VOICE = "/api/v1/voice"


# ============================================================================
# TEST: Health
# ============================================================================

class TestHealth:

    @pytest.mark.integration
    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "test"
        assert set(data["supported_languages"]) == {"hi", "en", "bn", "mr", "ta", "te"}

    @pytest.mark.integration
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["health_check"] == "/api/v1/health"

    @pytest.mark.integration
    def test_request_id_is_echoed(self, client):
        response = client.get("/api/v1/health", headers={"X-Request-ID": "req_test_123"})
        assert response.headers["X-Request-ID"] == "req_test_123"

    @pytest.mark.integration
    def test_request_id_is_generated(self, client):
        response = client.get("/api/v1/health")
        assert response.headers["X-Request-ID"].startswith("req_")


# ============================================================================
# TEST: Price inquiry endpoints
# ============================================================================

class TestPriceInquiryEndpoints:

    @pytest.mark.integration
    def test_detect_language(self, client):
        response = client.post(f"{VOICE}/detect-language", json={"transcript": "potato price"})
        assert response.status_code == 200
        assert response.json() == {"language": "en", "speech_locale": "en-US"}

    @pytest.mark.integration
    def test_detect_language_marathi(self, client):
        response = client.post(f"{VOICE}/detect-language", json={"transcript": "मी बाजारात जात आहे"})
        assert response.json()["language"] == "mr"

    @pytest.mark.integration
    def test_extract_item(self, client):
        response = client.post(f"{VOICE}/extract-item", json={"transcript": "mujhe tel chahiye"})
        assert response.json() == {"item": "Oil"}

    @pytest.mark.integration
    def test_extract_item_none(self, client):
        response = client.post(f"{VOICE}/extract-item", json={"transcript": "hotel chahiye"})
        assert response.json() == {"item": None}

    @pytest.mark.integration
    def test_price_inquiry(self, client):
        response = client.post(f"{VOICE}/price-inquiry", json={"transcript": "pyaj ka rate kya hai"})
        data = response.json()
        assert data["language"] == "hi"
        assert data["item"] == "Onion"
        assert data["speech_locale"] == "hi-IN"

    @pytest.mark.integration
    def test_confirmation(self, client):
        response = client.get(f"{VOICE}/confirmation", params={"language": "en", "item": "Potato"})
        assert response.status_code == 200
        assert response.json()["message"] == "Starting price comparison for Potato. Language switched to English."

    @pytest.mark.integration
    def test_confirmation_defaults_to_hindi(self, client):
        response = client.get(f"{VOICE}/confirmation")
        assert response.json()["message"] == "हिंदी चुनी गई - पूरा ऐप हिंदी में बदल गया।"

    @pytest.mark.integration
    def test_confirmation_unknown_language(self, client):
        response = client.get(f"{VOICE}/confirmation", params={"language": "fr"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


# ============================================================================
# TEST: Voice order endpoints
# ============================================================================

class TestVoiceOrderEndpoints:

    @pytest.mark.integration
    def test_parse_order(self, client):
        response = client.post(f"{VOICE}/parse-order", json={"transcript": "2 kilo aloo"})
        assert response.json() == {"order": {"quantity": 2.0, "unit": "kg", "product": "aloo"}}

    @pytest.mark.integration
    def test_parse_order_unparseable(self, client):
        response = client.post(f"{VOICE}/parse-order", json={"transcript": "hello how are you"})
        assert response.status_code == 200
        assert response.json() == {"order": None}

    @pytest.mark.integration
    def test_voice_order(self, client):
        response = client.post(f"{VOICE}/order", json={"transcript": "2 kilo aloo"})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["language"] == "hi"
        assert data["product"]["name"] == "aloo"
        assert data["product"]["translated_name"] == "potato"
        hosts = {urlparse(platform.search_url_template).netloc for platform in PLATFORMS}
        assert urlparse(data["redirect_url"]).netloc in hosts

    @pytest.mark.integration
    def test_voice_order_failure_is_not_an_http_error(self, client):
        response = client.post(f"{VOICE}/order", json={"transcript": "hello how are you"})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["redirect_url"] is None

    @pytest.mark.integration
    def test_list_platforms(self, client):
        data = client.get(f"{VOICE}/platforms").json()
        assert [platform["name"] for platform in data] == ["Blinkit", "Zepto", "BigBasket", "JioMart"]
        assert sum(platform["priority"] for platform in data) == pytest.approx(1.0)

    @pytest.mark.integration
    def test_get_platform_case_insensitive(self, client):
        response = client.get(f"{VOICE}/platforms/zepto")
        assert response.status_code == 200
        assert response.json()["search_url_template"] == "https://www.zeptonow.com/search?query="

    @pytest.mark.integration
    def test_get_unknown_platform(self, client):
        response = client.get(f"{VOICE}/platforms/amazon")
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"


# ============================================================================
# TEST: Marketplace matching
# ============================================================================

class TestMatchProduct:

    @pytest.mark.integration
    def test_match_product(self, client, sample_products):
        payload = {
            "query": "aloo",
            "products": [product.model_dump() for product in sample_products],
        }
        response = client.post(f"{VOICE}/match-product", json=payload)
        assert response.status_code == 200
        assert response.json()["product"]["id"] == "PROD-001"

    @pytest.mark.integration
    def test_match_product_none(self, client, sample_products):
        payload = {
            "query": "chocolate",
            "products": [product.model_dump() for product in sample_products],
        }
        assert client.post(f"{VOICE}/match-product", json=payload).json() == {"product": None}


# ============================================================================
# TEST: Request validation
# ============================================================================

class TestTranscriptValidation:

    @pytest.mark.integration
    @pytest.mark.parametrize("path", ["detect-language", "extract-item", "parse-order", "order", "price-inquiry"])
    def test_blank_transcript_rejected(self, client, path):
        response = client.post(f"{VOICE}/{path}", json={"transcript": "   "})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["details"]["field"] == "transcript"

    @pytest.mark.integration
    def test_too_long_transcript_rejected(self, client):
        response = client.post(f"{VOICE}/order", json={"transcript": "a" * 501})
        assert response.status_code == 400
        assert response.json()["error"]["details"]["value"] == 501

    @pytest.mark.integration
    def test_missing_transcript_is_schema_error(self, client):
        response = client.post(f"{VOICE}/order", json={})
        assert response.status_code == 422

    @pytest.mark.integration
    def test_blank_match_query_rejected(self, client):
        response = client.post(f"{VOICE}/match-product", json={"query": "", "products": []})
        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == "query"

"""Tests for the generator and results pages.

Uses TestClient against an app built without lifespan, a fresh SQLite
database per test, and respx for the outbound HTTP calls.
"""

import json
import uuid

import httpx
import pytest
import respx
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from nopasswords import __version__
from nopasswords.db import Base, get_session
from nopasswords.store.service import hset
from web.routers import config, generator, health

GENERATE_URL = "https://backend.example.com/api/generate"


def create_test_app() -> FastAPI:
    """Create a minimal FastAPI app for testing without lifespan."""
    application = FastAPI(title="WiFi QR Code Generator", version=__version__)

    application.include_router(health.router, tags=["health"])
    application.include_router(config.router, prefix="/config", tags=["config"])
    application.include_router(generator.router, tags=["generator"])

    return application


@pytest.fixture
def session_factory(tmp_path):
    """Session factory on a fresh SQLite database file."""
    db_file = tmp_path / f"test_{uuid.uuid4().hex[:8]}.db"
    engine = create_engine(f"sqlite:///{db_file}", echo=False)
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine)
    engine.dispose()


@pytest.fixture
def mock_http():
    """Intercept outbound HTTP calls made by the app."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def client(session_factory, mock_http, monkeypatch):
    """Create a test client wired to the test database."""
    monkeypatch.setenv("NOPASSWORDS_GENERATE_URL", GENERATE_URL)
    monkeypatch.delenv("NOPASSWORDS_ANALYTICS_URL", raising=False)

    app = create_test_app()
    app.state.session_factory = session_factory

    with httpx.Client() as http_client:
        app.state.http_client = http_client
        with TestClient(app) as test_client:
            yield test_client


@pytest.fixture
def stored_result(session_factory):
    """Store a finished generation under id 'xyz'."""
    with get_session(session_factory) as session:
        hset(
            session,
            "xyz",
            {
                "prompt": "italian mountains",
                "wifi_name": "infinity_5g",
                "displayImg": "https://x/img.png",
                "passwordImg": "https://x/img2.png",
                "model_latency": "4500",
            },
        )
    return "xyz"


@pytest.fixture
def valid_form():
    """Valid form submission."""
    return {
        "wifi_name": "infinity_5g",
        "wifi_password": "hunter22",
        "prompt": "italian mountains",
        "encryption": "WPA",
    }


class TestHome:
    """Tests for the empty form page."""

    def test_home_loads(self, client):
        """The form page renders in the empty state."""
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Generate a Wifi QR Code" in response.text
        assert "Wifi Network Name (SSID)" in response.text
        assert "Your Wifi QR Code" not in response.text

    def test_home_lists_options(self, client):
        """Suggestions and encryption options are offered."""
        response = client.get("/")
        assert "futuristic robot creatures" in response.text
        assert '<option value="WEP"' in response.text
        assert '<option value="none"' in response.text


class TestSubmit:
    """Tests for form submission."""

    def test_success_redirects(self, client, mock_http, valid_form):
        """A successful generation redirects to the results page."""
        route = mock_http.post(GENERATE_URL).mock(
            return_value=httpx.Response(
                200,
                json={
                    "id": "abc123",
                    "image_url": "https://x/img.png",
                    "download_url": "https://x/img2.png",
                    "model_latency_ms": 4500,
                },
            )
        )

        response = client.post("/", data=valid_form, follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/results/abc123"
        assert route.call_count == 1
        assert json.loads(route.calls.last.request.content) == valid_form

    def test_invalid_input_no_request(self, client, mock_http, valid_form):
        """Invalid input re-renders with a field message and no request."""
        route = mock_http.post(GENERATE_URL).mock(return_value=httpx.Response(200))
        valid_form["prompt"] = "ab"

        response = client.post("/", data=valid_form)

        assert response.status_code == 400
        assert "at least 3 characters" in response.text
        assert route.call_count == 0
        # Entered values are kept
        assert "infinity_5g" in response.text

    def test_server_error_banner(self, client, mock_http, valid_form):
        """A 500 from the backend shows the error banner."""
        mock_http.post(GENERATE_URL).mock(
            return_value=httpx.Response(500, text="internal error")
        )

        response = client.post("/", data=valid_form)

        assert response.status_code == 502
        assert 'role="alert"' in response.text
        assert "Failed to generate QR code: 500, internal error" in response.text
        assert "Generating..." not in response.text.split("<script>")[0]

    def test_network_error_banner(self, client, mock_http, valid_form):
        """Transport failures also show the error banner."""
        mock_http.post(GENERATE_URL).mock(side_effect=httpx.ConnectError("refused"))

        response = client.post("/", data=valid_form)

        assert response.status_code == 502
        assert "Failed to generate QR code" in response.text


class TestSuggestion:
    """Tests for the suggestion picker."""

    def test_suggestion_fills_prompt(self, client, mock_http):
        """Picking a suggestion re-renders with the prompt filled in."""
        route = mock_http.post(GENERATE_URL).mock(return_value=httpx.Response(200))

        response = client.post(
            "/suggestion",
            data={
                "suggestion": "minimalist futuristic architecture",
                "wifi_name": "infinity_5g",
                "wifi_password": "hunter22",
                "encryption": "WEP",
            },
        )

        assert response.status_code == 200
        assert (
            ">minimalist futuristic architecture</textarea>" in response.text
        )
        assert 'value="infinity_5g"' in response.text
        assert '<option value="WEP" selected>' in response.text
        assert route.call_count == 0


class TestResultsPage:
    """Tests for the results page."""

    def test_results_page(self, client, stored_result):
        """A stored result renders with metadata and the generation time."""
        response = client.get(f"/results/{stored_result}")

        assert response.status_code == 200
        assert (
            "<title>Wifi Qr Code Generator: italian mountains</title>"
            in response.text
        )
        assert "linking to: infinity_5g" in response.text
        assert "4.50" in response.text
        assert "Your Wifi QR Code" in response.text
        assert 'src="https://x/img.png"' in response.text

    def test_results_page_social_metadata(self, client, stored_result):
        """Open Graph and Twitter tags carry the preview image."""
        response = client.get(f"/results/{stored_result}")

        assert '<meta property="og:image" content="https://x/img.png">' in response.text
        assert 'content="summary_large_image"' in response.text
        assert 'content="@emergingbits"' in response.text

    def test_results_page_prefills_form(self, client, stored_result):
        """The form is pre-filled with the stored prompt and network."""
        response = client.get(f"/results/{stored_result}")

        assert ">italian mountains</textarea>" in response.text
        assert 'value="infinity_5g"' in response.text
        assert "Regenerate" in response.text

    def test_results_page_download_links(self, client, stored_result):
        """Both download actions link to the download route."""
        response = client.get(f"/results/{stored_result}")

        assert "Download With Password" in response.text
        assert "Download Without Password" in response.text
        assert "/results/xyz/download?variant=password" in response.text
        assert "/results/xyz/download?variant=display" in response.text

    def test_results_page_not_found(self, client):
        """Unknown ids give a 404 without metadata or form."""
        response = client.get("/results/missing")

        assert response.status_code == 404
        assert "Result not found: missing" in response.json()["detail"]
        assert "og:image" not in response.text

    def test_results_page_unfinished(self, client, session_factory):
        """A record without a display image uses the fallback preview."""
        with get_session(session_factory) as session:
            hset(session, "pending", {"prompt": "forest", "wifi_name": "home"})

        response = client.get("/results/pending")

        assert response.status_code == 200
        assert "https://nopasswords.xyz/og-image.png" in response.text
        assert "Your Wifi QR Code" not in response.text

    def test_results_page_idempotent(self, client, stored_result):
        """Rendering the same result twice gives the same page."""
        first = client.get(f"/results/{stored_result}")
        second = client.get(f"/results/{stored_result}")
        assert first.text == second.text


class TestResultsDownload:
    """Tests for image downloads."""

    def test_download_with_password(self, client, mock_http, stored_result):
        """The password variant serves the password image as an attachment."""
        mock_http.get("https://x/img2.png").mock(
            return_value=httpx.Response(
                200, content=b"password-image", headers={"content-type": "image/png"}
            )
        )

        response = client.get(f"/results/{stored_result}/download?variant=password")

        assert response.status_code == 200
        assert response.content == b"password-image"
        assert response.headers["content-type"] == "image/png"
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="wifiQrCode.png"'
        )

    def test_download_without_password(self, client, mock_http, stored_result):
        """The display variant serves the display image."""
        mock_http.get("https://x/img.png").mock(
            return_value=httpx.Response(
                200, content=b"display-image", headers={"content-type": "image/png"}
            )
        )

        response = client.get(f"/results/{stored_result}/download?variant=display")

        assert response.status_code == 200
        assert response.content == b"display-image"

    def test_download_not_found(self, client):
        """Downloading an unknown result gives 404."""
        response = client.get("/results/missing/download")
        assert response.status_code == 404

    def test_download_invalid_variant(self, client, stored_result):
        """Unknown variants are rejected."""
        response = client.get(f"/results/{stored_result}/download?variant=other")
        assert response.status_code == 422

    def test_download_upstream_failure(self, client, mock_http, stored_result):
        """Image host failures give 502."""
        mock_http.get("https://x/img2.png").mock(return_value=httpx.Response(500))

        response = client.get(f"/results/{stored_result}/download")

        assert response.status_code == 502

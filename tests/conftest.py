"""
Shared fakes. Playwright and SMTP are never touched for real.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from stamp_pdf.config import Settings
from stamp_pdf.main import create_app

FAKE_PDF = b"%PDF-1.7\n%fake stamp\n%%EOF"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        smtp_host="mail.example.pl",
        smtp_port=587,
        smtp_user="kreator@example.pl",
        smtp_password="secret",
        receiver_email="zamowienia@example.pl",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.state.dispatcher = MagicMock(send=AsyncMock())
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


class FakeBrowser:
    """Stands in for playwright's async_playwright() entry point."""

    def __init__(self, pdf_bytes: bytes = FAKE_PDF):
        self.calls = []

        self.page = MagicMock()
        self.page.set_content = AsyncMock(side_effect=self._record("set_content"))
        self.fonts_handle = MagicMock(dispose=AsyncMock())
        self.page.evaluate_handle = AsyncMock(side_effect=self._record("fonts_ready", self.fonts_handle))
        self.page.pdf = AsyncMock(side_effect=self._record("pdf", pdf_bytes))

        self.browser = MagicMock()
        self.browser.new_page = AsyncMock(return_value=self.page)
        self.browser.close = AsyncMock(side_effect=self._record("close"))

        self.playwright = MagicMock()
        self.playwright.chromium.launch = AsyncMock(return_value=self.browser)

        cm = MagicMock()
        cm.__aenter__ = AsyncMock(return_value=self.playwright)
        cm.__aexit__ = AsyncMock(return_value=False)
        self.entry = MagicMock(return_value=cm)

    def _record(self, name, result=None):
        def _side_effect(*args, **kwargs):
            self.calls.append(name)
            return result
        return _side_effect


@pytest.fixture
def fake_browser() -> FakeBrowser:
    return FakeBrowser()

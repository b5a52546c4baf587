"""
Stamp renderer: caller HTML/CSS -> single-page PDF via headless Chromium.

Every call gets its own browser. The page is captured only after the network
is idle AND document.fonts.ready has resolved; capturing earlier silently
produces wrong glyphs.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Union

from playwright.async_api import Browser, async_playwright

logger = logging.getLogger(__name__)

CHROMIUM_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

# Appended after caller CSS so they always win.
ENFORCED_CSS = (
    "body { margin: 0; padding: 0; -webkit-print-color-adjust: exact; }\n"
    ".stamp { border: none !important; margin: 0 !important; }"
)

DOCUMENT_SHELL = """<!DOCTYPE html>
<html lang="pl">
<head>
  <meta charset="UTF-8" />
  <style>
{css}
{enforced}
  </style>
</head>
<body>{html}</body>
</html>
"""


class RenderFailure(Exception):
    """The browser could not launch, load the document or print it."""


def compose_document(html: Optional[str], css: Optional[str]) -> str:
    return DOCUMENT_SHELL.format(css=css or "", enforced=ENFORCED_CSS, html=html or "")


@asynccontextmanager
async def browser_session() -> AsyncIterator[Browser]:
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True, args=CHROMIUM_ARGS)
        try:
            yield browser
        finally:
            await browser.close()


async def render_pdf(
    html: Optional[str],
    css: Optional[str],
    width: Union[str, float, None],
    height: Union[str, float, None],
) -> bytes:
    document = compose_document(html, css)
    try:
        async with browser_session() as browser:
            page = await browser.new_page()
            await page.set_content(document, wait_until="networkidle")
            fonts_ready = await page.evaluate_handle("document.fonts.ready")
            await fonts_ready.dispose()
            # first page only; overflow is dropped
            pdf_bytes = await page.pdf(
                width=width,
                height=height,
                print_background=True,
                page_ranges="1",
            )
    except Exception as e:
        raise RenderFailure(f"PDF render failed: {e}") from e

    logger.info("Rendered PDF %sx%s (%d bytes)", width, height, len(pdf_bytes))
    return pdf_bytes

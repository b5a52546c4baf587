"""
Stamp PDF backend.
FastAPI application that renders stamp designs to PDF and mails orders to the shop.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stamp_pdf.api.render import router as render_router
from stamp_pdf.config import Settings, load_settings
from stamp_pdf.mail.dispatcher import MailDispatcher

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title="STAMP_PDF", version="1.0")
    app.state.settings = settings
    app.state.dispatcher = MailDispatcher(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(render_router)
    return app


def log_banner(settings: Settings) -> None:
    logger.info(
        "--- Stamp creator backend ---\n"
        "  Port:      %s\n"
        "  SMTP host: %s\n"
        "  SMTP user: %s\n"
        "  Receiver:  %s",
        settings.port,
        settings.smtp_host,
        settings.smtp_user,
        settings.receiver_email,
    )


def run() -> None:
    settings = load_settings()
    log_banner(settings)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()

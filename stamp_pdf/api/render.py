from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from stamp_pdf.config import Settings
from stamp_pdf.mail.dispatcher import DispatchFailure, MailDispatcher
from stamp_pdf.mail.message import build_outbound_message, compose_order_summary
from stamp_pdf.models.order import SendOrderRequest
from stamp_pdf.models.render import RenderRequest
from stamp_pdf.pdf.renderer import RenderFailure, render_pdf

logger = logging.getLogger(__name__)

router = APIRouter(tags=["render"])

PDF_ERROR_MESSAGE = "Błąd generowania PDF"
SEND_ERROR_MESSAGE = "Błąd wysyłki zamówienia"
SENT_MESSAGE = "Wysłano pomyślnie"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_dispatcher(request: Request) -> MailDispatcher:
    return request.app.state.dispatcher


@router.post("/generate-pdf")
async def generate_pdf(payload: RenderRequest = Body(...)):
    """
    Renders the stamp and returns it for download.
    Returns application/pdf bytes.
    """
    try:
        pdf_bytes = await render_pdf(payload.html, payload.css, payload.width, payload.height)
    except RenderFailure:
        logger.exception("[PDF ERROR]")
        return PlainTextResponse(PDF_ERROR_MESSAGE, status_code=500)

    # Response sets Content-Length from the body
    return Response(content=pdf_bytes, media_type="application/pdf")


@router.post("/send-order")
async def send_order(
    payload: SendOrderRequest = Body(...),
    settings: Settings = Depends(get_settings),
    dispatcher: MailDispatcher = Depends(get_dispatcher),
):
    """
    Renders the stamp and mails it, with the order summary, to the shop.
    Render and SMTP errors both come back as the same opaque 500.
    """
    order = payload.order()
    logger.info(
        "Sending order %s from %s to %s",
        order.id, settings.smtp_user, settings.receiver_email,
    )

    try:
        pdf_bytes = await render_pdf(payload.html, payload.css, payload.width, payload.height)
    except RenderFailure:
        logger.exception("[RENDER ERROR] order %s", order.id)
        return PlainTextResponse(SEND_ERROR_MESSAGE, status_code=500)

    summary = compose_order_summary(order, payload.product(), payload.external_id())
    message = build_outbound_message(settings, order, summary, pdf_bytes)

    try:
        await dispatcher.send(message)
    except DispatchFailure:
        logger.exception("[DISPATCH ERROR] order %s", order.id)
        return PlainTextResponse(SEND_ERROR_MESSAGE, status_code=500)

    logger.info("[SUCCESS] Order mail sent.")
    return JSONResponse({"ok": True, "message": SENT_MESSAGE})

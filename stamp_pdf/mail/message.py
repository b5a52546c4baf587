from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from stamp_pdf.config import Settings
from stamp_pdf.models.order import OrderDetails, ProductMeta
from stamp_pdf.util.helpers import PLACEHOLDER, first, text

SENDER_NAME = "Kreator pieczątek"
FALLBACK_ATTACHMENT_STEM = "zamowienie"

SUMMARY_TEMPLATE = """NOWE ZAMÓWIENIE STEMPLA

Numer wewnętrzny: {order_id}
ID zewnętrzne (Allegro/inne): {external_id}

DANE ZAMAWIAJĄCEGO:
--------------------------------------
Firma:       {company}
Miasto:      {city}
Adres:       {address}
Email:       {email}

SZCZEGÓŁY PRODUKTU:
--------------------------------------
Model:       {model}
ID modelu:   {model_id}
Ilość sztuk: {quantity}
Kolor obud.: {color}
Fonty:       {fonts}

--------------------------------------
Plik produkcyjny PDF znajduje się w załączniku.
Wiadomość wygenerowana automatycznie z Kreatora Stempli."""


@dataclass(frozen=True)
class Attachment:
    filename: str
    content: bytes
    content_type: str = "application/pdf"


@dataclass(frozen=True)
class OutboundMessage:
    sender: str
    to: str
    subject: str
    body_text: str
    attachment: Attachment
    reply_to: Optional[str] = None


def compose_order_summary(order: OrderDetails, meta: ProductMeta, external_id=None) -> str:
    """Plain-text body for the shop. Every line is always present."""
    return SUMMARY_TEMPLATE.format(
        order_id=text(order.id, PLACEHOLDER),
        external_id=text(external_id, PLACEHOLDER),
        company=text(order.companyName),
        city=text(order.city),
        address=text(order.address),
        email=text(order.contactEmail),
        model=first(meta.modelName, meta.size),
        model_id=text(meta.size),
        quantity=text(order.quantity),
        color=text(order.color),
        fonts=text(meta.fonts),
    )


def attachment_filename(order: OrderDetails) -> str:
    return f"stempel-{text(order.id, FALLBACK_ATTACHMENT_STEM)}.pdf"


def build_outbound_message(
    settings: Settings,
    order: OrderDetails,
    body_text: str,
    pdf_bytes: bytes,
) -> OutboundMessage:
    return OutboundMessage(
        sender=f'"{SENDER_NAME}" <{text(settings.smtp_user)}>',
        to=text(settings.receiver_email),
        reply_to=order.contactEmail if isinstance(order.contactEmail, str) and order.contactEmail else None,
        subject=f"[PRZEKAZANO] Stempel zamówienie – {text(order.id)}",
        body_text=body_text,
        attachment=Attachment(filename=attachment_filename(order), content=pdf_bytes),
    )

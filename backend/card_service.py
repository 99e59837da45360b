import base64
import io
import logging
from typing import Optional

import qrcode
from qrcode.image.svg import SvgPathImage
from reportlab.lib.units import cm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas as pdf_canvas
from sqlalchemy.orm import Session

from card_format import censor_nik, format_indonesian_date, format_registration_number, generate_qr_data
from models import Event, Participant
from schemas import CardData, CardEvent, CardParticipant

logger = logging.getLogger(__name__)

CARD_WIDTH = 10 * cm
CARD_HEIGHT = 18 * cm


def _make_qr(payload: str, box_size: int) -> qrcode.QRCode:
    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=0,
    )
    qr.add_data(payload)
    qr.make(fit=True)
    return qr


def render_qr_svg(payload: str) -> str:
    image = _make_qr(payload, box_size=6).make_image(image_factory=SvgPathImage)
    return image.to_string(encoding="unicode")


def _render_qr_png(payload: str) -> bytes:
    image = _make_qr(payload, box_size=4).make_image(fill_color="black", back_color="white")
    buffer = io.BytesIO()
    image.save(buffer)
    return buffer.getvalue()


def banner_data_uri(event: Event) -> Optional[str]:
    if not event.banner_data:
        return None
    content_type = event.banner_content_type or "image/png"
    encoded = base64.b64encode(event.banner_data).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


def _decode_data_uri_bytes(data_uri: Optional[str]) -> Optional[bytes]:
    if not data_uri or not data_uri.startswith("data:"):
        return None
    try:
        _, payload = data_uri.split(",", 1)
        return base64.b64decode(payload)
    except (ValueError, TypeError):
        return None


def build_card_data(db: Session, event_id: int, participant_id: int) -> Optional[CardData]:
    event = db.query(Event).filter(Event.id == event_id).first()
    if not event:
        return None
    participant = (
        db.query(Participant)
        .filter(Participant.id == participant_id, Participant.event_id == event.id)
        .first()
    )
    if not participant:
        return None

    qr_payload = generate_qr_data(event.id, participant.id, participant.registration_number, participant.name)
    return CardData(
        event=CardEvent(
            id=event.id,
            name=event.name,
            location=event.location,
            event_date=event.event_date,
        ),
        participant=CardParticipant(
            id=participant.id,
            name=participant.name,
            nik=participant.nik,
            phone_number=participant.phone_number,
            institution=participant.institution,
            email=participant.email,
            registration_number=participant.registration_number,
        ),
        qr_code_svg=render_qr_svg(qr_payload),
        banner_data_uri=banner_data_uri(event),
    )


def render_card_pdf(card: CardData) -> bytes:
    """Lay out one participant card on a 10 x 18 cm page."""
    buffer = io.BytesIO()
    canvas = pdf_canvas.Canvas(buffer, pagesize=(CARD_WIDTH, CARD_HEIGHT))
    canvas.setTitle(f"Kartu Peserta {card.participant.registration_number}")
    center_x = CARD_WIDTH / 2.0
    cursor_y = CARD_HEIGHT

    banner_bytes = _decode_data_uri_bytes(card.banner_data_uri)
    if banner_bytes:
        try:
            banner = ImageReader(io.BytesIO(banner_bytes))
            banner_height = 4 * cm
            canvas.drawImage(
                banner,
                0,
                CARD_HEIGHT - banner_height,
                width=CARD_WIDTH,
                height=banner_height,
                preserveAspectRatio=True,
                mask="auto",
            )
            cursor_y -= banner_height
        except Exception as exc:
            logger.error(f"Failed to draw banner for card {card.participant.registration_number}: {exc}")

    cursor_y -= 1 * cm
    canvas.setFont("Helvetica-Bold", 14)
    canvas.drawCentredString(center_x, cursor_y, card.event.name)
    canvas.setFont("Helvetica", 9)
    if card.event.event_date:
        cursor_y -= 0.6 * cm
        canvas.drawCentredString(center_x, cursor_y, format_indonesian_date(card.event.event_date))
    if card.event.location:
        cursor_y -= 0.5 * cm
        canvas.drawCentredString(center_x, cursor_y, card.event.location)

    qr_size = 4.5 * cm
    cursor_y -= 0.8 * cm + qr_size
    qr_payload = generate_qr_data(
        card.event.id,
        card.participant.id,
        card.participant.registration_number,
        card.participant.name,
    )
    canvas.drawImage(
        ImageReader(io.BytesIO(_render_qr_png(qr_payload))),
        center_x - qr_size / 2.0,
        cursor_y,
        width=qr_size,
        height=qr_size,
    )

    cursor_y -= 1 * cm
    canvas.setFont("Helvetica-Bold", 13)
    canvas.drawCentredString(center_x, cursor_y, card.participant.name)
    cursor_y -= 0.6 * cm
    canvas.setFont("Helvetica", 11)
    canvas.drawCentredString(
        center_x, cursor_y, format_registration_number(card.participant.registration_number)
    )

    details = [
        ("NIK", censor_nik(card.participant.nik)),
        ("Instansi", card.participant.institution or "-"),
    ]
    canvas.setFont("Helvetica", 9)
    for label, value in details:
        cursor_y -= 0.5 * cm
        canvas.drawCentredString(center_x, cursor_y, f"{label}: {value}")

    canvas.showPage()
    canvas.save()
    return buffer.getvalue()

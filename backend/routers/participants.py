import io
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from card_service import build_card_data, render_card_pdf
from database import get_db
from models import Event
from schemas import CardData

router = APIRouter()
logger = logging.getLogger(__name__)


def _card_or_404(db: Session, event_id: int, participant_id: int) -> CardData:
    if not db.query(Event.id).filter(Event.id == event_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    card = build_card_data(db, event_id, participant_id)
    if card is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Participant not found")
    return card


@router.get("/events/{event_id}/participants/{participant_id}/card_data", response_model=CardData)
def get_card_data(event_id: int, participant_id: int, db: Session = Depends(get_db)):
    return _card_or_404(db, event_id, participant_id)


@router.get("/events/{event_id}/participants/{participant_id}/download_card")
def download_card(
    event_id: int,
    participant_id: int,
    download: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
):
    """Card PDF. Only ``download=true`` asks for an attachment; any other value stays inline."""
    card = _card_or_404(db, event_id, participant_id)
    logger.info("PDF generation started for participant %s, event %s", participant_id, event_id)
    try:
        content = render_card_pdf(card)
    except Exception:
        logger.exception("PDF generation failed for participant %s, event %s", participant_id, event_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to generate PDF")
    logger.info("PDF generated successfully, size: %s bytes", len(content))

    disposition = "attachment" if download == "true" else "inline"
    filename = f"kartu_peserta_{card.participant.registration_number}.pdf"
    return StreamingResponse(
        io.BytesIO(content),
        media_type="application/pdf",
        headers={"Content-Disposition": f'{disposition}; filename="{filename}"'},
    )

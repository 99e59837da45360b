import io
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse
from sqlalchemy import case
from sqlalchemy.orm import Session, selectinload

from database import get_db
from models import Category, Event, Prize, Winning
from schemas import PrizeResponse
from winner_report import WinnerListPdf

router = APIRouter()
logger = logging.getLogger(__name__)


def _get_event_or_404(db: Session, event_id: int) -> Event:
    event = db.query(Event).filter(Event.id == event_id).first()
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


def _prize_response(prize: Prize) -> PrizeResponse:
    return PrizeResponse(
        id=prize.id,
        name=prize.name,
        description=prize.description,
        category=prize.category.value,
        quantity=prize.quantity,
        event_id=prize.event_id,
        winnings_count=len(prize.winnings),
        remaining_quantity=prize.remaining_quantity,
        created_at=prize.created_at,
        updated_at=prize.updated_at,
    )


@router.get("/events/{event_id}/prizes", response_model=List[PrizeResponse])
def list_prizes(event_id: int, db: Session = Depends(get_db)):
    event = _get_event_or_404(db, event_id)
    prizes = (
        db.query(Prize)
        .options(selectinload(Prize.winnings))
        .filter(Prize.event_id == event.id)
        .order_by(Prize.created_at.asc(), Prize.id.asc())
        .all()
    )
    return [_prize_response(prize) for prize in prizes]


@router.get("/events/{event_id}/prizes/export")
def export_winner_list(event_id: int, db: Session = Depends(get_db)):
    event = _get_event_or_404(db, event_id)
    if event.creator is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Event has no creator")

    prizes = (
        db.query(Prize)
        .options(selectinload(Prize.winnings).selectinload(Winning.participant))
        .filter(Prize.event_id == event.id)
        .order_by(
            case((Prize.category == Category.UTAMA, 0), else_=1),
            Prize.created_at.asc(),
            Prize.id.asc(),
        )
        .all()
    )
    content = WinnerListPdf(prizes, event).render()
    logger.info("Winner list exported for event %s (%s prizes)", event.id, len(prizes))
    return StreamingResponse(
        io.BytesIO(content),
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=daftar_pemenang_{event.id}.pdf"},
    )

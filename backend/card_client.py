"""HTTP client for participant cards.

Fetches the card JSON projection and the rendered card PDF from the API.
Preview and download hit the same resource; they differ only in the
disposition the server is asked for, which is handed back to the caller
together with the bytes. The same client reads an event's prize list,
normalizing whichever field spelling the server sends.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

import requests

from card_format import censor_nik, format_indonesian_date, format_registration_number, generate_qr_data
from schemas import CardData, PrizeRecord, prize_from_payload

logger = logging.getLogger(__name__)

INLINE = "inline"
ATTACHMENT = "attachment"
DEFAULT_FILENAME = "kartu-peserta.pdf"


@dataclass
class CardDocument:
    content: bytes
    disposition: str
    filename: str = DEFAULT_FILENAME

    @property
    def content_disposition(self) -> str:
        return f'{self.disposition}; filename="{self.filename}"'


def _filename_from_header(header: Optional[str]) -> Optional[str]:
    if not header:
        return None
    for part in header.split(";"):
        key, _, value = part.strip().partition("=")
        if key.lower() == "filename" and value:
            return value.strip().strip('"')
    return None


class ParticipantCardClient:
    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None, timeout: float = 30):
        self.base_url = (base_url or os.environ.get("API_BASE_URL", "http://localhost:8000")).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _card_url(self, event_id: int, participant_id: int, action: str) -> str:
        return f"{self.base_url}/api/events/{event_id}/participants/{participant_id}/{action}"

    def get_card_data(self, event_id: int, participant_id: int) -> CardData:
        response = self.session.get(self._card_url(event_id, participant_id, "card_data"), timeout=self.timeout)
        response.raise_for_status()
        return CardData.model_validate(response.json())

    def list_prizes(self, event_id: int) -> List[PrizeRecord]:
        response = self.session.get(f"{self.base_url}/api/events/{event_id}/prizes", timeout=self.timeout)
        response.raise_for_status()
        return [prize_from_payload(row) for row in response.json()]

    def _fetch_card_pdf(self, event_id: int, participant_id: int, disposition: str) -> CardDocument:
        params = {"download": "true"} if disposition == ATTACHMENT else None
        response = self.session.get(
            self._card_url(event_id, participant_id, "download_card"),
            params=params,
            timeout=self.timeout,
        )
        response.raise_for_status()
        filename = _filename_from_header(response.headers.get("Content-Disposition")) or DEFAULT_FILENAME
        logger.info(f"Fetched card PDF for participant {participant_id} ({len(response.content)} bytes, {disposition})")
        return CardDocument(content=response.content, disposition=disposition, filename=filename)

    def preview_card(self, event_id: int, participant_id: int) -> CardDocument:
        """Card PDF meant to be shown in place."""
        return self._fetch_card_pdf(event_id, participant_id, INLINE)

    def download_card(self, event_id: int, participant_id: int) -> CardDocument:
        """Card PDF meant to be saved as a file."""
        return self._fetch_card_pdf(event_id, participant_id, ATTACHMENT)

    # display helpers, exposed next to the fetch calls for callers rendering cards
    generate_qr_data = staticmethod(generate_qr_data)
    censor_nik = staticmethod(censor_nik)
    format_indonesian_date = staticmethod(format_indonesian_date)
    format_registration_number = staticmethod(format_registration_number)

"""Winner list report.

Renders "Daftar Pemenang" for one event: a title, the event metadata, then one
block per prize listing its winners in award order. The layout is a flat list
of text lines and spacers; reportlab's platypus engine decides where pages
break.
"""

import io
import logging
from typing import Iterable, List, Tuple, Union
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from card_format import format_report_date

logger = logging.getLogger(__name__)

NO_WINNERS_LINE = "   Belum ada pemenang."

STYLES = {
    "title": ParagraphStyle("WinnerTitle", fontName="Helvetica-Bold", fontSize=24, leading=29, alignment=TA_CENTER),
    "meta": ParagraphStyle("WinnerMeta", fontName="Helvetica", fontSize=12, leading=14.5),
    "prize": ParagraphStyle("WinnerPrize", fontName="Helvetica-Bold", fontSize=14, leading=17),
    "winner": ParagraphStyle("WinnerEntry", fontName="Helvetica-Oblique", fontSize=12, leading=14.5),
}

# (text, style) for text lines, (None, points) for vertical gaps
ReportLine = Tuple[Union[str, None], Union[str, int]]


def build_report_lines(prizes: Iterable, event) -> List[ReportLine]:
    lines: List[ReportLine] = [
        (f"Daftar Pemenang {event.name}", "title"),
        (None, 20),
        (f"Tanggal Event: {format_report_date(event.event_date)}", "meta"),
        (f"Dibuat oleh: {event.creator.name}", "meta"),
        (None, 20),
    ]
    for index, prize in enumerate(prizes, start=1):
        winners = list(prize.winners)
        lines.append((f"{index}. {prize.name} ({len(winners)}/{prize.quantity} Pemenang)", "prize"))
        if winners:
            for winner in winners:
                lines.append((f"   - {winner.name} (No. Peserta: {winner.participant_number})", "winner"))
        else:
            lines.append((NO_WINNERS_LINE, "winner"))
        lines.append((None, 10))
    return lines


def _paragraph_markup(text: str) -> str:
    # Paragraph collapses leading whitespace; keep the indent as hard spaces
    stripped = text.lstrip(" ")
    return "&nbsp;" * (len(text) - len(stripped)) + escape(stripped)


class WinnerListPdf:
    def __init__(self, prizes: Iterable, event):
        self.prizes = list(prizes)
        self.event = event

    def render(self) -> bytes:
        flowables = []
        for text, style in build_report_lines(self.prizes, self.event):
            if text is None:
                flowables.append(Spacer(1, style))
            else:
                flowables.append(Paragraph(_paragraph_markup(text), STYLES[style]))

        buffer = io.BytesIO()
        document = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            topMargin=0.5 * inch,
            bottomMargin=0.5 * inch,
            title=f"Daftar Pemenang {self.event.name}",
        )
        document.build(flowables)
        pdf_bytes = buffer.getvalue()
        logger.info(f"Winner list rendered for {self.event.name}: {len(self.prizes)} prizes, {len(pdf_bytes)} bytes")
        return pdf_bytes

# export.py
from __future__ import annotations

import logging
import os
from io import BytesIO
from pathlib import Path
from typing import Any, List, Optional
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from b_types.party_types import Guest, Party
from utils.helpers import coalesce_str, display_day

logger = logging.getLogger(__name__)

EMPTY_PDF = b"%PDF-1.4\n1 0 obj <<>> endobj\ntrailer <<>>\n%%EOF\n"

FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/local/share/fonts/DejaVuSans.ttf",
    str(Path(__file__).resolve().parent.parent / "DejaVuSans.ttf"),
]


def to_ascii(s: Any) -> str:
    if not isinstance(s, str):
        return ""
    return s.strip().encode("ascii", "ignore").decode("ascii")


def _register_unicode_font(styles) -> bool:
    font_path = next((p for p in FONT_CANDIDATES if os.path.exists(p)), None)
    if not font_path:
        return False
    try:
        pdfmetrics.registerFont(TTFont("DejaVuSans", font_path))
    except Exception as e:
        logger.warning(f"Could not register {font_path}: {e}")
        return False
    for name in ("Normal", "Heading1", "Heading2"):
        styles[name].fontName = "DejaVuSans"
    return True


def party_file_name(party: Party) -> str:
    name = to_ascii(coalesce_str(party.get("name"), "party")).replace(" ", "_") or "party"
    return f"party_{party.get('id', '')}_{name}.pdf"


def build_party_pdf(party: Party, guests: Optional[List[Guest]] = None) -> bytes:
    """One-page party sheet: details plus the names of rsvp'd guests."""
    buf = BytesIO()
    title = f"{coalesce_str(party.get('name'))} #{party.get('id', '')}"
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36,
        title=to_ascii(title),
    )
    styles = getSampleStyleSheet()
    has_unicode_font = _register_unicode_font(styles)

    def _txt(s: Any) -> str:
        text = s if has_unicode_font else to_ascii(s)
        return escape(text if isinstance(text, str) else "")

    story: List[Any] = [Paragraph(_txt(title), styles["Heading1"]), Spacer(1, 8)]

    meta_lines = []
    for label, value in (("Date", display_day(party.get("date"))), ("Location", party.get("location"))):
        if value:
            meta_lines.append(f"<b>{label}:</b> {_txt(value)}")
    if meta_lines:
        story.append(Paragraph("<br/>".join(meta_lines), styles["Normal"]))
        story.append(Spacer(1, 12))

    description = coalesce_str(party.get("description"))
    if description:
        story.append(Paragraph(_txt(description).replace("\n", "<br/>"), styles["Normal"]))
        story.append(Spacer(1, 12))

    story.append(Paragraph("Guests", styles["Heading2"]))
    names = [g.get("name", "") for g in guests or []]
    story.append(Paragraph("<br/>".join(_txt(n) for n in names) if names else "No RSVPs yet.", styles["Normal"]))

    try:
        doc.build(story)
        return buf.getvalue()
    except Exception:
        logger.exception(f"Could not build PDF for party {party.get('id')}")
        return EMPTY_PDF

"""
Certificate rendering.

Public API
----------
    render_certificate(result, quiz, display_name, issuer=...) -> Certificate

*result* needs id / score / passed / created_at and *quiz* needs title;
the ORM rows are passed straight in by the API layer.

The page is drawn once with PyMuPDF (A4 landscape) and exported twice:
as a PDF document and as a PNG snapshot for on-screen preview.
"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass
from datetime import datetime

import fitz  # PyMuPDF

from certifyme.errors import NotFoundError

log = logging.getLogger(__name__)

DEFAULT_ISSUER = "CertifyMe Platform"

_PAGE_WIDTH, _PAGE_HEIGHT = fitz.paper_size("a4-l")
_PREVIEW_ZOOM = 2  # PNG snapshot at 2x the PDF point size

# ── Palette ───────────────────────────────────────────────────────────────────
_BACKGROUND   = (0.937, 0.957, 1.0)
_PRIMARY      = (0.263, 0.220, 0.792)
_PRIMARY_SOFT = (0.780, 0.765, 0.949)
_PRIMARY_MID  = (0.600, 0.580, 0.900)
_TEXT_DARK    = (0.122, 0.161, 0.216)
_TEXT_MUTED   = (0.294, 0.333, 0.388)
_SUCCESS      = (0.086, 0.639, 0.290)
_RULE         = (0.612, 0.639, 0.686)

_MIN_FONT_SIZE = 8


@dataclass(frozen=True)
class Certificate:
    pdf: bytes
    png: bytes
    filename: str
    certificate_id: str


def certificate_filename(quiz_title: str) -> str:
    return re.sub(r"\s+", "_", quiz_title) + "_Certificate.pdf"


def certificate_id(result_id: str) -> str:
    return result_id[-8:].upper()


def format_completion_date(created_at: datetime) -> str:
    return f"{created_at:%B} {created_at.day}, {created_at.year}"


def _hex(color) -> str:
    return "#" + "".join(f"{round(c * 255):02x}" for c in color)


def _text(page, rect, text: str, fontsize: float, *, bold: bool = False,
          color=_TEXT_DARK, align: str = "center") -> None:
    """Write one line of *text* into *rect*, scaling it down until it fits.

    Goes through the HTML engine so characters outside the base-14 fonts
    (Ł, 李, ...) are drawn with MuPDF's fallback fonts.
    """
    css = (
        f"* {{font-family: sans-serif; font-size: {fontsize}px; "
        f"font-weight: {'bold' if bold else 'normal'}; color: {_hex(color)}; "
        f"text-align: {align}; margin: 0; padding: 0;}}"
    )
    spare, _scale = page.insert_htmlbox(
        rect, html.escape(text), css=css, scale_low=_MIN_FONT_SIZE / fontsize,
    )
    if spare < 0:
        log.error("certificate text %r does not fit in %s", text, rect)
        raise ValueError(f"certificate text does not fit: {text!r}")


def _centered(page, y: float, text: str, fontsize: float, *, bold: bool = False,
              color=_TEXT_DARK, x0: float = 60, x1: float = _PAGE_WIDTH - 60) -> float:
    """Write *text* centered between x0 and x1; returns the y just below the line."""
    rect = fitz.Rect(x0, y, x1, y + fontsize * 2)
    _text(page, rect, text, fontsize, bold=bold, color=color)
    return rect.y1


def _draw(page, *, name: str, quiz_title: str, score: int,
          completed_on: str, cert_id: str, issuer: str) -> None:
    width, height = _PAGE_WIDTH, _PAGE_HEIGHT

    # Background and decorative double border
    page.draw_rect(page.rect, color=None, fill=_BACKGROUND)
    page.draw_rect(fitz.Rect(16, 16, width - 16, height - 16), color=_PRIMARY_SOFT, width=4)
    page.draw_rect(fitz.Rect(24, 24, width - 24, height - 24), color=_PRIMARY_MID, width=2)

    y = _centered(page, 70, "Certificate of Completion", 34, bold=True, color=_PRIMARY)
    page.draw_line(
        fitz.Point(width / 2 - 36, y + 4), fitz.Point(width / 2 + 36, y + 4),
        color=_PRIMARY, width=3,
    )

    y = _centered(page, y + 22, "This is to certify that", 16, color=_TEXT_MUTED)
    y = _centered(page, y + 6, name, 28, bold=True, color=_TEXT_DARK)
    page.draw_line(
        fitz.Point(width / 2 - 180, y), fitz.Point(width / 2 + 180, y),
        color=_PRIMARY_SOFT, width=2,
    )
    y = _centered(page, y + 12, "has successfully completed the", 16, color=_TEXT_MUTED)
    y = _centered(page, y + 4, quiz_title, 22, bold=True, color=_PRIMARY)

    # Score | date columns
    col_top = y + 14
    mid = width / 2
    _centered(page, col_top, f"{score}%", 22, bold=True, color=_SUCCESS, x0=mid - 240, x1=mid - 20)
    _centered(page, col_top + 46, "Final Score", 11, color=_TEXT_MUTED, x0=mid - 240, x1=mid - 20)
    page.draw_line(fitz.Point(mid, col_top + 4), fitz.Point(mid, col_top + 64), color=_RULE, width=1)
    _centered(page, col_top + 6, completed_on, 16, bold=True, color=_TEXT_DARK, x0=mid + 20, x1=mid + 240)
    _centered(page, col_top + 46, "Date of Completion", 11, color=_TEXT_MUTED, x0=mid + 20, x1=mid + 240)

    # Signature
    sig_y = height - 110
    page.draw_line(fitz.Point(mid - 96, sig_y), fitz.Point(mid + 96, sig_y), color=_RULE, width=2)
    _centered(page, sig_y + 6, issuer, 11, color=_TEXT_MUTED)

    _text(
        page, fitz.Rect(width - 260, height - 56, width - 36, height - 36),
        f"Certificate ID: {cert_id}", 9, color=_TEXT_MUTED, align="right",
    )


def render_certificate(result, quiz, display_name: str,
                       issuer: str = DEFAULT_ISSUER) -> Certificate:
    """Render the certificate for a passed *result*.

    Raises NotFoundError when the result did not pass.
    """
    if not result.passed:
        raise NotFoundError("certificate not available")

    cert_id = certificate_id(result.id)
    doc = fitz.open()
    try:
        page = doc.new_page(width=_PAGE_WIDTH, height=_PAGE_HEIGHT)
        _draw(
            page,
            name=display_name,
            quiz_title=quiz.title,
            score=result.score,
            completed_on=format_completion_date(result.created_at),
            cert_id=cert_id,
            issuer=issuer,
        )
        png = page.get_pixmap(matrix=fitz.Matrix(_PREVIEW_ZOOM, _PREVIEW_ZOOM)).tobytes("png")
        pdf = doc.tobytes(garbage=3, deflate=True)
    finally:
        doc.close()

    log.info("rendered certificate %s for result %s", cert_id, result.id)
    return Certificate(
        pdf=pdf,
        png=png,
        filename=certificate_filename(quiz.title),
        certificate_id=cert_id,
    )

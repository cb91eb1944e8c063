from datetime import datetime, timezone
from types import SimpleNamespace

import fitz
import pytest

from certifyme.errors import NotFoundError
from certifyme.services.certificate import (
    certificate_filename,
    format_completion_date,
    render_certificate,
)


def _result(passed=True):
    return SimpleNamespace(
        id="3f2b8c1e-0d4a-4b7e-9a51-7c2e6d9fab12",
        score=80,
        passed=passed,
        created_at=datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc),
    )


QUIZ = SimpleNamespace(title="JavaScript   Fundamentals")


def test_filename_collapses_whitespace():
    assert certificate_filename("React  Development 101") == "React_Development_101_Certificate.pdf"


def test_completion_date_format():
    assert format_completion_date(datetime(2026, 3, 5)) == "March 5, 2026"


def test_render_produces_pdf_and_png():
    cert = render_certificate(_result(), QUIZ, "Ada Lovelace")

    assert cert.pdf.startswith(b"%PDF")
    assert cert.png.startswith(b"\x89PNG")
    assert cert.filename == "JavaScript_Fundamentals_Certificate.pdf"
    assert cert.certificate_id == "6D9FAB12"


def test_pdf_contains_certificate_text():
    quiz = SimpleNamespace(title="JavaScript Fundamentals")
    cert = render_certificate(_result(), quiz, "Ada Lovelace", issuer="Test Academy")

    with fitz.open(stream=cert.pdf, filetype="pdf") as doc:
        assert doc.page_count == 1
        page = doc[0]
        assert page.rect.width > page.rect.height  # landscape
        text = page.get_text()

    for expected in (
        "Certificate of Completion",
        "Ada Lovelace",
        "JavaScript Fundamentals",
        "80%",
        "October 19, 2026",
        "Test Academy",
        "Certificate ID: 6D9FAB12",
    ):
        assert expected in text


def test_name_outside_latin1_is_drawn():
    cert = render_certificate(_result(), SimpleNamespace(title="Quiz"), "Łukasz Nowak")

    with fitz.open(stream=cert.pdf, filetype="pdf") as doc:
        text = doc[0].get_text()

    assert "Łukasz Nowak" in text
    assert "?ukasz" not in text


def test_png_preview_shows_the_title():
    cert = render_certificate(_result(), SimpleNamespace(title="Quiz"), "Ada Lovelace")
    pix = fitz.Pixmap(cert.png)

    # title line sits at 70-138pt, i.e. rows 140-276 of the 2x snapshot
    dark = sum(
        1
        for y in range(140, 276, 3)
        for x in range(300, pix.width - 300, 3)
        if sum(pix.pixel(x, y)[:3]) < 450
    )
    assert dark > 50


def test_name_too_long_to_fit_is_an_error():
    with pytest.raises(ValueError, match="does not fit"):
        render_certificate(_result(), SimpleNamespace(title="Quiz"), "Ada Lovelace " * 400)


def test_failed_result_has_no_certificate():
    with pytest.raises(NotFoundError):
        render_certificate(_result(passed=False), QUIZ, "Ada Lovelace")


# ── via the API ───────────────────────────────────────────────────────────────

def _submit(client, auth, quiz_id, answers):
    return client.post(
        f"/api/quizzes/{quiz_id}/submissions", json={"answers": answers}, headers=auth
    ).get_json()["id"]


def test_certificate_download(client, auth, quiz):
    rid = _submit(client, auth, quiz, [0, 1, 2, 3, 0])

    r = client.get(f"/api/results/{rid}/certificate.pdf", headers=auth)
    assert r.status_code == 200
    assert r.mimetype == "application/pdf"
    assert "Python_Basics_Certificate.pdf" in r.headers["Content-Disposition"]
    assert r.data.startswith(b"%PDF")

    png = client.get(f"/api/results/{rid}/certificate.png", headers=auth)
    assert png.status_code == 200
    assert png.mimetype == "image/png"


def test_certificate_unavailable_for_failed_result(client, auth, quiz):
    rid = _submit(client, auth, quiz, [1, 1, 1, 1, 1])
    r = client.get(f"/api/results/{rid}/certificate.pdf", headers=auth)
    assert r.status_code == 404
    assert r.get_json() == {"error": "certificate not available"}

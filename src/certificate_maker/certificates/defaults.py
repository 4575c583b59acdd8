from __future__ import annotations

from datetime import datetime

from .models import Certificate, CertificateElement, utcnow

DEFAULT_CERTIFICATE_NAME = "Default Certificate"

_TEXT_STYLE = dict(
    type="text",
    x=400,
    color="#2c3e50",
    font_family="Times New Roman",
    text_align="center",
    border_color="transparent",
    border_width=0,
    border_style="solid",
    border_radius=0,
)


def default_certificate(now: datetime | None = None) -> Certificate:
    """
    The starter template served by ``GET /api/certificates/default`` and
    inserted into an empty collection at startup. Never carries an id.

    Timestamps are UTC; the printed date label uses the server's local date.
    """
    now = now or utcnow()
    elements = [
        CertificateElement(
            id="title",
            content="CERTIFICATE OF ACHIEVEMENT",
            y=100,
            font_size=36,
            font_weight="bold",
            z_index=1,
            **_TEXT_STYLE,
        ),
        CertificateElement(
            id="recipient",
            content="This certificate is awarded to [Recipient Name]",
            y=200,
            font_size=20,
            z_index=2,
            **_TEXT_STYLE,
        ),
        CertificateElement(
            id="description",
            content="For outstanding performance and dedication",
            y=250,
            font_size=20,
            z_index=3,
            **_TEXT_STYLE,
        ),
        CertificateElement(
            id="date",
            content=f"Date: {now.astimezone():%d/%m/%Y}",
            y=350,
            font_size=18,
            z_index=4,
            **_TEXT_STYLE,
        ),
        CertificateElement(
            id="signature",
            content="Authorized Signature",
            y=450,
            font_size=18,
            z_index=5,
            **_TEXT_STYLE,
        ),
    ]
    return Certificate(
        name=DEFAULT_CERTIFICATE_NAME,
        bg_image="",
        elements=elements,
        created_at=now,
        updated_at=now,
    )

from __future__ import annotations

import time
from datetime import datetime, timezone

import pytest

from certificate_maker.certificates.defaults import DEFAULT_CERTIFICATE_NAME, default_certificate


def test_default_certificate_shape():
    cert = default_certificate()
    assert cert.id is None
    assert cert.name == DEFAULT_CERTIFICATE_NAME
    assert cert.bg_image == ""
    assert [e.id for e in cert.elements] == ["title", "recipient", "description", "date", "signature"]
    assert [e.z_index for e in cert.elements] == [1, 2, 3, 4, 5]
    assert all(e.type == "text" and e.text_align == "center" for e in cert.elements)
    assert cert.created_at == cert.updated_at


def test_only_the_title_is_bold():
    weights = {e.id: e.font_weight for e in default_certificate().elements}
    assert weights.pop("title") == "bold"
    assert set(weights.values()) == {None}


def _date_label(cert) -> str:
    return next(e for e in cert.elements if e.id == "date").content


@pytest.fixture
def local_tz(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("needs time.tzset")

    def _set(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


def test_date_element_uses_day_month_year(local_tz):
    local_tz("UTC")
    now = datetime(2024, 3, 7, 9, 30, tzinfo=timezone.utc)
    cert = default_certificate(now)
    assert _date_label(cert) == "Date: 07/03/2024"
    assert cert.created_at == now


def test_each_call_returns_independent_objects():
    a, b = default_certificate(), default_certificate()
    a.elements[0].content = "changed"
    assert b.elements[0].content == "CERTIFICATE OF ACHIEVEMENT"


def test_date_label_follows_server_local_day(local_tz):
    local_tz("America/Los_Angeles")
    now = datetime(2024, 3, 7, 3, 0, tzinfo=timezone.utc)
    cert = default_certificate(now)
    assert _date_label(cert) == "Date: 06/03/2024"
    assert cert.created_at == now

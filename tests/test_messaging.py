from __future__ import annotations

from urllib.parse import parse_qs, urlparse

import pytest

from storefront.messaging import WhatsAppLinkChannel, build_whatsapp_link


def test_link_encodes_message_and_strips_phone_formatting():
    link = build_whatsapp_link("1. Pie & tea\nTotal: 50 ₪", "+970 59-219-8804")
    parsed = urlparse(link)

    assert parsed.netloc == "wa.me"
    assert parsed.path == "/970592198804"
    assert parse_qs(parsed.query)["text"] == ["1. Pie & tea\nTotal: 50 ₪"]


def test_link_requires_digits():
    with pytest.raises(ValueError):
        build_whatsapp_link("hi", "n/a")


def test_channel_hands_link_to_opener():
    opened: list[str] = []
    WhatsAppLinkChannel(opener=opened.append).send("hello there", "123")

    assert opened == ["https://wa.me/123?text=hello%20there"]

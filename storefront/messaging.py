"""Message channels that deliver a finished order text."""

from __future__ import annotations

import logging
import re
import webbrowser
from typing import Callable, Protocol
from urllib.parse import quote

from storefront.config import WHATSAPP_BASE_URL

logger = logging.getLogger(__name__)


class MessageChannel(Protocol):
    """Delivers one formatted order message to a destination."""

    def send(self, message: str, destination: str) -> None: ...


def build_whatsapp_link(message: str, phone_number: str) -> str:
    """Return a click-to-chat link with the message prefilled."""
    digits = re.sub(r"\D", "", phone_number)
    if not digits:
        raise ValueError(f"phone number has no digits: {phone_number!r}")
    return f"{WHATSAPP_BASE_URL}/{digits}?text={quote(message, safe='')}"


class WhatsAppLinkChannel:
    """Opens a WhatsApp chat with the order text filled in."""

    def __init__(self, opener: Callable[[str], object] = webbrowser.open) -> None:
        self.opener = opener

    def send(self, message: str, destination: str) -> None:
        link = build_whatsapp_link(message, destination)
        logger.info("opening whatsapp chat chars=%d", len(message))
        self.opener(link)

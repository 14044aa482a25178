"""Receipt printer channel: prints order messages on a USB ESC/POS printer."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from storefront.config import (
    PRINTER_FONT_OVERRIDE_ENV,
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)

logger = logging.getLogger(__name__)

# Extra vertical headroom per line to avoid descender clipping on thermal output.
_LINE_EXTRA_PX = 10
_BLANK_LINE_PX = 16
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
)


def parse_usb_destination(destination: str) -> tuple[int, int]:
    """
    Parse a ``"<vendor>:<product>"`` hex pair into USB ids.

    An empty destination selects the configured printer.
    """
    raw = destination.strip()
    if not raw:
        return (PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
    vendor, sep, product = raw.partition(":")
    if not sep:
        raise ValueError(f"printer destination must be '<vendor>:<product>', got {destination!r}")
    try:
        return (int(vendor, 16), int(product, 16))
    except ValueError as exc:
        raise ValueError(f"printer destination has non-hex ids: {destination!r}") from exc


def _font_candidates() -> Iterator[str]:
    override = os.environ.get(PRINTER_FONT_OVERRIDE_ENV, "").strip()
    if override:
        yield override
    yield PRINTER_FONT_PATH
    yield from _LINUX_FONT_FALLBACKS


def resolve_printer_font_path() -> str:
    """First existing font file among the env override, the configured path, and common Linux fonts."""
    tried = list(dict.fromkeys(path for path in _font_candidates() if path))
    found = next((path for path in tried if Path(path).is_file()), None)
    if found is None:
        raise RuntimeError(f"no receipt font found, set {PRINTER_FONT_OVERRIDE_ENV} (tried {', '.join(tried)})")
    return found


def _usb_printer_class() -> type:
    try:
        from escpos.printer import Usb
    except ImportError as exc:
        raise RuntimeError(f"python-escpos is unavailable: {exc}") from exc
    return Usb


def _load_font() -> object:
    from PIL import ImageFont

    return ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)


def check_printer_dependencies(destination: str = "") -> tuple[bool, str]:
    """Report whether an order could be printed to ``destination``; never raises and never opens the device."""
    try:
        vendor_id, product_id = parse_usb_destination(destination)
        _usb_printer_class()
        _load_font()
    except (RuntimeError, ValueError, OSError) as exc:
        return (False, f"receipt printer unavailable: {exc}")
    return (True, f"receipt printer {vendor_id:04x}:{product_id:04x} ready")


def _text_width(text: str, font: object) -> int:
    from PIL import Image, ImageDraw

    scratch = Image.new("1", (1, 1), color=1)
    bbox = ImageDraw.Draw(scratch).textbbox((0, 0), text, font=font)
    return bbox[2] - bbox[0]


def _fit_text_to_px(text: str, font: object, max_width_px: int) -> str:
    if _text_width(text, font) <= max_width_px:
        return text
    ellipsis = "..."
    trimmed = text
    while trimmed:
        candidate = f"{trimmed}{ellipsis}"
        if _text_width(candidate, font) <= max_width_px:
            return candidate
        trimmed = trimmed[:-1]
    return ellipsis


def wrap_text_to_px(text: str, font: object, max_width_px: int) -> list[str]:
    """Word-wrap one message line to the printable width; unbreakable words are truncated."""
    words = text.split(" ")
    wrapped: list[str] = []
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if _text_width(candidate, font) <= max_width_px:
            current = candidate
            continue
        if current:
            wrapped.append(current)
        current = _fit_text_to_px(word, font, max_width_px)
    wrapped.append(current)
    return wrapped


def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    scratch = Image.new("1", (1, 1), color=1)
    bbox = ImageDraw.Draw(scratch).textbbox((0, 0), text, font=font)
    text_height = bbox[3] - bbox[1]
    canvas_height = max(12, text_height + _LINE_EXTRA_PX)

    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)
    x = PRINTER_LEFT_INDENT_PX
    # Offset by bbox top so descenders (g, y, p, etc.) are not clipped.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((x, y), text, font=font, fill=0)
    return img


def render_message(message: str, font: object) -> list[object]:
    """Render message text into printer-width bitmap rows; blank lines become short gaps."""
    from PIL import Image

    max_width = PRINTER_WIDTH_PX - (PRINTER_LEFT_INDENT_PX * 2)
    images: list[object] = []
    for raw_line in message.splitlines():
        if raw_line.strip():
            images.extend(_render_line(line, font) for line in wrap_text_to_px(raw_line, font, max_width))
        else:
            images.append(Image.new("1", (PRINTER_WIDTH_PX, _BLANK_LINE_PX), color=1))
    # Tail so the ticket can be torn below the total.
    images.append(Image.new("1", (PRINTER_WIDTH_PX, PRINTER_TAIL_SPACER_PX), color=1))
    return images


def _open_printer(vendor_id: int, product_id: int) -> object:
    return _usb_printer_class()(vendor_id, product_id)


class ReceiptPrinterChannel:
    """Prints the order text on a thermal receipt printer and cuts the ticket."""

    def send(self, message: str, destination: str = "") -> None:
        if not message.strip():
            return
        vendor_id, product_id = parse_usb_destination(destination)
        font = _load_font()
        printer = _open_printer(vendor_id, product_id)
        rows = render_message(message, font)
        for img in rows:
            printer.image(img)
        printer.cut()
        logger.info("order printed rows=%d printer=%04x:%04x", len(rows), vendor_id, product_id)

"""Runtime configuration defaults for the cart, pricing, and order channels."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("STOREFRONT_DB_PATH", "data/storefront.db")
CART_STORAGE_KEY = os.environ.get("STOREFRONT_CART_KEY", "storefront:cart")

FREE_FILLING_LIMIT = 2
PRICE_DECIMALS = 2
# Variant labels containing any of these (case-insensitive) use the small surcharge tier.
SMALL_SIZE_MARKERS = ("small", "صغير")
CURRENCY_SYMBOL = "₪"

ORDER_PHONE_NUMBER = os.environ.get("STOREFRONT_ORDER_PHONE", "970592198804")
WHATSAPP_BASE_URL = "https://wa.me"

PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 28
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_FONT_OVERRIDE_ENV = "STOREFRONT_PRINTER_FONT_PATH"
PRINTER_LEFT_INDENT_PX = 16
PRINTER_TAIL_SPACER_PX = 70

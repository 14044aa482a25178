"""Order message rendering."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from rich.text import Text

from storefront.config import CURRENCY_SYMBOL
from storefront.constant import ORDER_MESSAGE_LABELS, ORDER_MESSAGE_STYLES
from storefront.models import CartLine, CatalogItem, Selection
from storefront.pricing import to_money, unit_price


def format_money(amount: Decimal) -> str:
    """Render an amount with the currency symbol, dropping a zero fraction."""
    amount = to_money(amount)
    if amount == amount.to_integral_value():
        return f"{amount.to_integral_value()} {CURRENCY_SYMBOL}"
    return f"{amount} {CURRENCY_SYMBOL}"


def _append_detail(text: Text, label_key: str, value: str) -> None:
    text.append("\n   • ")
    text.append(f"{ORDER_MESSAGE_LABELS[label_key]}:", style=ORDER_MESSAGE_STYLES["label"])
    text.append(f" {value}")


def format_order_line(index: int, line: CartLine) -> Text:
    """Render one numbered cart line with its details and subtotal."""
    text = Text()
    text.append(f"{index}. ", style=ORDER_MESSAGE_STYLES["index"])
    text.append(line.name, style=ORDER_MESSAGE_STYLES["name"])
    if line.variant:
        text.append(f" - {line.variant}", style=ORDER_MESSAGE_STYLES["variant"])
    if line.free_fillings:
        _append_detail(text, "free_fillings", ", ".join(line.free_fillings))
    if line.paid_fillings:
        _append_detail(text, "paid_fillings", ", ".join(line.paid_fillings))
    _append_detail(text, "quantity", str(line.quantity))
    _append_detail(text, "price", format_money(line.subtotal))
    return text


def build_order_text(lines: Iterable[CartLine]) -> Text:
    """Render the full order summary with styled labels."""
    text = Text()
    text.append(ORDER_MESSAGE_LABELS["greeting"])
    text.append("\n\n")

    total = Decimal("0")
    for idx, line in enumerate(lines, start=1):
        text.append_text(format_order_line(idx, line))
        text.append("\n\n")
        total += line.subtotal

    text.append(f"{ORDER_MESSAGE_LABELS['total']}: {format_money(total)}", style=ORDER_MESSAGE_STYLES["total"])
    return text


def format_order(lines: Iterable[CartLine]) -> str:
    """Plain-text order summary handed to a message channel."""
    return build_order_text(lines).plain


def format_quick_order(item: CatalogItem, selection: Selection) -> str:
    """Single-item order message for buying straight from the product page."""
    text = Text(ORDER_MESSAGE_LABELS["quick_greeting"].format(name=item.name))
    if item.has_variants and selection.variant is not None:
        text.append(f"\n- {ORDER_MESSAGE_LABELS['size']}: {selection.variant.size}")
    if item.has_fillings:
        if selection.free_fillings:
            text.append(f"\n- {ORDER_MESSAGE_LABELS['free_fillings']}: {', '.join(selection.free_fillings)}")
        if selection.paid_fillings:
            text.append(f"\n- {ORDER_MESSAGE_LABELS['paid_fillings']}: {', '.join(selection.paid_fillings)}")
    text.append(f"\n- {ORDER_MESSAGE_LABELS['price']}: {format_money(unit_price(item, selection))}")
    return text.plain

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from storefront.models import Selection
from storefront.rendering import build_order_text, format_money, format_order, format_quick_order


def test_format_money_drops_zero_fraction():
    assert format_money(Decimal("50.00")) == "50 ₪"
    assert format_money(Decimal("12.5")) == "12.50 ₪"


def test_format_order_scenario(cart, sized_item):
    selection = Selection(variant=sized_item.variants[0], free_fillings=("a", "b"), paid_fillings=("x",))
    cart.add_line(sized_item, selection)
    cart.add_line(sized_item, selection)

    assert format_order(cart.lines) == (
        "Hello, I would like to order the following items:\n"
        "\n"
        "1. Pie - small\n"
        "   • Free fillings: a, b\n"
        "   • Extra fillings: x\n"
        "   • Quantity: 2\n"
        "   • Price: 100 ₪\n"
        "\n"
        "Total: 100 ₪"
    )


def test_optional_details_are_omitted(cart, plain_item):
    cart.add_line(plain_item, Selection())
    message = format_order(cart.lines)

    assert "1. Bread\n   • Quantity: 1\n   • Price: 12.50 ₪" in message
    assert "fillings" not in message
    assert message.endswith("Total: 12.50 ₪")


def test_total_matches_cart_total(cart, sized_item, plain_item):
    cart.add_line(sized_item, Selection(variant=sized_item.variants[1], paid_fillings=("x",)))
    cart.add_line(plain_item, Selection())
    cart.set_quantity(1, 3)

    assert format_order(cart.lines).endswith(f"Total: {format_money(cart.total_price())}")
    assert format_money(cart.total_price()) == "127.50 ₪"


def test_build_order_text_is_styled(cart, plain_item):
    cart.add_line(plain_item, Selection())
    text = build_order_text(cart.lines)

    assert isinstance(text, Text)
    assert text.spans
    assert text.plain == format_order(cart.lines)


def test_empty_cart_renders_zero_total():
    assert format_order([]).endswith("Total: 0 ₪")


def test_quick_order_message(sized_item):
    selection = Selection(variant=sized_item.variants[1], free_fillings=("a",), paid_fillings=("x",))

    assert format_quick_order(sized_item, selection) == (
        "Hello, I would like to order Pie\n"
        "- Size: large\n"
        "- Free fillings: a\n"
        "- Extra fillings: x\n"
        "- Price: 90 ₪"
    )

"""Checkout: send the formatted cart through a channel, then clear it."""

from __future__ import annotations

import logging

from storefront.cart import Cart
from storefront.messaging import MessageChannel
from storefront.rendering import format_order

logger = logging.getLogger(__name__)


class CheckoutError(RuntimeError):
    """The order could not be delivered; the cart was left intact."""


class CartClearError(RuntimeError):
    """The order was delivered but the cart could not be cleared; do not resend it."""

    def __init__(self, sent_message: str, reason: str) -> None:
        super().__init__(f"order was sent but the cart could not be cleared: {reason}")
        self.sent_message = sent_message


def submit_order(cart: Cart, channel: MessageChannel, destination: str) -> str | None:
    """
    Deliver the cart as an order message and clear it on success.

    Returns the sent message, or ``None`` when the cart is empty. Raises
    :class:`CheckoutError` when nothing was sent and :class:`CartClearError`
    when the message went out but the emptied cart could not be stored.
    """
    if cart.is_empty:
        logger.info("submit_blocked reason=no_rows")
        return None

    message = format_order(cart.lines)
    try:
        channel.send(message, destination)
    except Exception as exc:
        logger.exception("submit_failed rows=%d channel=%s", len(cart), type(channel).__name__)
        raise CheckoutError(f"order could not be sent: {exc}") from exc

    rows, items = len(cart), cart.total_item_count()
    try:
        cart.clear()
    except Exception as exc:
        logger.exception("submit_sent_clear_failed rows=%d items=%d", rows, items)
        raise CartClearError(message, str(exc)) from exc
    logger.info("submit_sent rows=%d items=%d channel=%s", rows, items, type(channel).__name__)
    return message

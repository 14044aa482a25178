from __future__ import annotations

import pytest

from storefront.cart import Cart
from storefront.checkout import CartClearError, CheckoutError, submit_order
from storefront.models import Selection
from storefront.persistence import InMemoryKeyValueStore


class RecordingChannel:
    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def send(self, message: str, destination: str) -> None:
        self.sent.append((message, destination))


class BrokenChannel:
    def send(self, message: str, destination: str) -> None:
        raise OSError("printer offline")


def test_submit_sends_and_clears(cart, store, sized_item):
    cart.add_line(sized_item, Selection(variant=sized_item.variants[0]))
    channel = RecordingChannel()

    message = submit_order(cart, channel, "970592198804")

    assert channel.sent == [(message, "970592198804")]
    assert "1. Pie - small" in message
    assert cart.is_empty
    assert Cart(store).is_empty


def test_submit_empty_cart_is_noop(cart):
    channel = RecordingChannel()

    assert submit_order(cart, channel, "1") is None
    assert channel.sent == []


def test_failed_send_keeps_cart(cart, store, sized_item):
    cart.add_line(sized_item, Selection(variant=sized_item.variants[0]))

    with pytest.raises(CheckoutError) as excinfo:
        submit_order(cart, BrokenChannel(), "1")

    assert isinstance(excinfo.value.__cause__, OSError)
    assert len(cart) == 1
    assert len(Cart(store)) == 1


class ReadOnlyAfterAddStore(InMemoryKeyValueStore):
    def __init__(self) -> None:
        super().__init__()
        self.read_only = False

    def set(self, key: str, value: str) -> None:
        if self.read_only:
            raise OSError("storage is read-only")
        super().set(key, value)


def test_clear_failure_after_send_reports_sent_message(sized_item):
    store = ReadOnlyAfterAddStore()
    cart = Cart(store)
    cart.add_line(sized_item, Selection(variant=sized_item.variants[0]))
    channel = RecordingChannel()
    store.read_only = True

    with pytest.raises(CartClearError) as excinfo:
        submit_order(cart, channel, "1")

    assert len(channel.sent) == 1
    assert excinfo.value.sent_message == channel.sent[0][0]
    assert not isinstance(excinfo.value, CheckoutError)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert len(cart) == 1
    assert Cart(store).lines == cart.lines

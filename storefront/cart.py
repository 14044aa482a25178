"""Cart aggregation: identity-keyed lines, quantities, totals, persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from decimal import Decimal
from typing import Iterator

from storefront.config import CART_STORAGE_KEY
from storefront.models import CartLine, CatalogItem, LineKey, Selection
from storefront.persistence import KeyValueStore
from storefront.pricing import unit_price

logger = logging.getLogger(__name__)


def line_key(item: CatalogItem, selection: Selection) -> LineKey:
    """Identity key for a configured item, matching :attr:`CartLine.key`."""
    variant = selection.variant.size if selection.variant is not None else None
    return (item.item_id, variant, tuple(selection.free_fillings), tuple(selection.paid_fillings))


def _decode_lines(raw: str) -> list[CartLine]:
    records = json.loads(raw)
    if not isinstance(records, list):
        raise ValueError(f"stored cart must be a list, got {type(records).__name__}")

    lines: list[CartLine] = []
    seen: dict[LineKey, CartLine] = {}
    for record in records:
        if not isinstance(record, dict):
            raise ValueError(f"stored cart line must be an object, got {type(record).__name__}")
        line = CartLine.from_record(record)
        existing = seen.get(line.key)
        if existing is not None:
            existing.quantity += line.quantity
            continue
        seen[line.key] = line
        lines.append(line)
    return lines


class Cart:
    """
    The buyer's cart, persisted to a key-value store after every change.

    Lines are kept in insertion order and are unique by identity key. The
    stored value is read once, on construction; a missing or unreadable value
    starts an empty cart.
    """

    def __init__(self, storage: KeyValueStore, key: str = CART_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key
        self._lines: list[CartLine] = self._load()

    def _load(self) -> list[CartLine]:
        raw = self.storage.get(self.key)
        if raw is None:
            return []
        try:
            lines = _decode_lines(raw)
        except (ValueError, TypeError, KeyError, ArithmeticError) as exc:
            # json.JSONDecodeError is a ValueError; bad prices raise decimal.InvalidOperation.
            logger.warning("stored cart under %r is unreadable, starting empty: %s", self.key, exc)
            return []
        logger.debug("cart_loaded key=%r lines=%d", self.key, len(lines))
        return lines

    def _commit(self, lines: list[CartLine]) -> None:
        """Write ``lines`` to storage, then adopt them; a failed write leaves the cart untouched."""
        payload = json.dumps([line.to_record() for line in lines], ensure_ascii=False)
        self.storage.set(self.key, payload)
        self._lines = lines

    @property
    def lines(self) -> tuple[CartLine, ...]:
        """Snapshot copies; edit quantities through the cart so changes are persisted."""
        return tuple(replace(line) for line in self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def find_line(self, key: LineKey) -> int | None:
        for idx, line in enumerate(self._lines):
            if line.key == key:
                return idx
        return None

    def add_line(self, item: CatalogItem, selection: Selection) -> CartLine:
        """Add one unit of a configured item, merging into an equal line if present."""
        price = unit_price(item, selection)
        key = line_key(item, selection)

        lines = list(self._lines)
        idx = self.find_line(key)
        if idx is not None:
            line = replace(lines[idx], quantity=lines[idx].quantity + 1)
            lines[idx] = line
        else:
            line = CartLine(
                item_id=item.item_id,
                name=item.name,
                unit_price=price,
                image=item.image,
                variant=key[1],
                free_fillings=key[2],
                paid_fillings=key[3],
            )
            lines.append(line)

        self._commit(lines)
        logger.debug("line_added item=%s variant=%r quantity=%d", line.item_id, line.variant, line.quantity)
        return replace(line)

    def _valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._lines)

    def remove_line(self, index: int) -> None:
        if not self._valid_index(index):
            logger.debug("remove_line ignored index=%d size=%d", index, len(self._lines))
            return
        removed = self._lines[index]
        self._commit(self._lines[:index] + self._lines[index + 1 :])
        logger.debug("line_removed item=%s variant=%r", removed.item_id, removed.variant)

    def set_quantity(self, index: int, quantity: int) -> None:
        if quantity < 1 or not self._valid_index(index):
            logger.debug("set_quantity ignored index=%d quantity=%d", index, quantity)
            return
        lines = list(self._lines)
        lines[index] = replace(lines[index], quantity=quantity)
        self._commit(lines)

    def clear(self) -> None:
        self._commit([])
        logger.debug("cart_cleared key=%r", self.key)

    def total_item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def total_price(self) -> Decimal:
        return sum((line.subtotal for line in self._lines), Decimal("0"))

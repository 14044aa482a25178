"""Domain models for the storefront catalog and cart."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

LineKey = tuple[str, str | None, tuple[str, ...], tuple[str, ...]]


@dataclass(frozen=True)
class Variant:
    """A mutually exclusive size option with its own price."""

    size: str
    price: Decimal


@dataclass(frozen=True)
class PaidFilling:
    """A surcharged add-on priced by size tier."""

    name: str
    small_price: Decimal
    large_price: Decimal


@dataclass(frozen=True)
class CatalogItem:
    """A purchasable product definition, independent of any buyer's choices."""

    item_id: str
    name: str
    base_price: Decimal = Decimal("0")
    has_variants: bool = False
    variants: tuple[Variant, ...] = ()
    has_fillings: bool = False
    free_fillings: tuple[str, ...] = ()
    paid_fillings: tuple[PaidFilling, ...] = ()
    image: str = ""
    category: str = ""
    description: str = ""

    def variant_by_size(self, size: str) -> Variant | None:
        for variant in self.variants:
            if variant.size == size:
                return variant
        return None

    def paid_filling_by_name(self, name: str) -> PaidFilling | None:
        for filling in self.paid_fillings:
            if filling.name == name:
                return filling
        return None


@dataclass(frozen=True)
class Selection:
    """A buyer's in-progress configuration of one catalog item."""

    variant: Variant | None = None
    free_fillings: tuple[str, ...] = ()
    paid_fillings: tuple[str, ...] = ()


@dataclass
class CartLine:
    """One configured purchase with its quantity."""

    item_id: str
    name: str
    unit_price: Decimal
    image: str = ""
    variant: str | None = None
    free_fillings: tuple[str, ...] = ()
    paid_fillings: tuple[str, ...] = ()
    quantity: int = 1

    @property
    def key(self) -> LineKey:
        """Identity key; lines with equal keys are the same purchase."""
        return (self.item_id, self.variant, self.free_fillings, self.paid_fillings)

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.item_id,
            "name": self.name,
            "price": str(self.unit_price),
            "mainImage": self.image,
            "variant": self.variant,
            "freeFillings": list(self.free_fillings),
            "paidFillings": list(self.paid_fillings),
            "quantity": self.quantity,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> CartLine:
        """Rebuild a line from its stored record; raises on malformed input."""
        raw_quantity = Decimal(str(record["quantity"]))
        if raw_quantity != raw_quantity.to_integral_value() or raw_quantity < 1:
            raise ValueError(f"quantity must be a whole number >= 1, got {record['quantity']!r}")
        quantity = int(raw_quantity)
        variant = record.get("variant")
        return cls(
            item_id=str(record["id"]),
            name=str(record["name"]),
            unit_price=Decimal(str(record["price"])),
            image=str(record.get("mainImage") or ""),
            variant=str(variant) if variant is not None else None,
            free_fillings=tuple(str(name) for name in record.get("freeFillings") or []),
            paid_fillings=tuple(str(name) for name in record.get("paidFillings") or []),
            quantity=quantity,
        )


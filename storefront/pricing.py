"""Unit price resolution for a catalog item and a buyer's selection."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from storefront.config import PRICE_DECIMALS, SMALL_SIZE_MARKERS
from storefront.models import CatalogItem, PaidFilling, Selection, Variant

_MONEY_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMALS)


class IncompleteSelectionError(ValueError):
    """Raised when an item with variants is priced before a variant is chosen."""


def to_money(value: Decimal | int | float | str) -> Decimal:
    """Quantize a value to the currency scale."""
    if not isinstance(value, Decimal):
        # str() first so floats keep their shortest repr instead of binary noise.
        value = Decimal(str(value))
    return value.quantize(_MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def is_small_variant(variant: Variant) -> bool:
    size = variant.size.lower()
    return any(marker.lower() in size for marker in SMALL_SIZE_MARKERS)


def paid_filling_surcharge(filling: PaidFilling, variant: Variant) -> Decimal:
    """Return the surcharge tier matching the variant's size."""
    if is_small_variant(variant):
        return to_money(filling.small_price)
    return to_money(filling.large_price)


def unit_price(item: CatalogItem, selection: Selection) -> Decimal:
    """
    Resolve the per-unit price of a configured item.

    Items with variants start from the chosen variant's price and add the
    size-tiered surcharge of every selected paid filling. Items without
    variants always cost their base price: there is no size to pick a
    surcharge tier from. Free fillings never change the price, and paid
    filling names the item no longer offers are ignored.
    """
    if not item.has_variants:
        return to_money(item.base_price)

    variant = selection.variant
    if variant is None:
        raise IncompleteSelectionError(f"{item.item_id!r} needs a variant before it can be priced")

    total = to_money(variant.price)
    for name in selection.paid_fillings:
        filling = item.paid_filling_by_name(name)
        if filling is None:
            continue
        total += paid_filling_surcharge(filling, variant)
    return to_money(total)

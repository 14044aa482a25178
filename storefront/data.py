"""Static catalog data and lookup helpers."""

from __future__ import annotations

from decimal import InvalidOperation
from typing import Any

from storefront.constant import CATALOG_RECORDS
from storefront.models import CatalogItem, PaidFilling, Variant
from storefront.pricing import to_money


def _price(record: dict[str, Any], field_name: str, default: Any = None) -> Any:
    raw = record.get(field_name, default)
    if raw is None:
        raise ValueError(f"missing price field {field_name!r}")
    try:
        return to_money(raw)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"invalid price in {field_name!r}: {raw!r}") from exc


def catalog_item_from_record(record: dict[str, Any]) -> CatalogItem:
    """Build a catalog item from a document-store style record."""
    try:
        item_id = str(record["id"])
        name = str(record["name"])
        variants = tuple(
            Variant(size=str(raw["size"]), price=_price(raw, "price")) for raw in record.get("variants") or []
        )
        paid_fillings = tuple(
            PaidFilling(
                name=str(raw["name"]),
                small_price=_price(raw, "smallPrice"),
                large_price=_price(raw, "largePrice"),
            )
            for raw in record.get("paidFillings") or []
        )
    except KeyError as exc:
        raise ValueError(f"catalog record is missing {exc.args[0]!r}") from exc

    has_variants = bool(record.get("hasVariants"))
    if has_variants and not variants:
        raise ValueError(f"catalog item {item_id!r} has variants enabled but none defined")

    return CatalogItem(
        item_id=item_id,
        name=name,
        base_price=_price(record, "price", default=0),
        has_variants=has_variants,
        variants=variants,
        has_fillings=bool(record.get("hasFillings")),
        free_fillings=tuple(str(label) for label in record.get("freeFillings") or []),
        paid_fillings=paid_fillings,
        image=str(record.get("mainImage") or ""),
        category=str(record.get("category") or ""),
        description=str(record.get("description") or ""),
    )


CATALOG_BY_ID: dict[str, CatalogItem] = {
    item.item_id: item for item in (catalog_item_from_record(record) for record in CATALOG_RECORDS)
}


def catalog_item(item_id: str) -> CatalogItem | None:
    """Look up a catalog item by id."""
    return CATALOG_BY_ID.get(item_id)


def search_catalog(query: str | None, category: str | None = None) -> list[CatalogItem]:
    """Case-insensitive search over name and description, optionally within one category."""
    source = [item for item in CATALOG_BY_ID.values() if category is None or item.category == category]
    if not query:
        return source
    q = query.lower()
    return [item for item in source if q in item.name.lower() or q in item.description.lower()]

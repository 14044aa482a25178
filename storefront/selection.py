"""Selection rules for configuring a catalog item.

Every mutation returns a selection. A rejected mutation returns the prior
selection unchanged so callers can simply re-render from the result.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from storefront.config import FREE_FILLING_LIMIT
from storefront.models import CatalogItem, Selection

logger = logging.getLogger(__name__)


def new_selection(item: CatalogItem) -> Selection:
    """Start a selection; items with exactly one size start with that size chosen, so they can be priced at once."""
    if item.has_variants and len(item.variants) == 1:
        return Selection(variant=item.variants[0])
    return Selection()


def toggle_free_filling(item: CatalogItem, selection: Selection, name: str) -> Selection:
    if name in selection.free_fillings:
        return replace(selection, free_fillings=tuple(f for f in selection.free_fillings if f != name))

    if not item.has_fillings or name not in item.free_fillings:
        logger.debug("free filling rejected item=%s name=%r reason=not_offered", item.item_id, name)
        return selection

    if len(selection.free_fillings) >= FREE_FILLING_LIMIT:
        logger.debug("free filling rejected item=%s name=%r reason=limit", item.item_id, name)
        return selection
    return replace(selection, free_fillings=selection.free_fillings + (name,))


def toggle_paid_filling(item: CatalogItem, selection: Selection, name: str) -> Selection:
    if name in selection.paid_fillings:
        return replace(selection, paid_fillings=tuple(f for f in selection.paid_fillings if f != name))

    if not item.has_fillings or item.paid_filling_by_name(name) is None:
        logger.debug("paid filling rejected item=%s name=%r reason=not_offered", item.item_id, name)
        return selection
    return replace(selection, paid_fillings=selection.paid_fillings + (name,))


def set_variant(item: CatalogItem, selection: Selection, size: str) -> Selection:
    """Replace the chosen variant; filling choices are kept and re-priced by the new size."""
    variant = item.variant_by_size(size) if item.has_variants else None
    if variant is None:
        logger.debug("variant rejected item=%s size=%r", item.item_id, size)
        return selection
    return replace(selection, variant=variant)


def is_complete(item: CatalogItem, selection: Selection) -> bool:
    """Whether the selection can be priced and added to the cart."""
    return not item.has_variants or selection.variant is not None

"""Editable static catalog and order message configuration."""

from __future__ import annotations

from typing import Any

# Catalog records keep the document-store field names so exported documents can be pasted in as-is.
CATALOG_RECORDS: list[dict[str, Any]] = [
    {
        "id": "cheese_manakish",
        "name": "Cheese Manakish",
        "category": "pastries",
        "description": "Baked flatbread topped with white cheese.",
        "price": 0,
        "hasVariants": True,
        "variants": [
            {"size": "small", "price": 40},
            {"size": "large", "price": 70},
        ],
        "hasFillings": True,
        "freeFillings": ["thyme", "sesame", "olives"],
        "paidFillings": [
            {"name": "sausage", "smallPrice": 10, "largePrice": 20},
            {"name": "extra cheese", "smallPrice": 5, "largePrice": 8},
        ],
        "mainImage": "images/cheese-manakish.jpg",
    },
    {
        "id": "zaatar_manakish",
        "name": "Zaatar Manakish",
        "category": "pastries",
        "description": "Flatbread with zaatar and olive oil.",
        "price": 12,
        "hasVariants": False,
        "variants": [],
        "hasFillings": True,
        "freeFillings": ["tomato", "onion"],
        "paidFillings": [],
        "mainImage": "images/zaatar-manakish.jpg",
    },
    {
        "id": "birthday_cake",
        "name": "Birthday Cake",
        "category": "cakes",
        "description": "Layered sponge cake, made to order.",
        "price": 0,
        "hasVariants": True,
        "variants": [
            {"size": "small (8 slices)", "price": 120},
            {"size": "medium (12 slices)", "price": 160},
            {"size": "large (20 slices)", "price": 240},
        ],
        "hasFillings": True,
        "freeFillings": ["vanilla", "chocolate", "strawberry"],
        "paidFillings": [
            {"name": "lotus", "smallPrice": 15, "largePrice": 25},
            {"name": "pistachio", "smallPrice": 20, "largePrice": 35},
        ],
        "mainImage": "images/birthday-cake.jpg",
    },
    {
        "id": "date_maamoul_box",
        "name": "Date Maamoul Box",
        "category": "sweets",
        "description": "A box of date-filled semolina cookies.",
        "price": 0,
        "hasVariants": True,
        "variants": [{"size": "1 kg", "price": 55}],
        "hasFillings": False,
        "freeFillings": [],
        "paidFillings": [],
        "mainImage": "images/date-maamoul.jpg",
    },
    {
        "id": "knafeh_plate",
        "name": "Knafeh Plate",
        "category": "sweets",
        "description": "Warm cheese knafeh with syrup.",
        "price": 18.5,
        "hasVariants": False,
        "variants": [],
        "hasFillings": False,
        "freeFillings": [],
        "paidFillings": [],
        "mainImage": "images/knafeh.jpg",
    },
]

ORDER_MESSAGE_LABELS: dict[str, str] = {
    "greeting": "Hello, I would like to order the following items:",
    "quick_greeting": "Hello, I would like to order {name}",
    "size": "Size",
    "free_fillings": "Free fillings",
    "paid_fillings": "Extra fillings",
    "quantity": "Quantity",
    "price": "Price",
    "total": "Total",
}

ORDER_MESSAGE_STYLES: dict[str, str] = {
    "index": "bold",
    "name": "bold",
    "variant": "italic",
    "label": "dim",
    "total": "bold #ffffff on #2f6db5",
}

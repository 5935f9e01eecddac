# exercises_app/data/catalogs.py
"""
Product catalogues of the shop exercises (31 to 36).

Each row is an (id, name, price) tuple handed as is to `Product.create`.
"""

from decimal import Decimal
from typing import List, Tuple

ProductRow = Tuple[int, str, Decimal]

SCHOOL_SUPPLIES: List[ProductRow] = [
    (1, "Notebook", Decimal("4.99")),
    (2, "Gel Pen", Decimal("1.49")),
    (3, "Backpack", Decimal("29.99")),
]

ACCESSORIES: List[ProductRow] = [
    (10, "USB-C Cable", Decimal("9.99")),
    (11, "Wireless Mouse", Decimal("24.50")),
]

DESK_SETUP: List[ProductRow] = [
    (101, "Mechanical Keyboard", Decimal("79.00")),
    (102, 'Monitor 27"', Decimal("229.99")),
    (103, "Desk Lamp", Decimal("19.49")),
]

PC_PARTS: List[ProductRow] = [
    (900, "SSD 1TB", Decimal("89.00")),
    (901, "RAM 32GB", Decimal("79.50")),
]

# (product_id, quantity)
ACCESSORIES_ORDER: List[Tuple[int, int]] = [(10, 2), (11, 1)]
DESK_SETUP_ORDER: List[Tuple[int, int]] = [(101, 1), (103, 2)]

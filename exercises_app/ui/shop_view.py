# exercises_app/ui/shop_view.py
"""
Shop exercises: inventory, orders, cart component, validated factory and
repository-style lookups (31, 32, 33, 35, 36).
"""

import logging
from typing import Iterable, List, Tuple

from exercises_app.data.catalogs import (
    ACCESSORIES,
    ACCESSORIES_ORDER,
    DESK_SETUP,
    DESK_SETUP_ORDER,
    PC_PARTS,
    SCHOOL_SUPPLIES,
    ProductRow,
)
from exercises_app.domain.inventory import InventoryRepository, InventoryService
from exercises_app.domain.orders import CartComponent, OrderService
from exercises_app.domain.product import OrderLine, Product
from exercises_app.rules.methods import calculate_average, double_each, sum_all

logger = logging.getLogger(__name__)


# ---------- Helpers ----------


def stock_inventory(rows: Iterable[ProductRow]) -> InventoryService:
    """Build an inventory from (id, name, price) rows."""
    inventory = InventoryService()
    for product_id, name, price in rows:
        inventory.add(Product.create(product_id, name, price))
    return inventory


def _to_order_lines(pairs: Iterable[Tuple[int, int]]) -> List[OrderLine]:
    return [OrderLine(product_id, qty) for product_id, qty in pairs]


def price_cents(inventory: InventoryRepository) -> List[int]:
    """Prices in whole cents, truncated."""
    return [int(p.price * 100) for p in inventory.get_all()]


# ---------- Exercises ----------


def exercise_31():
    inventory = stock_inventory(SCHOOL_SUPPLIES)

    print("[31] Inventory created. Listing all products:")
    for product in inventory.get_all():
        print(f" - {product}")

    avg = calculate_average(price_cents(inventory)) / 100.0
    print(f"[31] Average price: ${avg:.2f}")


def exercise_32():
    inventory = stock_inventory(ACCESSORIES)
    orders = OrderService(inventory, logger)

    receipt = orders.place_order(_to_order_lines(ACCESSORIES_ORDER))
    print(f"[32] Placed order. Receipt:\n{receipt}")


def exercise_33():
    inventory = stock_inventory(DESK_SETUP)
    orders = OrderService(inventory, logger)
    cart = CartComponent(inventory, orders)

    print("[33] Showing catalog via component:")
    cart.show_catalog()

    print("\n[33] Checking out via component...")
    cart.checkout(_to_order_lines(DESK_SETUP_ORDER))


def exercise_35():
    try:
        product = Product.create(500, "Gaming Chair", "149.99")
        print(f"[35] Created product via factory: {product}")

        # negative price: rejected by the factory
        Product.create(501, "Broken Item", -1)
    except ValueError as ex:
        print(f"[35] Validation triggered: {ex}")


def exercise_36():
    repo = stock_inventory(PC_PARTS)

    ssd = repo.find_by_id(900)
    print(f"[36] FindById(900): {ssd if ssd is not None else 'not found'}")

    total = sum_all(double_each(price_cents(repo)))
    print(f"[36] Sum of doubled prices (cents): {total}")

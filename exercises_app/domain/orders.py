"""
Order placement and the cart "component" that drives it.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable, List, Optional

from exercises_app.domain.inventory import InventoryRepository
from exercises_app.domain.product import OrderLine, OrderReceipt, ReceiptLine
from exercises_app.exceptions import ProductNotFoundError


class OrderRepository(ABC):
    @abstractmethod
    def place_order(self, lines: Iterable[OrderLine]) -> OrderReceipt: ...


class OrderService(OrderRepository):
    def __init__(
        self, inventory: InventoryRepository, logger: Optional[logging.Logger] = None
    ):
        self._inventory = inventory
        self._logger = logger or logging.getLogger(__name__)

    def place_order(self, lines: Iterable[OrderLine]) -> OrderReceipt:
        """Resolve every line against the inventory and build the receipt.

        Raises ProductNotFoundError on the first unknown product id; nothing
        is logged in that case.
        """
        resolved: List[ReceiptLine] = []
        for line in lines:
            product = self._inventory.find_by_id(line.product_id)
            if product is None:
                raise ProductNotFoundError(line.product_id)
            line_total = self._line_total(product.price, line.quantity)
            resolved.append(ReceiptLine(product, line.quantity, line_total))

        receipt = OrderReceipt(resolved)
        self._logger.info(
            "Order placed. Items: %d, Total: $%.2f", len(resolved), receipt.total
        )
        return receipt

    @staticmethod
    def _line_total(price: Decimal, qty: int) -> Decimal:
        return price * qty


class CartComponent:
    """Coordinates the two services the way a UI component would."""

    def __init__(self, inventory: InventoryRepository, orders: OrderRepository):
        self._inventory = inventory
        self._orders = orders

    def show_catalog(self) -> None:
        print("== Catalog ==")
        for product in self._inventory.get_all():
            print(product)

    def checkout(self, cart_lines: Iterable[OrderLine]) -> OrderReceipt:
        receipt = self._orders.place_order(cart_lines)
        print("\n== Receipt ==\n" + str(receipt))
        return receipt

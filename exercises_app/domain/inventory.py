from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from exercises_app.domain.product import Product
from exercises_app.exceptions import DuplicateProductError


class InventoryRepository(ABC):
    @abstractmethod
    def add(self, product: Product) -> None: ...

    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]: ...

    @abstractmethod
    def get_all(self) -> Tuple[Product, ...]: ...


class InventoryService(InventoryRepository):
    """
    In-memory product list.

    Only this class mutates the list; callers get a tuple snapshot from
    `get_all`.
    """

    def __init__(self):
        self._products: List[Product] = []

    def add(self, product: Product) -> None:
        if any(p.id == product.id for p in self._products):
            raise DuplicateProductError(product.id)
        self._products.append(product)

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def get_all(self) -> Tuple[Product, ...]:
        return tuple(self._products)

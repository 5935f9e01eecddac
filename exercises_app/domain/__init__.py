"""
Domain objects for the exercises.

Plain dataclasses and small pydantic models: phones, persons, products,
orders, the in-memory inventory and the clock abstraction. They print at
most a line or two and hold no global state.
"""

from .clock import Clock, ExpiringOfferService, FakeClock, SystemClock
from .inventory import InventoryRepository, InventoryService
from .orders import CartComponent, OrderRepository, OrderService
from .person import Person18, Person19, Person20
from .phone import Phone
from .product import OrderLine, OrderReceipt, Product, ReceiptLine

__all__ = [
    "Clock",
    "ExpiringOfferService",
    "FakeClock",
    "SystemClock",
    "InventoryRepository",
    "InventoryService",
    "CartComponent",
    "OrderRepository",
    "OrderService",
    "Person18",
    "Person19",
    "Person20",
    "Phone",
    "OrderLine",
    "OrderReceipt",
    "Product",
    "ReceiptLine",
]

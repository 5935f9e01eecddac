"""
Product, order line and receipt models of the shop exercises.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import NamedTuple, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[Decimal, int, float, str]


class Product(BaseModel):
    """
    Immutable catalogue entry.

    Build it through `Product.create`, which validates the raw values and
    trims the name; the field constraints only back that check up.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0)

    @classmethod
    def create(cls, id: int, name: str, price: Number) -> "Product":
        """Validated factory.

        Raises
        ------
        ValueError
            If `id` is not positive, `name` is blank, or `price` is not a finite
            non-negative number.
        """
        if id <= 0:
            raise ValueError("Id must be positive.")
        if name is None or not name.strip():
            raise ValueError("Name required.")
        try:
            if not isinstance(price, Decimal):
                price = Decimal(str(price))
        except InvalidOperation:
            raise ValueError("Price must be a number.") from None
        if not price.is_finite():
            raise ValueError("Price must be a number.")
        if price < 0:
            raise ValueError("Price cannot be negative.")
        return cls(id=id, name=name.strip(), price=price)

    def __str__(self) -> str:
        return f"#{self.id} {self.name} (${self.price:.2f})"


@dataclass(frozen=True)
class OrderLine:
    product_id: int
    quantity: int

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError(f"quantity must be positive, got {self.quantity}")


class ReceiptLine(NamedTuple):
    product: Product
    qty: int
    line_total: Decimal


class OrderReceipt:
    """Resolved order lines and their total."""

    def __init__(self, lines: Sequence[ReceiptLine]):
        self.lines: Tuple[ReceiptLine, ...] = tuple(lines)
        self.total: Decimal = sum((line.line_total for line in self.lines), Decimal("0"))

    def __str__(self) -> str:
        parts = [
            f"{line.product.name} x{line.qty} = ${line.line_total:.2f}"
            for line in self.lines
        ]
        return "\n".join(parts) + f"\nTOTAL: ${self.total:.2f}"

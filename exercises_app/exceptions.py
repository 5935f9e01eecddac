"""Errors raised by the inventory and order toys."""


class ExercisesError(Exception):
    """Base class for the errors of this package."""


class DuplicateProductError(ExercisesError, ValueError):
    def __init__(self, product_id: int):
        super().__init__(f"Product with Id {product_id} already exists.")
        self.product_id = product_id


class ProductNotFoundError(ExercisesError, KeyError):
    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found.")
        self.product_id = product_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])

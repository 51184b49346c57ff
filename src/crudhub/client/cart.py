"""Client-side cart state.

A cart lives for one client session: it is created empty, mutated by
add/remove/set_quantity and cleared after a successful checkout. It is passed
explicitly to whatever needs it rather than held in module state.
"""

from dataclasses import dataclass, field

from src.crudhub.entities.service.order import LineItem
from src.crudhub.entities.service.product import Product


@dataclass
class CartLine:
    product_id: str
    name: str
    price: float
    quantity: int = 1

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


@dataclass
class Cart:
    _lines: dict[str, CartLine] = field(default_factory=dict, init=False)

    def add(self, product: Product, quantity: int = 1) -> CartLine:
        """Add ``quantity`` of ``product``; repeated adds merge into one line."""
        if quantity < 1:
            raise ValueError("quantity must be >= 1")
        line = self._lines.get(product.id)
        if line is None:
            line = CartLine(product.id, product.name, product.price, 0)
            self._lines[product.id] = line
        line.quantity += quantity
        return line

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; zero removes the line."""
        if quantity < 0:
            raise ValueError("quantity must be >= 0")
        if product_id not in self._lines:
            raise KeyError(product_id)
        if quantity == 0:
            del self._lines[product_id]
        else:
            self._lines[product_id].quantity = quantity

    def remove(self, product_id: str) -> None:
        self._lines.pop(product_id, None)

    def clear(self) -> None:
        self._lines.clear()

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines.values())

    @property
    def total(self) -> float:
        return sum(line.subtotal for line in self._lines.values())

    def __len__(self) -> int:
        return len(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def to_line_items(self) -> list[LineItem]:
        return [
            LineItem(
                product_id=line.product_id,
                name=line.name,
                price=line.price,
                quantity=line.quantity,
            )
            for line in self._lines.values()
        ]

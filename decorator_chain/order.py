import logging
from abc import ABC, abstractmethod


class Order(ABC):
    @abstractmethod
    def calculate_total(self) -> float:
        pass


class BaseOrder(Order):
    def __init__(self, total: float) -> None:
        self._total = total

    def calculate_total(self) -> float:
        return self._total


class OrderDecorator(Order):
    def __init__(self, order: Order) -> None:
        self._order = self._require(order)

    def _require(self, order: Order) -> Order:
        if order is None:
            raise ValueError(f"{type(self).__name__} requires an order to wrap.")
        node = order
        while node is not None:
            if node is self:
                raise ValueError(f"{type(self).__name__} cannot wrap itself.")
            node = getattr(node, "inner", None)
        return order

    @property
    def inner(self) -> Order:
        return self._order

    def set_inner(self, order: Order) -> None:
        self._order = self._require(order)
        logging.debug(f"{type(self).__name__}: now wrapping {type(order).__name__}")

    @abstractmethod
    def apply(self, total: float) -> float:
        pass

    def calculate_total(self) -> float:
        return self.apply(self._order.calculate_total())


class PercentageDiscount(OrderDecorator):
    def __init__(self, order: Order, percentage: float) -> None:
        super().__init__(order)
        self.percentage = percentage

    def apply(self, total: float) -> float:
        return total - total * (self.percentage / 100)


class FixedAmountDiscount(OrderDecorator):
    def __init__(self, order: Order, amount: float) -> None:
        super().__init__(order)
        self.amount = amount

    def apply(self, total: float) -> float:
        return total - self.amount

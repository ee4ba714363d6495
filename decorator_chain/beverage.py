import logging
from abc import ABC, abstractmethod

from decorator_chain import config


class Beverage(ABC):
    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_cost(self) -> float:
        pass


class CondimentDecorator(Beverage):
    @property
    @abstractmethod
    def label(self) -> str:
        pass

    @property
    @abstractmethod
    def surcharge(self) -> float:
        pass

    def __init__(self, beverage: Beverage) -> None:
        self._beverage = self._require(beverage)

    def _require(self, beverage: Beverage) -> Beverage:
        if beverage is None:
            raise ValueError(f"{type(self).__name__} requires a beverage to wrap.")
        node = beverage
        while node is not None:
            if node is self:
                raise ValueError(f"{type(self).__name__} cannot wrap itself.")
            node = getattr(node, "inner", None)
        return beverage

    @property
    def inner(self) -> Beverage:
        return self._beverage

    def set_inner(self, beverage: Beverage) -> None:
        self._beverage = self._require(beverage)
        logging.debug(f"{type(self).__name__}: now wrapping {type(beverage).__name__}")

    def combine_description(self, inner_description: str) -> str:
        return inner_description + config.DESCRIPTION_SEPARATOR + self.label

    def combine_cost(self, inner_cost: float) -> float:
        return inner_cost + self.surcharge

    def get_description(self) -> str:
        return self.combine_description(self._beverage.get_description())

    def get_cost(self) -> float:
        return self.combine_cost(self._beverage.get_cost())


# Beverage Implementations
class _Leaf(Beverage):
    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def cost(self) -> float:
        pass

    def get_description(self) -> str:
        return self.description

    def get_cost(self) -> float:
        return self.cost


class Espresso(_Leaf):
    description, cost = config.ESPRESSO


class HouseBlend(_Leaf):
    description, cost = config.HOUSE_BLEND


class DarkRoast(_Leaf):
    description, cost = config.DARK_ROAST


# Condiments
class Mocha(CondimentDecorator):
    label, surcharge = config.MOCHA


class Soy(CondimentDecorator):
    label, surcharge = config.SOY


class Whip(CondimentDecorator):
    label, surcharge = config.WHIP

import logging
from abc import ABC, abstractmethod
from typing import Optional

from decorator_chain.config import NEUTRAL_TEXT


class Component(ABC):
    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteComponent(Component):
    def operation(self) -> str:
        return "ConcreteComponent"


class Decorator(Component):
    """Wraps one component and forwards its operation.

    An unbound decorator (inner is None) answers with the neutral text
    instead of failing.
    """

    def __init__(self, component: Optional[Component] = None) -> None:
        self._component = component

    @property
    def inner(self) -> Optional[Component]:
        return self._component

    def set_inner(self, component: Optional[Component]) -> None:
        node = component
        while node is not None:
            if node is self:
                raise ValueError(f"{type(self).__name__} cannot wrap itself.")
            node = getattr(node, "inner", None)
        self._component = component
        if component is not None:
            logging.debug(f"{type(self).__name__}: now wrapping {type(component).__name__}")
        else:
            logging.debug(f"{type(self).__name__}: unbound")

    set_component = set_inner

    def combine(self, inner_result: str) -> str:
        return inner_result

    def operation(self) -> str:
        if self._component is None:
            inner_result = NEUTRAL_TEXT
        else:
            inner_result = self._component.operation()
        return self.combine(inner_result)


class ConcreteDecoratorA(Decorator):
    def combine(self, inner_result: str) -> str:
        return f"ConcreteDecoratorA({super().combine(inner_result)})"

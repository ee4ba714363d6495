from typing import Any, Callable, Iterator

import pandas as pd

from decorator_chain.beverage import Beverage
from decorator_chain.order import Order


def iter_layers(node) -> Iterator[Any]:
    """Yield the chain from the outermost wrapper down to the leaf."""
    while node is not None:
        yield node
        node = getattr(node, "inner", None)


def depth(node) -> int:
    layers = list(iter_layers(node))
    if layers and hasattr(layers[-1], "inner"):
        # unbound decorator, no leaf at the bottom
        return len(layers)
    return len(layers) - 1


def chain_breakdown(node, evaluate: Callable[[Any], Any]) -> pd.DataFrame:
    layers = list(iter_layers(node))[::-1]
    rows = [
        {"depth": i, "layer": type(layer).__name__, "result": evaluate(layer)}
        for i, layer in enumerate(layers)
    ]
    return pd.DataFrame(rows, columns=["depth", "layer", "result"])


def cost_breakdown(beverage: Beverage) -> pd.DataFrame:
    df = chain_breakdown(beverage, lambda b: (b.get_description(), b.get_cost()))
    df["description"] = [r[0] for r in df["result"]]
    df["cost"] = [r[1] for r in df["result"]]
    df["contribution"] = df["cost"].diff().fillna(df["cost"])
    return df.drop(columns=["result"])


def total_breakdown(order: Order) -> pd.DataFrame:
    df = chain_breakdown(order, lambda o: o.calculate_total())
    df = df.rename(columns={"result": "total"})
    df["change"] = df["total"].diff().fillna(0.0)
    return df

import pytest

from decorator_chain.beverage import DarkRoast, Espresso, Mocha, Whip
from decorator_chain.breakdown import chain_breakdown, cost_breakdown, depth, iter_layers, total_breakdown
from decorator_chain.component import ConcreteComponent, ConcreteDecoratorA, Decorator
from decorator_chain.order import BaseOrder, FixedAmountDiscount, PercentageDiscount


def test_iter_layers_outermost_first():
    leaf = DarkRoast()
    mocha = Mocha(leaf)
    whip = Whip(mocha)
    assert list(iter_layers(whip)) == [whip, mocha, leaf]


def test_depth():
    assert depth(Espresso()) == 0
    assert depth(Whip(Mocha(Espresso()))) == 2
    assert depth(ConcreteDecoratorA(ConcreteComponent())) == 1
    assert depth(Decorator()) == 1


def test_chain_breakdown_leaf_first():
    chain = ConcreteDecoratorA(ConcreteComponent())
    df = chain_breakdown(chain, lambda c: c.operation())
    assert df["layer"].tolist() == ["ConcreteComponent", "ConcreteDecoratorA"]
    assert df["result"].tolist() == ["ConcreteComponent", "ConcreteDecoratorA(ConcreteComponent)"]


def test_cost_breakdown_contributions_sum_to_cost():
    beverage = Whip(Mocha(Mocha(DarkRoast())))
    df = cost_breakdown(beverage)
    assert df["layer"].tolist() == ["DarkRoast", "Mocha", "Mocha", "Whip"]
    assert df["contribution"].tolist() == pytest.approx([0.99, 0.20, 0.20, 0.10])
    assert df["contribution"].sum() == pytest.approx(beverage.get_cost())
    assert df["description"].iloc[-1] == beverage.get_description()


def test_cost_breakdown_bare_leaf():
    df = cost_breakdown(Espresso())
    assert len(df) == 1
    assert df["contribution"].iloc[0] == pytest.approx(1.99)


def test_total_breakdown():
    order = PercentageDiscount(FixedAmountDiscount(BaseOrder(100), 20), 10)
    df = total_breakdown(order)
    assert df["layer"].tolist() == ["BaseOrder", "FixedAmountDiscount", "PercentageDiscount"]
    assert df["total"].tolist() == pytest.approx([100, 80, 72])
    assert df["change"].tolist() == pytest.approx([0, -20, -8])

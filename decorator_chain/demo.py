import logging

from decorator_chain.beverage import Beverage, DarkRoast, Espresso, HouseBlend, Mocha, Soy, Whip
from decorator_chain.breakdown import cost_breakdown, total_breakdown
from decorator_chain.component import Component, ConcreteComponent, ConcreteDecoratorA
from decorator_chain.order import BaseOrder, FixedAmountDiscount, Order, PercentageDiscount


def render_beverage(beverage: Beverage) -> str:
    return f"{beverage.get_description()} ${beverage.get_cost():.2f}"


def render_component(component: Component) -> str:
    return f"Result: {component.operation()}"


def render_total(label: str, order: Order) -> str:
    return f"Total after applying {label}: ${order.calculate_total():.2f}"


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    espresso = Espresso()
    logging.info(render_beverage(espresso))

    dark_roast = Whip(Mocha(Mocha(DarkRoast())))
    logging.info(render_beverage(dark_roast))

    house_blend = Whip(Mocha(Soy(HouseBlend())))
    logging.info(render_beverage(house_blend))
    logging.info("\n" + cost_breakdown(house_blend).to_string(index=False))

    simple = ConcreteComponent()
    logging.info("Client: I get a simple component:")
    logging.info(render_component(simple))
    logging.info("Client: Now I've got a decorated component:")
    logging.info(render_component(ConcreteDecoratorA(simple)))

    base_order = BaseOrder(100)
    logging.info(render_total("10% discount", PercentageDiscount(base_order, 10)))
    logging.info(render_total("$20 discount", FixedAmountDiscount(base_order, 20)))
    combined = PercentageDiscount(FixedAmountDiscount(base_order, 20), 15)
    logging.info(render_total("$20 fixed amount discount and 15% percentage discount", combined))
    logging.info("\n" + total_breakdown(combined).to_string(index=False))


if __name__ == "__main__":
    main()

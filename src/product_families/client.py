"""Client code that works with factories and products only through their protocols."""

import logging

from .protocols import AbstractFactory

logger = logging.getLogger(__name__)


def client_code(factory: AbstractFactory) -> None:
    """
    Build one product of each kind from ``factory`` and print what they do.

    Any concrete factory can be passed in, including ones defined outside
    this package, as long as it satisfies AbstractFactory.

    Args:
        factory: Factory producing a compatible product A and product B
    """
    product_a = factory.create_product_a()
    product_b = factory.create_product_b()
    logger.debug(
        f"Got {type(product_a).__name__} and {type(product_b).__name__} "
        f"from {type(factory).__name__}"
    )

    print(product_b.useful_function_b())
    print(product_b.another_useful_function_b(product_a))

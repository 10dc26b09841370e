"""
Concrete factories for the product families.

This module provides:
- One factory per family, each producing only its own family's products
- A small registry to look up a factory by family tag
"""

import logging

from .protocols import (
    AbstractFactory,
    AbstractProductA,
    AbstractProductB,
    FamilyTag,
)
from .products import (
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)

logger = logging.getLogger(__name__)


class ConcreteFactory1(AbstractFactory):
    """
    Factory for family 1.

    Every call returns a fresh product; nothing is cached or shared.
    """

    family: FamilyTag = 1

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    """Factory for family 2."""

    family: FamilyTag = 2

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()


_FACTORIES: dict[int, type[AbstractFactory]] = {
    ConcreteFactory1.family: ConcreteFactory1,
    ConcreteFactory2.family: ConcreteFactory2,
}


def get_available_families() -> list[int]:
    """Return list of registered family tags."""
    return sorted(_FACTORIES)


def create_factory(family: int) -> AbstractFactory:
    """
    Create a factory for the specified family.

    Args:
        family: Family tag (1 or 2)

    Returns:
        New factory instance producing products of that family
    """
    if family not in _FACTORIES:
        raise ValueError(
            f"Unknown family: {family}. "
            f"Available options: {get_available_families()}"
        )

    factory_cls = _FACTORIES[family]

    logger.debug(f"Creating {factory_cls.__name__} for family {family}")
    return factory_cls()

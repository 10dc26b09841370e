"""
Abstract Factory demonstration: two families of compatible products.
"""

from .client import client_code
from .factories import (
    ConcreteFactory1,
    ConcreteFactory2,
    create_factory,
    get_available_families,
)
from .products import (
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)
from .protocols import (
    AbstractFactory,
    AbstractProductA,
    AbstractProductB,
    FamilyTag,
)

__all__ = [
    "AbstractFactory",
    "AbstractProductA",
    "AbstractProductB",
    "FamilyTag",
    "ConcreteProductA1",
    "ConcreteProductA2",
    "ConcreteProductB1",
    "ConcreteProductB2",
    "ConcreteFactory1",
    "ConcreteFactory2",
    "create_factory",
    "get_available_families",
    "client_code",
]

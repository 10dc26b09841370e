"""
Capability protocols for the product families.

Key ideas:
- Each capability says *what* an object can do, not what it inherits from
- Only concrete variants carry a family tag (1 or 2); the capabilities do not
- A factory of family N only hands out products of family N

Products of different families still accept each other structurally: nothing
here checks that a collaborator comes from the same family.
"""

from typing import Literal, Protocol, runtime_checkable


FamilyTag = Literal[1, 2]


# =========================
# Product protocols
# =========================

@runtime_checkable
class AbstractProductA(Protocol):
    """A product that can do its own work and nothing else."""
    def useful_function_a(self) -> str: ...


@runtime_checkable
class AbstractProductB(Protocol):
    """
    A product that can do its own work, and can also collaborate with an
    AbstractProductA.

    Proper collaboration is only possible between products of the same family,
    but any AbstractProductA is accepted as collaborator.
    """
    def useful_function_b(self) -> str: ...

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str: ...


# =========================
# Factory protocol
# =========================

@runtime_checkable
class AbstractFactory(Protocol):
    """Protocol for creating one family of compatible products."""
    def create_product_a(self) -> AbstractProductA:
        """Create a new product A of this factory's family."""
        ...

    def create_product_b(self) -> AbstractProductB:
        """Create a new product B of this factory's family."""
        ...

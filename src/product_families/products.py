"""
Concrete products for both families.

Each concrete product is created by the matching concrete factory. Products
hold no state, so every instance of a class behaves the same way.
"""

from .protocols import AbstractProductA, AbstractProductB, FamilyTag


class ConcreteProductA1(AbstractProductA):
    family: FamilyTag = 1

    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2(AbstractProductA):
    family: FamilyTag = 2

    def useful_function_a(self) -> str:
        return "The result of the product A2."


class ConcreteProductB1(AbstractProductB):
    family: FamilyTag = 1

    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """
        Collaborate with a product A.

        B1 only works correctly with A1, but any AbstractProductA is accepted.

        Args:
            collaborator: Object exposing useful_function_a()

        Returns:
            The collaborator's result wrapped in B1's own message
        """
        result = collaborator.useful_function_a()
        return f"The result of the B1 collaborating with the ({result})"


class ConcreteProductB2(AbstractProductB):
    family: FamilyTag = 2

    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """Collaborate with a product A (correct only with A2, accepts any)."""
        result = collaborator.useful_function_a()
        return f"The result of the B2 collaborating with the ({result})"

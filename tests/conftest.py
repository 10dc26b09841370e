import sys
from pathlib import Path

import pytest

# Add the src directory to the Python path so imports work correctly
PROJECT_ROOT = Path(__file__).parent.parent
SRC_PATH = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_PATH))

from product_families.factories import ConcreteFactory1, ConcreteFactory2  # noqa: E402


@pytest.fixture(scope="session")
def factory_classes():
    """Return the concrete factory class for each family tag."""
    return {1: ConcreteFactory1, 2: ConcreteFactory2}

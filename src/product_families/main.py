#!/usr/bin/env python3
"""
Main entry point for the product families demonstration.

Runs the same client code once per configured factory family.
"""

from .client import client_code
from .config import DemoConfig, config
from .factories import create_factory


def main(demo_config: DemoConfig | None = None) -> None:
    """
    Run the client code with every configured factory.

    Args:
        demo_config: Runs to perform (default: global config)
    """
    if demo_config is None:
        demo_config = config

    for i, run in enumerate(demo_config.runs):
        if i:
            print(demo_config.separator)
        print(run.header)
        client_code(create_factory(run.family))


if __name__ == "__main__":
    main()

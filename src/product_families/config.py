"""
Configuration for the demonstration run.

Uses Pydantic models so that the sequence of runs printed by the entry point
is validated against the registered families.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .factories import get_available_families


class DemonstrationRun(BaseModel):
    """One invocation of the client code with a given family's factory."""

    family: int = Field(description="Family tag of the factory to use")
    header: str = Field(description="Line printed before the client output")

    @field_validator("family")
    @classmethod
    def validate_family(cls, v: Any) -> int:
        """Only registered families can be demonstrated."""
        available = get_available_families()
        if v not in available:
            raise ValueError(f"Unknown family: {v}. Available options: {available}")
        return v


class DemoConfig(BaseModel):
    """Main application configuration."""

    runs: list[DemonstrationRun] = Field(
        default=[
            DemonstrationRun(
                family=1,
                header="Client: Testing client code with the first factory type...",
            ),
            DemonstrationRun(
                family=2,
                header="Client: Testing the same client code with the second factory type...",
            ),
        ]
    )
    separator: str = Field(default="", description="Line printed between runs")


# Global configuration instance
config = DemoConfig()

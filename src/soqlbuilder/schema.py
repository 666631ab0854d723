"""Pydantic schemas for the builder state."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Condition(BaseModel):
    """One WHERE condition with its value already formatted.

    ``column`` and ``operator`` are ``None`` for parts that do not apply,
    e.g. function conditions store no operator.
    """

    model_config = ConfigDict(frozen=True)

    column: Optional[str] = Field(None, description="Left-hand column or expression.")
    operator: Optional[str] = Field(None, description="Comparison operator, e.g. '=' or 'IN'.")
    value: str = Field(..., description="Formatted right-hand side.")
    boolean: str = Field("AND", description="Connector to the previous condition.")

    def render(self, opening: int = 0, closing: int = 0) -> str:
        """Render the condition with ``opening`` / ``closing`` parentheses around it."""
        parts = [p for p in (self.column, self.operator) if p is not None]
        parts.append(self.value + ")" * closing)
        parts[0] = "(" * opening + parts[0]
        return " ".join(parts)


class OrderClause(BaseModel):
    model_config = ConfigDict(frozen=True)

    column: str
    direction: str = "ASC"

    def render(self) -> str:
        return f"{self.column} {self.direction}"

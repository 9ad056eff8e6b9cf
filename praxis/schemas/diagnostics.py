"""QA harness result schemas."""

from typing import Any

from pydantic import BaseModel, Field


class QAScenarioResult(BaseModel):
    id: str
    title: str
    description: str
    logs: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return not self.errors and not self.warnings

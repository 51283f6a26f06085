"""Validation issue reported for an uploaded report."""

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """One schema violation, addressed by field path.

    Paths use dots for nesting and brackets for list indices,
    e.g. "sampleInfo.patientId" or "mutatedGenes[0].tier".
    """

    field: str = Field(..., description="Path of the offending field ('root' for the document itself)")
    message: str = Field(..., description="Human-readable description of the violation")

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"

"""Derived models for the findings summary."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AlteredGene(BaseModel):
    """A gene consolidated across report sections.

    `count` is the number of distinct sections the gene appears in. The
    structural-variant flag has no input section yet and stays False.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    gene: str
    ensembl_id: str = ""
    mutated: bool = False
    fusion: bool = False
    sv: bool = False
    cn: bool = False
    immune: bool = False
    hrd: bool = False
    count: int = 0
    resources: list[str] = Field(default_factory=list)

    def add_resource(self, resource: str) -> None:
        if resource not in self.resources:
            self.resources.append(resource)


class SectionBucket(BaseModel):
    """Multi-section genes carrying one section flag (one slice of the summary plot)."""

    name: str
    value: int
    genes: list[str] = Field(default_factory=list)

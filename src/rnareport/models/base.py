"""Shared base for report models.

Reports travel as camelCase JSON (the upload/persistence format) while the
Python attributes are snake_case.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ReportModel(BaseModel):
    """Base class for every record in a Report.

    Unknown keys are kept so that a persisted report round-trips verbatim.
    A null value for an optional field is treated as absent and takes the
    field's default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_null_optionals(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        defaulted = set()
        for name, info in cls.model_fields.items():
            if info.is_required():
                continue
            if info.default is None and info.default_factory is None:
                continue
            defaulted.update((name, info.alias or name))
        return {key: value for key, value in data.items() if value is not None or key not in defaulted}

    def to_json_dict(self) -> dict:
        """Dump using the camelCase wire names."""
        return self.model_dump(mode="json", by_alias=True)

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Row(BaseModel):
    """Base for models read back from the store. Numeric primary keys are kept as strings."""

    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)

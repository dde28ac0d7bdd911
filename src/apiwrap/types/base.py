"""Common base for every vendor data-transfer model.

:class:`ApiModel` is a Pydantic model with two additions used by the CLI:

* ``str(model)`` renders pretty JSON (aliases applied, ``None`` dropped).
* :meth:`ApiModel.table_headers` / :meth:`ApiModel.table_row` expose the
  model as one table row, so any list of models can be handed to
  :meth:`~apiwrap.output.OutputManager.print_table`.
"""

from __future__ import annotations

import enum
import json
from typing import Any

from pydantic import BaseModel, ConfigDict


def _cell(value: Any) -> str:
    """Render one field value as a table cell."""
    if value is None:
        return ""
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, BaseModel):
        return value.model_dump_json(by_alias=True, exclude_none=True)
    if isinstance(value, (list, dict)):
        return json.dumps(
            value,
            default=lambda v: v.model_dump(mode="json", by_alias=True, exclude_none=True)
            if isinstance(v, BaseModel)
            else str(v),
        )
    return str(value)


class ApiModel(BaseModel):
    """Base class for vendor request and response models.

    Unknown response keys are ignored so that new vendor fields do not
    break deserialisation. Fields whose JSON names clash with Python
    keywords use an alias (``type_`` <-> ``"type"``).
    """

    model_config = ConfigDict(populate_by_name=True)

    def __str__(self) -> str:
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)

    @classmethod
    def table_headers(cls) -> list[str]:
        """Column names, one per declared field, in declaration order."""
        return list(cls.model_fields)

    def table_row(self) -> list[str]:
        """Cell values matching :meth:`table_headers`; ``None`` renders as ``""``."""
        return [_cell(getattr(self, name)) for name in type(self).model_fields]

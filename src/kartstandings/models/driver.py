"""Driver identity model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

MAX_VERSTAPPEN = "max verstappen"


class Driver(BaseModel):
    """Driver discovered from race results.

    ``is_max_verstappen`` is derived from the name on every access; it is
    never read from stored data.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    number: int | None = None

    @computed_field(alias="isMaxVerstappen")  # type: ignore[prop-decorator]
    @property
    def is_max_verstappen(self) -> bool:
        """True when the name contains "max verstappen", ignoring case."""
        return MAX_VERSTAPPEN in self.name.lower()

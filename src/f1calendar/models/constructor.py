"""Constructor (team) model."""

from __future__ import annotations

from f1calendar.models._base import OptionalText, OutputModel


class Constructor(OutputModel):
    """Constructor entered in a season."""

    constructor_id: str
    url: OptionalText = None
    name: str
    nationality: OptionalText = None

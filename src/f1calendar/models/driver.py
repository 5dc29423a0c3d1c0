"""Driver model."""

from __future__ import annotations

from f1calendar.models._base import OptionalText, OutputModel


class Driver(OutputModel):
    """Driver entered in a season."""

    driver_id: str
    permanent_number: OptionalText = None
    code: OptionalText = None
    url: OptionalText = None
    given_name: str
    family_name: str
    date_of_birth: OptionalText = None
    nationality: OptionalText = None

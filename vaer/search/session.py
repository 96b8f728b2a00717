from dataclasses import dataclass

from ..units import Unit


@dataclass
class SessionState:
    """
    State shared between user actions for as long as the app runs.

    Only the app mutates it: the unit through toggle_unit(), and the last
    city after a successful search.
    """

    unit: Unit = Unit.METRIC
    last_city: str | None = None

    def toggle_unit(self) -> Unit:
        self.unit = self.unit.toggled()
        return self.unit

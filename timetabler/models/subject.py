from dataclasses import dataclass


@dataclass(frozen=True)
class Subject:
    id: str
    name: str
    category: str
    # Carried through from the input; the solver does not consult it.
    pedagogic_day: int | None = None

from dataclasses import dataclass


@dataclass(frozen=True)
class Room:
    id: str
    name: str
    type: str = "CLASSROOM"
    capacity: int = 30

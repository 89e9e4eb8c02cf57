from dataclasses import dataclass

@dataclass(slots=True)
class Duration:
    """Length in seconds of the animation carried by the same entity."""
    value: float

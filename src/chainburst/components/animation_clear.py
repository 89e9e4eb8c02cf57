from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class ClearAnimation:
    pos: Tuple[int,int]
    alpha: float = 1.0

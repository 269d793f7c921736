from enum import Enum


class OutcomeKind(str, Enum):
    WIN = "WIN"
    DRAW = "DRAW"

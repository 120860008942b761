"""Display state enumeration."""

from enum import Enum, auto


class DisplayState(Enum):
    """
    Which side of the card is presented.

    Flow: FACE_UP ⇄ FACE_DOWN, starting FACE_UP. There is no terminal state.
    """

    FACE_UP = auto()
    FACE_DOWN = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Each state turns into the other; CardWidget builds its triggers from this table
VALID_TRANSITIONS: dict[DisplayState, list[DisplayState]] = {
    DisplayState.FACE_UP: [DisplayState.FACE_DOWN],
    DisplayState.FACE_DOWN: [DisplayState.FACE_UP],
}

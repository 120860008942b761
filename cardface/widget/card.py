"""Card widget - one card's visual tree and flip state."""

from typing import Callable, Optional

from transitions import Machine

from cardface.cards import Card, Rank, Suit
from cardface.errors import ConfigurationError, InvalidStateError
from cardface.layout import layout
from cardface.render.host import RenderHost, RenderNode, detach
from cardface.render.tree import TreeHost
from cardface.widget.events import CardEvent, CardEventType, EventEmitter
from cardface.widget.state import VALID_TRANSITIONS, DisplayState

# Style hook classes
ROOT_CLASS = "Card"
FLIPPED_CLASS = "CardFlipped"
FRONT_CLASS = "CardFront"
BACK_CLASS = "CardBack"
SYMBOL_CONTAINER_CLASS = "CardSymbolContainer"
SYMBOL_CLASS = "CardSymbol"
RANK_CLASS = "CardRank"


class CardWidget:
    """
    A playing card rendered as a node tree, with a face-up/face-down state.

    The widget owns its tree exclusively: build() creates a root holding a
    front face and a back face, destroy() detaches and releases it. Flipping
    only toggles a hook class on the root; face content is never rebuilt.
    """

    # State machine states
    STATES = [s.name.lower() for s in DisplayState]

    # State machine transitions: turn_face_down, turn_face_up
    TRANSITIONS = [
        {
            "trigger": f"turn_{dest.name.lower()}",
            "source": source.name.lower(),
            "dest": dest.name.lower(),
        }
        for source, dests in VALID_TRANSITIONS.items()
        for dest in dests
    ]

    def __init__(
        self,
        rank: Rank | int,
        suit: Suit | int,
        host: RenderHost | None = None,
    ) -> None:
        """
        Initialize an unbuilt card widget.

        Args:
            rank: Card rank (member or ordinal)
            suit: Card suit (member or ordinal)
            host: Node factory of the hosting UI (in-memory tree if not provided)

        Raises:
            ConfigurationError: If rank or suit is outside its domain
        """
        self._card = Card(rank, suit)
        self.host = host or TreeHost()
        self.events = EventEmitter()

        self.visual_root: Optional[RenderNode] = None
        self.front_face: Optional[RenderNode] = None
        self.back_face: Optional[RenderNode] = None
        self._glyph_nodes: list[RenderNode] = []

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial=DisplayState.FACE_UP.name.lower(),
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_sync_flip_class",
        )

    @classmethod
    def from_string(cls, s: str, host: RenderHost | None = None) -> "CardWidget":
        """Create a widget from a card string like 'AS' or '10♥'."""
        card = Card.from_string(s)
        return cls(card.rank, card.suit, host=host)

    def __repr__(self) -> str:
        built = "built" if self.visual_root is not None else "unbuilt"
        return f"CardWidget({self._card!r}, {self.state.name}, {built})"

    @property
    def card(self) -> Card:
        return self._card

    @property
    def rank(self) -> Rank:
        return self._card.rank

    @property
    def suit(self) -> Suit:
        return self._card.suit

    @property
    def state(self) -> DisplayState:
        """Get current display state as enum."""
        return DisplayState[self._machine_state.upper()]  # type: ignore

    @property
    def flipped(self) -> bool:
        """Check if the card is face down."""
        return self.state == DisplayState.FACE_DOWN

    @property
    def is_built(self) -> bool:
        return self.visual_root is not None

    @property
    def rank_label(self) -> str:
        """Return the printed rank token ('A', '2'-'10', 'J', 'Q', 'K')."""
        return self.rank.label

    def is_face(self) -> bool:
        """
        Check if the card shows a large rank glyph rather than a symbol grid.

        Advisory only: the Ace still gets its single-glyph grid.
        """
        return self.rank.is_ace or self.rank.is_court

    def subscribe(
        self,
        handler: Callable[[CardEvent], None],
        event_type: CardEventType | None = None,
    ) -> None:
        """Subscribe to widget events."""
        self.events.subscribe(handler, event_type)

    # Lifecycle

    def build(self) -> RenderNode:
        """
        Build the visual tree, replacing any tree built before.

        The new tree is created and installed before any event is emitted, so
        neither a host failure nor a raising subscriber can leave the widget
        half built.

        Returns:
            The new root node
        """
        root = self.host.create_element("div")
        root.class_name = self._root_class_name()

        front, glyph_nodes = self._create_front()
        back = self._create_back()
        root.append_child(front)
        root.append_child(back)

        replaced = self._release()

        self.visual_root = root
        self.front_face = front
        self.back_face = back
        self._glyph_nodes = glyph_nodes

        if replaced:
            self.events.emit(CardEventType.DESTROYED, self._card)
        self.events.emit(CardEventType.BUILT, self._card, glyphs=len(glyph_nodes))
        return root

    def destroy(self) -> None:
        """Detach and release the visual tree. Does nothing when not built."""
        if self._release():
            self.events.emit(CardEventType.DESTROYED, self._card)

    def _release(self) -> bool:
        """Detach and drop the visual tree; report whether there was one."""
        root = self.visual_root
        if root is None:
            return False

        detach(root)
        self.visual_root = None
        self.front_face = None
        self.back_face = None
        self._glyph_nodes = []
        return True

    def mount(self, parent: RenderNode) -> None:
        """
        Attach the visual tree to a host node.

        Raises:
            InvalidStateError: If the widget is not built
        """
        root = self._require_root("mount")
        parent.append_child(root)
        self.events.emit(CardEventType.MOUNTED, self._card)

    # Display state

    def flip(self, state: bool | None = None) -> bool:
        """
        Turn the card over, or set which side is presented.

        Args:
            state: True for face down, False for face up, None to toggle

        Returns:
            The new flipped value

        Raises:
            ConfigurationError: If state is neither None nor a bool
            InvalidStateError: If the widget is not built
        """
        if state is not None and not isinstance(state, bool):
            raise ConfigurationError(f"Invalid flip state: {state!r}")
        self._require_root("flip")

        target = (not self.flipped) if state is None else state
        if target == self.flipped:
            return target

        if target:
            self.turn_face_down()  # type: ignore[attr-defined]
        else:
            self.turn_face_up()  # type: ignore[attr-defined]

        self.events.emit(CardEventType.FLIPPED, self._card, flipped=target)
        return target

    # Face content queries

    def glyph_nodes(self) -> list[RenderNode]:
        """
        Return the suit glyph nodes of the front face, in layout order.

        Raises:
            InvalidStateError: If the widget is not built
        """
        self._require_root("query glyphs of")
        return list(self._glyph_nodes)

    def hook_classes(self) -> dict[str, str]:
        """
        Return the hook classes of the root, front and back nodes.

        Raises:
            InvalidStateError: If the widget is not built
        """
        root = self._require_root("query hook classes of")
        return {
            "root": root.class_name,
            "front": self.front_face.class_name,
            "back": self.back_face.class_name,
        }

    # Tree construction

    def _create_front(self) -> tuple[RenderNode, list[RenderNode]]:
        """Create the front face: symbol grid plus rank label."""
        label = self.rank_label
        glyph = self.suit.glyph

        front = self.host.create_element("div")
        front.class_name = f"{FRONT_CLASS} {ROOT_CLASS}{label} {self.suit.hook}"

        container = self.host.create_element("div")
        container.class_name = SYMBOL_CONTAINER_CLASS

        glyph_nodes = []
        for placement in layout(self.rank):
            symbol = self.host.create_element(
                "div",
                style={
                    "left": f"{placement.x_percent:g}%",
                    "top": f"{placement.y_percent:g}%",
                },
            )
            symbol.class_name = SYMBOL_CLASS
            symbol.append_text(glyph)
            container.append_child(symbol)
            glyph_nodes.append(symbol)

        front.append_child(container)

        # Rank token above the suit glyph, split by a line break
        rank_node = self.host.create_element("span")
        rank_node.class_name = f"{RANK_CLASS} {RANK_CLASS}{label}"
        rank_node.append_text(label)
        rank_node.append_child(self.host.create_element("br"))
        rank_node.append_text(glyph)
        front.append_child(rank_node)

        return front, glyph_nodes

    def _create_back(self) -> RenderNode:
        back = self.host.create_element("div")
        back.class_name = BACK_CLASS
        return back

    def _root_class_name(self) -> str:
        if self.flipped:
            return f"{ROOT_CLASS} {FLIPPED_CLASS}"
        return ROOT_CLASS

    def _sync_flip_class(self) -> None:
        """Make the root's flipped hook class match the display state."""
        if self.visual_root is None:
            return
        classes = [c for c in self.visual_root.class_name.split() if c != FLIPPED_CLASS]
        if self.flipped:
            classes.append(FLIPPED_CLASS)
        self.visual_root.class_name = " ".join(classes)

    def _require_root(self, action: str) -> RenderNode:
        if self.visual_root is None:
            raise InvalidStateError(f"Cannot {action} {self._card}: card is not built")
        return self.visual_root

"""Movement & collision resolver.

Turns a requested direction into a classified outcome for a grid entity:

* :class:`Moved` - the entity may step onto an empty cell.
* :class:`Blocked` - the move is a no-op; position and facing stay unchanged.
* :class:`Consumed` - the destination holds a pickup (the caller clears it
  with :func:`arcade_core.utils.board.consume`).
* :class:`CollidedWithEntity` - the destination is occupied by another entity.

Each axis has a :class:`WrapPolicy`; a candidate leaving the board is wrapped
modulo the axis size, clamped onto the edge, or rejected. Policies are usually
picked by name from ``MOVE_POLICY_REGISTRY``.

The resolver never mutates anything. Entity-vs-entity overlap for continuous
entities (space-shooter) uses :func:`rects_overlap`; :func:`shapes_collide`
dispatches on the declared shape so grid points and rectangles share one
predicate.
"""

from dataclasses import dataclass
from typing import Dict, Hashable, Mapping, Optional, Union

from arcade_core.components import Board, Position, Rect
from arcade_core.types import CellTag, Direction, WrapPolicy, WrapRule
from arcade_core.utils.board import DEFAULT_PICKUP_POINTS, cell_at, is_walkable
from arcade_core.utils.math import step_position


@dataclass(frozen=True)
class Moved:
    position: Position


@dataclass(frozen=True)
class Blocked:
    pass


@dataclass(frozen=True)
class Consumed:
    position: Position
    points: int
    power: bool = False


@dataclass(frozen=True)
class CollidedWithEntity:
    other: Hashable
    position: Position


MoveOutcome = Union[Moved, Blocked, Consumed, CollidedWithEntity]


MOVE_POLICY_REGISTRY: Dict[str, WrapRule] = {
    "bounded": (WrapPolicy.REJECT, WrapPolicy.REJECT),
    "tunnel": (WrapPolicy.WRAP, WrapPolicy.REJECT),
    "torus": (WrapPolicy.WRAP, WrapPolicy.WRAP),
    "clamped": (WrapPolicy.CLAMP, WrapPolicy.CLAMP),
}
"""Named per-axis wrap rules, ``(x_policy, y_policy)``."""


def wrap_coordinate(value: int, size: int, policy: WrapPolicy) -> Optional[int]:
    """Apply ``policy`` to one coordinate; ``None`` means the move is rejected."""
    if 0 <= value < size:
        return value
    if policy == WrapPolicy.WRAP:
        return value % size
    if policy == WrapPolicy.CLAMP:
        return max(0, min(size - 1, value))
    return None


def candidate_position(
    board: Board, pos: Position, direction: Direction, wrap: WrapRule
) -> Optional[Position]:
    """Return the normalized neighbor of ``pos`` or ``None`` if it is rejected."""
    raw = step_position(pos, direction)
    x = wrap_coordinate(raw.x, board.width, wrap[0])
    y = wrap_coordinate(raw.y, board.height, wrap[1])
    if x is None or y is None:
        return None
    return Position(x, y)


def resolve_move(
    board: Board,
    pos: Position,
    direction: Optional[Direction],
    wrap: WrapRule = MOVE_POLICY_REGISTRY["bounded"],
    occupants: Optional[Mapping[Position, Hashable]] = None,
    points: Mapping[CellTag, int] = DEFAULT_PICKUP_POINTS,
) -> MoveOutcome:
    """Classify a one-cell move from ``pos`` along ``direction``.

    Args:
        board (Board): Board the entity moves on.
        pos (Position): Current position.
        direction (Direction | None): Requested direction; ``None`` is Blocked.
        wrap (WrapRule): Per-axis policy for leaving the board.
        occupants (Mapping[Position, Hashable] | None): Cells held by other
            entities, mapped to an identifier reported on collision.
        points (Mapping[CellTag, int]): Pickup values reported by ``Consumed``.

    Returns:
        MoveOutcome: The classified outcome. ``Blocked`` whenever the entity
        would not actually change cell.
    """
    if direction is None:
        return Blocked()
    candidate = candidate_position(board, pos, direction, wrap)
    if candidate is None or candidate == pos:
        return Blocked()
    if not is_walkable(board, candidate):
        return Blocked()
    if occupants and candidate in occupants:
        return CollidedWithEntity(other=occupants[candidate], position=candidate)
    tag = cell_at(board, candidate).tag
    if tag in (CellTag.PICKUP, CellTag.POWER_PICKUP):
        return Consumed(
            position=candidate,
            points=points.get(tag, 0),
            power=tag == CellTag.POWER_PICKUP,
        )
    return Moved(position=candidate)


def outcome_position(outcome: MoveOutcome, current: Position) -> Position:
    """Position the entity ends on after ``outcome`` (``current`` if it did not move)."""
    if isinstance(outcome, (Moved, Consumed, CollidedWithEntity)):
        return outcome.position
    return current


def points_collide(a: Position, b: Position) -> bool:
    """Grid entities collide on exact position equality."""
    return a == b


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Axis-aligned bounding-box overlap; touching edges do not overlap."""
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def shapes_collide(a: Union[Position, Rect], b: Union[Position, Rect]) -> bool:
    """Overlap test appropriate to each entity's declared shape."""
    if isinstance(a, Rect) and isinstance(b, Rect):
        return rects_overlap(a, b)
    if isinstance(a, Position) and isinstance(b, Position):
        return points_collide(a, b)
    point, rect = (a, b) if isinstance(a, Position) else (b, a)
    assert isinstance(point, Position) and isinstance(rect, Rect)
    return rect.x <= point.x < rect.right and rect.y <= point.y < rect.bottom

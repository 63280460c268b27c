"""
Text rendering for the console front-end.
All functions are pure: they take game data and return strings.
"""

from typing import Iterable, List

from .piece import Piece
from .types import QueueError, QueueResult

WIDTH = 41
FRONT_MARKER = ">>"

MENU_OPTIONS = (
    ("1", "Show queue"),
    ("2", "Play piece (take from front)"),
    ("3", "Insert new piece"),
    ("4", "Remove piece by id"),
    ("5", "Quit"),
)

ERROR_MESSAGES = {
    QueueError.QUEUE_EMPTY: "No pieces in the queue. Insert a piece first.",
    QueueError.QUEUE_FULL: "Queue is full. Play some pieces before inserting new ones.",
    QueueError.INVALID_POSITION: "That piece is not in the queue.",
}


def _row(text: str) -> str:
    inner = WIDTH - 4
    return f"| {text[:inner]:<{inner}} |"


def _rule(char: str = "-") -> str:
    return "+" + char * (WIDTH - 2) + "+"


def piece_lines(pieces: Iterable[Piece]) -> List[str]:
    """Numbered piece listing, front first, the front piece marked."""
    lines = []
    for position, piece in enumerate(pieces, start=1):
        marker = FRONT_MARKER if position == 1 else " " * len(FRONT_MARKER)
        lines.append(f"{marker} {position:2}. Piece {piece.kind} (id {piece.piece_id:3})")
    return lines


def render_queue(snapshot: dict) -> str:
    lines = [
        _rule("="),
        _row("QUEUE STATE".center(WIDTH - 4)),
        _rule("="),
        _row(f"Pieces in queue: {snapshot['size']}/{snapshot['capacity']}"),
        _row(f"Next id: {snapshot['next_id']}"),
        _rule("="),
    ]
    if not snapshot["pieces"]:
        lines.append(_row("QUEUE EMPTY".center(WIDTH - 4)))
        lines.append(_row("Insert pieces to start!".center(WIDTH - 4)))
    else:
        lines.append(_row("PIECES (front -> back):"))
        lines.append(_rule("-"))
        lines.extend(_row(line) for line in piece_lines(snapshot["pieces"]))
    lines.append(_rule("="))
    return "\n".join(lines)


def render_header() -> str:
    return "\n".join(
        [
            _rule("="),
            _row("TETRIS STACK".center(WIDTH - 4)),
            _row("Circular queue of pieces".center(WIDTH - 4)),
            _rule("="),
        ]
    )


def render_menu() -> str:
    lines = [_rule("-"), _row("MAIN MENU".center(WIDTH - 4)), _rule("-")]
    lines.extend(_row(f"{key}. {label}") for key, label in MENU_OPTIONS)
    lines.append(_rule("-"))
    return "\n".join(lines)


def render_farewell() -> str:
    return "\n".join(
        [_rule("="), _row("THANKS FOR PLAYING!".center(WIDTH - 4)), _rule("=")]
    )


def render_error(result: QueueResult) -> str:
    return f"ERROR: {ERROR_MESSAGES.get(result.error, 'Operation failed.')}"


def render_played(result: QueueResult) -> str:
    if not result.ok:
        return render_error(result)
    lines = [
        "PIECE PLAYED!",
        f"  - Kind: {result.piece.kind}",
        f"  - Id: {result.piece.piece_id}",
    ]
    if result.replenished is not None:
        fresh = result.replenished
        lines.append(f"New piece generated automatically: {fresh.kind} (id {fresh.piece_id})")
    return "\n".join(lines)


def render_inserted(result: QueueResult) -> str:
    if not result.ok:
        return render_error(result)
    return "\n".join(
        [
            "NEW PIECE ADDED!",
            f"  - Kind: {result.piece.kind}",
            f"  - Id: {result.piece.piece_id}",
            f"  - Position in queue: {result.position + 1}",
        ]
    )


def render_removed(result: QueueResult, piece_id: int) -> str:
    if not result.ok:
        if result.error is QueueError.INVALID_POSITION:
            return f"ERROR: Piece with id {piece_id} not found in the queue!"
        return render_error(result)
    return "\n".join(
        [
            "PIECE REMOVED!",
            f"  - Kind: {result.piece.kind}",
            f"  - Id: {result.piece.piece_id}",
            f"  - Removed from position: {result.position + 1}",
        ]
    )

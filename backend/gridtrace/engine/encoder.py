"""Run-length path encoder — loops to SVG path data.

Each loop becomes ``M x y``, one relative ``h``/``v`` segment per run of
same-direction edges, then ``z``. Lengths are in grid units; the caller scales
them to pixels with the path's ``transform``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from itertools import groupby

from gridtrace.engine.edge_index import Direction, Loop


class Command(enum.Enum):
    MOVE = "move"
    LINE = "line"
    CLOSE = "close"


@dataclass(frozen=True)
class PathDirective:
    command: Command
    x: int = 0
    y: int = 0
    direction: Direction | None = None
    length: int = 0


SVG_PATH_COMMANDS: dict[Command | Direction, str] = {
    Command.MOVE: "M",
    Direction.UP: "v-",
    Direction.DOWN: "v",
    Direction.LEFT: "h-",
    Direction.RIGHT: "h",
    Command.CLOSE: "z",
}


def encode_loop(loop: Loop) -> list[PathDirective]:
    """Move to the loop start, one directive per maximal direction run, close."""
    if not loop:
        raise ValueError("Cannot encode an empty loop")

    first = loop[0]
    directives = [PathDirective(Command.MOVE, x=first.x, y=first.y)]
    for direction, run in groupby(loop, key=lambda edge: edge.direction):
        directives.append(
            PathDirective(Command.LINE, direction=direction, length=sum(1 for _ in run))
        )
    directives.append(PathDirective(Command.CLOSE))
    return directives


def directives_to_path_data(directives: list[PathDirective]) -> str:
    parts: list[str] = []
    for d in directives:
        if d.command is Command.MOVE:
            parts.append(f"{SVG_PATH_COMMANDS[Command.MOVE]}{d.x} {d.y}")
        elif d.command is Command.LINE:
            parts.append(f"{SVG_PATH_COMMANDS[d.direction]}{d.length}")
        else:
            parts.append(SVG_PATH_COMMANDS[Command.CLOSE])
    return "".join(parts)


def loops_to_path_data(loops: list[Loop]) -> str:
    """Concatenate every loop's encoding into one compound path ``d`` attribute."""
    return "".join(directives_to_path_data(encode_loop(loop)) for loop in loops)

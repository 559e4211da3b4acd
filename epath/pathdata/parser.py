from typing import List, Optional

from ..geometry import Point
from ..path import Path
from ..segments import Segment
from .lexer import Token, tokenize


class Cursor:
    def __init__(self, tokens: List[Token]):
        self.toks = tokens
        self.i = 0

    def peek(self) -> Optional[Token]:
        return self.toks[self.i] if self.i < len(self.toks) else None

    def match(self, *types: str) -> Optional[Token]:
        if self.i < len(self.toks) and self.toks[self.i][0] in types:
            t = self.toks[self.i]
            self.i += 1
            return t
        return None

    def expect(self, *types: str) -> Token:
        t = self.peek()
        if t and t[0] in types:
            self.i += 1
            return t
        want = '|'.join(types)
        if t:
            raise SyntaxError(f'[col {t[2]}] expected {want}, got {t[0]} {t[1]!r}')
        raise SyntaxError(f'Unexpected end of path data: expected {want}')


def parse_number(cur: Cursor) -> float:
    return float(cur.expect('NUMBER')[1])


def parse_point(cur: Cursor, relative: bool, origin: Point) -> Point:
    x = parse_number(cur)
    y = parse_number(cur)
    if relative:
        return origin[0] + x, origin[1] + y
    return x, y


class _PenState:
    """Current point bookkeeping while walking the commands."""

    def __init__(self) -> None:
        self.current: Point = (0.0, 0.0)
        self.start: Point = (0.0, 0.0)
        self.open = False


def _parse_command(cur: Cursor, cmd: str, pen: _PenState, out: List[Segment]) -> str:
    """Parse one coordinate group of ``cmd`` and return the command to repeat."""

    relative = cmd.islower()
    op = cmd.upper()

    if op == 'M':
        point = parse_point(cur, relative, pen.current)
        out.append(Segment.move(point))
        pen.current = pen.start = point
        pen.open = True
        # further coordinate pairs after a move are implicit lines
        return 'l' if relative else 'L'

    if op == 'Z':
        out.append(Segment.close())
        pen.current = pen.start
        pen.open = False
        return cmd

    if not pen.open:
        # drawing right after a close starts a new sub-path at the same point
        out.append(Segment.move(pen.start))
        pen.open = True

    if op == 'L':
        point = parse_point(cur, relative, pen.current)
        out.append(Segment.line(point))
    elif op == 'H':
        x = parse_number(cur)
        point = ((pen.current[0] + x) if relative else x, pen.current[1])
        out.append(Segment.line(point))
    elif op == 'V':
        y = parse_number(cur)
        point = (pen.current[0], (pen.current[1] + y) if relative else y)
        out.append(Segment.line(point))
    elif op == 'Q':
        control = parse_point(cur, relative, pen.current)
        point = parse_point(cur, relative, pen.current)
        out.append(Segment.quad(control, point))
    elif op == 'C':
        control1 = parse_point(cur, relative, pen.current)
        control2 = parse_point(cur, relative, pen.current)
        point = parse_point(cur, relative, pen.current)
        out.append(Segment.cubic(control1, control2, point))
    else:  # pragma: no cover - the lexer only emits known commands
        raise SyntaxError(f'unsupported path command {cmd!r}')

    pen.current = point
    return cmd


def parse_segments(text: str) -> List[Segment]:
    cur = Cursor(tokenize(text))
    pen = _PenState()
    segments: List[Segment] = []
    cmd: Optional[str] = None

    first = cur.peek()
    if first and not (first[0] == 'CMD' and first[1] in 'Mm'):
        raise SyntaxError(f'[col {first[2]}] path data must start with a move command')

    while cur.peek():
        tok = cur.match('CMD')
        if tok:
            cmd = tok[1]
        elif cmd is None or cmd in 'Zz':
            t = cur.peek()
            raise SyntaxError(f'[col {t[2]}] expected CMD, got NUMBER {t[1]!r}')
        cmd = _parse_command(cur, cmd, pen, segments)
    return segments


def parse_path_data(text: str) -> Path:
    """Parse SVG path data into a :class:`~epath.path.Path`.

    Supports ``M L H V Q C Z`` in absolute and relative form. Every ``Z``
    ends a sub-path.
    """

    return Path.from_segments(parse_segments(text))

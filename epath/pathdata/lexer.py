import re
from typing import List, Tuple

Token = Tuple[str, str, int]  # (type, value, col)

COMMANDS = 'MmLlHhVvQqCcZz'

WS = ' \t\r\n,'

_num_re = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


def tokenize(s: str) -> List[Token]:
    tokens: List[Token] = []
    i = 0
    n = len(s)
    while i < n:
        ch = s[i]
        col = i + 1
        if ch in WS:
            i += 1
            continue
        if ch in COMMANDS:
            tokens.append(('CMD', ch, col))
            i += 1
            continue
        m = _num_re.match(s, i)
        if m:
            tokens.append(('NUMBER', m.group(0), col))
            i = m.end()
            continue
        raise SyntaxError(f'[col {col}] unexpected character: {ch!r}')
    return tokens

import re
from typing import Any, Dict, List, Optional, Tuple

from .ast import Program, Span, Stmt
from .lexer import Token, tokenize_line

_ERROR_LOC_RE = re.compile(r"\[line (\d+), col (\d+)\]")


class Cursor:
    def __init__(self, tokens: List[Token]):
        self.toks = tokens
        self.i = 0

    def peek(self):
        return self.toks[self.i] if self.i < len(self.toks) else None

    def peek_ahead(self, offset: int = 1):
        idx = self.i + offset
        return self.toks[idx] if idx < len(self.toks) else None

    def match(self, *types: str):
        if self.i < len(self.toks) and self.toks[self.i][0] in types:
            t = self.toks[self.i]
            self.i += 1
            return t
        return None

    def expect(self, *types: str):
        t = self.peek()
        if t and t[0] in types:
            self.i += 1
            return t
        want = '|'.join(types)
        if t:
            raise SyntaxError(f'[line {t[2]}, col {t[3]}] expected {want}, got {t[0]}')
        raise SyntaxError(f'Unexpected end of line: expected {want}')

    def expect_end(self):
        t = self.peek()
        if t:
            raise SyntaxError(f"[line {t[2]}, col {t[3]}] unexpected trailing token '{t[1]}'")


def _parse_number_literal(raw: str):
    return float(raw) if ('.' in raw or 'e' in raw.lower()) else int(raw)


def parse_opt_value(cur: Cursor):
    vtok = cur.peek()
    if not vtok:
        raise SyntaxError('unterminated options value')
    if vtok[0] == 'STRING':
        return cur.match('STRING')[1]
    if vtok[0] == 'NUMBER':
        return _parse_number_literal(cur.match('NUMBER')[1])
    if vtok[0] == 'ID':
        raw = cur.match('ID')[1]
        low = raw.lower()
        if low in ('true', 'false'):
            return low == 'true'
        return low
    raise SyntaxError(f'[line {vtok[2]}, col {vtok[3]}] invalid option value token {vtok[0]}')


def parse_opts(cur: Cursor) -> Dict[str, Any]:
    opts: Dict[str, Any] = {}
    if not cur.match('LBRACK'):
        return opts
    need_sep = False
    last_key: Optional[str] = None
    while True:
        t = cur.peek()
        if not t:
            raise SyntaxError('unterminated options block')
        if t[0] == 'RBRACK':
            cur.i += 1
            break
        if need_sep:
            if t[0] == 'COMMA':
                cur.i += 1
                need_sep = False
                continue
            next_tok = cur.peek_ahead()
            if t[0] != 'ID' or not next_tok or next_tok[0] != 'EQUAL':
                if last_key:
                    raise SyntaxError(
                        f"[line {t[2]}, col {t[3]}] unexpected value '{t[1]}' after option '{last_key}'. "
                        "Did you forget to separate options or close the options block?"
                    )
                raise SyntaxError(f"[line {t[2]}, col {t[3]}] unexpected token '{t[1]}'. Expected ',' or ']'")
        k = cur.expect('ID')
        key = k[1].lower()
        if key in opts:
            raise SyntaxError(f"[line {k[2]}, col {k[3]}] duplicate option '{key}'")
        cur.expect('EQUAL')
        opts[key] = parse_opt_value(cur)
        need_sep = True
        last_key = key
    return opts


def parse_stmt(tokens: List[Token]) -> Optional[Stmt]:
    if not tokens:
        return None
    cur = Cursor(tokens)
    t0 = cur.peek()
    if t0[0] != 'ID':
        raise SyntaxError(f'[line {t0[2]}, col {t0[3]}] expected statement keyword')
    kw = t0[1].lower()
    cur.i += 1
    span = Span(t0[2], t0[3])

    if kw == 'radar':
        s = cur.expect('STRING')
        stmt = Stmt('radar', span, {'title': s[1]}, parse_opts(cur))
    elif kw == 'quadrant':
        q = cur.expect('ID')
        s = cur.expect('STRING')
        stmt = Stmt('quadrant', span, {'quadrant': q[1].lower(), 'title': s[1]})
    elif kw == 'color':
        target = cur.expect('ID')
        s = cur.expect('STRING')
        stmt = Stmt('color', span, {'target': target[1].lower(), 'value': s[1]})
    elif kw == 'item':
        s = cur.expect('STRING')
        stmt = Stmt('item', span, {'name': s[1]}, parse_opts(cur))
    else:
        raise SyntaxError(f"[line {t0[2]}, col {t0[3]}] unknown statement '{t0[1]}'")
    cur.expect_end()
    return stmt


def _augment_syntax_error(err: SyntaxError, line_text: str) -> Optional[SyntaxError]:
    message = str(err)
    if not line_text or "\n" in message:
        return None
    match = _ERROR_LOC_RE.search(message)
    if not match:
        return None
    col = max(int(match.group(2)), 1)
    caret_line = " " * (col - 1) + "^"
    snippet = f"    {line_text.rstrip()}\n    {caret_line}"
    return SyntaxError(f"{message}\n{snippet}")


def parse_program(text: str) -> Program:
    prog = Program()
    for i, raw in enumerate(text.splitlines(), start=1):
        try:
            tokens = tokenize_line(raw, i)
            stmt = parse_stmt(tokens)
        except SyntaxError as err:
            augmented = _augment_syntax_error(err, raw)
            if augmented is None:
                raise
            raise augmented from None
        if stmt:
            prog.stmts.append(stmt)
    return prog

from numbers import Real
from typing import Dict

from .ast import Program, Span
from .model import Assessment, Quadrant, Trend, UnknownEnumValue

COLOR_TARGETS = ('adopt', 'trial', 'assess', 'hold', 'background', 'grid', 'inactive', 'text')
RADAR_OPTIONS = ('width', 'height', 'print')
ITEM_OPTIONS = ('quadrant', 'assessment', 'active', 'move')


class ValidationError(Exception):
    pass


def _fail(sp: Span, message: str) -> ValidationError:
    return ValidationError(f'[line {sp.line}, col {sp.col}] {message}')


def _check_enum(parse, value: object, sp: Span) -> None:
    try:
        parse(value)
    except UnknownEnumValue as exc:
        raise _fail(sp, str(exc)) from exc


def validate(prog: Program) -> None:
    radar_seen = False
    titled: Dict[str, Span] = {}
    for s in prog.stmts:
        k = s.kind
        if k == 'radar':
            if radar_seen:
                raise _fail(s.span, 'only one radar statement is allowed')
            radar_seen = True
            for key, val in s.opts.items():
                if key not in RADAR_OPTIONS:
                    raise _fail(s.span, f'unknown radar option "{key}"')
                if key == 'print':
                    if not isinstance(val, bool):
                        raise _fail(s.span, 'radar option "print" must be boolean')
                elif isinstance(val, bool) or not isinstance(val, Real) or val <= 0:
                    raise _fail(s.span, f'radar option "{key}" must be a positive number')
        elif k == 'quadrant':
            name = s.data['quadrant']
            _check_enum(Quadrant.parse, name, s.span)
            if name in titled:
                first = titled[name]
                raise _fail(s.span, f'quadrant {name} already titled at line {first.line}')
            titled[name] = s.span
        elif k == 'color':
            if s.data['target'] not in COLOR_TARGETS:
                raise _fail(s.span, f'unknown color target "{s.data["target"]}"')
            if not s.data['value'].strip():
                raise _fail(s.span, 'color value must not be empty')
        elif k == 'item':
            if not s.data['name'].strip():
                raise _fail(s.span, 'item name must not be empty')
            for key in s.opts:
                if key not in ITEM_OPTIONS:
                    raise _fail(s.span, f'unknown item option "{key}"')
            for required in ('quadrant', 'assessment'):
                if required not in s.opts:
                    raise _fail(s.span, f'item "{s.data["name"]}" is missing option "{required}"')
            _check_enum(Quadrant.parse, s.opts['quadrant'], s.span)
            _check_enum(Assessment.parse, s.opts['assessment'], s.span)
            if 'move' in s.opts:
                _check_enum(Trend.parse, s.opts['move'], s.span)
            if not isinstance(s.opts.get('active', True), bool):
                raise _fail(s.span, 'item option "active" must be boolean')

import re
from typing import Optional, Union
from nerevar.common.errors import MalformedLiteral, InvalidNumber, InvalidBoolean

Scalar = Union[bool, int, float, str]

_INT_RE = re.compile(r"-?\d+")
_FLOAT_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_QUOTED_RE = re.compile(r'"((?:[^"\\\n]|\\.)*)"')
# One or more quoted segments joined by the Lua `..` operator
_CONCAT_RE = re.compile(r'"(?:[^"\\\n]|\\.)*"(?:\s*\.\.\s*"(?:[^"\\\n]|\\.)*")*')
_ESCAPE_RE = re.compile(r"\\(?:(\d{1,3})|(.))")

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "\\": "\\",
    '"': '"',
    "'": "'",
}
_LUA_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}

def _unescape(match: re.Match) -> str:
    code, char = match.groups()
    if code is not None:
        if int(code) > 255:
            raise MalformedLiteral(f"Escape sequence out of range: \\{code}")
        return chr(int(code))
    if char not in _ESCAPES:
        raise MalformedLiteral(f"Unknown escape sequence: \\{char}")
    return _ESCAPES[char]

def parse_string_literal(text: str) -> str:
    """
    Parse a double-quoted literal, or a Lua concatenation of them.

    `"Deer" .. "Hunter"` gives `DeerHunter`. Backslash escapes are decoded.
    """
    text = text.strip()
    if not _CONCAT_RE.fullmatch(text):
        raise MalformedLiteral(f"Not a string literal: {text!r}")
    return "".join(_ESCAPE_RE.sub(_unescape, body) for body in _QUOTED_RE.findall(text))

def parse_int_literal(text: str) -> int:
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        raise InvalidNumber(f"Not an integer: {text!r}")
    return int(text)

def parse_float_literal(text: str) -> float:
    # float() alone would also accept "nan", "inf" and "1_0"
    text = text.strip()
    if not _FLOAT_RE.fullmatch(text):
        raise InvalidNumber(f"Not a number: {text!r}")
    return float(text)

def parse_bool_literal(text: str) -> bool:
    text = text.strip()
    if text == "true":
        return True
    if text == "false":
        return False
    raise InvalidBoolean(f"Not a boolean: {text!r}")

def infer_value(text: str) -> Scalar:
    """
    Best-effort typing of an untyped value.

    Tries int, then float, then `true`/`false`; anything else stays a string.
    """
    for parse in (parse_int_literal, parse_float_literal, parse_bool_literal):
        try:
            return parse(text)
        except (InvalidNumber, InvalidBoolean):
            continue
    return text

def render_float(value: float, precision: Optional[int] = None) -> str:
    """
    Render a float for a config file.

    With no precision the shortest round-tripping form is used (`2.0` stays
    `2.0`); otherwise fixed-point with `precision` decimals.
    """
    if precision is None:
        return repr(float(value))
    return f"{float(value):.{precision}f}"

def render_ini_value(value: Scalar) -> str:
    """Canonical INI text: decimal ints, `true`/`false`, raw strings."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return render_float(value)
    text = str(value)
    if "\n" in text or "\r" in text:
        raise MalformedLiteral("INI values cannot span several lines")
    return text

def render_lua_value(value: Scalar, float_precision: Optional[int] = None) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return render_float(value, float_precision)
    return '"' + "".join(_LUA_ESCAPES.get(char, char) for char in value) + '"'

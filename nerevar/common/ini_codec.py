import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional
from nerevar.common.logger import setup_logger
from nerevar.common.errors import ConfigError, InvalidNumber, NoMatchingKeys
from nerevar.common.literals import Scalar, parse_bool_literal, parse_int_literal, render_ini_value

logger = setup_logger("IniCodec")

# A line together with its own terminator, so files join back byte for byte
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")

_UPPER_BOUNDS = {
    "u8": 0xFF,
    "u16": 0xFFFF,
    "u32": 0xFFFFFFFF,
}

@dataclass(frozen=True)
class IniField:
    """A known `key` inside a `[section]`, with the kind its value must have."""
    section: str
    key: str
    kind: str = "str"

    def coerce(self, raw: str) -> Any:
        if self.kind == "str":
            return raw
        if self.kind == "bool":
            return parse_bool_literal(raw)
        number = parse_int_literal(raw)
        if not 0 <= number <= _UPPER_BOUNDS[self.kind]:
            raise InvalidNumber(f"{self.key} = {number} is out of range for {self.kind}")
        return number

@dataclass
class IniEntry:
    index: int
    section: Optional[str]
    key: str
    value: str

def split_lines(text: str) -> List[str]:
    return _LINE_RE.findall(text)

def scan_ini(lines: Iterable[str]) -> Iterator[IniEntry]:
    """
    Walk `key = value` lines, tracking the current `[Section]`.

    Blank lines and `#` comments are skipped and leave the section unchanged.
    """
    section = None
    for index, line in enumerate(lines):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        if trimmed.startswith("[") and trimmed.endswith("]"):
            section = trimmed[1:-1].strip()
            continue

        key, sep, value = trimmed.partition("=")
        if not sep:
            continue
        yield IniEntry(index, section, key.strip(), value.strip())

def read_ini_values(text: str, fields: Iterable[IniField]) -> Dict[IniField, Any]:
    """
    Collect typed values for the known fields found in `text`.

    Fields that are absent, unparseable or outside their section are left out
    of the result; callers fall back to their defaults. The last occurrence of
    a key wins.
    """
    by_location = {(field.section, field.key): field for field in fields}
    values = {}

    for entry in scan_ini(split_lines(text)):
        field = by_location.get((entry.section, entry.key))
        if field is None:
            continue
        try:
            values[field] = field.coerce(entry.value)
        except ConfigError as e:
            logger.debug(f"[IniCodec] Line {entry.index + 1}: {e}. Using default.")
            values.pop(field, None)

    return values

def write_ini_values(text: str, updates: Dict[IniField, Scalar]) -> str:
    """
    Rewrite the lines of the given fields in place.

    A matched line becomes `key = value`, keeping its line ending; a line that
    already holds the rendered value is left untouched. Nothing is appended.

    Raises:
        NoMatchingKeys: no line matched any of the updates.
    """
    rendered = {(field.section, field.key): render_ini_value(value) for field, value in updates.items()}
    lines = split_lines(text)
    matched = 0

    for entry in scan_ini(lines):
        new_value = rendered.get((entry.section, entry.key))
        if new_value is None:
            continue

        matched += 1
        if entry.value == new_value:
            continue

        line = lines[entry.index]
        ending = line[len(line.rstrip("\r\n")):]
        lines[entry.index] = f"{entry.key} = {new_value}{ending}"
        logger.debug(f"[IniCodec] [{entry.section}] {entry.key} updated")

    if not matched:
        raise NoMatchingKeys("No matching configuration keys found to update")

    return "".join(lines)

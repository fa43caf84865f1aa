import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

# A value runs to the end of the line; quoted text may contain `-`,
# an unquoted `--` starts a trailing comment
_STRING = r'"(?:[^"\\\n]|\\.)*"'
_VALUE = rf'(?:{_STRING}|[^"\n-]|-(?!-))*'
_RETURN_RE = re.compile(r"^[ \t]*return[ \t]+config\b", re.MULTILINE)
_PAIR_RE = re.compile(
    r'(?<![\w.])(?P<key>[A-Za-z_]\w*)[ \t]*=[ \t]*'
    rf'(?P<value>{_STRING}(?:[ \t]*\.\.[ \t]*{_STRING})*|[^,}}\s]+)'
)

Span = Tuple[int, int]

@dataclass
class TablePair:
    key: str
    value: str
    start: int
    end: int

def assignment_pattern(name: str) -> re.Pattern:
    """
    `config.<name> = <value> [-- comment]` at the start of a line.

    The value may start on a later line than the `=`.
    """
    return re.compile(
        rf"^(?P<indent>[ \t]*)config\.{re.escape(name)}[ \t]*=\s*"
        rf"(?P<value>{_VALUE})(?P<comment>--[^\n]*)?$",
        re.MULTILINE,
    )

def read_assignment(text: str, name: str) -> Optional[str]:
    """Value text of the first assignment to `config.<name>`, or None."""
    match = assignment_pattern(name).search(text)
    if match is None:
        return None
    return match.group("value").strip()

def replace_assignment(text: str, name: str, rendered: str) -> Tuple[str, int]:
    """
    Rewrite every assignment to `config.<name>` as `config.<name> = <rendered>`.

    Indentation, trailing comments and line endings are kept.
    Returns the new text and the number of statements rewritten.
    """
    matches = list(assignment_pattern(name).finditer(text))
    for match in reversed(matches):
        value = match.group("value")
        start = match.start() + len(match.group("indent"))
        end = match.start("value") + len(value.rstrip())
        text = text[:start] + f"config.{name} = {rendered}" + text[end:]
    return text, len(matches)

def insert_assignment(text: str, name: str, rendered: str) -> str:
    """Add `config.<name> = <rendered>` on its own line before the last `return config`."""
    newline = "\r\n" if "\r\n" in text else "\n"
    statement = f"config.{name} = {rendered}"

    returns = list(_RETURN_RE.finditer(text))
    if returns:
        at = returns[-1].start()
        return text[:at] + statement + newline + text[at:]

    if text and not text.endswith(("\n", "\r")):
        text += newline
    return text + statement + newline

def _string_end(text: str, index: int, quote: str) -> int:
    i = index + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == quote or text[i] == "\n":
            return i + 1
        i += 1
    return len(text)

def _structural(text: str, start: int, end: Optional[int] = None) -> Iterator[Tuple[int, str]]:
    """Characters of `text[start:end]` that lie outside strings and `--` comments."""
    end = len(text) if end is None else end
    i = start
    while i < end:
        char = text[i]
        if char in "\"'":
            i = _string_end(text, i, char)
            continue
        if text.startswith("--", i):
            newline = text.find("\n", i)
            i = end if newline == -1 else newline
            continue
        yield i, char
        i += 1

def match_brace(text: str, start: int) -> Optional[int]:
    """Index just past the `}` closing the `{` at `start`, None if unbalanced."""
    depth = 0
    for i, char in _structural(text, start):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return i + 1
    return None

def find_block(text: str, name: str) -> Optional[Span]:
    """
    Span of the `{ ... }` table assigned to `config.<name>`.

    Only whitespace may sit between `=` and the opening brace. Returns None
    when there is no assignment, no brace, or the braces never balance.
    """
    match = re.search(rf"^[ \t]*config\.{re.escape(name)}[ \t]*=", text, re.MULTILINE)
    if match is None:
        return None

    pos = match.end()
    while pos < len(text) and text[pos].isspace():
        pos += 1
    if pos >= len(text) or text[pos] != "{":
        return None

    end = match_brace(text, pos)
    if end is None:
        return None
    return pos, end

def iter_block_entries(text: str, block: Span) -> Iterator[Span]:
    """Spans of the tables nested directly inside `block`."""
    start, end = block
    pos = start + 1
    while pos < end - 1:
        opening = next((i for i, char in _structural(text, pos, end - 1) if char == "{"), None)
        if opening is None:
            return
        closing = match_brace(text, opening)
        if closing is None or closing > end:
            return
        yield opening, closing
        pos = closing

def _in_comment(text: str, index: int) -> bool:
    i = text.rfind("\n", 0, index) + 1
    while i < index:
        if text[i] in "\"'":
            i = _string_end(text, i, text[i])
            continue
        if text.startswith("--", i):
            return True
        i += 1
    return False

def iter_table_pairs(text: str, span: Span) -> Iterator[TablePair]:
    """`key = value` pairs of a flat table; value spans index into `text`."""
    start, end = span
    for match in _PAIR_RE.finditer(text, start, end):
        if _in_comment(text, match.start()):
            continue
        yield TablePair(match.group("key"), match.group("value"), match.start("value"), match.end("value"))

def apply_edits(text: str, edits: List[Tuple[int, int, str]]) -> str:
    """Replace non-overlapping `(start, end, replacement)` spans."""
    for start, end, replacement in sorted(edits, reverse=True):
        text = text[:start] + replacement + text[end:]
    return text

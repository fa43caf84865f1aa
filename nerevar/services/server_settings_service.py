from typing import Any, Dict, List, Optional, Set, Tuple, Union
from pydantic import ValidationError
from nerevar.core.config import LUA_FLOAT_PRECISION
from nerevar.common.errors import ConfigError, InvalidNumber, InvalidPatch, MalformedLiteral, NoMatchingKeys
from nerevar.common.logger import setup_logger
from nerevar.common.literals import (
  Scalar,
  infer_value,
  parse_bool_literal,
  parse_float_literal,
  parse_int_literal,
  parse_string_literal,
  render_lua_value,
)
from nerevar.common.lua_codec import (
  Span,
  TablePair,
  apply_edits,
  find_block,
  insert_assignment,
  iter_block_entries,
  iter_table_pairs,
  read_assignment,
  replace_assignment,
)
from nerevar.schemas.server_settings import GameSetting, GameplaySettings, ServerSettings, TimeTable, VrSetting

logger = setup_logger("ServerSettings")

_PARSERS = {
  str: parse_string_literal,
  int: parse_int_literal,
  float: parse_float_literal,
  bool: parse_bool_literal,
}

NESTED_FIELDS = {"game_settings", "vr_settings", "default_time_table"}

# model field -> (Lua name, literal parser)
SCALAR_FIELDS = {
  name: (info.alias, _PARSERS[info.annotation])
  for name, info in GameplaySettings.model_fields.items()
  if name not in NESTED_FIELDS
}

# Lua key -> model field
TIME_TABLE_KEYS = {info.alias or name: name for name, info in TimeTable.model_fields.items()}

Patch = Union[GameplaySettings, ServerSettings, Dict[str, Any]]

def _inner(block: Span) -> Span:
  return block[0] + 1, block[1] - 1

def _entry_pairs(text: str, span: Span) -> Dict[str, TablePair]:
  pairs = {}
  for pair in iter_table_pairs(text, _inner(span)):
    pairs.setdefault(pair.key, pair)
  return pairs

def _entry_value(raw: str) -> Scalar:
  if raw.startswith('"'):
    return parse_string_literal(raw)
  value = infer_value(raw)
  if isinstance(value, str):
    raise MalformedLiteral(f"Unsupported entry value: {raw!r}")
  return value

def _read_entry(text: str, span: Span) -> Optional[Tuple[str, Scalar]]:
  pairs = _entry_pairs(text, span)
  if "name" not in pairs or "value" not in pairs:
    return None
  try:
    return parse_string_literal(pairs["name"].value), _entry_value(pairs["value"].value)
  except ConfigError:
    return None

def _read_entries(text: str, lua_name: str) -> List[Tuple[str, Scalar]]:
  """`{ name = ..., value = ... }` entries of a list table; malformed ones are dropped."""
  block = find_block(text, lua_name)
  if block is None:
    return []

  entries = []
  for span in iter_block_entries(text, block):
    entry = _read_entry(text, span)
    if entry is None:
      logger.debug(f"[ServerSettings] Skipping malformed {lua_name} entry: {text[span[0]:span[1]]}")
      continue
    entries.append(entry)
  return entries

def _read_time_table(text: str) -> TimeTable:
  block = find_block(text, "defaultTimeTable")
  if block is None:
    return TimeTable()

  values = {}
  for pair in iter_table_pairs(text, _inner(block)):
    name = TIME_TABLE_KEYS.get(pair.key)
    if name is None:
      continue
    try:
      values[name] = parse_int_literal(pair.value)
    except InvalidNumber:
      logger.debug(f"[ServerSettings] Ignoring defaultTimeTable.{pair.key} = {pair.value}")
  return TimeTable(**values)

def read_gameplay_settings(text: str) -> GameplaySettings:
  """Read the gameplay settings table

  Args:
      text (str): Content of config.lua

  Returns:
      GameplaySettings: Parsed settings, defaults for absent fields

  Raises:
      MalformedLiteral, InvalidNumber, InvalidBoolean: an assignment exists
          but its value is not a literal of the field's type
  """
  values: Dict[str, Any] = {}
  for name, (lua_name, parse) in SCALAR_FIELDS.items():
    raw = read_assignment(text, lua_name)
    if raw is None:
      continue
    try:
      values[name] = parse(raw)
    except ConfigError as e:
      raise type(e)(f"config.{lua_name}: {e}") from e

  values["game_settings"] = [GameSetting(name=n, value=v) for n, v in _read_entries(text, "gameSettings")]
  values["vr_settings"] = [
    VrSetting(name=n, value=v)
    for n, v in _read_entries(text, "vrSettings")
    if isinstance(v, (int, float)) and not isinstance(v, bool)
  ]
  values["default_time_table"] = _read_time_table(text)
  return GameplaySettings(**values)

def _resolve_patch(patch: Patch) -> Tuple[GameplaySettings, Set[str], bool]:
  """Settings to write, the fields to write, and whether the patch is partial."""
  if isinstance(patch, ServerSettings):
    patch = patch.config
  if isinstance(patch, GameplaySettings):
    return patch, set(GameplaySettings.model_fields), False

  if isinstance(patch, dict) and isinstance(patch.get("config"), dict):
    patch = patch["config"]
  try:
    settings = GameplaySettings.model_validate(patch)
  except ValidationError as e:
    raise InvalidPatch(f"Invalid server settings: {e}") from e
  return settings, set(settings.model_fields_set), True

def _write_time_table(text: str, table: TimeTable, partial: bool) -> Tuple[str, int]:
  block = find_block(text, "defaultTimeTable")
  if block is None:
    logger.debug("[ServerSettings] No defaultTimeTable block to update")
    return text, 0

  members = table.model_fields_set if partial else set(TimeTable.model_fields)
  edits = []
  for pair in iter_table_pairs(text, _inner(block)):
    name = TIME_TABLE_KEYS.get(pair.key)
    if name in members:
      edits.append((pair.start, pair.end, str(getattr(table, name))))
  return apply_edits(text, edits), len(edits)

def _write_entries(text: str, lua_name: str, entries: Dict[str, Scalar], float_precision: Optional[int]) -> Tuple[str, int]:
  """Rewrite the `value` of existing entries by name; new entries are not created."""
  block = find_block(text, lua_name)
  if block is None:
    logger.debug(f"[ServerSettings] No {lua_name} block to update")
    return text, 0

  edits = []
  seen = set()
  for span in iter_block_entries(text, block):
    pairs = _entry_pairs(text, span)
    if "name" not in pairs or "value" not in pairs:
      continue
    try:
      name = parse_string_literal(pairs["name"].value)
    except ConfigError:
      continue
    if name in entries:
      value = pairs["value"]
      edits.append((value.start, value.end, render_lua_value(entries[name], float_precision)))
      seen.add(name)

  for name in entries.keys() - seen:
    logger.debug(f"[ServerSettings] {lua_name} has no entry named {name!r}, skipped")
  return apply_edits(text, edits), len(edits)

def write_gameplay_settings(text: str, patch: Patch, float_precision: Optional[int] = LUA_FLOAT_PRECISION) -> str:
  """Write settings back into config.lua, touching only their statements

  A field whose `config.<name> = ...` line is missing gets a new line right
  before `return config`.

  Args:
      text (str): Current file content
      patch: Full settings, or a JSON dict (optionally wrapped in "config")
          where only the keys present are written
      float_precision (int | None): Decimals for floats, None for the
          shortest round-tripping form

  Returns:
      str: Updated file content

  Raises:
      InvalidPatch: the JSON patch does not validate
      MalformedLiteral: a string cannot be written as a Lua literal
      NoMatchingKeys: nothing was replaced or inserted
  """
  settings, fields, partial = _resolve_patch(patch)
  changed = 0
  inserted = []

  for name, (lua_name, _) in SCALAR_FIELDS.items():
    if name not in fields:
      continue
    rendered = render_lua_value(getattr(settings, name), float_precision)
    text, count = replace_assignment(text, lua_name, rendered)
    if not count:
      text = insert_assignment(text, lua_name, rendered)
      inserted.append(lua_name)
    changed += 1

  if "default_time_table" in fields:
    text, count = _write_time_table(text, settings.default_time_table, partial)
    changed += count
  if "game_settings" in fields:
    entries = {entry.name: entry.value for entry in settings.game_settings}
    text, count = _write_entries(text, "gameSettings", entries, float_precision)
    changed += count
  if "vr_settings" in fields:
    entries = {entry.name: entry.value for entry in settings.vr_settings}
    text, count = _write_entries(text, "vrSettings", entries, float_precision)
    changed += count

  if not changed:
    raise NoMatchingKeys("No server settings were updated")

  if inserted:
    logger.info(f"[ServerSettings] Added missing settings: {', '.join(inserted)}")
  logger.info(f"[ServerSettings] Updated {changed} setting(s)")
  return text

from pathlib import Path
import json
import os

from nerevar.common.errors import ConfigFileNotFound

def read_text(path: Path) -> str:
  # newline="" keeps CRLF files byte-identical through a round trip
  if not path.exists():
    raise ConfigFileNotFound(f"Config file not found at: {path}")
  with path.open("r", encoding="utf-8", newline="") as f:
    return f.read()

def write_text(path: Path, text: str) -> None:
  tmp = path.with_suffix(path.suffix + ".tmp")

  with tmp.open("w", encoding="utf-8", newline="") as f:
    f.write(text)

  os.replace(tmp, path)

def write_json(path: Path, data: dict) -> None:
  path.parent.mkdir(parents=True, exist_ok=True)
  tmp = path.with_suffix(".tmp")

  with tmp.open("w", encoding="utf-8") as f:
    json.dump(data, f, ensure_ascii=False, indent=2)

  os.replace(tmp, path)

def read_json(path: Path) -> dict:
  if not path.exists():
    return {}
  with path.open("r", encoding="utf-8") as f:
    return json.load(f)

from dotenv import load_dotenv
load_dotenv()

import os
from pathlib import Path

APP_NAME = "Nerevar"

def _optional_int(name: str) -> int | None:
  value = os.getenv(name, "").strip()
  return int(value) if value else None

# Roaming app-data root; the app keeps its own files under APPDATA/Nerevar
APPDATA_PATH = Path(os.getenv("APPDATA", str(Path.home() / ".config")))
NEREVAR_APPDATA_DIR = Path(os.getenv("NEREVAR_APPDATA_DIR", str(APPDATA_PATH / APP_NAME)))
DOCUMENTS_DIR = Path(os.getenv("NEREVAR_DOCUMENTS_DIR", str(Path.home() / "Documents")))

# Decimals used when writing floats into config.lua; unset keeps the shortest form
LUA_FLOAT_PRECISION = _optional_int("NEREVAR_LUA_FLOAT_PRECISION")

DEBUG = os.getenv("NEREVAR_DEBUG", "false").lower() in ("1", "true", "yes")

from enum import Enum
from typing import Optional
from pydantic import BaseModel

class Mode(str, Enum):
  player = "player"
  server = "server"

class LauncherConfig(BaseModel):
  """Nerevar's own config.json, written once TES3MP is installed"""
  tes3mp_path: str
  version: str
  last_updated: str
  mode: Optional[Mode] = None

class ModeUpdate(BaseModel):
  mode: Mode

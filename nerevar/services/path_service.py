from pathlib import Path
from nerevar.core.config import NEREVAR_APPDATA_DIR, DOCUMENTS_DIR

class PathResolver:
  """
  Where the files the converters work on live.

  Built from settings by the HTTP layer and handed to it as a dependency; the
  converters themselves only ever see text.
  """
  def __init__(self, appdata_dir: Path = NEREVAR_APPDATA_DIR, documents_dir: Path = DOCUMENTS_DIR):
    self.appdata_dir = Path(appdata_dir)
    self.documents_dir = Path(documents_dir)

  @property
  def tes3mp_dir(self) -> Path:
    return self.appdata_dir / "TES3MP"

  @property
  def launcher_config_path(self) -> Path:
    return self.appdata_dir / "config.json"

  @property
  def client_config_path(self) -> Path:
    return self.tes3mp_dir / "tes3mp-client-default.cfg"

  @property
  def server_config_path(self) -> Path:
    return self.tes3mp_dir / "tes3mp-server-default.cfg"

  @property
  def server_settings_path(self) -> Path:
    return self.tes3mp_dir / "server" / "scripts" / "config.lua"

  @property
  def openmw_config_path(self) -> Path:
    return self.documents_dir / "My Games" / "OpenMW" / "openmw.cfg"

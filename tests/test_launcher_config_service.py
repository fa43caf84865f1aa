import json
import pytest
from nerevar.common.errors import ConfigFileNotFound, CorruptConfigFile
from nerevar.schemas.launcher import Mode
from nerevar.services.launcher_config_service import load_launcher_config, set_mode

LAUNCHER_CONFIG = {
  "tes3mp_path": "C:/Users/nerevar/AppData/Roaming/Nerevar/TES3MP",
  "version": "0.8.1",
  "last_updated": "2024-05-01T12:00:00Z",
}

def test_load_missing_config(tmp_path):
  assert load_launcher_config(tmp_path / "config.json") is None

def test_set_mode_persists(tmp_path):
  path = tmp_path / "config.json"
  path.write_text(json.dumps(LAUNCHER_CONFIG), encoding="utf-8")
  assert load_launcher_config(path).mode is None

  config = set_mode(path, Mode.server)
  assert config.mode == Mode.server
  saved = json.loads(path.read_text(encoding="utf-8"))
  assert saved == {**LAUNCHER_CONFIG, "mode": "server"}

def test_set_mode_before_install(tmp_path):
  with pytest.raises(ConfigFileNotFound):
    set_mode(tmp_path / "config.json", Mode.player)

@pytest.mark.parametrize("content", ["{not json", json.dumps({"version": "0.8.1"})])
def test_load_corrupt_config(tmp_path, content):
  path = tmp_path / "config.json"
  path.write_text(content, encoding="utf-8")
  with pytest.raises(CorruptConfigFile):
    load_launcher_config(path)

import pytest
from nerevar.common.errors import InvalidPatch, NoMatchingKeys
from nerevar.schemas.server_config import ServerNetworkConfig
from nerevar.services.server_config_service import read_server_network_config, write_server_network_config

SERVER_CFG = (
  "[General]\n"
  "# The default localAddress of 0.0.0.0 makes the server reachable at all of its local addresses\n"
  "localAddress = 0.0.0.0\n"
  "port = 25565\n"
  "maximumPlayers = 64\n"
  "hostname = TES3MP server\n"
  "# 0 - Verbose (spam), 1 - Info, 2 - Warnings, 3 - Errors, 4 - Only fatal errors\n"
  "logLevel = 1\n"
  "password =\n"
  "\n"
  "[Plugins]\n"
  "home = ./server\n"
  "plugins = serverCore.lua\n"
  "\n"
  "[MasterServer]\n"
  "enabled = true\n"
  "address = master.tes3mp.com\n"
  "port = 25561\n"
  "rate = 10000\n"
)

def test_read_default_file_matches_defaults():
  assert read_server_network_config(SERVER_CFG) == ServerNetworkConfig()

def test_read_empty_file():
  assert read_server_network_config("") == ServerNetworkConfig()

def test_read_values():
  text = SERVER_CFG.replace("hostname = TES3MP server", "hostname = Vivec City").replace("enabled = true", "enabled = false")
  config = read_server_network_config(text)
  assert config.general.hostname == "Vivec City"
  assert config.master_server.enabled is False
  assert config.master_server.port == 25561

def test_read_invalid_values_use_defaults():
  text = "[General]\nport = abc\nlogLevel = 300\n[MasterServer]\nenabled = yes\nrate = -1\n"
  assert read_server_network_config(text) == ServerNetworkConfig()

def test_read_ignores_keys_in_other_sections():
  config = read_server_network_config("[Other]\nport = 1\nhostname = x\n")
  assert config.general.port == 25565
  assert config.general.hostname == "TES3MP server"

def test_write_is_surgical():
  updated = write_server_network_config(SERVER_CFG, {"general": {"hostname": "Balmora"}})
  assert updated == SERVER_CFG.replace("hostname = TES3MP server", "hostname = Balmora")

def test_write_current_values_is_identity():
  patch = read_server_network_config(SERVER_CFG).model_dump()
  assert write_server_network_config(SERVER_CFG, patch) == SERVER_CFG

def test_write_disambiguates_sections():
  text = "[General]\nport = 100\n[MasterServer]\nport = 200\n"
  updated = write_server_network_config(text, {"masterServer": {"port": 300}})
  assert updated == "[General]\nport = 100\n[MasterServer]\nport = 300\n"

def test_write_accepts_both_name_styles():
  camel = write_server_network_config(SERVER_CFG, {"general": {"localAddress": "127.0.0.1"}})
  snake = write_server_network_config(SERVER_CFG, {"general": {"local_address": "127.0.0.1"}})
  assert camel == snake == SERVER_CFG.replace("localAddress = 0.0.0.0", "localAddress = 127.0.0.1")

def test_write_round_trips():
  patch = {"general": {"maximumPlayers": 8, "password": "mudcrab"}, "masterServer": {"enabled": False}}
  config = read_server_network_config(write_server_network_config(SERVER_CFG, patch))
  assert config.general.maximum_players == 8
  assert config.general.password == "mudcrab"
  assert config.master_server.enabled is False
  assert config.general.port == 25565

@pytest.mark.parametrize("patch", [
  {"general": {"port": 70000}},
  {"general": {"logLevel": 256}},
  {"masterServer": {"rate": "fast"}},
])
def test_write_rejects_invalid_patch(patch):
  with pytest.raises(InvalidPatch):
    write_server_network_config(SERVER_CFG, patch)

@pytest.mark.parametrize("patch", [{}, {"general": {}}])
def test_write_empty_patch(patch):
  with pytest.raises(NoMatchingKeys):
    write_server_network_config(SERVER_CFG, patch)

def test_write_does_not_append_missing_keys():
  with pytest.raises(NoMatchingKeys):
    write_server_network_config("[General]\nport = 1\n", {"plugins": {"home": "./data"}})

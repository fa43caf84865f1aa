import json

CLIENT_CFG = "[General]\ndestinationAddress = localhost\nport = 25565\npassword =\n"

SERVER_CFG = (
  "[General]\nport = 25565\nmaximumPlayers = 64\n"
  "[MasterServer]\nenabled = true\naddress = master.tes3mp.com\nport = 25561\n"
)

CONFIG_LUA = """config = {}
config.gameMode = "Default"
config.gameSettings = {
    { name = "best attack", value = false }
}
config.defaultTimeTable = { year = 427, month = 7, day = 16, hour = 9, daysPassed = 1, dayTimeScale = 30, nightTimeScale = 40 }
return config
"""

def test_client_config(client, paths):
  paths.client_config_path.write_text(CLIENT_CFG, encoding="utf-8")

  response = client.get("/client-config")
  assert response.status_code == 200
  assert response.json() == {"destination_address": "localhost", "port": 25565, "password": ""}

  response = client.put("/client-config", json={"ip": "10.0.0.5", "port": 25566})
  assert response.status_code == 200
  assert response.json() == {"updated": True}
  assert client.get("/client-config").json() == {"destination_address": "10.0.0.5", "port": 25566, "password": ""}

def test_client_config_validation(client, paths):
  paths.client_config_path.write_text(CLIENT_CFG, encoding="utf-8")
  assert client.put("/client-config", json={"ip": "", "port": 1}).status_code == 422
  assert client.put("/client-config", json={"ip": "a", "port": 65536}).status_code == 422
  assert paths.client_config_path.read_text(encoding="utf-8") == CLIENT_CFG

def test_missing_files_are_404(client):
  assert client.get("/client-config").status_code == 404
  assert client.get("/server-config").status_code == 404
  assert client.get("/server-settings").status_code == 404
  assert client.put("/server-config", json={"general": {"port": 1}}).status_code == 404

def test_server_config(client, paths):
  paths.server_config_path.write_text(SERVER_CFG, encoding="utf-8")

  body = client.get("/server-config").json()
  assert body["general"]["maximum_players"] == 64
  assert body["master_server"]["address"] == "master.tes3mp.com"

  response = client.put("/server-config", json={"masterServer": {"enabled": False}})
  assert response.json() == {"updated": True}
  assert paths.server_config_path.read_text(encoding="utf-8") == SERVER_CFG.replace("enabled = true", "enabled = false")

def test_server_config_errors_leave_file_alone(client, paths):
  paths.server_config_path.write_text(SERVER_CFG, encoding="utf-8")
  assert client.put("/server-config", json={"general": {"port": 70000}}).status_code == 422
  assert client.put("/server-config", json={}).status_code == 422
  assert paths.server_config_path.read_text(encoding="utf-8") == SERVER_CFG

def test_server_settings(client, paths):
  paths.server_settings_path.write_text(CONFIG_LUA, encoding="utf-8")

  config = client.get("/server-settings").json()["config"]
  assert config["gameMode"] == "Default"
  assert config["defaultTimeTable"]["daysPassed"] == 1
  assert config["gameSettings"][0] == {"name": "best attack", "value": False}

  response = client.put("/server-settings", json={"config": {"fixmeInterval": 45}})
  assert response.status_code == 200
  assert "config.fixmeInterval = 45\nreturn config" in paths.server_settings_path.read_text(encoding="utf-8")

def test_server_settings_malformed_file(client, paths):
  paths.server_settings_path.write_text("config.loginTime = soon\n", encoding="utf-8")
  response = client.get("/server-settings")
  assert response.status_code == 422
  assert "loginTime" in response.json()["detail"]

def test_launcher_config(client, paths):
  assert client.get("/launcher-config").json() is None
  assert client.put("/launcher-config/mode", json={"mode": "server"}).status_code == 404

  paths.launcher_config_path.write_text(
    json.dumps({"tes3mp_path": "TES3MP", "version": "0.8.1", "last_updated": "2024-05-01"}), encoding="utf-8"
  )
  response = client.put("/launcher-config/mode", json={"mode": "server"})
  assert response.status_code == 200
  assert response.json()["mode"] == "server"
  assert client.get("/launcher-config").json()["mode"] == "server"

def test_corrupt_launcher_config(client, paths):
  paths.launcher_config_path.write_text("{not json", encoding="utf-8")
  assert client.get("/launcher-config").status_code == 422
  assert client.put("/launcher-config/mode", json={"mode": "player"}).status_code == 422

def test_openmw_config(client, paths):
  assert client.get("/openmw-config").json() is None
  paths.openmw_config_path.write_text("content=Morrowind.esm\nfullscreen = false\n", encoding="utf-8")
  assert client.get("/openmw-config").json() == {"content": "Morrowind.esm", "fullscreen": False}

import pytest
from nerevar.common.errors import InvalidNumber, NoMatchingKeys
from nerevar.schemas.connection import ConnectionConfig
from nerevar.services.client_config_service import read_connection_config, write_connection_config

CLIENT_CFG = (
  "[General]\n"
  "# The default destinationAddress of localhost connects to a server on this machine\n"
  "destinationAddress = localhost\n"
  "port = 25565\n"
  "password = \n"
  "\n"
  "[Chat]\n"
  "keySay = Y\n"
)

def test_read_connection_config():
  config = read_connection_config(CLIENT_CFG.replace("localhost\n", "192.168.1.20\n"))
  assert config == ConnectionConfig(destination_address="192.168.1.20", port=25565, password="")

def test_read_defaults():
  assert read_connection_config("") == ConnectionConfig()
  assert read_connection_config("[General]\nport = banana\n").port == 25565

def test_write_connection_config():
  updated = write_connection_config(CLIENT_CFG, "10.0.0.5", 25566, "secret")
  assert updated == CLIENT_CFG.replace(
    "destinationAddress = localhost", "destinationAddress = 10.0.0.5"
  ).replace("port = 25565", "port = 25566").replace("password = \n", "password = secret\n")
  assert read_connection_config(updated) == ConnectionConfig(destination_address="10.0.0.5", port=25566, password="secret")

def test_write_same_values_is_identity():
  assert write_connection_config(CLIENT_CFG, "localhost", 25565, "") == CLIENT_CFG

def test_write_keeps_crlf():
  text = "[General]\r\ndestinationAddress = localhost\r\nport = 25565\r\npassword = \r\n"
  assert write_connection_config(text, "1.2.3.4", 25565, "") == text.replace("localhost", "1.2.3.4")

def test_write_rejects_bad_port():
  with pytest.raises(InvalidNumber):
    write_connection_config(CLIENT_CFG, "localhost", 70000, "")

def test_write_without_general_section():
  with pytest.raises(NoMatchingKeys):
    write_connection_config("[Chat]\nkeySay = Y\n", "localhost", 25565, "")

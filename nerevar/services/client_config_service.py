from nerevar.common.ini_codec import IniField, read_ini_values, write_ini_values
from nerevar.common.errors import InvalidNumber
from nerevar.common.logger import setup_logger
from nerevar.schemas.connection import ConnectionConfig

logger = setup_logger("ClientConfig")

DESTINATION_ADDRESS = IniField("General", "destinationAddress")
PORT = IniField("General", "port", "u16")
PASSWORD = IniField("General", "password")

FIELDS = {
  DESTINATION_ADDRESS: "destination_address",
  PORT: "port",
  PASSWORD: "password",
}

def read_connection_config(text: str) -> ConnectionConfig:
  """Read the client connection config

  Args:
      text (str): Content of tes3mp-client-default.cfg

  Returns:
      ConnectionConfig: Parsed config, defaults for missing keys
  """
  values = read_ini_values(text, FIELDS)
  return ConnectionConfig(**{FIELDS[field]: value for field, value in values.items()})

def write_connection_config(text: str, ip: str, port: int, password: str) -> str:
  """Point the client config at another server.

  Args:
      text (str): Current file content
      ip (str): Server address
      port (int): Server port, 0-65535
      password (str): Server password, may be empty

  Returns:
      str: Updated file content

  Raises:
      InvalidNumber: port is out of range
      NoMatchingKeys: the file has none of the [General] keys
  """
  if not 0 <= port <= 0xFFFF:
    raise InvalidNumber(f"Port {port} is out of range")

  updated = write_ini_values(text, {
    DESTINATION_ADDRESS: ip,
    PORT: port,
    PASSWORD: password,
  })
  logger.info(f"[ClientConfig] Target set to {ip}:{port}, password: {'set' if password else 'empty'}")
  return updated

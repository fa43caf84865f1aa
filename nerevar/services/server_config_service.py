from typing import Any, Dict
from pydantic import ValidationError
from nerevar.common.ini_codec import IniField, read_ini_values, write_ini_values
from nerevar.common.errors import InvalidPatch, NoMatchingKeys
from nerevar.common.logger import setup_logger
from nerevar.schemas.server_config import ServerNetworkConfig

logger = setup_logger("ServerConfig")

# (model group, model field) for every key the file is known to carry
FIELDS = {
  IniField("General", "localAddress"): ("general", "local_address"),
  IniField("General", "port", "u16"): ("general", "port"),
  IniField("General", "maximumPlayers", "u16"): ("general", "maximum_players"),
  IniField("General", "hostname"): ("general", "hostname"),
  IniField("General", "logLevel", "u8"): ("general", "log_level"),
  IniField("General", "password"): ("general", "password"),
  IniField("Plugins", "home"): ("plugins", "home"),
  IniField("Plugins", "plugins"): ("plugins", "plugins"),
  IniField("MasterServer", "enabled", "bool"): ("master_server", "enabled"),
  IniField("MasterServer", "address"): ("master_server", "address"),
  IniField("MasterServer", "port", "u16"): ("master_server", "port"),
  IniField("MasterServer", "rate", "u32"): ("master_server", "rate"),
}

def read_server_network_config(text: str) -> ServerNetworkConfig:
  """Read the server network config

  Args:
      text (str): Content of tes3mp-server-default.cfg

  Returns:
      ServerNetworkConfig: Parsed config, defaults for anything missing or invalid
  """
  groups: Dict[str, Dict[str, Any]] = {"general": {}, "plugins": {}, "master_server": {}}
  for field, value in read_ini_values(text, FIELDS).items():
    group, name = FIELDS[field]
    groups[group][name] = value
  return ServerNetworkConfig(**groups)

def _patch_updates(patch: Dict[str, Any]) -> Dict[IniField, Any]:
  """Validate a partial JSON patch and keep only the fields it sets."""
  try:
    config = ServerNetworkConfig.model_validate(patch)
  except ValidationError as e:
    raise InvalidPatch(f"Invalid server config: {e}") from e

  updates = {}
  for field, (group, name) in FIELDS.items():
    if group not in config.model_fields_set:
      continue
    section = getattr(config, group)
    if name in section.model_fields_set:
      updates[field] = getattr(section, name)
  return updates

def write_server_network_config(text: str, patch: Dict[str, Any]) -> str:
  """Apply a partial patch to the server network config

  Args:
      text (str): Current file content
      patch (dict): e.g. {"general": {"port": 25565}, "masterServer": {"enabled": false}}

  Returns:
      str: Updated file content

  Raises:
      InvalidPatch: a patched value has the wrong type or is out of range
      NoMatchingKeys: nothing in the patch matched a line of the file
  """
  updates = _patch_updates(patch)
  if not updates:
    raise NoMatchingKeys("Patch does not set any known server config field")

  updated = write_ini_values(text, updates)
  logger.info(f"[ServerConfig] Updated {', '.join(f'{f.section}.{f.key}' for f in updates)}")
  return updated

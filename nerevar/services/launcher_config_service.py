import json
from pathlib import Path
from pydantic import ValidationError
from nerevar.utils import file_storage
from nerevar.common.errors import ConfigFileNotFound, CorruptConfigFile
from nerevar.common.logger import setup_logger
from nerevar.schemas.launcher import LauncherConfig, Mode

logger = setup_logger("LauncherConfig")

def load_launcher_config(path: Path) -> LauncherConfig | None:
  """Read Nerevar's config.json

  Args:
      path (Path): Path of config.json

  Returns:
      LauncherConfig | None: None before TES3MP has been installed

  Raises:
      CorruptConfigFile: config.json is not valid JSON or misses fields
  """
  if not path.exists():
    logger.info(f"[LauncherConfig] No config file found at: {path}")
    return None

  try:
    config = LauncherConfig.model_validate(file_storage.read_json(path))
  except (json.JSONDecodeError, ValidationError) as e:
    raise CorruptConfigFile(f"Could not load {path}: {e}") from e
  logger.debug(f"[LauncherConfig] Loaded config for TES3MP {config.version}")
  return config

def set_mode(path: Path, mode: Mode) -> LauncherConfig:
  """Switch between player and server mode

  Args:
      path (Path): Path of config.json
      mode (Mode): New mode

  Returns:
      LauncherConfig: The saved config
  """
  config = load_launcher_config(path)
  if config is None:
    raise ConfigFileNotFound("No config file found. Please install TES3MP first.")

  config.mode = mode
  file_storage.write_json(path, config.model_dump(mode="json"))
  logger.info(f"[LauncherConfig] Mode set to: {mode.value}")
  return config

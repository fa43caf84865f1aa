from typing import Dict
from nerevar.common.ini_codec import split_lines
from nerevar.common.literals import Scalar, infer_value
from nerevar.common.logger import setup_logger

logger = setup_logger("OpenMWConfig")

def parse_openmw_config(text: str) -> Dict[str, Scalar]:
  """Read openmw.cfg as an open map of settings

  Unlike the TES3MP .cfg readers there is no schema: every `key = value` line
  is kept, values are typed on a best-effort basis and repeated keys keep
  their last value.

  Args:
      text (str): Content of openmw.cfg

  Returns:
      dict: {key: int | float | bool | str}
  """
  config = {}
  for line in split_lines(text):
    line = line.strip()
    if not line or line.startswith("#"):
      continue

    key, sep, value = line.partition("=")
    if not sep:
      continue
    value = value.strip().strip('"').strip("'")
    config[key.strip()] = infer_value(value)

  logger.debug(f"[OpenMWConfig] Loaded {len(config)} settings")
  return config

from typing import Optional
from fastapi import APIRouter, Depends
import anyio
from nerevar.common.errors import ConfigError
from nerevar.dependencies import get_path_resolver, to_http_exception
from nerevar.schemas.launcher import LauncherConfig, ModeUpdate
from nerevar.services import launcher_config_service, openmw_config_service
from nerevar.services.path_service import PathResolver
from nerevar.utils import file_storage

router = APIRouter()

@router.get("/launcher-config", response_model=Optional[LauncherConfig])
async def get_launcher_config(paths: PathResolver = Depends(get_path_resolver)):
  try:
    return await anyio.to_thread.run_sync(launcher_config_service.load_launcher_config, paths.launcher_config_path)
  except ConfigError as e:
    raise to_http_exception(e)

@router.put("/launcher-config/mode", response_model=LauncherConfig)
async def set_mode(payload: ModeUpdate, paths: PathResolver = Depends(get_path_resolver)):
  """Switch the launcher between player and server mode"""
  try:
    return await anyio.to_thread.run_sync(launcher_config_service.set_mode, paths.launcher_config_path, payload.mode)
  except ConfigError as e:
    raise to_http_exception(e)

@router.get("/openmw-config")
async def get_openmw_config(paths: PathResolver = Depends(get_path_resolver)):
  """openmw.cfg as an open map, or null when OpenMW has not been set up"""
  path = paths.openmw_config_path
  if not path.exists():
    return None
  text = await anyio.to_thread.run_sync(file_storage.read_text, path)
  return openmw_config_service.parse_openmw_config(text)

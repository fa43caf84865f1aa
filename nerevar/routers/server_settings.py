from fastapi import APIRouter, Body, Depends
import anyio
from nerevar.common.errors import ConfigError
from nerevar.dependencies import get_path_resolver, to_http_exception
from nerevar.schemas.server_settings import ServerSettings
from nerevar.services import server_settings_service
from nerevar.services.path_service import PathResolver
from nerevar.utils import file_storage

router = APIRouter()

@router.get("", response_model=ServerSettings)
async def get_server_settings(paths: PathResolver = Depends(get_path_resolver)):
  """Gameplay settings from config.lua"""
  try:
    text = await anyio.to_thread.run_sync(file_storage.read_text, paths.server_settings_path)
    return ServerSettings(config=server_settings_service.read_gameplay_settings(text))
  except ConfigError as e:
    raise to_http_exception(e)

@router.put("")
async def set_server_settings(patch: dict = Body(...), paths: PathResolver = Depends(get_path_resolver)):
  """Write changed gameplay settings back into config.lua"""
  path = paths.server_settings_path
  try:
    text = await anyio.to_thread.run_sync(file_storage.read_text, path)
    updated = server_settings_service.write_gameplay_settings(text, patch)
    await anyio.to_thread.run_sync(file_storage.write_text, path, updated)
  except ConfigError as e:
    raise to_http_exception(e)
  return {"updated": True}

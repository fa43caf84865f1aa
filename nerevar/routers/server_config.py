from fastapi import APIRouter, Body, Depends
import anyio
from nerevar.common.errors import ConfigError
from nerevar.dependencies import get_path_resolver, to_http_exception
from nerevar.schemas.server_config import ServerNetworkConfig
from nerevar.services import server_config_service
from nerevar.services.path_service import PathResolver
from nerevar.utils import file_storage

router = APIRouter()

@router.get("", response_model=ServerNetworkConfig)
async def get_server_config(paths: PathResolver = Depends(get_path_resolver)):
  """Network settings of the dedicated server"""
  try:
    text = await anyio.to_thread.run_sync(file_storage.read_text, paths.server_config_path)
    return server_config_service.read_server_network_config(text)
  except ConfigError as e:
    raise to_http_exception(e)

@router.put("")
async def set_server_config(patch: dict = Body(...), paths: PathResolver = Depends(get_path_resolver)):
  """Apply a partial patch to the server network settings"""
  path = paths.server_config_path
  try:
    text = await anyio.to_thread.run_sync(file_storage.read_text, path)
    updated = server_config_service.write_server_network_config(text, patch)
    await anyio.to_thread.run_sync(file_storage.write_text, path, updated)
  except ConfigError as e:
    raise to_http_exception(e)
  return {"updated": True}

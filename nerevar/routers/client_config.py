from fastapi import APIRouter, Depends
import anyio
from nerevar.common.errors import ConfigError
from nerevar.dependencies import get_path_resolver, to_http_exception
from nerevar.schemas.connection import ConnectionConfig, ConnectionUpdate
from nerevar.services import client_config_service
from nerevar.services.path_service import PathResolver
from nerevar.utils import file_storage

router = APIRouter()

@router.get("", response_model=ConnectionConfig)
async def get_client_config(paths: PathResolver = Depends(get_path_resolver)):
  """Server the client currently connects to"""
  try:
    text = await anyio.to_thread.run_sync(file_storage.read_text, paths.client_config_path)
    return client_config_service.read_connection_config(text)
  except ConfigError as e:
    raise to_http_exception(e)

@router.put("")
async def set_client_config(payload: ConnectionUpdate, paths: PathResolver = Depends(get_path_resolver)):
  """Point the client at another server"""
  path = paths.client_config_path
  try:
    text = await anyio.to_thread.run_sync(file_storage.read_text, path)
    updated = client_config_service.write_connection_config(text, payload.ip, payload.port, payload.password)
    await anyio.to_thread.run_sync(file_storage.write_text, path, updated)
  except ConfigError as e:
    raise to_http_exception(e)
  return {"updated": True}

from fastapi import HTTPException, status
from nerevar.common.errors import ConfigError, ConfigFileNotFound
from nerevar.services.path_service import PathResolver

def get_path_resolver() -> PathResolver:
  return PathResolver()

def to_http_exception(e: ConfigError) -> HTTPException:
  if isinstance(e, ConfigFileNotFound):
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
  return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

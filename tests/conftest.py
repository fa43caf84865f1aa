import pytest
from fastapi.testclient import TestClient
from nerevar.dependencies import get_path_resolver
from nerevar.main import app
from nerevar.services.path_service import PathResolver

@pytest.fixture
def paths(tmp_path) -> PathResolver:
  resolver = PathResolver(tmp_path / "appdata" / "Nerevar", tmp_path / "Documents")
  resolver.server_settings_path.parent.mkdir(parents=True)
  resolver.openmw_config_path.parent.mkdir(parents=True)
  return resolver

@pytest.fixture
def client(paths):
  app.dependency_overrides[get_path_resolver] = lambda: paths
  with TestClient(app) as test_client:
    yield test_client
  app.dependency_overrides.clear()

from fastapi import FastAPI
from nerevar.core.config import DEBUG
from nerevar.common.logger import set_debug_mode
from nerevar.routers.client_config import router as client_config_router
from nerevar.routers.server_config import router as server_config_router
from nerevar.routers.server_settings import router as server_settings_router
from nerevar.routers.launcher import router as launcher_router

app = FastAPI(title="Nerevar", version="0.1.0")

set_debug_mode(DEBUG)

app.include_router(client_config_router, prefix="/client-config", tags=["client"])
app.include_router(server_config_router, prefix="/server-config", tags=["server"])
app.include_router(server_settings_router, prefix="/server-settings", tags=["server"])
app.include_router(launcher_router, tags=["launcher"])

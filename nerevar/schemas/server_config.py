from pydantic import AliasChoices, BaseModel, Field

class GeneralConfig(BaseModel):
  local_address: str = Field("0.0.0.0", validation_alias=AliasChoices("local_address", "localAddress"))
  port: int = Field(25565, ge=0, le=65535)
  maximum_players: int = Field(64, ge=0, le=65535, validation_alias=AliasChoices("maximum_players", "maximumPlayers"))
  hostname: str = "TES3MP server"
  log_level: int = Field(1, ge=0, le=255, validation_alias=AliasChoices("log_level", "logLevel"))
  password: str = ""

class PluginsConfig(BaseModel):
  home: str = "./server"
  # Kept as the raw delimited string from the file
  plugins: str = "serverCore.lua"

class MasterServerConfig(BaseModel):
  enabled: bool = True
  address: str = "master.tes3mp.com"
  port: int = Field(25561, ge=0, le=65535)
  rate: int = Field(10000, ge=0, le=0xFFFFFFFF)

class ServerNetworkConfig(BaseModel):
  """Server network settings from tes3mp-server-default.cfg.

  Reads emit snake_case names; patches may use either snake_case or the
  camelCase names of the file (`masterServer`, `localAddress`, ...).
  """
  general: GeneralConfig = Field(default_factory=GeneralConfig)
  plugins: PluginsConfig = Field(default_factory=PluginsConfig)
  master_server: MasterServerConfig = Field(default_factory=MasterServerConfig, validation_alias=AliasChoices("master_server", "masterServer"))

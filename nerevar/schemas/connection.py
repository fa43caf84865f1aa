from pydantic import AliasChoices, BaseModel, Field

class ConnectionConfig(BaseModel):
  """Client connection settings from tes3mp-client-default.cfg"""
  destination_address: str = Field("localhost", validation_alias=AliasChoices("destination_address", "destinationAddress"))
  port: int = Field(25565, ge=0, le=65535)
  password: str = ""

class ConnectionUpdate(BaseModel):
  """Body sent by the UI to point the client at a server"""
  ip: str = Field(..., min_length=1)
  port: int = Field(..., ge=0, le=65535)
  password: str = ""

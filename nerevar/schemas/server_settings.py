from typing import List, Union
from pydantic import BaseModel, ConfigDict, Field

class GameSetting(BaseModel):
  name: str
  value: Union[bool, int, float, str]

class VrSetting(BaseModel):
  name: str
  value: float

class TimeTable(BaseModel):
  model_config = ConfigDict(populate_by_name=True)

  year: int = 0
  month: int = 0
  day: int = 0
  hour: int = 0
  days_passed: int = Field(0, alias="daysPassed")
  day_time_scale: int = Field(0, alias="dayTimeScale")
  night_time_scale: int = Field(0, alias="nightTimeScale")

class GameplaySettings(BaseModel):
  """Gameplay settings from server/scripts/config.lua.

  Aliases are the Lua field names (`config.<alias> = ...`) and the JSON names
  the UI uses.
  """
  model_config = ConfigDict(populate_by_name=True)

  game_mode: str = Field("Default", alias="gameMode")
  login_time: int = Field(60, alias="loginTime")
  max_clients_per_ip: int = Field(3, alias="maxClientsPerIP")
  difficulty: int = Field(0, alias="difficulty")
  game_settings: List[GameSetting] = Field(default_factory=list, alias="gameSettings")
  vr_settings: List[VrSetting] = Field(default_factory=list, alias="vrSettings")
  default_time_table: TimeTable = Field(default_factory=TimeTable, alias="defaultTimeTable")
  pass_time_when_empty: bool = Field(False, alias="passTimeWhenEmpty")
  night_start_hour: int = Field(20, alias="nightStartHour")
  night_end_hour: int = Field(6, alias="nightEndHour")
  allow_console: bool = Field(False, alias="allowConsole")
  allow_bed_rest: bool = Field(True, alias="allowBedRest")
  allow_wilderness_rest: bool = Field(True, alias="allowWildernessRest")
  allow_wait: bool = Field(True, alias="allowWait")
  share_journal: bool = Field(True, alias="shareJournal")
  share_faction_ranks: bool = Field(True, alias="shareFactionRanks")
  share_faction_expulsion: bool = Field(False, alias="shareFactionExpulsion")
  share_faction_reputation: bool = Field(True, alias="shareFactionReputation")
  share_topics: bool = Field(True, alias="shareTopics")
  share_bounty: bool = Field(False, alias="shareBounty")
  share_reputation: bool = Field(True, alias="shareReputation")
  share_map_exploration: bool = Field(False, alias="shareMapExploration")
  share_videos: bool = Field(True, alias="shareVideos")
  use_instanced_spawn: bool = Field(True, alias="useInstancedSpawn")
  respawn_at_imperial_shrine: bool = Field(True, alias="respawnAtImperialShrine")
  respawn_at_tribunal_temple: bool = Field(True, alias="respawnAtTribunalTemple")
  max_attribute_value: int = Field(200, alias="maxAttributeValue")
  max_speed_value: int = Field(365, alias="maxSpeedValue")
  max_skill_value: int = Field(200, alias="maxSkillValue")
  max_acrobatics_value: int = Field(1200, alias="maxAcrobaticsValue")
  ignore_modifier_with_max_skill: bool = Field(False, alias="ignoreModifierWithMaxSkill")
  players_respawn: bool = Field(True, alias="playersRespawn")
  death_time: int = Field(5, alias="deathTime")
  death_penalty_jail_days: int = Field(5, alias="deathPenaltyJailDays")
  bounty_reset_on_death: bool = Field(False, alias="bountyResetOnDeath")
  bounty_death_penalty: bool = Field(False, alias="bountyDeathPenalty")
  allow_suicide_command: bool = Field(True, alias="allowSuicideCommand")
  allow_fixme_command: bool = Field(True, alias="allowFixmeCommand")
  fixme_interval: int = Field(30, alias="fixmeInterval")
  ping_difference_required_for_authority: int = Field(40, alias="pingDifferenceRequiredForAuthority")
  enforced_log_level: int = Field(-1, alias="enforcedLogLevel")
  physics_framerate: int = Field(60, alias="physicsFramerate")
  allow_on_container_for_unloaded_cells: bool = Field(False, alias="allowOnContainerForUnloadedCells")
  enable_player_collision: bool = Field(True, alias="enablePlayerCollision")
  enable_actor_collision: bool = Field(True, alias="enableActorCollision")
  enable_placed_object_collision: bool = Field(False, alias="enablePlacedObjectCollision")
  use_actor_collision_for_placed_objects: bool = Field(False, alias="useActorCollisionForPlacedObjects")
  maximum_object_scale: float = Field(20.0, alias="maximumObjectScale")
  enforce_data_files: bool = Field(True, alias="enforceDataFiles")

class ServerSettings(BaseModel):
  """JSON document exchanged with the UI"""
  config: GameplaySettings = Field(default_factory=GameplaySettings)

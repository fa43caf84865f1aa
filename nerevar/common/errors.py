class ConfigError(Exception):
    """Base class for every error raised by the config converters."""
    pass

class MalformedLiteral(ConfigError):
    """A located value is not a valid string literal."""
    pass

class InvalidNumber(ConfigError):
    """A located value is not a valid integer or float literal."""
    pass

class InvalidBoolean(ConfigError):
    """A located value is neither `true` nor `false`."""
    pass

class NoMatchingKeys(ConfigError):
    """An update call found nothing to rewrite."""
    pass

class InvalidPatch(ConfigError):
    """A JSON patch did not validate against the settings model."""
    pass

class ConfigFileNotFound(ConfigError):
    """A config file the caller asked for does not exist."""
    pass

class CorruptConfigFile(ConfigError):
    """A config file exists but its content cannot be loaded."""
    pass

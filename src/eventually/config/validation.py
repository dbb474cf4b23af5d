"""Config validation errors."""
from eventually.errors import EventuallyError


class ConfigError(EventuallyError):
    """Environment-driven defaults could not be loaded."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """An ``EVENTUALLY_*`` value is not a usable retry count or delay list."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]

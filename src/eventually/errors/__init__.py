"""Error hierarchy: public re-export surface.

Hierarchy::

    EventuallyError
    ├── UnhandledStrategyError   (policy.py)
    └── ConfigError              (eventually.config.validation)
        └── InvalidSettingValueError
"""

from eventually.errors.base import EventuallyError
from eventually.errors.policy import UnhandledStrategyError

__all__ = ["EventuallyError", "UnhandledStrategyError"]

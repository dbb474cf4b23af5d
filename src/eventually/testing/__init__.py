"""Testing – doubles for exercising retry policies without real waits."""
from eventually.testing.fakes import FlakyOperation, RecordingDelay

__all__ = ["FlakyOperation", "RecordingDelay"]

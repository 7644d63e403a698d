"""Common utilities: assertions, null checks, verbosity masks, timers, file loggers, random numbers, a data black box, pub/sub and a lock proxy."""

__version__ = "1.0.0"
"""pawfetch - fetch, decode and favorite pet data from remote or local sources.

By default, pawfetch's internal logging is disabled when used as a library.
Library users can enable logging by calling pawfetch.enable_logging().
"""

from pawfetch.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]

"""Config settings – KeySettings for the emitter and resolver."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from cdn_keys.config.settings.base import Settings
from cdn_keys.config.validation import InvalidSettingValueError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class KeySettings(Settings):
    """Tunables read from ``CDN_KEYS_*`` environment variables.

    ``public_statuses`` are the publish statuses that make a post or page
    visible on archives and the front page; crossing that boundary triggers
    full-visibility fan-out.
    """

    _prefix: ClassVar[str] = "CDN_KEYS"

    public_statuses: tuple[str, ...] = ("publish",)
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        statuses = self.public_statuses
        if isinstance(statuses, str):
            # a bare string is a comma-separated list, as in the environment
            statuses = statuses.split(",")
        self.public_statuses = tuple(s.strip() for s in statuses if s.strip())
        if not self.public_statuses:
            raise InvalidSettingValueError(
                "public_statuses", self.public_statuses, "at least one status is required"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["KeySettings"]

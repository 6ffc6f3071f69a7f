from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_UNLOCK_ALL = "SPACESTRUCTS_UNLOCK_ALL"
ENV_SEED = "SPACESTRUCTS_SEED"
ENV_LOG_LEVEL = "SPACESTRUCTS_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    unlock_all_levels: bool = False
    shuffle_seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        seed: Optional[int] = None
        raw_seed = env.get(ENV_SEED, "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                logger.warning("Ignoring non-integer %s=%r", ENV_SEED, raw_seed)

        log_level = env.get(ENV_LOG_LEVEL, "INFO").strip().upper() or "INFO"
        if log_level not in logging.getLevelNamesMapping():
            logger.warning("Unknown %s=%r, using INFO", ENV_LOG_LEVEL, log_level)
            log_level = "INFO"

        return cls(
            unlock_all_levels=env.get(ENV_UNLOCK_ALL) == "1",
            shuffle_seed=seed,
            log_level=log_level,
        )

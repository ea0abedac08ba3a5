from __future__ import annotations

import os
import logging

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .controller import REFRESH_INTERVAL_MS

ENV_PREFIX = 'LAP_TIMER_'

class Settings(BaseModel):
    refresh_ms: int = Field(default=REFRESH_INTERVAL_MS, gt=0)
    log_level: str = 'WARNING'
    title: str = 'Timer'

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f'Unknown log level: {v}')
        return v

    @classmethod
    def fromEnv(cls, load_dotenv: bool = True) -> Settings:
        '''
        Reads `LAP_TIMER_REFRESH_MS`, `LAP_TIMER_LOG_LEVEL`, `LAP_TIMER_TITLE`.
        Unset variables keep their defaults.
        A `.env` in the working directory (or above) fills in,
        without overriding the real environment.
        '''
        env: dict[str, str | None] = {}
        if load_dotenv:
            path = dotenv.find_dotenv(usecwd=True)
            if path:
                env.update(dotenv.dotenv_values(path))
        env.update(os.environ)
        raw = {}
        for name in cls.model_fields:
            value = env.get(ENV_PREFIX + name.upper())
            if value is not None:
                raw[name] = value
        return cls.model_validate(raw)

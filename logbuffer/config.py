"""Configuration for bounded log buffers."""

from pydantic import BaseModel, Field

DEFAULT_MAX_LOGS = 500


class LogBufferConfig(BaseModel):
    """Construction-time settings for a BoundedLogBuffer."""

    max_logs: int = Field(default=DEFAULT_MAX_LOGS, ge=1)
    echo: bool = True

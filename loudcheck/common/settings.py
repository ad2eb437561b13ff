# loudcheck/common/settings.py
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from loudcheck.common.logging import resolve_level
from loudcheck.domain.enums.loudness_standard import LoudnessStandard
from loudcheck.domain.enums.report_format import ReportFormat


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class FFprobeConfig(BaseModel):
    bin: str = "ffprobe"
    log_level: str = "error"  # quiet|panic|fatal|error|warning|info|verbose|debug|trace
    timeout_sec: Optional[int] = Field(default=None, ge=1)


class FFmpegConfig(BaseModel):
    bin: str = "ffmpeg"
    # None means wait for the child process however long it takes
    measure_timeout_sec: Optional[int] = Field(default=None, ge=1)
    transcode_timeout_sec: Optional[int] = Field(default=None, ge=1)


class AnalysisConfig(BaseModel):
    standard: LoudnessStandard = LoudnessStandard.ebu_r128
    report_format: ReportFormat = ReportFormat.json
    autofix: bool = False
    concurrent: bool = False
    output_suffix: str = "-fixedAudio"

    @field_validator("autofix", "concurrent", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @field_validator("report_format", mode="before")
    @classmethod
    def _format(cls, v):
        return ReportFormat.parse(v) if isinstance(v, str) else v


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "loudcheck"
    app_env: str = "development"  # development|test|production
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, v):
        # unknown names such as "verbose" map to INFO
        return logging.getLevelName(resolve_level(v))

    # -------- Sub-configs --------
    ffprobe: FFprobeConfig = FFprobeConfig()
    ffmpeg: FFmpegConfig = FFmpegConfig()
    analysis: AnalysisConfig = AnalysisConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from loudcheck.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically

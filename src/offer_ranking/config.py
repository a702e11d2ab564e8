"""Configuration — scoring constants, total-score policy, storage defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class WorkloadRule(BaseModel):
    baseline_hours: float = Field(default=40.0, gt=0.0)
    hour_penalty: float = Field(default=5.0, ge=0.0)


class ScoringRules(BaseModel):
    location_default_preference: str = "indifferent"
    location_fallback_score: float = 50.0
    option_fallback_score: float = 0.0
    turnover_penalty: float = 15.0
    salary_increase_full_pct: float = Field(default=10.0, gt=0.0)
    unsure_score: float = 50.0
    normalization_floor: float = Field(default=1.0, gt=0.0)


class Settings(BaseSettings):
    clamp_total: bool = False
    max_bonus_dimensions: int = Field(default=3, ge=0)

    snapshot_path: str = "data/board.json"
    snapshot_version: int = 1

    workload: WorkloadRule = WorkloadRule()
    rules: ScoringRules = ScoringRules()

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "OFFER_RANKING_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }


settings = Settings()

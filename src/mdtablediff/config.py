"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from mdtablediff.core.columns.policy import (
    ADDED_REMOVED_CONFIDENCE,
    DATA_WEIGHT,
    FALLBACK_CONFIDENCE,
    HEADER_WEIGHT,
    MATCH_THRESHOLD,
    MAX_SAMPLE_ROWS,
    MAX_SAMPLE_VALUES,
    POSITION_BONUS,
    MatchPolicy,
)


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "mdtablediff"
    parser_config: str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    output_format: str = Field(default="json", pattern="^(json|yaml)$", description="json or yaml")
    log_level:     str = Field(default="WARNING", description="Minimum loguru level for CLI output")
    json_logs:     bool = Field(default=False, description="Serialize log records as JSON")

    header_weight: float = Field(default=HEADER_WEIGHT, ge=0, le=1, description="Weight of header similarity")
    data_weight:   float = Field(default=DATA_WEIGHT,   ge=0, le=1, description="Weight of sampled data overlap")
    position_bonus: float = Field(default=POSITION_BONUS, ge=0, le=1, description="Max bonus for positional proximity")
    match_threshold: float = Field(default=MATCH_THRESHOLD, ge=0, le=1, description="Min adjusted score to accept a match")
    added_removed_confidence: float = Field(default=ADDED_REMOVED_CONFIDENCE, ge=0, le=1)
    fallback_confidence: float = Field(default=FALLBACK_CONFIDENCE, ge=0, le=1)
    max_sample_rows:   int = Field(default=MAX_SAMPLE_ROWS,   ge=1, description="Rows sampled per table")
    max_sample_values: int = Field(default=MAX_SAMPLE_VALUES, ge=1, description="Distinct values kept per column")

    def match_policy(self) -> MatchPolicy:
        """Build the column matching policy from the configured constants."""
        return MatchPolicy(
            header_weight=self.header_weight,
            data_weight=self.data_weight,
            position_bonus=self.position_bonus,
            match_threshold=self.match_threshold,
            added_removed_confidence=self.added_removed_confidence,
            fallback_confidence=self.fallback_confidence,
            max_sample_rows=self.max_sample_rows,
            max_sample_values=self.max_sample_values,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDTABLEDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDTABLEDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)

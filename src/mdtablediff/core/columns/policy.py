"""Column matching policy constants"""

from pydantic import BaseModel, ConfigDict, Field


HEADER_WEIGHT = 0.55
DATA_WEIGHT = 0.45
POSITION_BONUS = 0.08
MATCH_THRESHOLD = 0.55
ADDED_REMOVED_CONFIDENCE = 0.85
FALLBACK_CONFIDENCE = 0.5
MAX_SAMPLE_ROWS = 8
MAX_SAMPLE_VALUES = 12


class MatchPolicy(BaseModel):
    """Weights, thresholds, and sampling caps used by the column resolver."""
    model_config = ConfigDict(frozen=True)

    header_weight:   float = Field(default=HEADER_WEIGHT,   ge=0, le=1)
    data_weight:     float = Field(default=DATA_WEIGHT,     ge=0, le=1)
    position_bonus:  float = Field(default=POSITION_BONUS,  ge=0, le=1)
    match_threshold: float = Field(default=MATCH_THRESHOLD, ge=0, le=1)
    added_removed_confidence: float = Field(default=ADDED_REMOVED_CONFIDENCE, ge=0, le=1)
    fallback_confidence:      float = Field(default=FALLBACK_CONFIDENCE,      ge=0, le=1)
    max_sample_rows:   int = Field(default=MAX_SAMPLE_ROWS,   ge=1)
    max_sample_values: int = Field(default=MAX_SAMPLE_VALUES, ge=1)


DEFAULT_POLICY = MatchPolicy()

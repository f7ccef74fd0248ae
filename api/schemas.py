import math
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from repcount.config import Thresholds
from repcount.quality.failures import SkipReason
from repcount.repdetect.counter import PostureState


class ThresholdsIn(BaseModel):
    """
    Optional overrides for the counter thresholds; omitted fields keep their defaults.
    """
    up_angle_deg: Optional[float] = Field(None, ge=0, le=180, description="Both elbows above this count as up.")
    down_angle_deg: Optional[float] = Field(None, ge=0, le=180, description="Both elbows below this count as down.")
    min_confidence: Optional[float] = Field(None, ge=0, le=1, description="Minimum per-joint confidence.")

    @model_validator(mode="after")
    def band_is_open(self) -> "ThresholdsIn":
        self.to_thresholds()
        return self

    def to_thresholds(self) -> Thresholds:
        return Thresholds().with_overrides(**self.model_dump()).validate()


class JointIn(BaseModel):
    x: float
    y: float
    z: float = 0.0
    confidence: float = Field(..., ge=0, le=1)

    @field_validator("x", "y", "z")
    @classmethod
    def coordinate_is_finite(cls, v: float) -> float:
        if math.isnan(v) or math.isinf(v):
            raise ValueError("coordinates must be finite numbers")
        return v


class FrameIn(BaseModel):
    joints: Dict[str, JointIn] = Field(default_factory=dict, description="Joint name -> position and confidence.")


class SessionCreate(BaseModel):
    thresholds: Optional[ThresholdsIn] = None


class SessionStatus(BaseModel):
    session_id: str
    count: int
    state: PostureState
    recording: bool
    thresholds: Dict[str, float]


class FrameResult(BaseModel):
    accepted: bool = Field(..., description="False when the frame was dropped (not recording or session busy).")
    counted: bool = False
    count: int
    state: PostureState
    skipped: Optional[SkipReason] = None
    left_angle: Optional[float] = None
    right_angle: Optional[float] = None

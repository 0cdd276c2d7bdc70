from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from timealign.utils.load import load_yaml

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ReferenceConfig(BaseModel):
    start: date
    end: date
    num_samples: int = Field(..., gt=0, description="timeline entries per window")


class RequestConfig(BaseModel):
    """A classification request as declared in YAML."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    timeline: Optional[List[date]] = Field(
        default=None, description="inline acquisition dates"
    )
    timeline_file: Optional[Path] = Field(
        default=None, description="text (one date per line) or CSV with a 'date' column"
    )
    bands: List[str] = Field(default_factory=list)
    labels: List[str] = Field(default_factory=list)
    reference: Optional[ReferenceConfig] = None
    samples_file: Optional[Path] = Field(
        default=None, description="JSON lines samples; the first one defines the reference"
    )
    metadata_columns: int = Field(default=2, ge=0)
    log_level: Optional[str] = Field(default=None, description="DEFAULT LOG LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object):
        if value is None:
            return None
        text = str(value).strip().upper()
        if not text:
            return None
        if text not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {value!r}"
            )
        return text

    @field_validator("bands")
    @classmethod
    def _unique_bands(cls, value: List[str]) -> List[str]:
        if len(set(value)) != len(value):
            raise ValueError("bands must not repeat")
        return value

    @model_validator(mode="after")
    def _validate_sources(self) -> "RequestConfig":
        if (self.timeline is None) == (self.timeline_file is None):
            raise ValueError("declare exactly one of 'timeline' or 'timeline_file'")
        if self.reference is None and self.samples_file is None:
            raise ValueError("declare 'reference' or 'samples_file'")
        if not self.bands and self.samples_file is None:
            raise ValueError("'bands' is required unless 'samples_file' provides them")
        return self

    def resolve_paths(self, base: Path) -> "RequestConfig":
        """Return a copy with relative file paths anchored at ``base``."""
        updates = {}
        for key in ("timeline_file", "samples_file"):
            value = getattr(self, key)
            if value is not None and not value.is_absolute():
                updates[key] = (base / value).resolve()
        return self.model_copy(update=updates) if updates else self


def load_request(path: Path) -> RequestConfig:
    data = load_yaml(path)
    cfg = RequestConfig.model_validate(data)
    return cfg.resolve_paths(path.parent)

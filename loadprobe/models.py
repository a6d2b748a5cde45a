from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union


class TimingSample(BaseModel):
    """One response, timed in seconds from the moment the GET was started."""
    model_config = ConfigDict(frozen=True)

    ttfb: float = Field(ge=0.0)
    ttlb: float = Field(ge=0.0)
    total_time: float = Field(ge=0.0)
    status: int


class RequestFailure(BaseModel):
    """A request that never produced a response (DNS, refused, timeout, ...)."""
    model_config = ConfigDict(frozen=True)

    reason: str
    detail: str = ""


Outcome = Union[TimingSample, RequestFailure]


class LoadResult(BaseModel):
    successful_count: int = 0
    failed_count: int = 0
    samples: List[TimingSample] = Field(default_factory=list)
    duration_s: float = 0.0

    @property
    def total_count(self) -> int:
        return self.successful_count + self.failed_count


class SeriesStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    # min/max are None when there were no successful samples
    min: Optional[float] = None
    max: Optional[float] = None
    mean: float = 0.0


class SummaryStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    successful_count: int
    failed_count: int
    requests_per_second: float
    p95: float
    p99: float
    total_time: SeriesStats
    ttfb: SeriesStats
    ttlb: SeriesStats

    @property
    def has_data(self) -> bool:
        return self.successful_count > 0

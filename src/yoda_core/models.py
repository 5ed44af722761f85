"""
Data models for yoda-core.
"""

import math
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CacheOptions(BaseModel):
    """Options accepted by the cache factory."""
    model_config = ConfigDict(extra="forbid")

    ttl: Optional[float] = Field(
        default=None,
        gt=0,
        description="Time-to-live in seconds (math.inf = never expire). None = configured default"
    )
    weak: Optional[bool] = Field(
        default=None,
        description="Hold weak-referenceable values weakly. None = configured default"
    )

    @model_validator(mode="before")
    @classmethod
    def _convert_ttl_ms(cls, data: Any) -> Any:
        # ttl_ms is the millisecond spelling used by editor-side callers
        if isinstance(data, Mapping) and "ttl_ms" in data:
            data = dict(data)
            ttl_ms = data.pop("ttl_ms")
            if "ttl" not in data and ttl_ms is not None:
                data["ttl"] = ttl_ms / 1000
        return data

    @property
    def persistent(self) -> bool:
        """True when entries never expire."""
        return self.ttl is not None and math.isinf(self.ttl)


def normalize_options(options: Optional[Union[CacheOptions, Mapping[str, Any]]]) -> dict[str, Any]:
    """
    Validate one layer of cache options into a plain dict.

    'ttl_ms' is converted to 'ttl' and unset keys are dropped, so layers
    can be merged without one layer's spelling hiding another's.
    """
    if options is None:
        return {}
    if not isinstance(options, CacheOptions):
        options = CacheOptions.model_validate(options)
    return options.model_dump(exclude_none=True)

"""Per-call options and store-level configuration models.

Both models are frozen Pydantic v2 models: options are built fresh for
every call and config is fixed for the lifetime of a store, so neither is
ever mutated after construction.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CacheOptions(BaseModel):
    """Options accepted by a single cache operation.

    Unknown keys are ignored so callers can pass through option mappings
    shared with other cache layers.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Seconds until expiry.  ``0`` is a real value here and is kept
    # distinct from ``None`` (= "use the store default").
    ttl: int | None = Field(default=None, description="Per-call TTL in seconds.")
    # Kept exactly as given: only the literal ``False`` disables JSON
    # decoding on reads, so ``0`` or ``"no"`` must not be coerced.
    parse: Any = Field(default=None, description="Decode stored JSON on reads.")


class StoreConfig(BaseModel):
    """Construction-time configuration of a cache store.

    Accepts ``isCacheableValue`` as an alias so config mappings written
    for other cache-manager stores can be reused unchanged.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    ttl: int | None = Field(default=None, description="Default TTL in seconds; None = no expiry.")
    is_cacheable_value: Callable[[Any], bool] | None = Field(
        default=None,
        alias="isCacheableValue",
        description="Predicate deciding whether a value may be written.",
    )

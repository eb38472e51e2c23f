"""Produce domain models and API schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProduceRecord(BaseModel):
    """A single produce item held by the store and exchanged over the API.

    Missing ``name`` and ``unitPrice`` fall back to empty/zero values; the
    produce code is always required.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field("", description="Display name of the produce item")
    produce_code: str = Field(
        ...,
        alias="produceCode",
        description="Four groups of four alphanumerics separated by hyphens",
    )
    unit_price: float = Field(
        0.0,
        alias="unitPrice",
        ge=0,
        allow_inf_nan=False,
        description="Price per unit",
    )

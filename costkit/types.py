"""Core data models for the pricing catalog, price results, and balance checks."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


Tier = Literal["Simple", "Standard", "Complex", "Premium"]
BalanceStatus = Literal["sufficient", "close", "moderate", "insufficient"]


# ---------------------------------------------------------------------------
# Catalog (static pricing configuration)
# ---------------------------------------------------------------------------

class PromptTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_words: Optional[int] = None  # None = no upper bound
    cost: int


class CostTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_cost: Optional[int] = None
    label: Tier


class ModePolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_cost: int
    max_cost: int
    tiers: list[CostTier] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> ModePolicy:
        if self.min_cost > self.max_cost:
            raise ValueError(f"min_cost {self.min_cost} exceeds max_cost {self.max_cost}")
        if self.tiers[-1].max_cost is not None:
            raise ValueError("last cost tier must have no max_cost")
        return self

    def clamp(self, total: int) -> int:
        return min(max(self.min_cost, total), self.max_cost)

    def tier_for(self, cost: int) -> Tier:
        for tier in self.tiers[:-1]:
            if tier.max_cost is None or cost <= tier.max_cost:
                return tier.label
        return self.tiers[-1].label


class PricingPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_cost: int
    prompt_tiers: list[PromptTier] = Field(min_length=1)
    generation: ModePolicy
    refinement: ModePolicy

    @model_validator(mode="after")
    def _check_prompt_tiers(self) -> PricingPolicy:
        if self.prompt_tiers[-1].max_words is not None:
            raise ValueError("last prompt tier must have no max_words")
        return self


class CountPricing(BaseModel):
    """Price a multi-select by how many values are picked rather than which."""

    model_config = ConfigDict(frozen=True)

    free: int = 0
    per_item: float = 1.0
    cap: Optional[int] = None


class Addon(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    value: str
    cost: int


class CategorySpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    group: Optional[str] = None
    multi: bool = False
    conditional: bool = False  # priced only when something is selected
    hidden: bool = False
    persistent: bool = False
    costs: dict[str, int] = Field(default_factory=dict)
    unselected_cost: int = 0
    count_pricing: Optional[CountPricing] = None
    fields: dict[str, str] = Field(default_factory=dict)

    @property
    def priced(self) -> bool:
        return bool(self.costs) or self.count_pricing is not None

    @property
    def color_picker(self) -> bool:
        return bool(self.fields)


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    policy: PricingPolicy
    addons: dict[str, Addon] = Field(default_factory=dict)
    labels: dict[str, str] = Field(default_factory=dict)
    categories: dict[str, CategorySpec]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class PriceResult(BaseModel):
    cost: int
    breakdown: dict[str, int] = Field(default_factory=dict)
    estimate: Tier
    word_count: int = Field(default=0, serialization_alias="wordCount")
    raw_total: int = Field(default=0, serialization_alias="rawTotal")
    is_refinement: bool = Field(default=False, serialization_alias="isRefinement")


class BreakdownItem(BaseModel):
    label: str
    cost: int
    type: Literal["addition", "discount"]


class BalanceCheck(BaseModel):
    sufficient: bool
    deficit: int
    percentage: float
    status: BalanceStatus

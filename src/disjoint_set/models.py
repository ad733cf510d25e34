"""Pydantic models describing disjoint-set registries."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RegistryStats(BaseModel):
    """Point-in-time summary of a registry's grouping."""

    model_config = ConfigDict(frozen=True)

    element_count: int = Field(ge=0, description="Number of elements in the universe")
    group_count: int = Field(ge=0, description="Number of disjoint groups")
    largest_group_size: int = Field(ge=0, description="Size of the biggest group")

    @model_validator(mode="after")
    def check_group_count(self) -> Self:
        """Ensure there are no more groups than elements, and none when empty."""
        if self.group_count > self.element_count:
            raise ValueError("group_count must be <= element_count")
        if (self.element_count == 0) != (self.group_count == 0):
            raise ValueError("group_count must be 0 exactly when element_count is 0")
        return self

    @model_validator(mode="after")
    def check_largest_group(self) -> Self:
        """Ensure the largest group fits in the universe and is consistent with group_count."""
        if self.largest_group_size > self.element_count:
            raise ValueError("largest_group_size must be <= element_count")
        if self.element_count and self.largest_group_size < 1:
            raise ValueError("largest_group_size must be >= 1 for a non-empty registry")
        return self

    @property
    def singletons_only(self) -> bool:
        """True when no two elements have been merged."""
        return self.group_count == self.element_count

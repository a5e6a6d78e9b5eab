"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class DataSourceConfig(BaseModel):
    """Where the patient dataset is read from."""

    # None means the dataset bundled with the package
    path: Optional[str] = Field(default=None)
    encoding: str = Field(default="utf-8")


class PaginationConfig(BaseModel):
    """Page and limit defaults and bounds."""

    default_page: int = Field(default=1, ge=1)
    default_limit: int = Field(default=20, ge=1)
    min_limit: int = Field(default=1, ge=1)
    max_limit: int = Field(default=100, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> "PaginationConfig":
        if self.min_limit > self.max_limit:
            raise ValueError("min_limit must be <= max_limit")
        if not (self.min_limit <= self.default_limit <= self.max_limit):
            raise ValueError("default_limit must lie within [min_limit, max_limit]")
        return self


class SortingConfig(BaseModel):
    """Sortable fields exposed to callers."""

    allowed_fields: List[str] = Field(
        default_factory=lambda: ["age", "patient_name"]
    )


class FilterToggleConfig(BaseModel):
    """Enable/disable individual filter stages."""

    search: bool = True
    age_range: bool = True
    medical_issue: bool = True


class LoggingConfig(BaseModel):
    """Logging output settings."""

    level: str = Field(default="INFO")
    use_json: bool = True


class DirectoryConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    data_source: DataSourceConfig = Field(default_factory=DataSourceConfig)
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    sorting: SortingConfig = Field(default_factory=SortingConfig)
    filters: FilterToggleConfig = Field(default_factory=FilterToggleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"populate_by_name": True}

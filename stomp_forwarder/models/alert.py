"""Alertmanager webhook payload models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _WireModel(BaseModel):
    """Immutable model that reads and writes Alertmanager's camelCase field names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null on a known field means "not set"
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Alert(_WireModel):
    """A single firing or resolved alert."""

    annotations: dict[str, Any] = Field(default_factory=dict)
    ends_at: str = Field(default="", alias="endsAt")
    generator_url: str = Field(default="", alias="generatorURL")
    labels: dict[str, str] = Field(default_factory=dict)
    starts_at: str = Field(default="", alias="startsAt")

    @model_validator(mode="before")
    @classmethod
    def null_alert(cls, data: Any) -> Any:
        # a null entry in the alerts array is an empty alert
        return {} if data is None else data

    @field_validator("labels", mode="before")
    @classmethod
    def null_label_values(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {k: "" if value is None else value for k, value in v.items()}
        return v

    def to_json(self) -> str:
        """Serialize the alert with its wire field names."""
        return self.model_dump_json(by_alias=True)


class AlertBatch(_WireModel):
    """Group of alerts from a single webhook payload."""

    alerts: list[Alert] = Field(default_factory=list)
    common_annotations: dict[str, Any] = Field(default_factory=dict, alias="commonAnnotations")
    common_labels: dict[str, Any] = Field(default_factory=dict, alias="commonLabels")
    external_url: str = Field(default="", alias="externalURL")
    group_labels: dict[str, Any] = Field(default_factory=dict, alias="groupLabels")
    receiver: str = ""
    status: str = ""


"""Pydantic models for declarative element trees and defaults files."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ElementSpec(BaseModel):
    """One element of a declarative tree, as read from YAML."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    element: str = Field(
        ..., description="Element class name (e.g. Div, InputCheckbox) or tag name."
    )
    tag_name: Optional[str] = Field(
        None,
        alias="tagName",
        description="Tag name for the generic Tag element.",
    )
    attributes: Dict[str, Any] = Field(
        default_factory=dict, description="Attributes set on the element."
    )
    content: Optional[str] = Field(None, description="Text content, HTML-escaped.")
    html: Optional[str] = Field(None, description="Raw markup content, inserted as is.")
    children: List["ElementSpec"] = Field(
        default_factory=list,
        description=(
            "Nested elements rendered after the content, one per line. Choice lists "
            "take them as items and button groups as buttons."
        ),
    )
    items: Dict[Any, Any] = Field(
        default_factory=dict,
        description="Select options: value -> label, or group key -> nested mapping.",
    )
    label: Optional[str] = Field(None, description="Label text for form controls.")
    value: Any = Field(None, description="Value of value-carrying controls.")
    checked: Any = Field(None, description="Checked state for checkbox and radio inputs.")
    template: Optional[str] = Field(
        None, description="Template with {prefix}, {tag}, {suffix} placeholders."
    )
    themes: List[str] = Field(
        default_factory=list,
        description="Theme names resolved through the configured theme table.",
    )

    @field_validator("element")
    @classmethod
    def _element_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("element must not be empty")
        return value.strip()


class DefaultsConfig(BaseModel):
    """Global defaults and theme tables loaded from a YAML file."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    defaults: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict,
        description="Default attributes keyed by element class name.",
    )
    themes: Dict[str, Dict[str, Dict[str, Any]]] = Field(
        default_factory=dict,
        description="Theme name -> element class name -> attributes.",
    )


ElementSpec.model_rebuild()


__all__ = ["DefaultsConfig", "ElementSpec"]

"""Pydantic models for declarative component files."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BemSpec(BaseModel):
    """BEM classes appended to a component's class list."""

    block: str = Field(..., description="Block name.")
    element: Optional[str] = Field(None, description="Optional element name.")
    modifiers: List[str] = Field(
        default_factory=list, description="Modifiers applied to the block or element."
    )


class BemxSpec(BaseModel):
    """Contextual BEMX classes appended to a component's class list."""

    block: str = Field(..., description="Child block name.")
    parent: Optional[str] = Field(
        None, description="Parent block providing the context, if any."
    )
    modifiers: List[str] = Field(
        default_factory=list, description="Modifiers of the child block."
    )
    parent_modifiers: List[str] = Field(
        default_factory=list,
        alias="parentModifiers",
        description="Parent modifiers expressed in the child's context.",
    )

    model_config = ConfigDict(populate_by_name=True)


class ComponentSpec(BaseModel):
    """One component entry of a components file."""

    tag: str = Field("comp", description="Element name.")
    closed: bool = Field(
        True, description="Whether the element renders content and a closing tag."
    )
    id: Optional[str] = Field(None, description="Value of the id attribute.")
    classes: List[str] = Field(
        default_factory=list, description="Class tokens added in order."
    )
    bem: Optional[BemSpec] = Field(None, description="BEM classes to add.")
    bemx: Optional[BemxSpec] = Field(None, description="BEMX classes to add.")
    attributes: Dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Plain attributes; null or empty values render as bare keys.",
    )
    data: Dict[str, str] = Field(
        default_factory=dict, description="data-* attributes without the prefix."
    )
    aria: Dict[str, str] = Field(
        default_factory=dict, description="aria-* attributes without the prefix."
    )
    contents: List[str] = Field(
        default_factory=list, description="Text lines, escaped on insertion."
    )


class PageSpec(BaseModel):
    """Options for wrapping rendered components in an HTML document."""

    title: str = Field("", description="Document title.")
    lang: str = Field("en", description="Value of the html lang attribute.")


class ComponentsFile(BaseModel):
    """Schema for a components YAML file."""

    components: List[ComponentSpec] = Field(
        default_factory=list, description="Components rendered in order."
    )
    page: PageSpec = Field(
        default_factory=PageSpec, description="Document shell used by render --page."
    )


__all__ = [
    "BemSpec",
    "BemxSpec",
    "ComponentSpec",
    "ComponentsFile",
    "PageSpec",
]

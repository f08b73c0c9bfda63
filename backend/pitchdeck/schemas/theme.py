"""Theme descriptors: immutable visual style bundles applied at render/export time."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Frozen(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ThemeColors(_Frozen):
    primary: str
    secondary: str
    accent: str
    text: str
    background: str
    surface: str


class ThemeFonts(_Frozen):
    heading: str
    body: str


class ThemeStyles(_Frozen):
    border_radius: str
    shadow: str
    gradient: str | None = None


class ThemeDescriptor(_Frozen):
    id: str
    name: str
    colors: ThemeColors
    fonts: ThemeFonts
    styles: ThemeStyles



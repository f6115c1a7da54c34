"""Typed records for the site's data file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, RootModel


class _Record(BaseModel):
    # Hand-edited data: numbers in text fields render as their text.
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)


class LabeledValue(_Record):
    label: str | None = None
    value: str | int | float | None = None


class Section(_Record):
    title: str | None = None
    text: str | None = None


class Skill(_Record):
    name_zh: str | None = None
    name_en: str | None = None
    type: str | None = None
    effect: str | None = None
    icon: str | None = None
    details: list[LabeledValue] = []


class Item(_Record):
    """One character, unit, building, mode or guide.

    Every field is optional; the renderer emits a block only for the fields
    that are present.
    """

    id: str | None = None
    name_zh: str | None = None
    name_en: str | None = None
    role: str | None = None
    description: str | None = None
    main_image: str | None = None
    icon: str | None = None
    stats: list[LabeledValue] | None = None
    cost: str | None = None
    rules: list[str] | None = None
    details: list[str] | None = None
    content: str | None = None
    sections: list[Section] | None = None
    skills: list[Skill] | None = None
    tactics: list[str] | None = None

    @property
    def display_name(self) -> str:
        return self.name_zh or self.id or ""


class Catalog(RootModel[dict[str, list[Item]]]):
    """Category name -> ordered items, as stored in ``data.json``."""

    def get(self, category: str) -> list[Item] | None:
        return self.root.get(category)

    def __contains__(self, category: object) -> bool:
        return category in self.root

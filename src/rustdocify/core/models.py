"""Domain models for rustdocify."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class ItemKind(str, Enum):
    """Rustdoc item page kinds (the `KIND.` prefix of `KIND.NAME.html`)."""

    ENUM = "enum"
    FN = "fn"
    STRUCT = "struct"
    TRAIT = "trait"


class MemberKind(str, Enum):
    """Rustdoc anchor kinds for items nested in an item page."""

    METHOD = "method"
    TYMETHOD = "tymethod"
    VARIANT = "variant"


ALLOWED_MEMBERS: dict[ItemKind, tuple[MemberKind, ...]] = {
    ItemKind.ENUM: (MemberKind.METHOD, MemberKind.VARIANT),
    ItemKind.FN: (),
    ItemKind.STRUCT: (MemberKind.METHOD,),
    ItemKind.TRAIT: (MemberKind.TYMETHOD,),
}
"""Member anchors each item kind can carry."""


class ItemRef(BaseModel):
    """An item page such as `struct.Foo.html`."""

    kind: ItemKind
    name: str = Field(min_length=1)


class MemberRef(BaseModel):
    """A member anchor such as `#method.new`."""

    kind: MemberKind
    name: str = Field(min_length=1)


class LinkTarget(BaseModel):
    """A docs.rs URL decomposed into its semantic parts."""

    package: str = Field(description="Package name from the URL")
    version: str | None = Field(default=None, description="Version segment, e.g. 1.2.3 or *")
    crate: str | None = Field(default=None, description="Crate segment")
    modules: list[str] = Field(default_factory=list, description="Module path segments")
    item: ItemRef | None = Field(default=None, description="Item page, if any")
    member: MemberRef | None = Field(default=None, description="Member anchor, if any")
    fragment: str | None = Field(default=None, description="Bare URL fragment")
    index: bool = Field(default=False, description="URL ended in / or index.html")

    @field_validator("package")
    @classmethod
    def validate_package(cls, v: str) -> str:
        """Package name must be non-empty."""
        if not v:
            raise ValueError("Package name must not be empty")
        return v

    @model_validator(mode="after")
    def validate_member(self) -> LinkTarget:
        """A member needs an item it belongs to and replaces any fragment."""
        if self.member is not None:
            if self.item is None:
                raise ValueError("Member anchor without an item")
            if self.member.kind not in ALLOWED_MEMBERS[self.item.kind]:
                raise ValueError(
                    f"{self.item.kind.value} items have no {self.member.kind.value} members"
                )
            if self.fragment is not None:
                raise ValueError("Member anchor and fragment are mutually exclusive")
        return self

    @property
    def path(self) -> list[str]:
        """Path segments below `crate`, item and member included."""
        segments = list(self.modules)
        if self.item is not None:
            segments.append(self.item.name)
        if self.member is not None:
            segments.append(self.member.name)
        return segments

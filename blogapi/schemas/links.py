"""HAL-style hypermedia building blocks shared by every resource model."""

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """A single hypermedia link."""

    model_config = ConfigDict(frozen=True)

    href: str = Field(description="Absolute URL of the linked resource")


Links = dict[str, Link]


class LinkedModel(BaseModel):
    """Base for resource models carrying a `_links` object."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    links: Links = Field(default_factory=dict, alias="_links")

    def link(self, rel: str) -> str:
        """Return the href of the `rel` link."""
        return self.links[rel].href

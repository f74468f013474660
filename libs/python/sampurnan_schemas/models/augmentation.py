"""Validated shapes for generative-service output."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums import CitationKind


class ManuscriptAutofill(BaseModel):
    """Field proposals for a manuscript, keyed exactly as requested in the prompt.

    Values are the model's best guesses and are meant to be reviewed before
    they are merged into a :class:`~sampurnan_schemas.models.catalog.ManuscriptCreate`.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    author: str
    description: str
    category: str
    language: str
    script: str
    condition: str
    readability: str


class GroundingSource(BaseModel):
    uri: Optional[str] = None
    title: Optional[str] = None


class Citation(BaseModel):
    """A source reference returned with a grounded answer."""

    kind: CitationKind
    source: GroundingSource

    @property
    def uri(self) -> Optional[str]:
        return self.source.uri

    @property
    def title(self) -> Optional[str]:
        return self.source.title


class GroundedAnswer(BaseModel):
    text: str
    sources: list[Citation] = Field(default_factory=list)

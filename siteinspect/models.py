# siteinspect/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Safety = Literal["safe", "warning"]


# ---------------------------------------------------------
# PIPELINE TYPES (request scoped, never leave the core)
# ---------------------------------------------------------

@dataclass
class PageSummary:
    title: str
    description: str
    headings: List[str]
    body_text: str
    link_count: int
    image_count: int
    status: int
    has_ssl: bool


@dataclass
class SafetyVerdict:
    safety: Safety = "safe"
    warnings: List[str] = field(default_factory=list)

    def flag(self, warning: str) -> None:
        # once raised, the verdict stays at "warning"
        self.warnings.append(warning)
        self.safety = "warning"


# ---------------------------------------------------------
# API MODELS
# ---------------------------------------------------------

class UrlAnalysisRequest(BaseModel):
    url: Optional[str] = None


class QrContentRequest(BaseModel):
    content: Optional[str] = None


class PageElements(BaseModel):
    links: int
    images: int
    headings: int


class AnalysisMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    domain: str
    status: Union[int, str]
    has_ssl: bool = Field(..., alias="hasSSL")
    page_elements: Optional[PageElements] = Field(None, alias="pageElements")


class AnalysisResult(BaseModel):
    title: str
    description: str
    type: str
    safety: Safety
    warnings: List[str] = Field(default_factory=list)
    metadata: Optional[AnalysisMetadata] = None

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

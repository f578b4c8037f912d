"""Wire models for the CourtListener REST API (v4)."""

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Cluster(_WireModel):
    """A case record (opinion group) matched by citation-lookup."""

    id: int
    case_name: str = ""
    absolute_url: str = ""

    @property
    def string_id(self) -> str:
        return str(self.id)


class LookupResponse(_WireModel):
    """One entry of the citation-lookup array, one per recognized span."""

    citation: str
    normalized_citations: list[str] = Field(default_factory=list)
    start_index: int = 0
    end_index: int = 0
    status: int
    error_message: str = ""
    clusters: list[Cluster] = Field(default_factory=list)


class CaseSearchHit(_WireModel):
    case_name: str = Field(alias="caseName")
    citation: list[str] = Field(default_factory=list)
    absolute_url: str = ""
    cluster_id: int
    court: str = ""
    date_filed: str = Field(default="", alias="dateFiled")


class SearchResponse(_WireModel):
    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[CaseSearchHit] = Field(default_factory=list)


class OpinionRecord(_WireModel):
    id: int
    case_name: str = ""
    citation: str | list = ""
    absolute_url: str = ""
    plain_text: str = ""

"""Data models for AlsoAsked requests, responses and formatted results."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LANGUAGE = "en"
DEFAULT_REGION = "us"
DEFAULT_DEPTH = 2
MIN_DEPTH = 1
MAX_DEPTH = 3


# --- Requests ---


class SearchOverrides(BaseModel):
    """Optional search fields supplied by a caller, ``None`` when not given."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    language: str | None = None
    region: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    depth: int | None = None
    fresh: bool | None = None
    async_: bool | None = Field(default=None, alias="async")
    notify_webhooks: bool | None = Field(default=None, alias="notifyWebhooks")


class SingleTermArgs(SearchOverrides):
    """Arguments of the single-term search tool. Overrides are not defaulted."""

    term: str

    def overrides(self) -> SearchOverrides:
        return SearchOverrides(**self.model_dump(exclude={"term"}))


class SearchRequest(BaseModel):
    """Fully defaulted request body for ``POST /search``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    terms: list[str] = Field(min_length=1)
    language: str = DEFAULT_LANGUAGE
    region: str = DEFAULT_REGION
    latitude: float | None = None
    longitude: float | None = None
    depth: int = Field(default=DEFAULT_DEPTH, ge=MIN_DEPTH, le=MAX_DEPTH)
    fresh: bool = False
    async_: bool = Field(default=False, alias="async")
    notify_webhooks: bool = Field(default=False, alias="notifyWebhooks")

    @classmethod
    def from_overrides(cls, terms: Sequence[str], overrides: SearchOverrides | None = None) -> "SearchRequest":
        """Build a request, filling every falsy override with its default."""
        o = overrides or SearchOverrides()
        return cls(
            terms=list(terms),
            language=o.language or DEFAULT_LANGUAGE,
            region=o.region or DEFAULT_REGION,
            latitude=o.latitude,
            longitude=o.longitude,
            depth=o.depth or DEFAULT_DEPTH,
            fresh=o.fresh or False,
            async_=o.async_ or False,
            notify_webhooks=o.notify_webhooks or False,
        )

    def to_payload(self) -> dict[str, Any]:
        """JSON body with wire names; unset coordinates are left out, never null."""
        return self.model_dump(by_alias=True, exclude_none=True)


# --- API responses ---


class QuestionNode(BaseModel):
    """A PAA question with its nested follow-up questions (``results`` on the wire)."""

    model_config = ConfigDict(extra="ignore")

    question: str
    results: list["QuestionNode"] | None = None

    @property
    def children(self) -> list["QuestionNode"]:
        return self.results or []


class SearchQuery(BaseModel):
    model_config = ConfigDict(extra="ignore")

    term: str
    results: list[QuestionNode] | None = None


class SearchResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: str
    queries: list[SearchQuery] = Field(default_factory=list)
    id: str | int | None = None
    message: str | None = None


class Account(BaseModel):
    """Account metadata returned by ``GET /account``, passed through as-is."""

    model_config = ConfigDict(extra="allow")

    id: str | int
    name: str
    email: str
    credits: int | float
    plan: str


# --- Formatted output ---


class FormattedQuestionNode(BaseModel):
    """Display view of a QuestionNode annotated with its depth level."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    level: int = Field(ge=1)
    question: str
    child_questions: list["FormattedQuestionNode"] = Field(default_factory=list, alias="childQuestions")
    child_count: int = Field(default=0, ge=0, alias="childCount")


class SearchQueryResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search_term: str = Field(alias="searchTerm")
    total_questions: int = Field(ge=0, alias="totalQuestions")
    questions: list[FormattedQuestionNode] = Field(default_factory=list)

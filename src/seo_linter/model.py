# src/seo_linter/model.py
from enum import Enum
from typing import Optional, Dict, Any, Tuple, Union, Literal

import pandas as pd
from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict, Field

from seo_linter.dom.builder import parse_document


class Renderer(str, Enum):
    """The two renderings a page can be linted against."""
    SERVER = "server"
    CLIENT = "client"


class CrawlError(BaseModel):
    """Crawl metadata describing why (part of) a page could not be fetched or rendered."""
    model_config = ConfigDict(frozen=True)

    message: str
    stage: Optional[Renderer] = None
    status_code: Optional[int] = None


class Page(BaseModel):
    """
    A crawled page as handed over by the crawler.

    The server document is always present; the client document is absent
    when client rendering was not performed or failed.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    url: str
    server_document: BeautifulSoup
    client_document: Optional[BeautifulSoup] = None
    crawl_error: Optional[CrawlError] = None

    @classmethod
    def from_html(
            cls,
            url: str,
            server_html: str,
            client_html: Optional[str] = None,
            crawl_error: Optional[CrawlError] = None
    ) -> "Page":
        """Builds a Page straight from raw markup."""
        return cls(
            url=url,
            server_document=parse_document(server_html),
            client_document=parse_document(client_html) if client_html is not None else None,
            crawl_error=crawl_error
        )

    def document_for(self, renderer: Renderer) -> Optional[BeautifulSoup]:
        """Returns the document for the given renderer, or None if that rendering is unavailable."""
        if renderer == Renderer.CLIENT:
            return self.client_document
        return self.server_document


class RuleContext(BaseModel):
    """Read-only context passed to every validator next to the document."""
    model_config = ConfigDict(frozen=True)

    url: str
    renderer: Renderer
    crawl_error: Optional[CrawlError] = None


# --- Rule outcomes ---

class _OutcomeBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def is_error(self) -> bool:
        return False

    @property
    def is_warning(self) -> bool:
        return False


class PassOutcome(_OutcomeBase):
    kind: Literal["pass"] = "pass"

    @property
    def message(self) -> Optional[str]:
        return None

    def to_record(self) -> Dict[str, Any]:
        return {"ok": True}


class WarningOutcome(_OutcomeBase):
    kind: Literal["warning"] = "warning"
    message: str

    @property
    def is_warning(self) -> bool:
        return True

    def to_record(self) -> Dict[str, Any]:
        return {"warning": self.message}


class ErrorOutcome(_OutcomeBase):
    kind: Literal["error"] = "error"
    message: str

    @property
    def is_error(self) -> bool:
        return True

    def to_record(self) -> Dict[str, Any]:
        return {"error": self.message}


RuleOutcome = Union[PassOutcome, WarningOutcome, ErrorOutcome]


# --- Run report ---

class OutcomeRecord(BaseModel):
    """One classified outcome of a (page, rule) pair."""
    model_config = ConfigDict(frozen=True)

    url: str
    rule: str
    outcome: RuleOutcome = Field(discriminator="kind")


class IssueRecord(BaseModel):
    """A warning or an error as listed in the run summary."""
    model_config = ConfigDict(frozen=True)

    url: str
    rule: str
    message: str


class RunReport(BaseModel):
    """
    Finalized aggregate of one linting run.

    `outcomes` lists every non-skipped (page, rule) pair in processing order;
    `warnings` and `errors` are the subsets that need attention.
    """
    model_config = ConfigDict(frozen=True)

    success_count: int = 0
    warning_count: int = 0
    fail_count: int = 0
    outcomes: Tuple[OutcomeRecord, ...] = ()
    warnings: Tuple[IssueRecord, ...] = ()
    errors: Tuple[IssueRecord, ...] = ()

    @property
    def exit_code(self) -> int:
        """Hosts should signal failure when at least one rule failed."""
        return 1 if self.fail_count else 0

    def to_dataframe(self) -> pd.DataFrame:
        """Flattens all outcomes into a DataFrame for export (CSV/Excel)."""
        rows = [
            {
                "URL": record.url,
                "Rule": record.rule,
                "Outcome": record.outcome.kind,
                "Message": record.outcome.message or ""
            }
            for record in self.outcomes
        ]
        return pd.DataFrame(rows, columns=["URL", "Rule", "Outcome", "Message"])

"""Top-level entry point tying extraction, validation and highlighting together."""

import logging
from pathlib import Path

from citecheck.extractor import citation_patterns
from citecheck.extractor.case_name_resolver import CaseNameResolver
from citecheck.extractor.document_parser import DocumentParser
from citecheck.models.citation import Citation, ValidationResult, ValidationSummary
from citecheck.output.highlighter import highlight_citations
from citecheck.verifier.courtlistener import CourtListenerClient
from citecheck.verifier.errors import CourtListenerError
from citecheck.verifier.verifier import SITE_URL, CitationValidator

logger = logging.getLogger(__name__)


class LegalCitationChecker:
    def __init__(
        self,
        client: CourtListenerClient | None = None,
        parser: DocumentParser | None = None,
        context_window: int = 200,
        site_url: str = SITE_URL,
    ):
        self.client = client or CourtListenerClient()
        self.parser = parser or DocumentParser()
        self.validator = CitationValidator(
            self.client, CaseNameResolver(context_window), site_url=site_url
        )
        self.last_result: ValidationResult | None = None

    @classmethod
    def from_settings(cls, settings) -> "LegalCitationChecker":
        return cls(
            client=CourtListenerClient.from_settings(settings),
            context_window=settings.context_window,
            site_url=settings.courtlistener_site_url,
        )

    async def set_api_token(self, token: str) -> None:
        await self.client.set_token(token)

    async def is_api_ready(self) -> bool:
        try:
            return await self.client.health_check()
        except CourtListenerError as e:
            logger.warning("CourtListener not ready: %s", e)
            return False

    async def validate_citations(self, text: str) -> ValidationResult:
        result = await self.validator.validate_text(text)
        self.last_result = result
        return result

    async def validate_single_citation(self, citation: str) -> Citation:
        return await self.validator.validate_single_citation(citation)

    async def get_validation_summary(self, text: str) -> ValidationSummary:
        return ValidationSummary.from_result(await self.validate_citations(text))

    def process_document(self, path: str | Path) -> str:
        """Extract plain text; UnsupportedFormatError/DocumentParsingError propagate."""
        return self.parser.extract_plain_text(path)

    async def process_and_validate_document(self, path: str | Path) -> ValidationResult:
        return await self.validate_citations(self.process_document(path))

    async def fetch_opinion(self, citation: Citation) -> Citation:
        """Return ``citation`` with the opinion's plain text attached."""
        if not citation.cluster_id:
            raise ValueError(f"No cluster id for {citation.original_text!r}")
        opinion = await self.client.get_opinion_text(citation.cluster_id)
        return citation.updated(opinion_text=opinion.plain_text)

    # Offline helpers; no API calls

    def find_citation_ranges(self, text: str) -> list[tuple[int, int]]:
        return citation_patterns.find_citation_ranges(text)

    def find_case_name_ranges(self, text: str) -> list[tuple[int, int]]:
        return citation_patterns.find_case_name_ranges(text)

    def contains_citations(self, text: str) -> bool:
        return citation_patterns.contains_citations(text)

    def extract_citations(self, text: str) -> list[str]:
        return citation_patterns.extract_citations(text)

    def clean_legal_text(self, text: str) -> str:
        return citation_patterns.clean_legal_text(text)

    def highlight_citations(
        self, text: str, citations=None, style: str = "markdown"
    ) -> str:
        return highlight_citations(text, citations, style=style)

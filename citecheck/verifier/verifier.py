"""Verification orchestrator: classify every citation CourtListener recognizes."""

import logging
import time

from citecheck.extractor.case_name_resolver import CaseNameResolver
from citecheck.extractor.citation_patterns import extract_case_names
from citecheck.models.api import LookupResponse
from citecheck.models.citation import (
    CaseNameStatus,
    Citation,
    CitationStatus,
    ValidationResult,
)
from citecheck.verifier import notes
from citecheck.verifier.courtlistener import CourtListenerClient
from citecheck.verifier.errors import CourtListenerError

logger = logging.getLogger(__name__)

SITE_URL = "https://www.courtlistener.com"
ERROR_PREFIX_LENGTH = 100
NOT_FOUND_STATUSES = (400, 404)


class CitationValidator:
    def __init__(
        self,
        client: CourtListenerClient,
        resolver: CaseNameResolver | None = None,
        site_url: str = SITE_URL,
    ):
        self.client = client
        self.resolver = resolver or CaseNameResolver()
        self.site_url = site_url.rstrip("/")

    async def validate_text(self, text: str) -> ValidationResult:
        """Validate every citation in ``text``.

        Never raises for API failures: a failed batch lookup becomes a single
        error citation plus an entry in ``errors``. Citations come back in the
        order the lookup endpoint reported them.
        """
        started = time.perf_counter()

        try:
            responses = await self.client.lookup_citations_in_text(text)
        except CourtListenerError as e:
            logger.warning("Citation lookup failed: %s (%s)", e, type(e).__name__)
            return ValidationResult(
                citations=(_error_citation(text, e),),
                processing_time=time.perf_counter() - started,
                errors=(f"Citation validation error: {e}",),
            )

        if not responses:
            case_names = extract_case_names(text)
            if case_names:
                logger.debug("No citations recognized; case names in text: %s", case_names)
            return ValidationResult(processing_time=time.perf_counter() - started)

        citations = []
        for response in responses:
            citation = await self._classify(response, text)
            logger.debug(
                "%s -> citation %s, case name %s",
                citation.original_text,
                citation.citation_status.value,
                citation.case_name_status.value,
            )
            citations.append(citation)

        result = ValidationResult(
            citations=tuple(citations),
            processing_time=time.perf_counter() - started,
        )
        logger.info(
            "Validated %d citations in %.2fs", len(result.citations), result.processing_time
        )
        return result

    async def validate_single_citation(self, text: str) -> Citation:
        result = await self.validate_text(text)
        if result.citations:
            return result.citations[0]
        return Citation(
            original_text=text,
            citation_status=CitationStatus.ERROR,
            case_name_status=CaseNameStatus.ERROR,
        )

    async def _classify(self, response: LookupResponse, document: str) -> Citation:
        citation = Citation(
            original_text=response.citation,
            normalized_citation=response.normalized_citations[0] if response.normalized_citations else None,
            start_index=response.start_index,
            end_index=response.end_index,
        )

        if response.status == 200 and response.clusters:
            cluster = response.clusters[0]
            return citation.updated(
                normalized_citation=citation.normalized_citation or response.citation,
                case_name=cluster.case_name,
                citation_status=CitationStatus.VALID,
                case_name_status=CaseNameStatus.VALID,
                cluster_id=cluster.string_id,
                court_listener_url=f"{self.site_url}{cluster.absolute_url}",
                notes=notes.valid_citation_notes(response),
            )

        if response.status not in NOT_FOUND_STATUSES:
            return citation.updated(
                citation_status=CitationStatus.INVALID,
                case_name_status=CaseNameStatus.INVALID,
                notes=notes.invalid_citation_notes(response),
            )

        citation = citation.updated(citation_status=CitationStatus.INVALID)
        case_name = self.resolver.resolve(response.citation, document)
        if not case_name:
            return citation.updated(
                case_name_status=CaseNameStatus.INVALID,
                notes=notes.invalid_citation_notes(response),
            )

        citation = citation.updated(case_name=case_name)
        return await self._search_by_name(citation, case_name)

    async def _search_by_name(self, citation: Citation, case_name: str) -> Citation:
        """Fallback for a rejected citation: look the case up by name instead."""
        try:
            hits = await self.client.search_case_name(case_name)
        except CourtListenerError as e:
            logger.warning("Case name search failed for %r: %s", case_name, e)
            return citation.updated(
                case_name_status=CaseNameStatus.INVALID,
                notes=notes.search_failed_notes(case_name, e),
            )

        if not hits:
            return citation.updated(
                case_name_status=CaseNameStatus.INVALID,
                notes=notes.case_name_not_found_notes(case_name),
            )

        first = hits[0]
        return citation.updated(
            case_name_status=CaseNameStatus.PARTIALLY_VALID,
            cluster_id=str(first.cluster_id),
            court_listener_url=f"{self.site_url}{first.absolute_url}",
            notes=notes.case_name_found_notes(case_name, hits),
        )


def _error_citation(text: str, error: Exception) -> Citation:
    prefix = text[:ERROR_PREFIX_LENGTH]
    if len(text) > ERROR_PREFIX_LENGTH:
        prefix += "..."
    return Citation(
        original_text=prefix,
        citation_status=CitationStatus.ERROR,
        case_name_status=CaseNameStatus.ERROR,
        notes=f"Error occurred during citation validation: {error}",
    )

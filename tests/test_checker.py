"""Tests for the LegalCitationChecker facade."""

import pytest
from httpx import Response

from citecheck.checker import LegalCitationChecker
from citecheck.models.citation import Citation, CitationStatus
from conftest import BROWN_CLUSTER, lookup_entry, search_body

BRIEF = "Brown v. Board of Education, 347 U.S. 483 (1954)"


@pytest.fixture
def checker(client):
    return LegalCitationChecker(client=client)


class TestApi:
    async def test_is_api_ready(self, checker, api):
        api.get("/search/").mock(return_value=Response(200, json=search_body()))
        assert await checker.is_api_ready()

    async def test_is_api_ready_false_on_error(self, checker, api):
        api.get("/search/").mock(return_value=Response(401))
        assert not await checker.is_api_ready()

    async def test_set_api_token(self, api):
        route = api.get("/search/").mock(return_value=Response(200, json=search_body()))
        checker = LegalCitationChecker()
        assert not await checker.is_api_ready()
        await checker.set_api_token("fresh")
        assert await checker.is_api_ready()
        assert route.calls.last.request.headers["Authorization"] == "Token fresh"

    async def test_validation_summary(self, checker, api):
        api.post("/citation-lookup/").mock(return_value=Response(200, json=[
            lookup_entry("347 U.S. 483", clusters=[BROWN_CLUSTER], start=29),
        ]))
        summary = await checker.get_validation_summary(BRIEF)
        assert summary.total_citations == 1
        assert summary.valid_citations == 1
        assert checker.last_result.citations[0].cluster_id == "103"

    async def test_process_and_validate_document(self, checker, api, tmp_path):
        path = tmp_path / "brief.txt"
        path.write_text(BRIEF, encoding="utf-8")
        route = api.post("/citation-lookup/").mock(return_value=Response(200, json=[]))
        result = await checker.process_and_validate_document(path)
        assert result.citations == ()
        assert b"347 U.S. 483" in route.calls.last.request.content


class TestFetchOpinion:
    async def test_attaches_text(self, checker, api):
        api.get("/clusters/103/").mock(return_value=Response(200, json={
            "id": 103,
            "case_name": "Brown v. Board of Education",
            "citation": ["347 U.S. 483"],
            "absolute_url": "/opinion/103/brown-v-board-of-education/",
            "plain_text": "We conclude that in the field of public education...",
        }))
        citation = Citation(
            original_text="347 U.S. 483", cluster_id="103", citation_status=CitationStatus.VALID
        )
        fetched = await checker.fetch_opinion(citation)
        assert fetched.opinion_text.startswith("We conclude")
        assert fetched.id == citation.id
        assert citation.opinion_text is None

    async def test_requires_cluster_id(self, checker):
        with pytest.raises(ValueError):
            await checker.fetch_opinion(Citation(original_text="999 F.3d 1"))


class TestOffline:
    def test_helpers(self):
        checker = LegalCitationChecker()
        assert checker.contains_citations(BRIEF)
        assert checker.find_citation_ranges(BRIEF) == [(29, 41)]
        assert checker.find_case_name_ranges(BRIEF) == [(0, 27)]
        assert checker.extract_citations(BRIEF) == ["347 U.S. 483"]
        assert checker.clean_legal_text("FILED   Smith") == "Smith"
        assert checker.highlight_citations(BRIEF) == "Brown v. Board of Education, `347 U.S. 483` (1954)"

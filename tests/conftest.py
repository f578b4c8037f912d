"""Shared fixtures: a CourtListener client with no retry delay and a respx router."""

import pytest
import respx

from citecheck.verifier.courtlistener import BASE_URL, CourtListenerClient

TOKEN = "test-token-0123456789"


@pytest.fixture
def client():
    return CourtListenerClient(api_key=TOKEN, retry_delay=0)


@pytest.fixture
def api():
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as respx_mock:
        yield respx_mock


def lookup_entry(citation, status=200, clusters=(), start=0, end=None, normalized=None, error=""):
    """Build one citation-lookup array element."""
    return {
        "citation": citation,
        "normalized_citations": [normalized or citation],
        "start_index": start,
        "end_index": end if end is not None else start + len(citation),
        "status": status,
        "error_message": error,
        "clusters": list(clusters),
    }


def search_hit(case_name, cluster_id, court="scotus", date_filed="1954-05-17", citations=()):
    return {
        "caseName": case_name,
        "citation": list(citations),
        "absolute_url": f"/opinion/{cluster_id}/{case_name.lower().replace(' ', '-')}/",
        "cluster_id": cluster_id,
        "court": court,
        "dateFiled": date_filed,
    }


def search_body(*hits):
    return {"count": len(hits), "next": None, "previous": None, "results": list(hits)}


BROWN_CLUSTER = {
    "id": 103,
    "case_name": "Brown v. Board of Education",
    "absolute_url": "/opinion/103/brown-v-board-of-education/",
}

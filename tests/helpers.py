"""Builders shared by the test modules."""
from unittest.mock import MagicMock

from toplangs.models import LanguageEdge, RepositoryLanguageRecord


def make_record(*edges, archived=False):
    return RepositoryLanguageRecord(archived, tuple(LanguageEdge(n, s) for n, s in edges))


def make_node(*edges, archived=False):
    """Raw GraphQL repository node, as returned by the API."""
    return {
        "isArchived": archived,
        "languages": {"edges": [{"size": s, "node": {"name": n}} for n, s in edges]},
    }


def wrap(nodes):
    return {"data": {"viewer": {"repositories": {"nodes": nodes}}}}


def make_session(payload=None, status_code=200, reason="OK"):
    response = MagicMock()
    response.ok = 200 <= status_code < 300
    response.status_code = status_code
    response.reason = reason
    response.json.return_value = payload
    session = MagicMock()
    session.post.return_value = response
    return session

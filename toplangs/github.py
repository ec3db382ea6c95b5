"""GitHub GraphQL access: one request for repository language sizes."""

import logging

import requests

from toplangs.errors import ResponseDecodeError, TransportError, UpstreamQueryError
from toplangs.models import LanguageEdge, RepositoryLanguageRecord

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"

# Repositories past the first 100, and languages past the first 20 of a
# repository, are not fetched.
TOP_LANGUAGES_QUERY = """
query ViewerTopLanguages {
  viewer {
    repositories(
      first: 100
      ownerAffiliations: OWNER
      isFork: false
      privacy: PUBLIC
    ) {
      nodes {
        isArchived
        languages(first: 20) {
          edges {
            size
            node {
              name
            }
          }
        }
      }
    }
  }
}
"""


def fetch_repositories(token, session=None, timeout=30):
    """Run the top-languages query and return the raw repository nodes.

    A single attempt is made; any failure is raised to the caller.
    """
    http = session or requests
    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }
    try:
        r = http.post(GITHUB_GRAPHQL_URL, headers=headers,
                      json={"query": TOP_LANGUAGES_QUERY}, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(None, str(e)) from e

    if not r.ok:
        raise TransportError(r.status_code, r.reason)

    try:
        data = r.json()
    except ValueError as e:
        raise ResponseDecodeError(f"GitHub API returned a non-JSON body: {e}") from e

    if not isinstance(data, dict):
        raise ResponseDecodeError("GitHub API returned an unexpected payload")
    if data.get("errors"):
        raise UpstreamQueryError(data["errors"])

    try:
        nodes = data["data"]["viewer"]["repositories"]["nodes"]
    except (KeyError, TypeError) as e:
        raise ResponseDecodeError(f"Missing repositories in response: {e!r}") from e
    if not isinstance(nodes, list):
        raise ResponseDecodeError("Repository nodes are not a list")

    logger.debug("Fetched %d repository nodes", len(nodes))
    return nodes


def decode_repositories(nodes):
    """Convert raw GraphQL repository nodes into language records."""
    records = []
    for i, node in enumerate(nodes):
        try:
            edges = tuple(
                LanguageEdge(name=edge["node"]["name"], size=int(edge["size"]))
                for edge in node["languages"]["edges"]
            )
            records.append(RepositoryLanguageRecord(bool(node["isArchived"]), edges))
        except (KeyError, TypeError, ValueError) as e:
            raise ResponseDecodeError(f"Malformed repository node #{i}: {e!r}") from e
    return records

"""Fold per-repository language breakdowns into per-language byte totals."""


def aggregate(records):
    """Sum language bytes across every non-archived repository.

    Returns an insertion-ordered dict of language name -> bytes. Keys are
    created on first sight, so the order doubles as the tie-break order
    used by the ranker. Zero-byte edges never create a key.
    """
    totals = {}
    for record in records:
        if record.is_archived:
            continue
        for edge in record.edges:
            if edge.size <= 0:
                continue
            totals[edge.name] = totals.get(edge.name, 0) + edge.size
    return totals

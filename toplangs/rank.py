"""Turn language totals into a percentage ranking with an overflow bucket."""

from toplangs.models import RankedEntry

OTHER_LABEL = "Other"


def _percent(part, total):
    return round(part / total * 100, 1)


def rank(totals, top_n):
    """Rank languages by bytes and keep the first ``top_n``.

    Anything past ``top_n`` is folded into a trailing "Other" entry computed
    from the raw byte sum of the overflow set. Ties keep the insertion order
    of ``totals``. Returns an empty list when there are no bytes at all,
    since a percentage of nothing is undefined.
    """
    if top_n < 0:
        raise ValueError(f"top_n must be non-negative, got {top_n}")

    # sorted() stays stable with reverse=True
    entries = sorted(totals.items(), key=lambda kv: kv[1], reverse=True)
    total_bytes = sum(size for _, size in entries)
    if total_bytes == 0:
        return []

    cut = min(top_n, len(entries))
    top, rest = entries[:cut], entries[cut:]

    ranking = [RankedEntry(name, _percent(size, total_bytes)) for name, size in top]
    if rest:
        rest_bytes = sum(size for _, size in rest)
        ranking.append(RankedEntry(OTHER_LABEL, _percent(rest_bytes, total_bytes)))
    return ranking

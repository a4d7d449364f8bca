"""Relations between match chains.

Two chains are compared by the ``full_path`` of each segment:

- siblings: same length, same full paths except possibly the last
  (``/funnel/name`` and ``/funnel/email``)
- ancestor/descendant: the shorter chain is a strict prefix of the longer
  (``/funnel`` is an ancestor of ``/funnel/name``)
"""

from collections.abc import Sequence

from navstack.routing.route import MatchedSegment


def is_sibling(a: Sequence[MatchedSegment], b: Sequence[MatchedSegment]) -> bool:
    """True when *a* and *b* share every segment but the last."""
    if len(a) != len(b):
        return False
    return all(x.full_path == y.full_path for x, y in zip(a[:-1], b[:-1], strict=True))


def is_descendant(a: Sequence[MatchedSegment], b: Sequence[MatchedSegment]) -> bool:
    """True when *b* descends from *a*, i.e. *a* is a strict prefix of *b*."""
    if len(a) >= len(b):
        return False
    return all(x.full_path == y.full_path for x, y in zip(a, b))


def is_related(existing: Sequence[MatchedSegment], target: Sequence[MatchedSegment]) -> bool:
    """True when *existing* is a sibling or an ancestor of *target*.

    This is the relation push and replace validate the stack against.
    """
    return is_descendant(existing, target) or is_sibling(existing, target)

"""Resolves the commit a working checkout is compared against."""

from ..protocols.git_query_protocol import GitQueryProtocol
from .git_query import GitQueryError


class ReferenceResolver:
    """Finds the merge base of a base reference and HEAD."""

    def __init__(self, git_query: GitQueryProtocol):
        self.git_query = git_query

    def merge_base(self, base: str) -> str:
        """Return the merge base of `base` and HEAD. Raises GitQueryError."""
        return self.git_query.run("merge-base", base, "HEAD")

    def resolve(self, base: str) -> str:
        """
        Return the comparison point for `base`.

        Falls back to `base` itself when no merge base can be computed
        (unrelated histories, unknown ref, ...). Never raises.
        """
        try:
            ref = self.merge_base(base)
        except GitQueryError as e:
            print(f"Warning: merge-base failed, diffing against {base} directly: {e}")
            return base
        if not ref:
            print(f"Warning: merge-base returned nothing, diffing against {base} directly")
            return base
        return ref

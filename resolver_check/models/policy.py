"""Allow/deny policy model for resolver verification runs."""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple


@dataclass(frozen=True)
class PolicyConfig:
    """Expected allow/deny outcome for a set of domains.

    Attributes:
        require_allow: Domains that must resolve to a usable address, in the
            order given. None when the flag was absent or its list was empty.
        require_deny: Domains that must be blocked, in the order given.
            None when the flag was absent or its list was empty.

    Invariants:
        - Domain names are compared verbatim (case-sensitive, no trailing dot
          normalization).
        - None and an empty tuple are distinct: an empty tuple means the flag
          was given but every element was blank.
    """

    require_allow: Optional[Tuple[str, ...]] = None
    require_deny: Optional[Tuple[str, ...]] = None

    @property
    def allow_set(self) -> FrozenSet[str]:
        return frozenset(self.require_allow or ())

    @property
    def deny_set(self) -> FrozenSet[str]:
        return frozenset(self.require_deny or ())

    @property
    def is_policy_mode(self) -> bool:
        """Whether results should be graded against this policy.

        Returns:
            bool: True if at least one requirement list is non-empty.
        """
        return bool(self.require_allow) or bool(self.require_deny)

    def domains_to_query(self, plain_domains: List[str]) -> List[str]:
        """Build the ordered query list for a run.

        Required-allow domains come first, then required-deny domains, then
        the plain query-only domains. Duplicates are kept so the result list
        mirrors exactly what was asked for.

        Args:
            plain_domains: Domains given without any requirement flag.

        Returns:
            list[str]: Domains in submission order.
        """
        domains: List[str] = []
        domains.extend(self.require_allow or ())
        domains.extend(self.require_deny or ())
        domains.extend(plain_domains)
        return domains

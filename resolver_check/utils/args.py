"""Command-line argument classification for resolver checks."""

from typing import List, Optional, Tuple

from resolver_check.models.policy import PolicyConfig


REQUIRE_ALLOW_FLAGS = ("--require-allow", "--require_allow")
REQUIRE_DENY_FLAGS = ("--require-deny", "--require_deny")


def split_domains(text: str) -> Optional[List[str]]:
    """Split a comma-separated domain list.

    Elements are trimmed of surrounding whitespace and blank elements are
    dropped.

    Args:
        text: Comma-separated list as passed on the command line.

    Returns:
        list[str] | None: Domains in input order. None for an empty input
        string, an empty list when every element was blank.

    Examples:
        >>> split_domains(" example.com , test.com ")
        ['example.com', 'test.com']
        >>> split_domains(",,,")
        []
        >>> split_domains("") is None
        True
    """
    if text == "":
        return None

    return [part.strip() for part in text.split(",") if part.strip()]


def _as_tuple(domains: Optional[List[str]]) -> Optional[Tuple[str, ...]]:
    return None if domains is None else tuple(domains)


def parse_args(args: List[str]) -> Tuple[PolicyConfig, List[str]]:
    """Classify arguments into a policy and plain query-only domains.

    Recognizes ``--require-allow <csv>`` and ``--require-deny <csv>`` (the
    underscore spellings are accepted too). Each flag consumes the next
    token; a flag in last position is ignored. Repeating a flag replaces the
    earlier list. Every other token is a plain domain.

    Args:
        args: Arguments following the resolver address.

    Returns:
        Tuple[PolicyConfig, list[str]]: (policy, plain_domains)
    """
    require_allow: Optional[List[str]] = None
    require_deny: Optional[List[str]] = None
    plain_domains: List[str] = []

    idx = 0
    while idx < len(args):
        token = args[idx]
        if token in REQUIRE_ALLOW_FLAGS or token in REQUIRE_DENY_FLAGS:
            if idx + 1 < len(args):
                domains = split_domains(args[idx + 1])
                if token in REQUIRE_ALLOW_FLAGS:
                    require_allow = domains
                else:
                    require_deny = domains
                idx += 1
        else:
            plain_domains.append(token)
        idx += 1

    policy = PolicyConfig(
        require_allow=_as_tuple(require_allow),
        require_deny=_as_tuple(require_deny),
    )
    return policy, plain_domains

"""Grading of query results against the allow/deny policy."""

from typing import AbstractSet, List

from resolver_check.models.policy import PolicyConfig
from resolver_check.models.query_result import QueryResult, QueryStatus, Verdict


EXIT_OK = 0
EXIT_POLICY_FAILED = 1


def determine_verdict(
    domain: str,
    status: QueryStatus,
    allow_set: AbstractSet[str],
    deny_set: AbstractSet[str],
) -> Verdict:
    """Grade a single domain's status against the requirements.

    The allow set is consulted first, so a domain listed in both sets is
    graded as required-allow.

    Args:
        domain: Domain exactly as queried.
        status: Classified query status.
        allow_set: Domains that must be ALLOWED.
        deny_set: Domains that must be BLOCKED.

    Returns:
        Verdict: PASS, FAIL, or UNDETERMINED when no requirement names it.
    """
    if domain in allow_set:
        return Verdict.PASS if status == QueryStatus.ALLOWED else Verdict.FAIL

    if domain in deny_set:
        return Verdict.PASS if status == QueryStatus.BLOCKED else Verdict.FAIL

    return Verdict.UNDETERMINED


def validate_results(results: List[QueryResult], policy: PolicyConfig) -> int:
    """Assign a verdict to every result and compute the exit code.

    Mutates ``results`` in place. ERROR statuses fail whichever requirement
    they fall under; UNDETERMINED results never affect the exit code.

    Args:
        results: Query results in submission order.
        policy: Allow/deny requirements.

    Returns:
        int: 1 if any verdict is FAIL, 0 otherwise.
    """
    allow_set = policy.allow_set
    deny_set = policy.deny_set
    failed = False

    for result in results:
        result.verdict = determine_verdict(
            result.domain, result.status, allow_set, deny_set
        )
        if result.verdict == Verdict.FAIL:
            failed = True

    return EXIT_POLICY_FAILED if failed else EXIT_OK

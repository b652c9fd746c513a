"""Main entry point for resolver-check.

Usage:
    resolver-check <dns-server:port> [--require-allow csv] [--require-deny csv] [domain...]

Without requirement flags every domain is queried and reported (exit 0).
With them, each result is also graded PASS/FAIL/UNDETERMINED and the exit
code is 1 if any requirement failed.
"""

import logging
import sys
import time
from typing import List, Optional

from resolver_check.config import QueryConfig
from resolver_check.models.query_result import QueryResult, QueryStatus, Verdict
from resolver_check.services.logger import log_run_summary, setup_logging
from resolver_check.services.policy_validator import EXIT_OK, validate_results
from resolver_check.services.resolver_client import ResolverQueryEngine, check_domains
from resolver_check.services.result_presenter import PresenterError, ResultPresenter
from resolver_check.utils.args import parse_args


logger = logging.getLogger(__name__)

USAGE = (
    "usage: resolver-check <dns-server:53> [--require-allow domains] "
    "[--require-deny domains] [domain...]"
)

# The resolver address is the only mandatory argument
MIN_REQUIRED_ARGS = 1


class UsageError(ValueError):
    """Raised for an invocation that cannot produce any query."""


def _count(results: List[QueryResult], status: QueryStatus) -> int:
    return sum(1 for r in results if r.status == status)


def run(argv: List[str], config: QueryConfig) -> tuple[List[QueryResult], int]:
    """Query every requested domain and grade the results if required.

    Args:
        argv: Command-line arguments without the program name.
        config: Timeout, retry and output settings.

    Returns:
        tuple[list[QueryResult], int]: (results, exit_code)

    Raises:
        UsageError: If arguments are missing, the resolver address is
            unusable, or no domain ends up queued.
    """
    if len(argv) < MIN_REQUIRED_ARGS:
        raise UsageError(USAGE)

    server = argv[0]
    policy, plain_domains = parse_args(argv[1:])
    domains = policy.domains_to_query(plain_domains)

    if not domains:
        raise UsageError("no domains specified")

    try:
        engine = ResolverQueryEngine(server, config)
    except ValueError as e:
        raise UsageError(str(e)) from e

    logger.info(
        f"Querying {len(domains)} domain(s) via {engine.host}:{engine.port} "
        f"(worst case {config.worst_case_seconds:.1f}s per domain)"
    )

    results = check_domains(engine, domains)

    exit_code = EXIT_OK
    if policy.is_policy_mode:
        exit_code = validate_results(results, policy)

    return results, exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:].

    Returns:
        int: Exit code (0 when no requirement failed, 1 on failure or fatal
        error).
    """
    start_time = time.time()
    args = sys.argv[1:] if argv is None else argv

    try:
        config = QueryConfig.from_env()
    except ValueError as e:
        setup_logging()
        logger.error(f"Fatal error: invalid configuration: {e}")
        return 1

    setup_logging(config.verbose)

    try:
        results, exit_code = run(args, config)
    except UsageError as e:
        logger.error(f"Fatal error: {e}")
        return 1

    try:
        output = ResultPresenter.render(results, config.output_format)
    except PresenterError as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    sys.stdout.write(output)
    sys.stdout.flush()

    log_run_summary(
        total=len(results),
        allowed=_count(results, QueryStatus.ALLOWED),
        blocked=_count(results, QueryStatus.BLOCKED),
        errors=_count(results, QueryStatus.ERROR),
        failed=sum(1 for r in results if r.verdict == Verdict.FAIL),
        exit_code=exit_code,
        duration_sec=time.time() - start_time,
    )

    return exit_code


if __name__ == "__main__":
    sys.exit(main())

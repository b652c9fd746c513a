"""Resolver query engine for allow/deny verification.

Assumes the resolver under test signals a block with NXDOMAIN, an empty
answer, or the 0.0.0.0 sentinel, and signals an allow with a routable
address. These semantics are resolver-dependent.
"""

import logging
import time
from typing import Any, Callable, List, Optional

import dns.exception
import dns.flags
import dns.message
import dns.query
import dns.rcode
import dns.rdatatype

from resolver_check.config import QueryConfig
from resolver_check.models.answer_record import RecordKind, answer_records
from resolver_check.models.query_result import QueryResult, QueryStatus
from resolver_check.services.logger import log_query_result
from resolver_check.utils.ip_utils import (
    is_null_address,
    parse_resolver_address,
    resolve_server_host,
)
from resolver_check.utils.retry import call_with_retry


logger = logging.getLogger(__name__)

BLOCK_REASON_NXDOMAIN = "NXDOMAIN"
BLOCK_REASON_NO_ANSWER = "no answer"
BLOCK_REASON_NULL_ONLY = "only null addresses"


def build_query(domain: str) -> dns.message.Message:
    """Build a recursive A-record query for a domain.

    Args:
        domain: Domain name; made absolute if it is not already.

    Returns:
        dns.message.Message: Query message with RD set.

    Raises:
        dns.exception.DNSException: If the name is not a valid DNS name.
    """
    query = dns.message.make_query(domain, dns.rdatatype.A)
    query.flags |= dns.flags.RD
    return query


def classify_response(domain: str, response: dns.message.Message) -> QueryResult:
    """Classify a resolver response as ALLOWED or BLOCKED.

    Rules, first match wins:
    1. NXDOMAIN rcode -> BLOCKED "NXDOMAIN"
    2. Empty answer section -> BLOCKED "no answer"
    3. First A record that is not 0.0.0.0 -> ALLOWED with that address
    4. Otherwise -> BLOCKED "only null addresses"

    Args:
        domain: Domain the response belongs to.
        response: Parsed DNS response.

    Returns:
        QueryResult: Classified result without a verdict.
    """
    if response.rcode() == dns.rcode.NXDOMAIN:
        return QueryResult(domain, QueryStatus.BLOCKED, BLOCK_REASON_NXDOMAIN)

    records = answer_records(response)
    if not records:
        return QueryResult(domain, QueryStatus.BLOCKED, BLOCK_REASON_NO_ANSWER)

    for record in records:
        if record.kind == RecordKind.A and not is_null_address(record.value):
            return QueryResult(domain, QueryStatus.ALLOWED, record.value)

    return QueryResult(domain, QueryStatus.BLOCKED, BLOCK_REASON_NULL_ONLY)


class ResolverQueryEngine:
    """Queries one resolver for A records with bounded retries.

    Timeouts are retried after ``config.retry_delay`` seconds until
    ``config.max_retries`` is exhausted. Any other failure ends the query
    straight away with an ERROR result.

    Example:
        >>> engine = ResolverQueryEngine("1.1.1.1:53")
        >>> engine.query("example.com").status
        <QueryStatus.ALLOWED: 'ALLOWED'>
    """

    def __init__(
        self,
        resolver_address: str,
        config: Optional[QueryConfig] = None,
        exchange: Optional[Callable[..., Any]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the engine.

        Args:
            resolver_address: ``host:port`` of the resolver under test.
            config: Timeout and retry settings (defaults when None).
            exchange: Function sending one query and returning the response,
                with the signature of ``dns.query.udp``.
            sleep: Sleep function used between attempts.

        Raises:
            ValueError: If the resolver address cannot be parsed or its host
                name cannot be resolved.
        """
        self.host, self.port = parse_resolver_address(resolver_address)
        self.server_ip = resolve_server_host(self.host, self.port)
        self.config = config or QueryConfig()
        self._exchange = exchange or dns.query.udp
        self._sleep = sleep

    def query(self, domain: str) -> QueryResult:
        """Query the resolver for one domain's A record.

        Args:
            domain: Domain name to look up.

        Returns:
            QueryResult: ALLOWED, BLOCKED or ERROR result for the domain.
        """
        try:
            request = build_query(domain)
            response = call_with_retry(
                self._exchange,
                request,
                self.server_ip,
                max_retries=self.config.max_retries,
                delay=self.config.retry_delay,
                retry_on=(dns.exception.Timeout,),
                sleep=self._sleep,
                timeout=self.config.request_timeout,
                port=self.port,
            )
        except (dns.exception.DNSException, OSError, ValueError) as e:
            # Timeout after the last attempt lands here too
            detail = str(e) or type(e).__name__
            logger.debug(
                f"Query for {domain} via {self.host}:{self.port} failed: {detail}"
            )
            return QueryResult(domain, QueryStatus.ERROR, detail)

        return classify_response(domain, response)


def check_domains(engine: ResolverQueryEngine, domains: List[str]) -> List[QueryResult]:
    """Query domains one at a time, keeping submission order.

    Args:
        engine: Engine bound to the resolver under test.
        domains: Domains in submission order.

    Returns:
        list[QueryResult]: One result per domain, same order as ``domains``.
    """
    results: List[QueryResult] = []

    for domain in domains:
        started = time.time()
        result = engine.query(domain)
        log_query_result(
            domain=result.domain,
            status=result.status.value,
            detail=result.detail,
            duration_ms=int((time.time() - started) * 1000),
        )
        results.append(result)

    return results

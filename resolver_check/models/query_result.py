"""DNS query result models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class QueryStatus(Enum):
    """Classification of a single A-record query."""

    ALLOWED = "ALLOWED"  # Usable (non-null) A record returned
    BLOCKED = "BLOCKED"  # NXDOMAIN, empty answer, or only 0.0.0.0
    ERROR = "ERROR"  # Transport failure or retries exhausted


class Verdict(Enum):
    """Outcome of grading a query result against the allow/deny policy."""

    PASS = "PASS"
    FAIL = "FAIL"
    UNDETERMINED = "UNDETERMINED"  # Queried but not named by any requirement


@dataclass
class QueryResult:
    """Result of querying one domain against the resolver under test.

    Attributes:
        domain: Domain name exactly as it was submitted.
        status: Classification of the response.
        detail: Resolved address, block reason, or error message.
        verdict: Policy verdict, None until validation runs.
    """

    domain: str
    status: QueryStatus
    detail: str
    verdict: Optional[Verdict] = None

    def to_json(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict.

        The verdict is emitted under its wire name ``testResult`` and only
        when validation has assigned one; plain query mode omits the key.

        Returns:
            dict: JSON-serializable representation with stable key order.
        """
        data: Dict[str, Any] = {
            "domain": self.domain,
            "status": self.status.value,
            "detail": self.detail,
        }
        if self.verdict is not None:
            data["testResult"] = self.verdict.value
        return data

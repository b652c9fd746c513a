"""pytest fixtures for testing."""

import logging

import pytest
import dns.message
import dns.rcode
import dns.rrset

from resolver_check.config import QueryConfig
from resolver_check.services.logger import CustomJsonFormatter


@pytest.fixture
def fast_config():
    """Query config with short timeouts for unit tests."""
    return QueryConfig(request_timeout=0.2, max_retries=1, retry_delay=0.0)


@pytest.fixture
def make_response():
    """Factory building real DNS responses for an A query.

    Usage: make_response("example.com", answers=[("A", "1.2.3.4")],
    rcode=dns.rcode.NOERROR)
    """

    def _make(domain, answers=(), rcode=dns.rcode.NOERROR):
        query = dns.message.make_query(domain, "A")
        response = dns.message.make_response(query)
        response.set_rcode(rcode)
        owner = query.question[0].name
        for rdtype, value in answers:
            response.answer.append(
                dns.rrset.from_text(owner, 300, "IN", rdtype, value)
            )
        return response

    return _make


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop handlers installed by setup_logging() so they never outlive capsys."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, logging.StreamHandler) and isinstance(
            handler.formatter, CustomJsonFormatter
        ):
            root.removeHandler(handler)
    root.setLevel(level)

"""Tagged answer-record model decoupled from dnspython rdata classes."""

from dataclasses import dataclass
from enum import Enum
from typing import List

import dns.message
import dns.rdatatype


class RecordKind(Enum):
    """Kind of a DNS answer record."""

    A = "A"
    AAAA = "AAAA"
    CNAME = "CNAME"
    OTHER = "OTHER"

    @classmethod
    def from_rdtype(cls, rdtype: int) -> "RecordKind":
        """Map a dnspython rdata type to a record kind.

        Args:
            rdtype: Numeric rdata type (e.g. ``dns.rdatatype.A``).

        Returns:
            RecordKind: Matching kind, or OTHER for anything unmodelled.
        """
        try:
            return cls(dns.rdatatype.to_text(rdtype))
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class AnswerRecord:
    """A single answer record: its kind plus the text form of its payload.

    Attributes:
        kind: Record kind.
        value: Presentation-format payload (address for A/AAAA, target name
            for CNAME, raw text otherwise).
    """

    kind: RecordKind
    value: str


def answer_records(response: dns.message.Message) -> List[AnswerRecord]:
    """Flatten a response's answer section into records, in response order.

    Args:
        response: Parsed DNS response.

    Returns:
        list[AnswerRecord]: One entry per rdata across all answer RRsets.
    """
    records: List[AnswerRecord] = []
    for rrset in response.answer:
        kind = RecordKind.from_rdtype(rrset.rdtype)
        for rdata in rrset:
            records.append(AnswerRecord(kind=kind, value=rdata.to_text()))
    return records

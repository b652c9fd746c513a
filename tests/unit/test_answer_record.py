"""Unit tests for tagged answer records."""

import dns.rdatatype

from resolver_check.models.answer_record import AnswerRecord, RecordKind, answer_records


def test_record_kind_from_rdtype():
    assert RecordKind.from_rdtype(dns.rdatatype.A) == RecordKind.A
    assert RecordKind.from_rdtype(dns.rdatatype.AAAA) == RecordKind.AAAA
    assert RecordKind.from_rdtype(dns.rdatatype.CNAME) == RecordKind.CNAME
    assert RecordKind.from_rdtype(dns.rdatatype.TXT) == RecordKind.OTHER


def test_record_kind_unknown_numeric_type():
    assert RecordKind.from_rdtype(65280) == RecordKind.OTHER


def test_answer_records_empty(make_response):
    assert answer_records(make_response("example.com")) == []


def test_answer_records_preserve_response_order(make_response):
    response = make_response(
        "www.example.com",
        answers=[
            ("CNAME", "example.com."),
            ("A", "0.0.0.0"),
            ("A", "93.184.216.34"),
        ],
    )

    records = answer_records(response)

    assert records == [
        AnswerRecord(RecordKind.CNAME, "example.com."),
        AnswerRecord(RecordKind.A, "0.0.0.0"),
        AnswerRecord(RecordKind.A, "93.184.216.34"),
    ]

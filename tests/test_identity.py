"""Deterministic identifiers."""

from synthetic_org.generators.identity import (
    employee_id, enps_response_id, rating_id, review_id, stable_hash,
)


def test_stable_hash_golden_values():
    assert stable_hash("") == "00000000"
    assert stable_hash("a") == "00000061"
    assert stable_hash("ab") == "00000c21"


def test_stable_hash_is_eight_hex_chars():
    for text in ["sarah.chen@acmecorp.com", "x" * 500, "émilie@acmecorp.com"]:
        digest = stable_hash(text)
        assert len(digest) == 8
        int(digest, 16)


def test_stable_hash_wraps_to_32_bits():
    # Long inputs overflow many times over; the result stays a valid digest
    assert stable_hash("z" * 10_000) == stable_hash("z" * 10_000)


def test_id_prefixes():
    emp = employee_id("sarah.chen@acmecorp.com")
    assert emp.startswith("emp_")
    assert rating_id(emp, "rc_2024_annual").startswith("rat_")
    assert review_id(emp, "rc_2024_annual").startswith("rev_")
    assert enps_response_id(emp, "2024-06-15").startswith("enps_")


def test_ids_derive_from_business_keys():
    emp = employee_id("sarah.chen@acmecorp.com")
    assert emp == f"emp_{stable_hash('sarah.chen@acmecorp.com')}"
    assert rating_id(emp, "rc_2023_annual") == f"rat_{stable_hash(emp + '_rc_2023_annual')}"
    assert review_id(emp, "rc_2023_annual") == f"rev_{stable_hash('rev_' + emp + '_rc_2023_annual')}"
    assert enps_response_id(emp, "2024-06-15") == f"enps_{stable_hash('enps_' + emp + '_2024-06-15')}"


def test_rating_and_review_ids_differ_for_same_pair():
    emp = employee_id("robert.kim@acmecorp.com")
    assert rating_id(emp, "rc_2025_q1")[4:] != review_id(emp, "rc_2025_q1")[4:]

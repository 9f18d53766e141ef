"""Deterministic identifiers derived from stable business keys.

``stable_hash`` is the single hash function behind every generated id:

1. Start from h = 0.
2. For each character c: h = h * 31 + ord(c), wrapped to a signed 32-bit int.
3. Take |h|, render it as lower-case hex, left-pad with zeros to 8 characters
   and keep the first 8.

The same text always yields the same 8-character digest, in every process and
on every platform, so the same email always maps to the same employee id.
"""

_MASK_32 = 0xFFFFFFFF


def _to_signed_32(value: int) -> int:
    value &= _MASK_32
    return value - (1 << 32) if value & 0x80000000 else value


def stable_hash(text: str) -> str:
    h = 0
    for char in text:
        h = _to_signed_32(h * 31 + ord(char))
    return format(abs(h), "x").zfill(8)[:8]


def employee_id(email: str) -> str:
    return f"emp_{stable_hash(email)}"


def rating_id(employee_id: str, cycle_id: str) -> str:
    return f"rat_{stable_hash(f'{employee_id}_{cycle_id}')}"


def review_id(employee_id: str, cycle_id: str) -> str:
    return f"rev_{stable_hash(f'rev_{employee_id}_{cycle_id}')}"


def enps_response_id(employee_id: str, survey_date: str) -> str:
    return f"enps_{stable_hash(f'enps_{employee_id}_{survey_date}')}"

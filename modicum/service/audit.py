"""Tamper-evident log of the computations the service answered.

A record keeps the operation name, the operand type, the decimal inputs in
call order and the rendered result.  Records are chained by SHA-256, and
``verify`` does more than check the links: it runs every record through
``modicum.arith`` again and compares results, so a record whose result was
edited and whose hash was recomputed is still caught.

Only the newest ``max_records`` records are kept.  When the oldest one is
evicted its hash becomes the anchor the remaining chain must start from.
"""

from __future__ import annotations

import hashlib
import json
import time
from collections import deque
from dataclasses import asdict, dataclass
from typing import Any, Callable, Deque, Dict, List, Optional

from modicum.arith import (
    add_mod,
    constrain,
    div_mod,
    egcd,
    eq_mod,
    invert,
    mul_mod,
    ne_mod,
    pow_mod,
    sub_mod,
)
from modicum.arith.fixed import resolve_dtype
from modicum.config import AUDIT_MAX_RECORDS
from modicum.errors import ModicumError

GENESIS_HASH = "0" * 64

OPERATIONS: Dict[str, Callable[..., Any]] = {
    "constrain": constrain,
    "egcd": egcd,
    "invert": invert,
    "add_mod": add_mod,
    "sub_mod": sub_mod,
    "mul_mod": mul_mod,
    "div_mod": div_mod,
    "pow_mod": pow_mod,
    "eq_mod": eq_mod,
    "ne_mod": ne_mod,
}


def render_result(value: Any) -> Any:
    """JSON form of an operation result: decimal strings, ``None`` and bools kept."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, tuple):
        return [str(v) for v in value]
    return str(value)


@dataclass
class ComputationRecord:
    seq: int
    timestamp: float
    operation: str
    dtype: str
    inputs: Dict[str, str]  # argument name -> decimal, in call order
    result: Any
    prev_hash: str
    record_hash: str = ""

    def digest(self) -> str:
        body = asdict(self)
        del body["record_hash"]
        payload = json.dumps(body, sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(payload.encode()).hexdigest()

    def replay(self) -> Any:
        """Recompute the result from the stored inputs.

        The modulus stays a plain ``int``; every other input is converted
        into ``dtype`` as the service does.
        """
        fn = OPERATIONS[self.operation]
        dtype = resolve_dtype(self.dtype)
        args = []
        for name, raw in self.inputs.items():
            value = int(raw)
            if name != "modulus" and dtype is not int:
                value = dtype.try_from(value)
            args.append(value)
        return render_result(fn(*args))


class ComputationLog:
    """Bounded, hash-chained list of ``ComputationRecord``."""

    def __init__(self, max_records: int = AUDIT_MAX_RECORDS) -> None:
        if max_records < 1:
            raise ValueError(f"max_records must be positive, got {max_records}")
        self.max_records = max_records
        self._records: Deque[ComputationRecord] = deque()
        self._anchor = GENESIS_HASH
        self._head = GENESIS_HASH
        self._seq = 0

    def __len__(self) -> int:
        return len(self._records)

    def record(self, operation: str, dtype: str, inputs: Dict[str, Any], result: Any) -> ComputationRecord:
        if operation not in OPERATIONS:
            raise KeyError(f"unknown operation {operation!r}")
        rec = ComputationRecord(
            seq=self._seq,
            timestamp=time.time(),
            operation=operation,
            dtype=dtype,
            inputs={name: str(value) for name, value in inputs.items()},
            result=render_result(result),
            prev_hash=self._head,
        )
        rec.record_hash = rec.digest()
        if len(self._records) == self.max_records:
            self._anchor = self._records.popleft().record_hash
        self._records.append(rec)
        self._head = rec.record_hash
        self._seq += 1
        return rec

    def records(self) -> List[Dict[str, Any]]:
        return [asdict(r) for r in self._records]

    def first_invalid(self) -> Optional[int]:
        """Sequence number of the first record that fails a check, or ``None``."""
        prev = self._anchor
        for rec in self._records:
            if rec.prev_hash != prev or rec.record_hash != rec.digest():
                return rec.seq
            try:
                if rec.replay() != rec.result:
                    return rec.seq
            except (ModicumError, KeyError, ValueError, OverflowError):
                return rec.seq
            prev = rec.record_hash
        return None

    def verify(self) -> bool:
        return self.first_invalid() is None

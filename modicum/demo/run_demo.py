#!/usr/bin/env python3
"""modicum service demo.

Usage (with the service running, e.g. ``uvicorn modicum.service.app:app``):
    python -m modicum.demo.run_demo

The script:
1. Checks the service is up and lists the operand types.
2. Runs a handful of modular computations over HTTP.
3. Divides by a non-invertible value (answered with ``null``).
4. Sends a modulus that does not fit the operand type (rejected with 400).
5. Dumps the audit log and has the service re-check it.
"""

from __future__ import annotations

import sys

import httpx

from modicum.config import SERVICE_URL

SERVICE = SERVICE_URL

# (path, body, expected result)
SCENARIOS = [
    ("/egcd", {"a": 102, "b": 38}, {"gcd": "2", "x": "3", "y": "-8"}),
    ("/invert", {"a": 3, "modulus": 11}, {"result": "4"}),
    ("/invert", {"a": 11, "modulus": 11}, {"result": None}),
    ("/add_mod", {"a": 5, "b": 3, "modulus": 7, "dtype": "i8"}, {"result": "1"}),
    ("/pow_mod", {"base": 10, "exponent": 3, "modulus": 11}, {"result": "10"}),
    ("/pow_mod", {"base": -10, "exponent": 3, "modulus": 7, "dtype": "i32"}, {"result": "1"}),
]


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def main() -> None:
    client = httpx.Client(base_url=SERVICE, timeout=15.0)
    failures = 0

    # ---- 1. Health ----
    banner("1) Service health")
    resp = client.get("/health")
    resp.raise_for_status()
    print(f"   dtypes: {', '.join(resp.json()['dtypes'])}")

    # ---- 2. Computations ----
    banner("2) Modular computations")
    for path, body, expected in SCENARIOS:
        resp = client.post(path, json=body)
        resp.raise_for_status()
        got = resp.json()
        mark = "ok" if got == expected else "MISMATCH"
        if got != expected:
            failures += 1
        print(f"   {path:<10} {body} -> {got}  [{mark}]")

    # ---- 3. No inverse ----
    banner("3) Division by a non-invertible value")
    resp = client.post("/div_mod", json={"a": 10, "b": 5, "modulus": 10})
    resp.raise_for_status()
    print(f"   10 / 5 mod 10 -> {resp.json()['result']}")

    # ---- 4. Precondition violation ----
    banner("4) Modulus wider than the operand type")
    resp = client.post("/constrain", json={"value": 5, "modulus": 300, "dtype": "i8"})
    print(f"   HTTP {resp.status_code}: {resp.json()['detail']}")

    # ---- 5. Audit ----
    banner("5) Audit log")
    resp = client.get("/audit")
    resp.raise_for_status()
    for entry in resp.json():
        print(f"   #{entry['seq']} [{entry['operation']}/{entry['dtype']}] {entry['inputs']} -> {entry['result']}")
    resp = client.get("/audit/verify")
    resp.raise_for_status()
    print(f"   Chain and replay valid: {resp.json()['valid']}")

    if failures:
        print(f"\n{failures} scenario(s) did not match")
        sys.exit(1)


if __name__ == "__main__":
    main()

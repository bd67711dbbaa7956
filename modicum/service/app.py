"""Computation service.

Exposes the modular operations over HTTP.  Integers travel as decimal
strings (plain JSON ints are accepted on input) so values wider than a
double survive any client.  ``dtype`` picks the operand type the
computation runs in; see ``modicum.arith.fixed.DTYPES``.

Endpoints:
- GET  /health        – liveness + known dtypes
- POST /constrain     – canonical residue
- POST /egcd          – gcd and Bezout coefficients
- POST /invert        – modular inverse (null if none)
- POST /add_mod, /sub_mod, /mul_mod
- POST /div_mod       – null if the divisor is not invertible
- POST /pow_mod
- POST /eq_mod, /ne_mod
- GET  /audit         – most recent computations (bounded, see config)
- GET  /audit/verify  – check hash links and re-run every record
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

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
from modicum.arith.fixed import DTYPES, resolve_dtype
from modicum.config import AUDIT_ENABLED, AUDIT_MAX_RECORDS, DEFAULT_DTYPE
from modicum.errors import ModicumError
from modicum.service.audit import ComputationLog

IntLike = Union[int, str]

# ------ request models ------


class ConstrainRequest(BaseModel):
    value: IntLike
    modulus: IntLike
    dtype: str = DEFAULT_DTYPE


class EgcdRequest(BaseModel):
    a: IntLike
    b: IntLike
    dtype: str = DEFAULT_DTYPE


class InvertRequest(BaseModel):
    a: IntLike
    modulus: IntLike
    dtype: str = DEFAULT_DTYPE


class BinaryModRequest(BaseModel):
    """Operands for add/sub/mul/div/eq/ne."""

    a: IntLike
    b: IntLike
    modulus: IntLike
    dtype: str = DEFAULT_DTYPE


class PowModRequest(BaseModel):
    base: IntLike
    exponent: IntLike
    modulus: IntLike
    dtype: str = DEFAULT_DTYPE


class ServiceState:
    """Per-app mutable state."""

    def __init__(self, audit_enabled: bool = AUDIT_ENABLED, max_records: int = AUDIT_MAX_RECORDS) -> None:
        self.audit_enabled = audit_enabled
        self.audit = ComputationLog(max_records)


# ------ helpers ------


def _parse_int(raw: IntLike, field: str) -> int:
    try:
        return int(str(raw).strip())
    except ValueError:
        raise HTTPException(400, f"{field}: {raw!r} is not an integer") from None


def _operand(raw: IntLike, field: str, dtype: type) -> Any:
    value = _parse_int(raw, field)
    if dtype is int:
        return value
    try:
        return dtype.try_from(value)
    except OverflowError as exc:
        raise HTTPException(400, f"{field}: {exc}") from exc


def _dtype(name: str) -> type:
    try:
        return resolve_dtype(name)
    except ModicumError as exc:
        raise HTTPException(400, str(exc)) from exc


def _text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def create_app(state: ServiceState | None = None) -> FastAPI:
    """Factory that creates a service app with its own audit log."""
    if state is None:
        state = ServiceState()

    app = FastAPI(title="modicum")

    def run(operation: str, fn: Callable[..., Any], inputs: Dict[str, Any], dtype: str, *args: Any) -> Any:
        try:
            result = fn(*args)
        except ModicumError as exc:
            raise HTTPException(400, str(exc)) from exc
        if state.audit_enabled:
            state.audit.record(operation, dtype, inputs, result)
        return result

    def binary(operation: str, fn: Callable[..., Any], req: BinaryModRequest) -> Any:
        dtype = _dtype(req.dtype)
        a = _operand(req.a, "a", dtype)
        b = _operand(req.b, "b", dtype)
        modulus = _parse_int(req.modulus, "modulus")
        inputs = {"a": a, "b": b, "modulus": modulus}
        return run(operation, fn, inputs, req.dtype, a, b, modulus)

    @app.get("/health")
    async def health():
        return {"status": "ok", "dtypes": sorted(DTYPES)}

    @app.post("/constrain")
    async def constrain_endpoint(req: ConstrainRequest):
        dtype = _dtype(req.dtype)
        value = _operand(req.value, "value", dtype)
        modulus = _parse_int(req.modulus, "modulus")
        result = run("constrain", constrain, {"value": value, "modulus": modulus}, req.dtype, value, modulus)
        return {"result": _text(result)}

    @app.post("/egcd")
    async def egcd_endpoint(req: EgcdRequest):
        dtype = _dtype(req.dtype)
        a = _operand(req.a, "a", dtype)
        b = _operand(req.b, "b", dtype)
        d, x, y = run("egcd", egcd, {"a": a, "b": b}, req.dtype, a, b)
        return {"gcd": str(d), "x": str(x), "y": str(y)}

    @app.post("/invert")
    async def invert_endpoint(req: InvertRequest):
        dtype = _dtype(req.dtype)
        a = _operand(req.a, "a", dtype)
        modulus = _parse_int(req.modulus, "modulus")
        result = run("invert", invert, {"a": a, "modulus": modulus}, req.dtype, a, modulus)
        return {"result": _text(result)}

    @app.post("/add_mod")
    async def add_mod_endpoint(req: BinaryModRequest):
        return {"result": _text(binary("add_mod", add_mod, req))}

    @app.post("/sub_mod")
    async def sub_mod_endpoint(req: BinaryModRequest):
        return {"result": _text(binary("sub_mod", sub_mod, req))}

    @app.post("/mul_mod")
    async def mul_mod_endpoint(req: BinaryModRequest):
        return {"result": _text(binary("mul_mod", mul_mod, req))}

    @app.post("/div_mod")
    async def div_mod_endpoint(req: BinaryModRequest):
        return {"result": _text(binary("div_mod", div_mod, req))}

    @app.post("/pow_mod")
    async def pow_mod_endpoint(req: PowModRequest):
        dtype = _dtype(req.dtype)
        base = _operand(req.base, "base", dtype)
        exponent = _operand(req.exponent, "exponent", dtype)
        modulus = _parse_int(req.modulus, "modulus")
        inputs = {"base": base, "exponent": exponent, "modulus": modulus}
        result = run("pow_mod", pow_mod, inputs, req.dtype, base, exponent, modulus)
        return {"result": _text(result)}

    @app.post("/eq_mod")
    async def eq_mod_endpoint(req: BinaryModRequest):
        return {"result": binary("eq_mod", eq_mod, req)}

    @app.post("/ne_mod")
    async def ne_mod_endpoint(req: BinaryModRequest):
        return {"result": binary("ne_mod", ne_mod, req)}

    @app.get("/audit")
    async def audit_records():
        return state.audit.records()

    @app.get("/audit/verify")
    async def audit_verify():
        bad = state.audit.first_invalid()
        return {"valid": bad is None, "first_invalid": bad, "records": len(state.audit)}

    return app


app = create_app()

"""Tests for the HTTP computation service, using in-process TestClients."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from modicum.service.app import ServiceState, create_app


@pytest.fixture()
def state():
    return ServiceState(audit_enabled=True)


@pytest.fixture()
def client(state):
    return TestClient(create_app(state))


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert "i32" in body["dtypes"]


def test_constrain(client):
    resp = client.post("/constrain", json={"value": -10, "modulus": 7})
    assert resp.status_code == 200
    assert resp.json() == {"result": "4"}


def test_constrain_accepts_string_integers(client):
    big = str(2**200 + 5)
    resp = client.post("/constrain", json={"value": big, "modulus": str(2**200)})
    assert resp.json() == {"result": "5"}


def test_egcd(client):
    resp = client.post("/egcd", json={"a": 102, "b": 38})
    assert resp.json() == {"gcd": "2", "x": "3", "y": "-8"}


def test_invert(client):
    assert client.post("/invert", json={"a": 3, "modulus": 11}).json() == {"result": "4"}
    assert client.post("/invert", json={"a": -3, "modulus": 11, "dtype": "i8"}).json() == {"result": "7"}


def test_invert_none(client):
    resp = client.post("/invert", json={"a": 11, "modulus": 11})
    assert resp.status_code == 200
    assert resp.json() == {"result": None}


def test_binary_ops(client):
    body = {"a": 5, "b": 3, "modulus": 7, "dtype": "i8"}
    assert client.post("/add_mod", json=body).json() == {"result": "1"}
    assert client.post("/sub_mod", json=body).json() == {"result": "2"}
    assert client.post("/mul_mod", json=body).json() == {"result": "1"}
    assert client.post("/div_mod", json=body).json() == {"result": "4"}


def test_div_mod_not_invertible(client):
    resp = client.post("/div_mod", json={"a": 10, "b": 5, "modulus": 10})
    assert resp.status_code == 200
    assert resp.json() == {"result": None}


def test_pow_mod(client):
    resp = client.post("/pow_mod", json={"base": 10, "exponent": 3, "modulus": 11})
    assert resp.json() == {"result": "10"}
    resp = client.post("/pow_mod", json={"base": -10, "exponent": 3, "modulus": 7, "dtype": "i32"})
    assert resp.json() == {"result": "1"}


def test_eq_ne_mod(client):
    body = {"a": -10, "b": 4, "modulus": 7}
    assert client.post("/eq_mod", json=body).json() == {"result": True}
    assert client.post("/ne_mod", json=body).json() == {"result": False}


def test_zero_modulus_rejected(client):
    resp = client.post("/constrain", json={"value": 3, "modulus": 0})
    assert resp.status_code == 400
    assert "positive" in resp.json()["detail"]


def test_modulus_too_wide_for_dtype(client):
    resp = client.post("/constrain", json={"value": 5, "modulus": 300, "dtype": "i8"})
    assert resp.status_code == 400
    assert "I8" in resp.json()["detail"]


def test_operand_out_of_range(client):
    resp = client.post("/add_mod", json={"a": 500, "b": 1, "modulus": 7, "dtype": "i8"})
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("a:")


def test_negative_exponent_rejected(client):
    resp = client.post("/pow_mod", json={"base": 2, "exponent": -1, "modulus": 7})
    assert resp.status_code == 400


def test_unsigned_invert_rejected(client):
    resp = client.post("/invert", json={"a": 3, "modulus": 11, "dtype": "u32"})
    assert resp.status_code == 400
    assert "signed" in resp.json()["detail"]


def test_unknown_dtype(client):
    resp = client.post("/egcd", json={"a": 1, "b": 2, "dtype": "f64"})
    assert resp.status_code == 400


def test_non_integer_string(client):
    resp = client.post("/constrain", json={"value": "ten", "modulus": 7})
    assert resp.status_code == 400


def test_audit_records_computations(client, state):
    client.post("/invert", json={"a": 3, "modulus": 11})
    client.post("/egcd", json={"a": 102, "b": 38, "dtype": "i16"})
    client.post("/constrain", json={"value": 3, "modulus": 0})  # rejected, not recorded

    records = client.get("/audit").json()
    assert [r["operation"] for r in records] == ["invert", "egcd"]
    assert records[0]["inputs"] == {"a": "3", "modulus": "11"}
    assert records[0]["result"] == "4"
    assert records[1]["dtype"] == "i16"
    assert records[1]["result"] == ["2", "3", "-8"]

    verify = client.get("/audit/verify").json()
    assert verify == {"valid": True, "first_invalid": None, "records": 2}
    assert len(state.audit) == 2


def test_audit_verify_replays_results(client, state):
    client.post("/mul_mod", json={"a": 10, "b": 5, "modulus": 7})
    client.post("/pow_mod", json={"base": 10, "exponent": 3, "modulus": 11})
    rec = state.audit._records[1]
    rec.result = "3"
    rec.record_hash = rec.digest()
    state.audit._head = rec.record_hash

    verify = client.get("/audit/verify").json()
    assert verify["valid"] is False
    assert verify["first_invalid"] == 1


def test_audit_bounded():
    state = ServiceState(audit_enabled=True, max_records=2)
    client = TestClient(create_app(state))
    for a in range(5):
        client.post("/add_mod", json={"a": a, "b": 1, "modulus": 5})
    records = client.get("/audit").json()
    assert [r["seq"] for r in records] == [3, 4]
    assert client.get("/audit/verify").json()["valid"] is True


def test_audit_disabled():
    state = ServiceState(audit_enabled=False)
    client = TestClient(create_app(state))
    client.post("/add_mod", json={"a": 1, "b": 2, "modulus": 5})
    assert client.get("/audit").json() == []

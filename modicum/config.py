"""Global configuration for modicum."""

import os

# ---------- Operand type used when a service request omits ``dtype`` ----------
# Any key of ``modicum.arith.fixed.DTYPES``: "int" (unbounded) or i8..u64.
DEFAULT_DTYPE = os.environ.get("MODICUM_DEFAULT_DTYPE", "int")

# ---------- Audit log of service computations ----------
AUDIT_ENABLED = os.environ.get("MODICUM_AUDIT", "1").strip().lower() not in ("0", "false", "no")

# ---------- Service location (used by the demo client) ----------
SERVICE_URL = os.environ.get("MODICUM_SERVICE_URL", "http://localhost:8000")

# Oldest records are evicted once the log holds this many.
AUDIT_MAX_RECORDS = int(os.environ.get("MODICUM_AUDIT_MAX_RECORDS", "10000"))

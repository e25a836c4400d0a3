"""Claims checking (claimed models and observed anomalies as data)."""

from .engine import evaluate_claims
from .load import load_claims, load_claims_text
from .schema import Claims, ClaimsResult

__all__ = ["Claims", "ClaimsResult", "evaluate_claims", "load_claims", "load_claims_text"]

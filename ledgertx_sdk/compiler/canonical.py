"""
Canonical JSON compiler.

A deterministic stand-in for the ledger's binary compiler, for offline work
and tests. Every payload is a JSON object with sorted keys, compact
separators and a top-level ``type`` tag. Bytes are hex encoded and decimals
are written as plain (non-exponent) strings without trailing fractional
zeros, so equal amounts always compile to the same bytes.

This is not the ledger's wire format; transactions compiled here cannot be
submitted to a network.
"""
import enum
import json
import logging
from decimal import Decimal
from typing import Any, Sequence

from pydantic import BaseModel

from ..exceptions import CompilationError
from ..utils import canonical_decimal
from .base import TransactionCompiler

logger = logging.getLogger(__name__)


def _encode(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return {
            field.alias or name: _encode(getattr(obj, name))
            for name, field in type(obj).model_fields.items()
        }
    if obj is None or isinstance(obj, (bool, int, str)):
        return obj
    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj).hex()
    if isinstance(obj, Decimal):
        return canonical_decimal(obj)
    if isinstance(obj, enum.Enum):
        return _encode(obj.value)
    if isinstance(obj, (tuple, list)):
        return [_encode(item) for item in obj]
    raise CompilationError(f"Cannot encode value of type {type(obj).__name__}")


class CanonicalJsonCompiler(TransactionCompiler):
    """Deterministic JSON implementation of TransactionCompiler"""

    def _dump(self, type_tag: str, payload: dict) -> bytes:
        document = dict(payload)
        document["type"] = type_tag
        compiled = json.dumps(
            document, sort_keys=True, separators=(",", ":"), ensure_ascii=True
        ).encode("utf-8")
        logger.debug(f"Compiled {type_tag} ({len(compiled)} bytes)")
        return compiled

    def compile_intent(self, header, manifest) -> bytes:
        return self._dump("TransactionIntent", {
            "header": _encode(header),
            "manifest": _encode(manifest),
        })

    def compile_signed_intent(self, header, manifest, signatures: Sequence) -> bytes:
        return self._dump("SignedTransactionIntent", {
            "intent": {
                "header": _encode(header),
                "manifest": _encode(manifest),
            },
            "intent_signatures": [_encode(signature) for signature in signatures],
        })

    def compile_notarized(self, signed_intent, notary_signature) -> bytes:
        return self._dump("NotarizedTransaction", {
            "signed_intent": _encode(signed_intent),
            "notary_signature": _encode(notary_signature),
        })

"""
Transaction compilers.
"""
from .base import TransactionCompiler
from .canonical import CanonicalJsonCompiler

__all__ = ["TransactionCompiler", "CanonicalJsonCompiler"]

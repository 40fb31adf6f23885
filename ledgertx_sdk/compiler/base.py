"""
Compiler interface used by the transaction builders.

The builders never serialize transactions themselves. They hand the typed
data model to a ``TransactionCompiler`` and hash whatever bytes it returns,
so the wire format is owned entirely by the compiler implementation.
"""
import logging
from abc import ABC, abstractmethod
from typing import Sequence

from ..utils import hash_bytes

logger = logging.getLogger(__name__)


class TransactionCompiler(ABC):
    """
    Abstract base class for transaction compilers.

    Implementations must be deterministic: equal inputs compile to equal
    bytes. Errors raised by an implementation propagate to the caller
    unchanged.
    """

    @abstractmethod
    def compile_intent(self, header, manifest) -> bytes:
        """
        Compile a transaction intent.

        Args:
            header: TransactionHeader
            manifest: TransactionManifest

        Returns:
            Compiled intent bytes
        """
        pass

    @abstractmethod
    def compile_signed_intent(self, header, manifest, signatures: Sequence) -> bytes:
        """
        Compile a signed transaction intent.

        Args:
            header: TransactionHeader
            manifest: TransactionManifest
            signatures: Intent signatures in signing order

        Returns:
            Compiled signed intent bytes
        """
        pass

    @abstractmethod
    def compile_notarized(self, signed_intent, notary_signature) -> bytes:
        """
        Compile a notarized transaction.

        Args:
            signed_intent: SignedTransactionIntent
            notary_signature: Notary Signature

        Returns:
            Compiled notarized transaction bytes
        """
        pass

    def content_hash(self, data: bytes) -> bytes:
        """
        Hash compiled bytes. Defaults to Blake2b with a 32 byte digest.

        Args:
            data: Compiled bytes

        Returns:
            32-byte hash
        """
        return hash_bytes(data)

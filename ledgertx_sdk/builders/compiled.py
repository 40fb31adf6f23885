"""
Compiled transaction artifacts.

Each artifact pairs a typed transaction value with its compiled bytes and
content hash, and keeps a reference to the compiler that produced them so
that the next stage can be compiled the same way.
"""
import logging
from dataclasses import dataclass, field

from ..compiler import TransactionCompiler
from ..signing import resolve_notary_signature, resolve_notary_signature_async
from ..transaction import NotarizedTransaction, SignedTransactionIntent, TransactionIntent

logger = logging.getLogger(__name__)


def _short(digest: bytes) -> str:
    return digest.hex()[:16]


def compile_intent(compiler: TransactionCompiler, intent: TransactionIntent) -> "CompiledTransactionIntent":
    """Compile and hash a transaction intent"""
    compiled = compiler.compile_intent(intent.header, intent.manifest)
    intent_hash = compiler.content_hash(compiled)
    logger.debug(f"Compiled intent: {len(compiled)} bytes, hash {_short(intent_hash)}...")
    return CompiledTransactionIntent(
        intent=intent,
        compiled_intent=compiled,
        intent_hash=intent_hash,
        compiler=compiler,
    )


def compile_signed_intent(
    compiler: TransactionCompiler,
    signed_intent: SignedTransactionIntent,
    intent_hash: bytes,
) -> "CompiledSignedTransactionIntent":
    """Compile and hash a signed transaction intent"""
    intent = signed_intent.intent
    compiled = compiler.compile_signed_intent(
        intent.header, intent.manifest, signed_intent.intent_signatures
    )
    signed_intent_hash = compiler.content_hash(compiled)
    logger.debug(
        f"Compiled signed intent with {len(signed_intent.intent_signatures)} signature(s): "
        f"{len(compiled)} bytes, hash {_short(signed_intent_hash)}..."
    )
    return CompiledSignedTransactionIntent(
        intent_hash=intent_hash,
        signed_intent=signed_intent,
        compiled_signed_intent=compiled,
        signed_intent_hash=signed_intent_hash,
        compiler=compiler,
    )


def compile_notarized_transaction(
    compiler: TransactionCompiler,
    notarized_transaction: NotarizedTransaction,
    intent_hash: bytes,
) -> "CompiledNotarizedTransaction":
    """Compile and hash a notarized transaction"""
    compiled = compiler.compile_notarized(
        notarized_transaction.signed_intent, notarized_transaction.notary_signature
    )
    payload_hash = compiler.content_hash(compiled)
    logger.info(f"Notarized transaction {intent_hash.hex()} ({len(compiled)} bytes)")
    return CompiledNotarizedTransaction(
        intent_hash=intent_hash,
        notarized_transaction=notarized_transaction,
        compiled=compiled,
        notarized_payload_hash=payload_hash,
        compiler=compiler,
    )


@dataclass(frozen=True)
class CompiledTransactionIntent:
    """A compiled transaction intent and its hash"""
    intent: TransactionIntent
    compiled_intent: bytes
    intent_hash: bytes
    compiler: TransactionCompiler = field(repr=False, compare=False)

    @property
    def transaction_id(self) -> bytes:
        return self.intent_hash

    def to_bytes(self) -> bytes:
        return self.compiled_intent

    def intent_hash_hex(self) -> str:
        return self.intent_hash.hex()


@dataclass(frozen=True)
class CompiledSignedTransactionIntent:
    """
    A compiled signed intent, ready to be notarized.

    ``hash_to_notarize`` is what the notary signs; ``transaction_id`` is the
    intent hash, which identifies the transaction on the ledger.
    """
    intent_hash: bytes
    signed_intent: SignedTransactionIntent
    compiled_signed_intent: bytes
    signed_intent_hash: bytes
    compiler: TransactionCompiler = field(repr=False, compare=False)

    @property
    def hash_to_notarize(self) -> bytes:
        return self.signed_intent_hash

    @property
    def transaction_id(self) -> bytes:
        return self.intent_hash

    def to_bytes(self) -> bytes:
        return self.compiled_signed_intent

    def intent_hash_hex(self) -> str:
        return self.intent_hash.hex()

    def _notarize(self, notary_signature) -> "CompiledNotarizedTransaction":
        notarized = NotarizedTransaction(
            signed_intent=self.signed_intent,
            notary_signature=notary_signature,
        )
        return compile_notarized_transaction(self.compiler, notarized, self.intent_hash)

    def compile_notarized(self, source) -> "CompiledNotarizedTransaction":
        """
        Notarize and compile.

        Args:
            source: Notary signature source (private key, Signer, callback or signature)

        Returns:
            CompiledNotarizedTransaction

        Raises:
            SignatureSourceError: If the source is unusable or asynchronous
        """
        return self._notarize(resolve_notary_signature(source, self.hash_to_notarize))

    async def compile_notarized_async(self, source) -> "CompiledNotarizedTransaction":
        """Async variant of compile_notarized; awaits asynchronous sources"""
        return self._notarize(await resolve_notary_signature_async(source, self.hash_to_notarize))


@dataclass(frozen=True)
class CompiledNotarizedTransaction:
    """A compiled notarized transaction, ready for submission"""
    intent_hash: bytes
    notarized_transaction: NotarizedTransaction
    compiled: bytes
    notarized_payload_hash: bytes
    compiler: TransactionCompiler = field(repr=False, compare=False)

    @property
    def transaction_id(self) -> bytes:
        return self.intent_hash

    def to_bytes(self) -> bytes:
        return self.compiled

    def to_hex(self) -> str:
        return self.compiled.hex()

    def intent_hash_hex(self) -> str:
        return self.intent_hash.hex()

    def transaction_id_hex(self) -> str:
        return self.transaction_id.hex()

    def notarized_payload_hash_hex(self) -> str:
        return self.notarized_payload_hash.hex()

"""
Staged transaction builder.

    TransactionBuilder(compiler)
        .header(header)            -> TransactionBuilderManifestStep
        .manifest(manifest)        -> TransactionBuilderIntentSignaturesStep
        .sign(source)              -> TransactionBuilderIntentSignaturesStep (0..N times)
        .notarize(source)          -> NotarizedTransaction

Every stage is immutable. ``sign`` returns a new stage holding one more
signature and leaves the stage it was called on untouched, so a partially
signed stage can be branched or reused.
"""
import logging
from typing import Optional, Tuple, Union

from ..compiler import TransactionCompiler
from ..config import DEFAULT_MAX_EPOCH_WINDOW
from ..signing import (
    public_key_of,
    resolve_notary_signature,
    resolve_notary_signature_async,
    resolve_signature,
    resolve_signature_async,
)
from ..transaction import (
    NotarizedTransaction,
    SignedTransactionIntent,
    TransactionHeader,
    TransactionIntent,
    TransactionManifest,
    check_epoch_window,
)
from .compiled import (
    CompiledNotarizedTransaction,
    CompiledSignedTransactionIntent,
    CompiledTransactionIntent,
    compile_intent,
    compile_signed_intent,
)

logger = logging.getLogger(__name__)


def _check_compiler(compiler) -> TransactionCompiler:
    if not isinstance(compiler, TransactionCompiler):
        raise TypeError(f"Expected a TransactionCompiler, got {type(compiler).__name__}")
    return compiler


class TransactionBuilder:
    """
    Entry point of the staged builder.

    Args:
        compiler: Compiler used for every compile and hash step
        max_epoch_window: Largest ``end - start`` epoch window accepted by ``header``
    """

    def __init__(self, compiler: TransactionCompiler, max_epoch_window: Optional[int] = DEFAULT_MAX_EPOCH_WINDOW):
        self._compiler = _check_compiler(compiler)
        self._max_epoch_window = max_epoch_window

    def header(self, header: TransactionHeader) -> "TransactionBuilderManifestStep":
        """
        Set the transaction header.

        Raises:
            TypeError: If header is not a TransactionHeader
            EpochRangeError: If the header's epoch window is larger than max_epoch_window
        """
        if not isinstance(header, TransactionHeader):
            raise TypeError(f"Expected a TransactionHeader, got {type(header).__name__}")
        check_epoch_window(
            header.start_epoch_inclusive, header.end_epoch_exclusive, self._max_epoch_window
        )
        return TransactionBuilderManifestStep(self._compiler, header)

    @classmethod
    def from_intent(
        cls,
        compiler: TransactionCompiler,
        intent: Union[TransactionIntent, SignedTransactionIntent],
    ) -> "TransactionBuilderIntentSignaturesStep":
        """
        Resume building from an existing intent or signed intent.

        Signatures already present on a signed intent are kept in order.
        """
        compiler = _check_compiler(compiler)
        if isinstance(intent, SignedTransactionIntent):
            return TransactionBuilderIntentSignaturesStep(
                compiler, intent.intent, intent.intent_signatures
            )
        if isinstance(intent, TransactionIntent):
            return TransactionBuilderIntentSignaturesStep(compiler, intent)
        raise TypeError(f"Invalid type passed in for transaction intent: {type(intent).__name__}")


class TransactionBuilderManifestStep:
    """Builder stage waiting for the manifest"""

    def __init__(self, compiler: TransactionCompiler, header: TransactionHeader):
        self._compiler = compiler
        self._header = header

    @property
    def header(self) -> TransactionHeader:
        return self._header

    def manifest(self, manifest: TransactionManifest) -> "TransactionBuilderIntentSignaturesStep":
        if not isinstance(manifest, TransactionManifest):
            raise TypeError(f"Expected a TransactionManifest, got {type(manifest).__name__}")
        intent = TransactionIntent(header=self._header, manifest=manifest)
        return TransactionBuilderIntentSignaturesStep(self._compiler, intent)


class TransactionBuilderIntentSignaturesStep:
    """Builder stage collecting intent signatures before notarization"""

    def __init__(
        self,
        compiler: TransactionCompiler,
        intent: TransactionIntent,
        intent_signatures: Tuple = (),
    ):
        self._compiler = compiler
        self._signed_intent = SignedTransactionIntent(
            intent=intent, intent_signatures=tuple(intent_signatures)
        )

    @property
    def intent(self) -> TransactionIntent:
        return self._signed_intent.intent

    @property
    def intent_signatures(self) -> Tuple:
        return self._signed_intent.intent_signatures

    @property
    def signed_intent(self) -> SignedTransactionIntent:
        return self._signed_intent

    def compile_intent(self) -> CompiledTransactionIntent:
        """Compile the intent; its hash is what intent signers sign"""
        return compile_intent(self._compiler, self.intent)

    def compile_signed_intent(self) -> CompiledSignedTransactionIntent:
        """Compile the intent with the signatures collected so far"""
        intent_hash = self.compile_intent().intent_hash
        return compile_signed_intent(self._compiler, self._signed_intent, intent_hash)

    # Direct-build accessors; these do not advance the builder

    def build_transaction_intent(self) -> CompiledTransactionIntent:
        return self.compile_intent()

    def build_signed_transaction_intent(self) -> CompiledSignedTransactionIntent:
        return self.compile_signed_intent()

    def compile_notarized(self, source) -> CompiledNotarizedTransaction:
        """Notarize and return the compiled notarized transaction"""
        return self.compile_signed_intent().compile_notarized(source)

    async def compile_notarized_async(self, source) -> CompiledNotarizedTransaction:
        return await self.compile_signed_intent().compile_notarized_async(source)

    def _with_signature(self, signature) -> "TransactionBuilderIntentSignaturesStep":
        return TransactionBuilderIntentSignaturesStep(
            self._compiler, self.intent, self.intent_signatures + (signature,)
        )

    def sign(self, source) -> "TransactionBuilderIntentSignaturesStep":
        """
        Sign the intent hash.

        Args:
            source: Signature source (private key, Signer, callback or precomputed signature)

        Returns:
            A new stage with the signature appended; this stage is unchanged

        Raises:
            SignatureSourceError: If the source is unusable, asynchronous or returns the wrong type
        """
        intent_hash = self.compile_intent().intent_hash
        return self._with_signature(resolve_signature(source, intent_hash))

    async def sign_async(self, source) -> "TransactionBuilderIntentSignaturesStep":
        """Async variant of sign; awaits asynchronous sources"""
        intent_hash = self.compile_intent().intent_hash
        return self._with_signature(await resolve_signature_async(source, intent_hash))

    def _check_notary(self, source) -> None:
        notary_key = public_key_of(source)
        if notary_key is not None and notary_key != self.intent.header.notary_public_key:
            logger.warning(
                f"Notary key {notary_key.hex()} does not match the header's "
                f"notary_public_key {self.intent.header.notary_public_key.hex()}"
            )

    def _notarized(self, notary_signature) -> NotarizedTransaction:
        notarized = NotarizedTransaction(
            signed_intent=self._signed_intent,
            notary_signature=notary_signature,
        )
        logger.info(f"Notarized transaction with {len(self.intent_signatures)} intent signature(s)")
        return notarized

    def notarize(self, source) -> NotarizedTransaction:
        """
        Sign the signed intent hash as notary.

        Args:
            source: Notary signature source

        Returns:
            NotarizedTransaction

        Raises:
            SignatureSourceError: If the source is unusable, asynchronous or returns the wrong type
        """
        self._check_notary(source)
        signed_intent_hash = self.compile_signed_intent().signed_intent_hash
        return self._notarized(resolve_notary_signature(source, signed_intent_hash))

    async def notarize_async(self, source) -> NotarizedTransaction:
        """Async variant of notarize; awaits asynchronous sources"""
        self._check_notary(source)
        signed_intent_hash = self.compile_signed_intent().signed_intent_hash
        return self._notarized(await resolve_notary_signature_async(source, signed_intent_hash))

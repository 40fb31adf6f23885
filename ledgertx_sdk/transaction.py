"""
Transaction data model: header, manifest and the three signing layers.

    TransactionIntent = header + manifest
    SignedTransactionIntent = intent + intent signatures (in signing order)
    NotarizedTransaction = signed intent + notary signature
"""
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictBytes, StrictInt, model_validator

from .config import DEFAULT_COST_UNIT_LIMIT, DEFAULT_MAX_EPOCH_WINDOW
from .crypto import PublicKey, Signature, SignatureWithPublicKey
from .exceptions import EpochRangeError
from .instructions import Instruction

U8Int = Annotated[StrictInt, Field(ge=0, le=2 ** 8 - 1)]
U16Int = Annotated[StrictInt, Field(ge=0, le=2 ** 16 - 1)]
U32Int = Annotated[StrictInt, Field(ge=0, le=2 ** 32 - 1)]
U64Int = Annotated[StrictInt, Field(ge=0, le=2 ** 64 - 1)]


class TransactionHeader(BaseModel):
    """Transaction header; validity window is [start_epoch_inclusive, end_epoch_exclusive)"""
    model_config = ConfigDict(frozen=True)

    version: U8Int
    network_id: U8Int
    start_epoch_inclusive: U64Int
    end_epoch_exclusive: U64Int
    nonce: U32Int
    notary_public_key: PublicKey
    notary_is_signatory: StrictBool
    cost_unit_limit: U32Int
    tip_percentage: U16Int

    @model_validator(mode="after")
    def _check_epochs(self):
        if self.start_epoch_inclusive >= self.end_epoch_exclusive:
            raise ValueError(
                f"start_epoch_inclusive ({self.start_epoch_inclusive}) must be lower than "
                f"end_epoch_exclusive ({self.end_epoch_exclusive})"
            )
        return self

    @property
    def epoch_window(self) -> int:
        return self.end_epoch_exclusive - self.start_epoch_inclusive

    @classmethod
    def new(
        cls,
        network_id: int,
        start_epoch_inclusive: int,
        end_epoch_exclusive: int,
        nonce: int,
        notary_public_key,
        notary_is_signatory: bool = False,
        cost_unit_limit: int = DEFAULT_COST_UNIT_LIMIT,
        tip_percentage: int = 0,
        version: int = 1,
        max_epoch_window: Optional[int] = DEFAULT_MAX_EPOCH_WINDOW,
    ) -> "TransactionHeader":
        """
        Create a header and check its epoch window.

        Args:
            network_id: Network the transaction is valid on
            start_epoch_inclusive: First epoch the transaction is valid in
            end_epoch_exclusive: First epoch the transaction is no longer valid in
            nonce: u32 nonce
            notary_public_key: Public key model of the notary
            notary_is_signatory: Whether the notary signature also counts as an intent signature
            cost_unit_limit: Maximum cost units the transaction may consume
            tip_percentage: Validator tip percentage
            version: Header version
            max_epoch_window: Largest allowed ``end - start``; None disables the check

        Returns:
            The validated header

        Raises:
            EpochRangeError: If the epochs are out of order or the window is too large
            ValueError: If any other field is invalid
        """
        check_epoch_window(start_epoch_inclusive, end_epoch_exclusive, max_epoch_window)
        return cls(
            version=version,
            network_id=network_id,
            start_epoch_inclusive=start_epoch_inclusive,
            end_epoch_exclusive=end_epoch_exclusive,
            nonce=nonce,
            notary_public_key=notary_public_key,
            notary_is_signatory=notary_is_signatory,
            cost_unit_limit=cost_unit_limit,
            tip_percentage=tip_percentage,
        )


def check_epoch_window(start_epoch: int, end_epoch: int, max_epoch_window: Optional[int]) -> None:
    """
    Raise EpochRangeError unless start < end and end - start <= max_epoch_window.
    """
    for name, epoch in (("start_epoch_inclusive", start_epoch), ("end_epoch_exclusive", end_epoch)):
        if isinstance(epoch, bool) or not isinstance(epoch, int):
            raise TypeError(f"{name} must be an int, got {type(epoch).__name__}")
    if start_epoch >= end_epoch:
        raise EpochRangeError(
            f"Start epoch ({start_epoch}) must be lower than end epoch ({end_epoch})",
            start_epoch=start_epoch,
            end_epoch=end_epoch,
        )
    if max_epoch_window is not None and end_epoch - start_epoch > max_epoch_window:
        raise EpochRangeError(
            f"Epoch window of {end_epoch - start_epoch} exceeds the maximum of {max_epoch_window}",
            start_epoch=start_epoch,
            end_epoch=end_epoch,
        )


class TransactionManifest(BaseModel):
    """Ordered instructions plus the blobs they reference"""
    model_config = ConfigDict(frozen=True)

    instructions: tuple[Instruction, ...] = ()
    blobs: tuple[StrictBytes, ...] = ()


class TransactionIntent(BaseModel):
    model_config = ConfigDict(frozen=True)

    header: TransactionHeader
    manifest: TransactionManifest


class SignedTransactionIntent(BaseModel):
    """Intent plus intent signatures, kept in the order they were added"""
    model_config = ConfigDict(frozen=True)

    intent: TransactionIntent
    intent_signatures: tuple[SignatureWithPublicKey, ...] = ()

    def with_signature(self, signature) -> "SignedTransactionIntent":
        """Return a copy with signature appended; self is unchanged"""
        return SignedTransactionIntent(
            intent=self.intent,
            intent_signatures=self.intent_signatures + (signature,)
        )


class NotarizedTransaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    signed_intent: SignedTransactionIntent
    notary_signature: Signature

"""
Convenience builders for common single-signer transactions.
"""
import logging
from typing import Iterable, List, Optional

from ..compiler import TransactionCompiler
from ..config import (
    DEFAULT_COST_UNIT_LIMIT,
    DEFAULT_EXPIRES_AFTER_EPOCHS,
    DEFAULT_LOCK_FEE,
    DEFAULT_MAX_EPOCH_WINDOW,
    DEFAULT_TIP_PERCENTAGE,
    FAUCET_AMOUNT,
    FAUCET_EXPIRES_AFTER_EPOCHS,
    FAUCET_LOCK_FEE,
    TRANSACTION_VERSION,
    KnownAddresses,
    NetworkConfig,
)
from ..crypto import PUBLIC_KEY_TYPES, Ed25519Key
from ..exceptions import EpochRangeError
from ..transaction import TransactionHeader
from ..utils import Amount, random_nonce, resolve_address, resolve_decimal
from ..values import decimal
from .compiled import CompiledNotarizedTransaction, CompiledSignedTransactionIntent
from .manifest import ManifestBuilder
from .transaction import TransactionBuilder, TransactionBuilderIntentSignaturesStep
from .transfers import DEPOSIT_METHODS, FungibleTransfer, build_transfer_manifest

logger = logging.getLogger(__name__)


def _check_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


class SimpleTransactionBuilder:
    """
    Builds fungible transfer transactions signed by a single key.

    The signer is also the notary, so the header is built with
    ``notary_is_signatory=True`` and no separate intent signature is needed::

        compiled = (
            SimpleTransactionBuilder(compiler, 242, current_epoch, account, key.public_key())
            .transfer_fungible(other_account, xrd, 10)
            .compile_intent()
        )
        notarized = compiled.compile_notarized(key)

    Args:
        compiler: Compiler used for every compile and hash step
        network_id: Network the transaction is valid on
        valid_from_epoch: First epoch the transaction is valid in
        from_account: Account the transfers come from; also pays the fee
        signer_public_key: Public key model of the signer/notary
        nonce: Header nonce; a random u32 when not given
    """

    def __init__(
        self,
        compiler: TransactionCompiler,
        network_id: int,
        valid_from_epoch: int,
        from_account: str,
        signer_public_key,
        nonce: Optional[int] = None,
    ):
        if not isinstance(compiler, TransactionCompiler):
            raise TypeError(f"Expected a TransactionCompiler, got {type(compiler).__name__}")
        if not isinstance(signer_public_key, PUBLIC_KEY_TYPES):
            raise TypeError(f"Expected a public key model, got {type(signer_public_key).__name__}")

        self._compiler = compiler
        self._network_id = _check_int("network_id", network_id)
        self._valid_from_epoch = _check_int("valid_from_epoch", valid_from_epoch)
        self._from_account = resolve_address(from_account)
        self._signer_public_key = signer_public_key

        self._version = TRANSACTION_VERSION
        self._nonce = random_nonce() if nonce is None else _check_int("nonce", nonce)
        self._expires_after_epochs = DEFAULT_EXPIRES_AFTER_EPOCHS
        self._cost_unit_limit = DEFAULT_COST_UNIT_LIMIT
        self._tip_percentage = DEFAULT_TIP_PERCENTAGE
        self._locked_fee = resolve_decimal(DEFAULT_LOCK_FEE)
        self._fee_payer = self._from_account
        self._deposit_method = "deposit"
        self._transfers: List[FungibleTransfer] = []

    def version(self, version: int) -> "SimpleTransactionBuilder":
        self._version = _check_int("version", version)
        return self

    def nonce(self, nonce: int) -> "SimpleTransactionBuilder":
        self._nonce = _check_int("nonce", nonce)
        return self

    def permanently_reject_after_epochs(self, epochs: int) -> "SimpleTransactionBuilder":
        """
        Number of epochs after which the transaction is permanently rejected.

        Raises:
            EpochRangeError: If epochs is not between 1 and the maximum epoch window
        """
        _check_int("epochs", epochs)
        if not 1 <= epochs <= DEFAULT_MAX_EPOCH_WINDOW:
            raise EpochRangeError(
                f"Expiry must be between 1 and {DEFAULT_MAX_EPOCH_WINDOW} epochs, got {epochs}"
            )
        self._expires_after_epochs = epochs
        return self

    def cost_unit_limit(self, cost_unit_limit: int) -> "SimpleTransactionBuilder":
        self._cost_unit_limit = _check_int("cost_unit_limit", cost_unit_limit)
        return self

    def tip_percentage(self, tip_percentage: int) -> "SimpleTransactionBuilder":
        self._tip_percentage = _check_int("tip_percentage", tip_percentage)
        return self

    def locked_fee(self, amount: Amount) -> "SimpleTransactionBuilder":
        self._locked_fee = resolve_decimal(amount)
        return self

    def fee_payer(self, fee_payer: str) -> "SimpleTransactionBuilder":
        self._fee_payer = resolve_address(fee_payer)
        return self

    def deposit_method(self, method: str) -> "SimpleTransactionBuilder":
        if method not in DEPOSIT_METHODS:
            raise ValueError(
                f"Unknown deposit method '{method}'. Expected one of: {', '.join(DEPOSIT_METHODS)}"
            )
        self._deposit_method = method
        return self

    def transfer_fungible(
        self,
        to_account: str,
        resource_address: str,
        amount: Amount,
        from_account: Optional[str] = None,
    ) -> "SimpleTransactionBuilder":
        """
        Add a fungible transfer.

        Args:
            to_account: Receiving account
            resource_address: Resource to transfer
            amount: Amount to transfer
            from_account: Sending account, defaults to the builder's from_account
        """
        self._transfers.append(FungibleTransfer(
            from_account=self._from_account if from_account is None else from_account,
            to_account=to_account,
            resource_address=resource_address,
            amount=amount,
        ))
        return self

    def _header(self) -> TransactionHeader:
        return TransactionHeader.new(
            network_id=self._network_id,
            start_epoch_inclusive=self._valid_from_epoch,
            end_epoch_exclusive=self._valid_from_epoch + self._expires_after_epochs,
            nonce=self._nonce,
            notary_public_key=self._signer_public_key,
            notary_is_signatory=True,
            cost_unit_limit=self._cost_unit_limit,
            tip_percentage=self._tip_percentage,
            version=self._version,
        )

    def _step(self) -> TransactionBuilderIntentSignaturesStep:
        manifest = build_transfer_manifest(
            self._transfers,
            fee_payer=self._fee_payer,
            fee_amount=self._locked_fee,
            deposit_method=self._deposit_method,
        )
        return TransactionBuilder(self._compiler).header(self._header()).manifest(manifest)

    def compile_intent(self) -> CompiledSignedTransactionIntent:
        """Compile the transaction as a signed intent without intent signatures"""
        return self._step().compile_signed_intent()

    def compile_intent_with_signatures(self, sources: Iterable) -> CompiledSignedTransactionIntent:
        """
        Compile the transaction and sign the intent hash with each source in order.

        Args:
            sources: Signature sources for additional intent signatures

        Returns:
            CompiledSignedTransactionIntent ready to be notarized
        """
        step = self._step()
        for source in sources:
            step = step.sign(source)
        return step.compile_signed_intent()

    async def compile_intent_with_signatures_async(self, sources: Iterable) -> CompiledSignedTransactionIntent:
        """Async variant of compile_intent_with_signatures"""
        step = self._step()
        for source in sources:
            step = await step.sign_async(source)
        return step.compile_signed_intent()


def free_xrd_from_faucet(
    compiler: TransactionCompiler,
    to_account: str,
    network_id: int,
    valid_from_epoch: int,
    known_addresses: Optional[KnownAddresses] = None,
) -> CompiledNotarizedTransaction:
    """
    Build a notarized transaction that takes free XRD from the network faucet.

    The faucet pays the fee, so the transaction needs no account signature; it
    is notarized by a freshly generated Ed25519 key.

    Args:
        compiler: Compiler used for every compile and hash step
        to_account: Account that receives the XRD
        network_id: Network the transaction is valid on
        valid_from_epoch: First epoch the transaction is valid in
        known_addresses: Faucet and XRD addresses; looked up in NetworkConfig when not given

    Returns:
        CompiledNotarizedTransaction

    Raises:
        ValueError: If the network is unknown to NetworkConfig
    """
    if known_addresses is None:
        known_addresses = NetworkConfig.get_known_addresses(network_id)
    faucet = known_addresses.faucet_component_address
    xrd = known_addresses.xrd_resource_address
    to_account = resolve_address(to_account)

    manifest = (
        ManifestBuilder()
        .call_method(faucet, "lock_fee", [decimal(FAUCET_LOCK_FEE)])
        .call_method(faucet, "free", [])
        .take_from_worktop_by_amount(
            xrd,
            FAUCET_AMOUNT,
            lambda builder, bucket: builder.call_method(to_account, "deposit", [bucket]),
        )
        .build()
    )

    notary = Ed25519Key.generate()
    header = TransactionHeader.new(
        network_id=network_id,
        start_epoch_inclusive=valid_from_epoch,
        end_epoch_exclusive=valid_from_epoch + FAUCET_EXPIRES_AFTER_EPOCHS,
        nonce=random_nonce(),
        notary_public_key=notary.public_key(),
        notary_is_signatory=False,
    )
    logger.debug(f"Building faucet transaction for {to_account} on network {network_id}")
    return (
        TransactionBuilder(compiler)
        .header(header)
        .manifest(manifest)
        .compile_notarized(notary)
    )

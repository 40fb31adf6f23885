"""
Fungible transfer actions and their aggregation into a manifest.

Transfers are collapsed per (account, resource) before any instruction is
emitted, so ten transfers of the same resource out of one account become a
single withdrawal::

    manifest = build_transfer_manifest(
        [
            FungibleTransfer(alice, bob, xrd, 10),
            FungibleTransfer(alice, carol, xrd, "2.5"),
        ],
        fee_payer=alice,
    )
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, NamedTuple, Optional, Tuple

from ..config import DEFAULT_LOCK_FEE
from ..transaction import TransactionManifest
from ..utils import Amount, resolve_address, resolve_decimal
from ..values import address, decimal
from .manifest import ManifestBuilder

logger = logging.getLogger(__name__)

DEPOSIT_METHODS = ("deposit", "try_deposit_or_abort")

AccountResource = Tuple[str, str]


@dataclass(frozen=True)
class FungibleTransfer:
    """Move ``amount`` of a fungible resource from one account to another"""
    from_account: str
    to_account: str
    resource_address: str
    amount: Decimal

    def __post_init__(self):
        for name in ("from_account", "to_account", "resource_address"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string, got {type(value).__name__}")
            resolve_address(value)
        amount = resolve_decimal(self.amount)
        if amount < 0:
            raise ValueError(f"Transfer amount must not be negative, got {amount}")
        object.__setattr__(self, "amount", amount)


class TransferAggregation(NamedTuple):
    """Summed withdrawals and deposits, in first-seen order"""
    withdraws: Dict[AccountResource, Decimal]
    deposits: Dict[AccountResource, Decimal]


def aggregate_transfers(actions: Iterable[FungibleTransfer]) -> TransferAggregation:
    """
    Sum transfer amounts per (from_account, resource) and (to_account, resource).

    Args:
        actions: Transfers to aggregate

    Returns:
        TransferAggregation whose dicts keep the order in which each key was first seen

    Raises:
        TypeError: If an action is not a FungibleTransfer
    """
    withdraws: Dict[AccountResource, Decimal] = {}
    deposits: Dict[AccountResource, Decimal] = {}

    for action in actions:
        if not isinstance(action, FungibleTransfer):
            raise TypeError(f"Expected a FungibleTransfer, got {type(action).__name__}")
        withdraw_key = (action.from_account, action.resource_address)
        deposit_key = (action.to_account, action.resource_address)
        withdraws[withdraw_key] = withdraws.get(withdraw_key, Decimal(0)) + action.amount
        deposits[deposit_key] = deposits.get(deposit_key, Decimal(0)) + action.amount

    return TransferAggregation(withdraws=withdraws, deposits=deposits)


def build_transfer_manifest(
    actions: Iterable[FungibleTransfer],
    fee_payer,
    fee_amount: Optional[Amount] = None,
    deposit_method: str = "deposit",
) -> TransactionManifest:
    """
    Build a manifest that locks the fee and performs all transfers.

    The manifest is, in order: one ``lock_fee`` call on the fee payer, one
    ``withdraw`` per (account, resource), then for each (account, resource)
    deposit a ``TAKE_FROM_WORKTOP_BY_AMOUNT`` into a new bucket followed by
    the deposit call with that bucket.

    Args:
        actions: Transfers to perform
        fee_payer: Account that locks the fee
        fee_amount: Fee to lock, defaults to DEFAULT_LOCK_FEE
        deposit_method: "deposit" or "try_deposit_or_abort"

    Returns:
        TransactionManifest

    Raises:
        TypeError: If an argument has the wrong type
        ValueError: If the deposit method is unknown or an amount is invalid
    """
    if deposit_method not in DEPOSIT_METHODS:
        raise ValueError(
            f"Unknown deposit method '{deposit_method}'. Expected one of: {', '.join(DEPOSIT_METHODS)}"
        )
    fee_payer_address = address(fee_payer)
    fee = decimal(DEFAULT_LOCK_FEE if fee_amount is None else fee_amount)
    aggregation = aggregate_transfers(actions)

    withdrawing_accounts = list(dict.fromkeys(account for account, _ in aggregation.withdraws))
    if len(withdrawing_accounts) > 1:
        logger.warning(
            f"Transfers withdraw from {len(withdrawing_accounts)} accounts "
            f"({', '.join(withdrawing_accounts)}); each may need its own intent signature"
        )

    builder = ManifestBuilder().call_method(fee_payer_address, "lock_fee", [fee])

    for (account, resource), amount in aggregation.withdraws.items():
        builder.call_method(account, "withdraw", [address(resource), decimal(amount)])

    for (account, resource), amount in aggregation.deposits.items():
        builder.take_from_worktop_by_amount(
            resource,
            amount,
            lambda b, bucket, account=account: b.call_method(account, deposit_method, [bucket]),
        )

    manifest = builder.build()
    logger.debug(
        f"Built transfer manifest: {len(aggregation.withdraws)} withdrawals, "
        f"{len(aggregation.deposits)} deposits, {len(manifest.instructions)} instructions"
    )
    return manifest

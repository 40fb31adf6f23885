"""
Fluent builder for transaction manifests.
"""
import logging
from typing import Callable, Iterable, Sequence

from .. import instructions as ins
from ..transaction import TransactionManifest
from ..utils import Bytes, hash_bytes, resolve_bytes
from ..values import (
    Bucket,
    Proof,
    U8,
    Value,
    address,
    blob,
    decimal,
    ids_array,
    string,
    u8,
)
from .allocator import SequentialIdAllocator

logger = logging.getLogger(__name__)

BucketCallback = Callable[["ManifestBuilder", Bucket], "ManifestBuilder"]
ProofCallback = Callable[["ManifestBuilder", Proof], "ManifestBuilder"]


def _bucket(value) -> Bucket:
    if isinstance(value, Bucket):
        return value
    if isinstance(value, str):
        return Bucket(identifier=value)
    raise TypeError(f"Expected a Bucket, got {type(value).__name__}")


def _proof(value) -> Proof:
    if isinstance(value, Proof):
        return value
    if isinstance(value, str):
        return Proof(identifier=value)
    raise TypeError(f"Expected a Proof, got {type(value).__name__}")


def _divisibility(value) -> U8:
    if isinstance(value, U8):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Divisibility must be an int, got {type(value).__name__}")
    return u8(value)


class ManifestBuilder:
    """
    Builds a TransactionManifest one instruction at a time.

    Every method appends exactly one instruction and returns the builder so
    calls can be chained. Methods that create a bucket or proof allocate a
    fresh identifier and pass it to ``and_then(builder, handle)``, which
    runs right after the instruction is appended::

        manifest = (
            ManifestBuilder()
            .call_method(account, "lock_fee", [decimal(5)])
            .call_method(account, "withdraw", [address(xrd), decimal(10)])
            .take_from_worktop_by_amount(xrd, 10, lambda b, bucket: (
                b.call_method(other_account, "deposit", [bucket])
            ))
            .build()
        )

    Arguments are validated before anything is allocated or appended, so a
    failed call leaves the builder unchanged.
    """

    def __init__(self):
        self._instructions = []
        self._blobs = []
        self._id_allocator = SequentialIdAllocator()

    def _append(self, instruction) -> "ManifestBuilder":
        self._instructions.append(instruction)
        return self

    @property
    def instructions(self) -> tuple:
        return tuple(self._instructions)

    # Invocations

    def call_function(
        self,
        package_address,
        blueprint_name: str,
        function_name: str,
        arguments: Sequence[Value] = (),
    ) -> "ManifestBuilder":
        """
        Call a function on a blueprint.

        Args:
            package_address: Address of the package containing the blueprint
            blueprint_name: Name of the blueprint
            function_name: Name of the function
            arguments: Manifest values passed to the function
        """
        return self._append(ins.CallFunction(
            package_address=address(package_address),
            blueprint_name=blueprint_name,
            function_name=function_name,
            arguments=tuple(arguments),
        ))

    def call_method(
        self,
        component_address,
        method_name: str,
        arguments: Sequence[Value] = (),
    ) -> "ManifestBuilder":
        """
        Call a method on a component.

        Args:
            component_address: Address of the component
            method_name: Name of the method
            arguments: Manifest values passed to the method
        """
        return self._append(ins.CallMethod(
            component_address=address(component_address),
            method_name=method_name,
            arguments=tuple(arguments),
        ))

    # Worktop

    def take_from_worktop(self, resource_address, and_then: BucketCallback) -> "ManifestBuilder":
        """Take all of a resource from the worktop into a new bucket"""
        resource = address(resource_address)
        bucket = self._id_allocator.new_bucket()
        self._append(ins.TakeFromWorktop(resource_address=resource, into_bucket=bucket))
        return and_then(self, bucket)

    def take_from_worktop_by_amount(
        self,
        resource_address,
        amount,
        and_then: BucketCallback,
    ) -> "ManifestBuilder":
        """
        Take an amount of a resource from the worktop into a new bucket.

        Args:
            resource_address: Address of the resource
            amount: Amount to take (Decimal, int, float, numeric str or Decimal value)
            and_then: Called with the builder and the new bucket
        """
        resource = address(resource_address)
        resolved_amount = decimal(amount)
        bucket = self._id_allocator.new_bucket()
        self._append(ins.TakeFromWorktopByAmount(
            resource_address=resource,
            amount=resolved_amount,
            into_bucket=bucket,
        ))
        return and_then(self, bucket)

    def take_from_worktop_by_ids(
        self,
        resource_address,
        ids: Iterable,
        and_then: BucketCallback,
    ) -> "ManifestBuilder":
        """Take specific non-fungibles from the worktop into a new bucket"""
        resource = address(resource_address)
        local_ids = ids_array(ids)
        bucket = self._id_allocator.new_bucket()
        self._append(ins.TakeFromWorktopByIds(
            resource_address=resource,
            ids=local_ids,
            into_bucket=bucket,
        ))
        return and_then(self, bucket)

    def return_to_worktop(self, bucket) -> "ManifestBuilder":
        return self._append(ins.ReturnToWorktop(bucket=_bucket(bucket)))

    def assert_worktop_contains(self, resource_address) -> "ManifestBuilder":
        return self._append(ins.AssertWorktopContains(resource_address=address(resource_address)))

    def assert_worktop_contains_by_amount(self, resource_address, amount) -> "ManifestBuilder":
        return self._append(ins.AssertWorktopContainsByAmount(
            resource_address=address(resource_address),
            amount=decimal(amount),
        ))

    def assert_worktop_contains_by_ids(self, resource_address, ids: Iterable) -> "ManifestBuilder":
        return self._append(ins.AssertWorktopContainsByIds(
            resource_address=address(resource_address),
            ids=ids_array(ids),
        ))

    # Auth zone and proofs

    def pop_from_auth_zone(self, and_then: ProofCallback) -> "ManifestBuilder":
        """Pop the most recent proof off the auth zone into a new proof"""
        proof = self._id_allocator.new_proof()
        self._append(ins.PopFromAuthZone(into_proof=proof))
        return and_then(self, proof)

    def push_to_auth_zone(self, proof) -> "ManifestBuilder":
        return self._append(ins.PushToAuthZone(proof=_proof(proof)))

    def clear_auth_zone(self) -> "ManifestBuilder":
        return self._append(ins.ClearAuthZone())

    def clear_signature_proofs(self) -> "ManifestBuilder":
        return self._append(ins.ClearSignatureProofs())

    def create_proof_from_auth_zone(self, resource_address, and_then: ProofCallback) -> "ManifestBuilder":
        resource = address(resource_address)
        proof = self._id_allocator.new_proof()
        self._append(ins.CreateProofFromAuthZone(resource_address=resource, into_proof=proof))
        return and_then(self, proof)

    def create_proof_from_auth_zone_by_amount(
        self,
        resource_address,
        amount,
        and_then: ProofCallback,
    ) -> "ManifestBuilder":
        resource = address(resource_address)
        resolved_amount = decimal(amount)
        proof = self._id_allocator.new_proof()
        self._append(ins.CreateProofFromAuthZoneByAmount(
            resource_address=resource,
            amount=resolved_amount,
            into_proof=proof,
        ))
        return and_then(self, proof)

    def create_proof_from_auth_zone_by_ids(
        self,
        resource_address,
        ids: Iterable,
        and_then: ProofCallback,
    ) -> "ManifestBuilder":
        resource = address(resource_address)
        local_ids = ids_array(ids)
        proof = self._id_allocator.new_proof()
        self._append(ins.CreateProofFromAuthZoneByIds(
            resource_address=resource,
            ids=local_ids,
            into_proof=proof,
        ))
        return and_then(self, proof)

    def create_proof_from_bucket(self, bucket, and_then: ProofCallback) -> "ManifestBuilder":
        source = _bucket(bucket)
        proof = self._id_allocator.new_proof()
        self._append(ins.CreateProofFromBucket(bucket=source, into_proof=proof))
        return and_then(self, proof)

    def clone_proof(self, proof, and_then: ProofCallback) -> "ManifestBuilder":
        """Clone a proof into a newly allocated proof"""
        source = _proof(proof)
        cloned = self._id_allocator.new_proof()
        self._append(ins.CloneProof(proof=source, into_proof=cloned))
        return and_then(self, cloned)

    def drop_proof(self, proof) -> "ManifestBuilder":
        return self._append(ins.DropProof(proof=_proof(proof)))

    def drop_all_proofs(self) -> "ManifestBuilder":
        return self._append(ins.DropAllProofs())

    # Packages, resources and metadata

    def publish_package(
        self,
        code: Bytes,
        schema: Bytes,
        royalty_config: Value,
        metadata: Value,
        access_rules: Value,
    ) -> "ManifestBuilder":
        """
        Publish a package.

        The code and schema are added to the manifest's blobs and referenced
        by their Blake2b-256 hashes.

        Args:
            code: Package WASM, as bytes or hex
            schema: Package schema, as bytes or hex
            royalty_config: Royalty configuration value
            metadata: Metadata map value
            access_rules: Access rules value
        """
        code_bytes = resolve_bytes(code)
        schema_bytes = resolve_bytes(schema)
        self._append(ins.PublishPackage(
            code=blob(hash_bytes(code_bytes)),
            schema=blob(hash_bytes(schema_bytes)),
            royalty_config=royalty_config,
            metadata=metadata,
            access_rules=access_rules,
        ))
        self._blobs.append(code_bytes)
        self._blobs.append(schema_bytes)
        logger.debug(f"Added package blobs ({len(code_bytes)} + {len(schema_bytes)} bytes)")
        return self

    def burn_resource(self, bucket) -> "ManifestBuilder":
        return self._append(ins.BurnResource(bucket=_bucket(bucket)))

    def recall_resource(self, vault_id, amount) -> "ManifestBuilder":
        return self._append(ins.RecallResource(vault_id=address(vault_id), amount=decimal(amount)))

    def set_metadata(self, entity_address, key: str, value: Value) -> "ManifestBuilder":
        return self._append(ins.SetMetadata(
            entity_address=address(entity_address),
            key=string(key),
            value=value,
        ))

    def remove_metadata(self, entity_address, key: str) -> "ManifestBuilder":
        return self._append(ins.RemoveMetadata(entity_address=address(entity_address), key=string(key)))

    def set_package_royalty_config(self, package_address, royalty_config: Value) -> "ManifestBuilder":
        return self._append(ins.SetPackageRoyaltyConfig(
            package_address=address(package_address),
            royalty_config=royalty_config,
        ))

    def set_component_royalty_config(self, component_address, royalty_config: Value) -> "ManifestBuilder":
        return self._append(ins.SetComponentRoyaltyConfig(
            component_address=address(component_address),
            royalty_config=royalty_config,
        ))

    def claim_package_royalty(self, package_address) -> "ManifestBuilder":
        return self._append(ins.ClaimPackageRoyalty(package_address=address(package_address)))

    def claim_component_royalty(self, component_address) -> "ManifestBuilder":
        return self._append(ins.ClaimComponentRoyalty(component_address=address(component_address)))

    def set_method_access_rule(self, entity_address, key: Value, rule: Value) -> "ManifestBuilder":
        return self._append(ins.SetMethodAccessRule(
            entity_address=address(entity_address),
            key=key,
            rule=rule,
        ))

    def mint_fungible(self, resource_address, amount) -> "ManifestBuilder":
        return self._append(ins.MintFungible(
            resource_address=address(resource_address),
            amount=decimal(amount),
        ))

    def mint_non_fungible(self, resource_address, entries: Value) -> "ManifestBuilder":
        return self._append(ins.MintNonFungible(resource_address=address(resource_address), entries=entries))

    def mint_uuid_non_fungible(self, resource_address, entries: Value) -> "ManifestBuilder":
        return self._append(ins.MintUuidNonFungible(resource_address=address(resource_address), entries=entries))

    def create_fungible_resource(self, divisibility, metadata: Value, access_rules: Value) -> "ManifestBuilder":
        return self._append(ins.CreateFungibleResource(
            divisibility=_divisibility(divisibility),
            metadata=metadata,
            access_rules=access_rules,
        ))

    def create_fungible_resource_with_initial_supply(
        self,
        divisibility,
        metadata: Value,
        access_rules: Value,
        initial_supply,
    ) -> "ManifestBuilder":
        supply = decimal(initial_supply)
        return self._append(ins.CreateFungibleResourceWithInitialSupply(
            divisibility=_divisibility(divisibility),
            metadata=metadata,
            access_rules=access_rules,
            initial_supply=supply,
        ))

    def create_non_fungible_resource(
        self,
        id_type: Value,
        schema: Value,
        metadata: Value,
        access_rules: Value,
    ) -> "ManifestBuilder":
        return self._append(ins.CreateNonFungibleResource(
            id_type=id_type,
            schema=schema,
            metadata=metadata,
            access_rules=access_rules,
        ))

    def create_non_fungible_resource_with_initial_supply(
        self,
        id_type: Value,
        schema: Value,
        metadata: Value,
        access_rules: Value,
        initial_supply: Value,
    ) -> "ManifestBuilder":
        return self._append(ins.CreateNonFungibleResourceWithInitialSupply(
            id_type=id_type,
            schema=schema,
            metadata=metadata,
            access_rules=access_rules,
            initial_supply=initial_supply,
        ))

    # Native components

    def create_access_controller(
        self,
        controlled_asset,
        rule_set: Value,
        timed_recovery_delay_in_minutes: Value,
    ) -> "ManifestBuilder":
        return self._append(ins.CreateAccessController(
            controlled_asset=_bucket(controlled_asset),
            rule_set=rule_set,
            timed_recovery_delay_in_minutes=timed_recovery_delay_in_minutes,
        ))

    def create_identity(self, access_rule: Value) -> "ManifestBuilder":
        return self._append(ins.CreateIdentity(access_rule=access_rule))

    def create_validator(self, key: Value, owner_access_rule: Value) -> "ManifestBuilder":
        return self._append(ins.CreateValidator(key=key, owner_access_rule=owner_access_rule))

    def create_account(self, withdraw_rule: Value) -> "ManifestBuilder":
        return self._append(ins.CreateAccount(withdraw_rule=withdraw_rule))

    def assert_access_rule(self, access_rule: Value) -> "ManifestBuilder":
        return self._append(ins.AssertAccessRule(access_rule=access_rule))

    def build(self) -> TransactionManifest:
        """
        Freeze the instructions and blobs appended so far.

        The builder can keep being used; later calls do not change manifests
        that were already built.
        """
        return TransactionManifest(
            instructions=tuple(self._instructions),
            blobs=tuple(self._blobs),
        )

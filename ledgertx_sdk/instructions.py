"""
Manifest instructions.

Each instruction is a frozen pydantic model tagged by its ``instruction``
field. ``Instruction`` is the closed, discriminated union of all variants;
a manifest is an ordered tuple of them.
"""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .values import (
    Address,
    Blob,
    Bucket,
    Decimal,
    NonFungibleLocalId,
    Proof,
    String,
    U8,
    Value,
)


class _Instruction(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# Invocations

class CallFunction(_Instruction):
    instruction: Literal["CALL_FUNCTION"] = "CALL_FUNCTION"
    package_address: Address
    blueprint_name: StrictStr
    function_name: StrictStr
    arguments: tuple[Value, ...] = ()


class CallMethod(_Instruction):
    instruction: Literal["CALL_METHOD"] = "CALL_METHOD"
    component_address: Address
    method_name: StrictStr
    arguments: tuple[Value, ...] = ()


# Worktop

class TakeFromWorktop(_Instruction):
    instruction: Literal["TAKE_FROM_WORKTOP"] = "TAKE_FROM_WORKTOP"
    resource_address: Address
    into_bucket: Bucket


class TakeFromWorktopByAmount(_Instruction):
    instruction: Literal["TAKE_FROM_WORKTOP_BY_AMOUNT"] = "TAKE_FROM_WORKTOP_BY_AMOUNT"
    resource_address: Address
    amount: Decimal
    into_bucket: Bucket


class TakeFromWorktopByIds(_Instruction):
    instruction: Literal["TAKE_FROM_WORKTOP_BY_IDS"] = "TAKE_FROM_WORKTOP_BY_IDS"
    resource_address: Address
    ids: tuple[NonFungibleLocalId, ...]
    into_bucket: Bucket


class ReturnToWorktop(_Instruction):
    instruction: Literal["RETURN_TO_WORKTOP"] = "RETURN_TO_WORKTOP"
    bucket: Bucket


class AssertWorktopContains(_Instruction):
    instruction: Literal["ASSERT_WORKTOP_CONTAINS"] = "ASSERT_WORKTOP_CONTAINS"
    resource_address: Address


class AssertWorktopContainsByAmount(_Instruction):
    instruction: Literal["ASSERT_WORKTOP_CONTAINS_BY_AMOUNT"] = "ASSERT_WORKTOP_CONTAINS_BY_AMOUNT"
    resource_address: Address
    amount: Decimal


class AssertWorktopContainsByIds(_Instruction):
    instruction: Literal["ASSERT_WORKTOP_CONTAINS_BY_IDS"] = "ASSERT_WORKTOP_CONTAINS_BY_IDS"
    resource_address: Address
    ids: tuple[NonFungibleLocalId, ...]


# Auth zone and proofs

class PopFromAuthZone(_Instruction):
    instruction: Literal["POP_FROM_AUTH_ZONE"] = "POP_FROM_AUTH_ZONE"
    into_proof: Proof


class PushToAuthZone(_Instruction):
    instruction: Literal["PUSH_TO_AUTH_ZONE"] = "PUSH_TO_AUTH_ZONE"
    proof: Proof


class ClearAuthZone(_Instruction):
    instruction: Literal["CLEAR_AUTH_ZONE"] = "CLEAR_AUTH_ZONE"


class ClearSignatureProofs(_Instruction):
    instruction: Literal["CLEAR_SIGNATURE_PROOFS"] = "CLEAR_SIGNATURE_PROOFS"


class CreateProofFromAuthZone(_Instruction):
    instruction: Literal["CREATE_PROOF_FROM_AUTH_ZONE"] = "CREATE_PROOF_FROM_AUTH_ZONE"
    resource_address: Address
    into_proof: Proof


class CreateProofFromAuthZoneByAmount(_Instruction):
    instruction: Literal["CREATE_PROOF_FROM_AUTH_ZONE_BY_AMOUNT"] = "CREATE_PROOF_FROM_AUTH_ZONE_BY_AMOUNT"
    resource_address: Address
    amount: Decimal
    into_proof: Proof


class CreateProofFromAuthZoneByIds(_Instruction):
    instruction: Literal["CREATE_PROOF_FROM_AUTH_ZONE_BY_IDS"] = "CREATE_PROOF_FROM_AUTH_ZONE_BY_IDS"
    resource_address: Address
    ids: tuple[NonFungibleLocalId, ...]
    into_proof: Proof


class CreateProofFromBucket(_Instruction):
    instruction: Literal["CREATE_PROOF_FROM_BUCKET"] = "CREATE_PROOF_FROM_BUCKET"
    bucket: Bucket
    into_proof: Proof


class CloneProof(_Instruction):
    instruction: Literal["CLONE_PROOF"] = "CLONE_PROOF"
    proof: Proof
    into_proof: Proof


class DropProof(_Instruction):
    instruction: Literal["DROP_PROOF"] = "DROP_PROOF"
    proof: Proof


class DropAllProofs(_Instruction):
    instruction: Literal["DROP_ALL_PROOFS"] = "DROP_ALL_PROOFS"


# Packages, resources and metadata

class PublishPackage(_Instruction):
    instruction: Literal["PUBLISH_PACKAGE"] = "PUBLISH_PACKAGE"
    code: Blob
    schema_: Blob = Field(alias="schema")
    royalty_config: Value
    metadata: Value
    access_rules: Value


class BurnResource(_Instruction):
    instruction: Literal["BURN_RESOURCE"] = "BURN_RESOURCE"
    bucket: Bucket


class RecallResource(_Instruction):
    instruction: Literal["RECALL_RESOURCE"] = "RECALL_RESOURCE"
    vault_id: Address
    amount: Decimal


class SetMetadata(_Instruction):
    instruction: Literal["SET_METADATA"] = "SET_METADATA"
    entity_address: Address
    key: String
    value: Value


class RemoveMetadata(_Instruction):
    instruction: Literal["REMOVE_METADATA"] = "REMOVE_METADATA"
    entity_address: Address
    key: String


class SetPackageRoyaltyConfig(_Instruction):
    instruction: Literal["SET_PACKAGE_ROYALTY_CONFIG"] = "SET_PACKAGE_ROYALTY_CONFIG"
    package_address: Address
    royalty_config: Value


class SetComponentRoyaltyConfig(_Instruction):
    instruction: Literal["SET_COMPONENT_ROYALTY_CONFIG"] = "SET_COMPONENT_ROYALTY_CONFIG"
    component_address: Address
    royalty_config: Value


class ClaimPackageRoyalty(_Instruction):
    instruction: Literal["CLAIM_PACKAGE_ROYALTY"] = "CLAIM_PACKAGE_ROYALTY"
    package_address: Address


class ClaimComponentRoyalty(_Instruction):
    instruction: Literal["CLAIM_COMPONENT_ROYALTY"] = "CLAIM_COMPONENT_ROYALTY"
    component_address: Address


class SetMethodAccessRule(_Instruction):
    instruction: Literal["SET_METHOD_ACCESS_RULE"] = "SET_METHOD_ACCESS_RULE"
    entity_address: Address
    key: Value
    rule: Value


class MintFungible(_Instruction):
    instruction: Literal["MINT_FUNGIBLE"] = "MINT_FUNGIBLE"
    resource_address: Address
    amount: Decimal


class MintNonFungible(_Instruction):
    instruction: Literal["MINT_NON_FUNGIBLE"] = "MINT_NON_FUNGIBLE"
    resource_address: Address
    entries: Value


class MintUuidNonFungible(_Instruction):
    instruction: Literal["MINT_UUID_NON_FUNGIBLE"] = "MINT_UUID_NON_FUNGIBLE"
    resource_address: Address
    entries: Value


class CreateFungibleResource(_Instruction):
    instruction: Literal["CREATE_FUNGIBLE_RESOURCE"] = "CREATE_FUNGIBLE_RESOURCE"
    divisibility: U8
    metadata: Value
    access_rules: Value


class CreateFungibleResourceWithInitialSupply(_Instruction):
    instruction: Literal["CREATE_FUNGIBLE_RESOURCE_WITH_INITIAL_SUPPLY"] = (
        "CREATE_FUNGIBLE_RESOURCE_WITH_INITIAL_SUPPLY"
    )
    divisibility: U8
    metadata: Value
    access_rules: Value
    initial_supply: Decimal


class CreateNonFungibleResource(_Instruction):
    instruction: Literal["CREATE_NON_FUNGIBLE_RESOURCE"] = "CREATE_NON_FUNGIBLE_RESOURCE"
    id_type: Value
    schema_: Value = Field(alias="schema")
    metadata: Value
    access_rules: Value


class CreateNonFungibleResourceWithInitialSupply(_Instruction):
    instruction: Literal["CREATE_NON_FUNGIBLE_RESOURCE_WITH_INITIAL_SUPPLY"] = (
        "CREATE_NON_FUNGIBLE_RESOURCE_WITH_INITIAL_SUPPLY"
    )
    id_type: Value
    schema_: Value = Field(alias="schema")
    metadata: Value
    access_rules: Value
    initial_supply: Value


# Native components

class CreateAccessController(_Instruction):
    instruction: Literal["CREATE_ACCESS_CONTROLLER"] = "CREATE_ACCESS_CONTROLLER"
    controlled_asset: Bucket
    rule_set: Value
    timed_recovery_delay_in_minutes: Value


class CreateIdentity(_Instruction):
    instruction: Literal["CREATE_IDENTITY"] = "CREATE_IDENTITY"
    access_rule: Value


class CreateValidator(_Instruction):
    instruction: Literal["CREATE_VALIDATOR"] = "CREATE_VALIDATOR"
    key: Value
    owner_access_rule: Value


class CreateAccount(_Instruction):
    instruction: Literal["CREATE_ACCOUNT"] = "CREATE_ACCOUNT"
    withdraw_rule: Value


class AssertAccessRule(_Instruction):
    instruction: Literal["ASSERT_ACCESS_RULE"] = "ASSERT_ACCESS_RULE"
    access_rule: Value


Instruction = Annotated[
    Union[
        CallFunction,
        CallMethod,
        TakeFromWorktop,
        TakeFromWorktopByAmount,
        TakeFromWorktopByIds,
        ReturnToWorktop,
        AssertWorktopContains,
        AssertWorktopContainsByAmount,
        AssertWorktopContainsByIds,
        PopFromAuthZone,
        PushToAuthZone,
        ClearAuthZone,
        ClearSignatureProofs,
        CreateProofFromAuthZone,
        CreateProofFromAuthZoneByAmount,
        CreateProofFromAuthZoneByIds,
        CreateProofFromBucket,
        CloneProof,
        DropProof,
        DropAllProofs,
        PublishPackage,
        BurnResource,
        RecallResource,
        SetMetadata,
        RemoveMetadata,
        SetPackageRoyaltyConfig,
        SetComponentRoyaltyConfig,
        ClaimPackageRoyalty,
        ClaimComponentRoyalty,
        SetMethodAccessRule,
        MintFungible,
        MintNonFungible,
        MintUuidNonFungible,
        CreateFungibleResource,
        CreateFungibleResourceWithInitialSupply,
        CreateNonFungibleResource,
        CreateNonFungibleResourceWithInitialSupply,
        CreateAccessController,
        CreateIdentity,
        CreateValidator,
        CreateAccount,
        AssertAccessRule,
    ],
    Field(discriminator="instruction"),
]

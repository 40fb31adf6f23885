"""
Tests for the manifest builder and identifier allocation.
"""
import hashlib

import pytest

from ledgertx_sdk import instructions as ins
from ledgertx_sdk.builders import ManifestBuilder, SequentialIdAllocator
from ledgertx_sdk.values import Bucket, Proof, address, decimal, enum, map_, tuple_
from conftest import ACCOUNT_A, ACCOUNT_B, XRD


def _keep(builder, _handle):
    return builder


class TestSequentialIdAllocator:
    def test_buckets_and_proofs_count_independently(self):
        allocator = SequentialIdAllocator()
        assert allocator.new_bucket() == Bucket(identifier="bucket0")
        assert allocator.new_proof() == Proof(identifier="proof0")
        assert allocator.new_bucket() == Bucket(identifier="bucket1")
        assert allocator.new_proof() == Proof(identifier="proof1")

    def test_allocators_do_not_share_state(self):
        first = SequentialIdAllocator()
        first.new_bucket()
        assert SequentialIdAllocator().new_bucket().identifier == "bucket0"


class TestManifestBuilder:
    def test_instructions_keep_call_order(self):
        manifest = (
            ManifestBuilder()
            .call_method(ACCOUNT_A, "lock_fee", [decimal(5)])
            .call_method(ACCOUNT_A, "withdraw", [address(XRD), decimal(10)])
            .take_from_worktop(XRD, lambda b, bucket: b.call_method(ACCOUNT_B, "deposit", [bucket]))
            .build()
        )
        kinds = [i.instruction for i in manifest.instructions]
        assert kinds == ["CALL_METHOD", "CALL_METHOD", "TAKE_FROM_WORKTOP", "CALL_METHOD"]
        assert manifest.instructions[3].arguments == (Bucket(identifier="bucket0"),)

    def test_callback_runs_after_append_and_before_return(self):
        seen = []

        def and_then(builder, bucket):
            seen.append((len(builder.instructions), bucket.identifier))
            return builder

        builder = ManifestBuilder().take_from_worktop_by_amount(XRD, 1, and_then)
        assert seen == [(1, "bucket0")]
        assert len(builder.instructions) == 1

    def test_handles_are_unique(self):
        buckets, proofs = [], []

        def keep_bucket(builder, bucket):
            buckets.append(bucket.identifier)
            return builder

        def keep_proof(builder, proof):
            proofs.append(proof.identifier)
            return builder

        builder = ManifestBuilder()
        for _ in range(3):
            builder.take_from_worktop(XRD, keep_bucket)
            builder.pop_from_auth_zone(keep_proof)
        builder.create_proof_from_auth_zone(XRD, keep_proof)
        builder.create_proof_from_bucket(Bucket(identifier="bucket0"), keep_proof)

        assert buckets == ["bucket0", "bucket1", "bucket2"]
        assert proofs == ["proof0", "proof1", "proof2", "proof3", "proof4"]

    def test_clone_proof_allocates_new_proof(self):
        manifest = (
            ManifestBuilder()
            .pop_from_auth_zone(lambda b, proof: b.clone_proof(proof, _keep))
            .build()
        )
        clone = manifest.instructions[1]
        assert isinstance(clone, ins.CloneProof)
        assert clone.proof.identifier == "proof0"
        assert clone.into_proof.identifier == "proof1"

    def test_nested_callbacks_allocate_in_call_order(self):
        manifest = (
            ManifestBuilder()
            .take_from_worktop(XRD, lambda b, first: (
                b.take_from_worktop(XRD, lambda b2, second: (
                    b2.call_method(ACCOUNT_B, "deposit_batch", [first, second])
                ))
            ))
            .build()
        )
        assert manifest.instructions[2].arguments == (
            Bucket(identifier="bucket0"),
            Bucket(identifier="bucket1"),
        )

    def test_amounts_are_resolved(self):
        manifest = ManifestBuilder().take_from_worktop_by_amount(XRD, "1.5", _keep).build()
        assert str(manifest.instructions[0].amount.value) == "1.5"

    def test_invalid_amount_leaves_builder_unchanged(self):
        builder = ManifestBuilder()
        with pytest.raises(ValueError):
            builder.take_from_worktop_by_amount(XRD, "lots", _keep)
        with pytest.raises(TypeError):
            builder.take_from_worktop_by_amount(XRD, None, _keep)
        builder.take_from_worktop(XRD, _keep)
        manifest = builder.build()
        assert len(manifest.instructions) == 1
        assert manifest.instructions[0].into_bucket.identifier == "bucket0"

    def test_invalid_address_raises(self):
        with pytest.raises(TypeError):
            ManifestBuilder().call_method(1234, "free")
        with pytest.raises(ValueError):
            ManifestBuilder().call_method("", "free")

    def test_take_by_ids(self):
        manifest = ManifestBuilder().take_from_worktop_by_ids(XRD, [1, "ticket"], _keep).build()
        assert [i.value for i in manifest.instructions[0].ids] == ["#1#", "<ticket>"]

    def test_publish_package_adds_blobs(self):
        code = b"\x00asm\x01\x00\x00\x00"
        schema = b"\x5c\x21\x00"
        manifest = (
            ManifestBuilder()
            .publish_package(code, schema.hex(), tuple_(), map_("String", "String"), enum(0))
            .build()
        )
        publish = manifest.instructions[0]
        assert publish.code.hash == hashlib.blake2b(code, digest_size=32).digest()
        assert publish.schema_.hash == hashlib.blake2b(schema, digest_size=32).digest()
        assert manifest.blobs == (code, schema)

    def test_builder_cannot_be_seeded_with_instructions(self):
        first = ManifestBuilder().take_from_worktop(XRD, _keep).build()
        with pytest.raises(TypeError):
            ManifestBuilder(instructions=first.instructions)

    def test_continuing_a_builder_keeps_handles_unique(self):
        builder = ManifestBuilder().take_from_worktop(XRD, _keep)
        builder.build()
        builder.take_from_worktop(XRD, _keep)
        handles = [i.into_bucket.identifier for i in builder.build().instructions]
        assert handles == ["bucket0", "bucket1"]

    def test_build_is_a_snapshot(self):
        builder = ManifestBuilder().drop_all_proofs()
        first = builder.build()
        builder.clear_auth_zone()
        second = builder.build()
        assert len(first.instructions) == 1
        assert len(second.instructions) == 2

    def test_every_simple_instruction(self):
        manifest = (
            ManifestBuilder()
            .call_function("package_sim1qyqzcexvnyg60z7lnlwauh66nhzg3m8tch2j8wc0e70qkydk8r", "Faucet", "new", [])
            .return_to_worktop("bucket0")
            .assert_worktop_contains(XRD)
            .assert_worktop_contains_by_amount(XRD, 1)
            .assert_worktop_contains_by_ids(XRD, [1])
            .push_to_auth_zone("proof0")
            .clear_auth_zone()
            .clear_signature_proofs()
            .drop_proof("proof0")
            .drop_all_proofs()
            .burn_resource("bucket0")
            .recall_resource("internal_vault_sim1tz9qmn4j", 3)
            .set_metadata(ACCOUNT_A, "name", enum(0))
            .remove_metadata(ACCOUNT_A, "name")
            .set_package_royalty_config("package_sim1qyqzcexvnyg60z7lnlwauh66nhzg3m8tch2j8wc0e70qkydk8r", tuple_())
            .set_component_royalty_config(ACCOUNT_A, tuple_())
            .claim_package_royalty("package_sim1qyqzcexvnyg60z7lnlwauh66nhzg3m8tch2j8wc0e70qkydk8r")
            .claim_component_royalty(ACCOUNT_A)
            .set_method_access_rule(ACCOUNT_A, tuple_(), enum(0))
            .mint_fungible(XRD, 10)
            .mint_non_fungible(XRD, map_("NonFungibleLocalId", "Tuple"))
            .mint_uuid_non_fungible(XRD, tuple_())
            .create_fungible_resource(18, map_("String", "String"), map_("Enum", "Tuple"))
            .create_fungible_resource_with_initial_supply(18, map_("String", "String"), map_("Enum", "Tuple"), 1000)
            .create_non_fungible_resource(enum(0), tuple_(), map_("String", "String"), map_("Enum", "Tuple"))
            .create_non_fungible_resource_with_initial_supply(
                enum(0), tuple_(), map_("String", "String"), map_("Enum", "Tuple"), map_("NonFungibleLocalId", "Tuple")
            )
            .create_access_controller("bucket0", tuple_(), enum("None"))
            .create_identity(enum(0))
            .create_validator(tuple_(), enum(0))
            .create_account(enum(0))
            .assert_access_rule(enum(0))
            .build()
        )
        assert len(manifest.instructions) == 31
        assert manifest.instructions[-1].instruction == "ASSERT_ACCESS_RULE"

    def test_bad_divisibility_type(self):
        with pytest.raises(TypeError):
            ManifestBuilder().create_fungible_resource("18", map_("String", "String"), map_("Enum", "Tuple"))

    def test_instruction_from_dict(self):
        from pydantic import TypeAdapter
        parsed = TypeAdapter(ins.Instruction).validate_python({
            "instruction": "DROP_PROOF",
            "proof": {"kind": "Proof", "identifier": "proof3"},
        })
        assert parsed == ins.DropProof(proof=Proof(identifier="proof3"))

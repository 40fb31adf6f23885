"""
Tests for compiled transaction artifacts.
"""
import asyncio

import pytest

from ledgertx_sdk.builders import TransactionBuilder
from ledgertx_sdk.compiler import CanonicalJsonCompiler
from ledgertx_sdk.crypto import Ed25519Signature
from ledgertx_sdk.exceptions import SignatureSourceError


@pytest.fixture
def signed(compiler, header, manifest, ed25519_key):
    return TransactionBuilder(compiler).header(header).manifest(manifest).sign(ed25519_key).compile_signed_intent()


class TestCompiledSignedIntent:
    def test_hashes(self, signed, compiler):
        assert signed.transaction_id == signed.intent_hash
        assert signed.hash_to_notarize == signed.signed_intent_hash
        assert signed.signed_intent_hash == compiler.content_hash(signed.to_bytes())
        assert signed.intent_hash_hex() == signed.intent_hash.hex()

    def test_compile_notarized(self, signed, notary_key, compiler):
        notarized = signed.compile_notarized(notary_key)

        assert notarized.transaction_id == signed.intent_hash
        assert notarized.to_hex() == notarized.to_bytes().hex()
        assert notarized.transaction_id_hex() == signed.intent_hash_hex()
        assert notarized.notarized_payload_hash_hex() == compiler.content_hash(notarized.compiled).hex()
        assert notary_key.public_key().verify(
            signed.signed_intent_hash, notarized.notarized_transaction.notary_signature
        )

    def test_compile_notarized_async(self, signed, notary_key):
        async def sign(digest):
            await asyncio.sleep(0)
            return notary_key.sign_to_signature(digest)

        expected = signed.compile_notarized(notary_key)
        notarized = asyncio.run(signed.compile_notarized_async(sign))

        assert notarized == expected

    def test_compile_notarized_rejects_async_source(self, signed, notary_key):
        async def sign(digest):
            return notary_key.sign_to_signature(digest)

        with pytest.raises(SignatureSourceError):
            signed.compile_notarized(sign)

    def test_precomputed_notary_signature(self, signed, notary_key):
        signature = notary_key.sign_to_signature(signed.hash_to_notarize)
        assert isinstance(signature, Ed25519Signature)

        notarized = signed.compile_notarized(signature)
        assert notarized.notarized_transaction.notary_signature == signature

    def test_compiler_not_part_of_equality(self, signed, compiler):
        other = CanonicalJsonCompiler()
        assert other is not compiler
        assert signed == type(signed)(
            intent_hash=signed.intent_hash,
            signed_intent=signed.signed_intent,
            compiled_signed_intent=signed.compiled_signed_intent,
            signed_intent_hash=signed.signed_intent_hash,
            compiler=other,
        )

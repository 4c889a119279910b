import pytest

from tinychain.proof_of_existence import (
    CreateClaim,
    ProofOfExistencePallet,
    RevokeClaim,
)
from tinychain.support import DispatchError


def test_basic_proof_of_existence():
    pallet = ProofOfExistencePallet()
    claim = "Unique Document Hash"
    pallet.create_claim("Alice", claim)
    assert pallet.get_claim(claim) == "Alice"
    with pytest.raises(DispatchError, match="Claim already exists"):
        pallet.create_claim("Alice", claim)
    pallet.revoke_claim("Alice", claim)
    assert pallet.get_claim(claim) is None


def test_revoke_by_non_owner():
    pallet = ProofOfExistencePallet()
    pallet.create_claim("Alice", "doc")
    with pytest.raises(DispatchError, match="Caller does not own the claim"):
        pallet.revoke_claim("Bob", "doc")
    assert pallet.get_claim("doc") == "Alice"


def test_revoke_missing_claim():
    pallet = ProofOfExistencePallet()
    with pytest.raises(DispatchError, match="Claim does not exist"):
        pallet.revoke_claim("Alice", "doc")


def test_dispatch_create_and_revoke():
    pallet = ProofOfExistencePallet()
    pallet.dispatch("Bob", CreateClaim("Bob's claim"))
    assert pallet.get_claim("Bob's claim") == "Bob"
    pallet.dispatch("Bob", RevokeClaim("Bob's claim"))
    assert pallet.get_claim("Bob's claim") is None


def test_dispatch_rejects_unknown_call():
    with pytest.raises(TypeError):
        ProofOfExistencePallet().dispatch("Alice", "claim")
import pytest

from tinychain.balances import Transfer
from tinychain.proof_of_existence import CreateClaim, RevokeClaim
from tinychain.runtime import Runtime, main
from tinychain.support import Block, DispatchError, Extrinsic, Header


def test_execute_block_runs_transfers():
    runtime = Runtime()
    runtime.balances.set_balance("Alice", 100)
    block = Block(Header(1), [Extrinsic("Alice", Transfer(to="Bob", amount=30))])
    runtime.execute_block(block)
    assert runtime.balances.get_balance("Bob") == 30
    assert runtime.balances.get_balance("Alice") + runtime.balances.get_balance("Bob") == 100
    assert runtime.system.block_number() == block.header.block_number
    assert runtime.system.get_nonce("Alice") == 1


def test_block_number_mismatch():
    runtime = Runtime()
    with pytest.raises(DispatchError, match="Block number mismatch"):
        runtime.execute_block(Block(Header(2), []))
    assert runtime.system.block_number() == 1


def test_failed_extrinsic_is_reported_and_block_continues(capsys):
    runtime = Runtime()
    block = Block(
        Header(1),
        [
            Extrinsic("Bob", Transfer(to="Alice", amount=5)),
            Extrinsic("Bob", CreateClaim("doc")),
        ],
    )
    runtime.execute_block(block)
    err = capsys.readouterr().err
    assert "Insufficient balance" in err
    assert "Extrinsic Index: 0" in err
    assert runtime.proof_of_existence.get_claim("doc") == "Bob"
    assert runtime.system.get_nonce("Bob") == 2


def test_dispatch_routes_claims():
    runtime = Runtime()
    runtime.dispatch("Alice", CreateClaim("Alice's claim"))
    assert runtime.proof_of_existence.get_claim("Alice's claim") == "Alice"
    runtime.dispatch("Alice", RevokeClaim("Alice's claim"))
    assert runtime.proof_of_existence.get_claim("Alice's claim") is None


def test_dispatch_propagates_pallet_errors():
    runtime = Runtime()
    with pytest.raises(DispatchError, match="Claim does not exist"):
        runtime.dispatch("Alice", RevokeClaim("missing"))


def test_dispatch_unknown_call():
    with pytest.raises(TypeError):
        Runtime().dispatch("Alice", object())


def test_main_prints_final_state(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Alice's claim" in out
    assert "Bob's claim" in out
    assert "'Charlie': 20" in out
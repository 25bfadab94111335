import pytest

from factom.api import tx
from factom.api.tx import SearchBy, SearchByAddress, SearchByRange, SearchByTxid


@pytest.mark.asyncio
async def test_transactions_range_sends_only_range(api, remote) -> None:
    await tx.transactions(api, SearchByRange(start=1, end=2))
    assert remote.last["method"] == "transactions"
    assert remote.last["params"] == {"range": {"start": 1, "end": 2}}
    assert remote.last_url == api.wallet_uri


@pytest.mark.asyncio
async def test_transactions_txid_sends_only_txid(api, remote) -> None:
    await tx.transactions(api, SearchByTxid("7552f1f7"))
    assert remote.last["params"] == {"txid": "7552f1f7"}


@pytest.mark.asyncio
async def test_transactions_address_sends_only_address(api, remote) -> None:
    await tx.transactions(api, SearchByAddress("FA2jK2HcLnRdS94dEcU27rF3meoJfpUcZPSinpb7AwQvPRY6RL1Q"))
    assert remote.last["params"] == {"address": "FA2jK2HcLnRdS94dEcU27rF3meoJfpUcZPSinpb7AwQvPRY6RL1Q"}


@pytest.mark.asyncio
@pytest.mark.parametrize("search", [None, "7552f1f7", {"txid": "7552f1f7"}])
async def test_transactions_rejects_other_search_values(api, remote, search) -> None:
    with pytest.raises(TypeError):
        await tx.transactions(api, search)
    assert remote.requests == []


@pytest.mark.asyncio
async def test_transactions_parses_results(api, remote) -> None:
    remote.respond_result(
        {
            "transactions": [
                {
                    "blockheight": 12,
                    "feespaid": 12000,
                    "signed": True,
                    "timestamp": 1520000000,
                    "totalinputs": 1012000,
                    "totaloutputs": 1000000,
                    "inputs": [{"amount": 1012000, "address": "FA2j", "useraddress": "FA2j"}],
                    "outputs": [{"amount": 1000000, "address": "FA3E", "useraddress": "FA3E"}],
                    "ecoutputs": [],
                    "txid": "7552f1f7",
                }
            ]
        }
    )
    response = await tx.transactions(api, SearchByTxid("7552f1f7"))
    found = response.result.transactions[0]
    assert found.blockheight == 12
    assert found.signed is True
    assert found.inputs[0].amount == 1012000


@pytest.mark.asyncio
async def test_ack_omits_absent_full_transaction(api, remote) -> None:
    await tx.ack(api, "e96cca38", "f")
    assert remote.last["method"] == "ack"
    assert remote.last["params"] == {"hash": "e96cca38", "chainid": "f"}
    assert remote.last_url == api.uri


@pytest.mark.asyncio
async def test_ack_sends_full_transaction_when_given(api, remote) -> None:
    await tx.ack(api, "e96cca38", "c", full_transaction="0201")
    assert remote.last["params"] == {"hash": "e96cca38", "chainid": "c", "fulltransaction": "0201"}


@pytest.mark.asyncio
async def test_ack_parses_entry_status(api, remote) -> None:
    remote.respond_result(
        {
            "committxid": "e5b5be39",
            "entryhash": "9228b4b0",
            "commitdata": {"status": "DBlockConfirmed", "blockdate": 1518286500000},
            "entrydata": {"status": "TransactionACK"},
        }
    )
    response = await tx.ack(api, "e5b5be39", "c")
    assert response.result.commitdata.status == "DBlockConfirmed"
    assert response.result.entrydata.status == "TransactionACK"
    assert response.result.txid == ""


@pytest.mark.asyncio
async def test_pending_transactions_omits_absent_address(api, remote) -> None:
    remote.respond_result([])
    response = await tx.pending_transactions(api)
    assert remote.last["method"] == "pending-transactions"
    assert remote.last["params"] == {}
    assert response.result == []


@pytest.mark.asyncio
async def test_pending_transactions_reads_capitalized_keys(api, remote) -> None:
    remote.respond_result(
        [
            {
                "TransactionID": "f0b1b5b8",
                "Status": "TransactionACK",
                "Inputs": [{"amount": 1000, "address": "FA2j", "useraddress": "FA2j"}],
                "Outputs": [],
                "ECOutputs": [],
                "Fees": 12000,
            }
        ]
    )
    response = await tx.pending_transactions(api, address="FA2j")
    assert remote.last["params"] == {"address": "FA2j"}
    pending = response.result[0]
    assert pending.transactionid == "f0b1b5b8"
    assert pending.status == "TransactionACK"
    assert pending.inputs[0].amount == 1000
    assert pending.fees == 12000


@pytest.mark.asyncio
async def test_working_transactions_are_keyed_by_tx_name(api, remote) -> None:
    remote.respond_result({"name": "TX_NAME", "signed": False, "inputs": None, "outputs": None})

    response = await tx.new_transaction(api, "TX_NAME")
    assert remote.last == {"jsonrpc": "2.0", "id": 0, "method": "new-transaction", "params": {"tx-name": "TX_NAME"}}
    assert remote.last_url == api.wallet_uri
    assert response.result.name == "TX_NAME"
    assert response.result.inputs is None

    await tx.add_input(api, "TX_NAME", "FA2j", 1000)
    assert remote.last["params"] == {"tx-name": "TX_NAME", "address": "FA2j", "amount": 1000}


@pytest.mark.asyncio
async def test_sign_transaction_force_is_optional(api, remote) -> None:
    await tx.sign_transaction(api, "TX_NAME")
    assert remote.last["params"] == {"tx-name": "TX_NAME"}

    await tx.sign_transaction(api, "TX_NAME", force=False)
    assert remote.last["params"] == {"tx-name": "TX_NAME", "force": False}


@pytest.mark.asyncio
async def test_tmp_transactions_reads_tx_name_alias(api, remote) -> None:
    remote.respond_result({"transactions": [{"tx-name": "TX_NAME", "txid": "4a6c", "totalinputs": 5}]})
    response = await tx.tmp_transactions(api)
    item = response.result.transactions[0]
    assert item.tx_name == "TX_NAME"
    assert item.totalinputs == 5
    assert response.model_dump(by_alias=True)["result"]["transactions"][0]["tx-name"] == "TX_NAME"


@pytest.mark.asyncio
async def test_compose_transaction_returns_submit_call(api, remote) -> None:
    remote.respond_result(
        {"jsonrpc": "2.0", "id": 0, "method": "factoid-submit", "params": {"transaction": "0201"}}
    )
    response = await tx.compose_transaction(api, "TX_NAME")
    assert response.result.method == "factoid-submit"
    assert response.result.params == {"transaction": "0201"}


@pytest.mark.asyncio
async def test_transaction_unknown_hash_height(api, remote) -> None:
    remote.respond_result({"includedindirectoryblockheight": -1})
    response = await tx.transaction(api, "00")
    assert response.result.includedindirectoryblockheight == -1
    assert response.result.factoidtransaction.blockheight == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "search,params",
    [
        (SearchBy.txid("7552f1f7"), {"txid": "7552f1f7"}),
        (SearchBy.address("FA2j"), {"address": "FA2j"}),
        (SearchBy.range(10, 20), {"range": {"start": 10, "end": 20}}),
    ],
)
async def test_search_by_constructors_encode_one_filter(api, remote, search, params) -> None:
    await tx.transactions(api, search)
    assert remote.last["params"] == params


def test_search_by_constructors_build_filter_values() -> None:
    assert SearchBy.txid("ab") == SearchByTxid("ab")
    assert SearchBy.address("FA2j") == SearchByAddress("FA2j")
    assert SearchBy.range(1, 2) == SearchByRange(start=1, end=2)

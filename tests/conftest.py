from typing import Any, Dict, List, NamedTuple

import pytest
from eth_utils import keccak

import deployment.apm

OWNER = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
APM_ADDRESS = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"
FACTORY_ADDRESS = "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB"
REGISTRAR_ADDRESS = "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb"
KERNEL_ADDRESS = "0x52908400098527886E0F7030069857D2E4169EE7"
ACL_ADDRESS = "0x8617E340B3D01FA5F11F306F4090FD50E238070D"
NEW_APM_ADDRESS = "0xde709f2102306220921060314715629080e2fb77"

CREATE_NAME_ROLE = keccak(text="CREATE_NAME_ROLE")
TX_HASH = "0x" + "ab" * 32


class FakeLog(NamedTuple):
    event_name: str
    event_arguments: Dict[str, Any]


class FakeReceipt(NamedTuple):
    events: List[FakeLog]
    txn_hash: str = TX_HASH


class FakeMethod(NamedTuple):
    contract: "FakeContract"
    name: str


class FakeContract:
    """Answers view calls from `views`; any other attribute is a transaction method."""

    def __init__(self, contract_name, address, **views):
        self.contract_name = contract_name
        self.address = address
        self._views = views

    def __getattr__(self, item):
        if item.startswith("_"):
            raise AttributeError(item)
        if item in self._views:
            return lambda: self._views[item]
        return FakeMethod(contract=self, name=item)


class FakeContainer:
    def __init__(self, contract_name, contracts):
        self.contract_name = contract_name
        self.contracts = contracts

    def at(self, address):
        contract = self.contracts[address]
        assert contract.contract_name == self.contract_name
        return contract


class FakeAccount(NamedTuple):
    address: str


class FakeTransactor:
    """Records transactions instead of sending them."""

    def __init__(self, receipt):
        self.receipt = receipt
        self.transactions = []
        self.failures = dict()

    def fail_on(self, method_name, error):
        self.failures[method_name] = error

    def get_account(self):
        return FakeAccount(address=OWNER)

    def transact(self, method, *args):
        if method.name in self.failures:
            raise self.failures[method.name]
        self.transactions.append((method.contract.address, method.name, args))
        if method.name == "newAPM":
            return self.receipt
        return FakeReceipt(events=[])


@pytest.fixture
def contracts():
    contracts = [
        FakeContract(
            "APMRegistry", APM_ADDRESS, registrar=REGISTRAR_ADDRESS, kernel=KERNEL_ADDRESS
        ),
        FakeContract("ENSSubdomainRegistrar", REGISTRAR_ADDRESS, CREATE_NAME_ROLE=CREATE_NAME_ROLE),
        FakeContract("Kernel", KERNEL_ADDRESS, acl=ACL_ADDRESS),
        FakeContract("ACL", ACL_ADDRESS),
        FakeContract("APMRegistryFactory", FACTORY_ADDRESS),
    ]
    return {c.address: c for c in contracts}


@pytest.fixture(autouse=True)
def contract_containers(monkeypatch, contracts):
    monkeypatch.setattr(
        deployment.apm,
        "get_contract_container",
        lambda contract_name: FakeContainer(contract_name, contracts),
    )


@pytest.fixture
def deploy_apm_receipt():
    return FakeReceipt(
        events=[FakeLog(event_name="DeployAPM", event_arguments={"apm": NEW_APM_ADDRESS})]
    )


@pytest.fixture
def transactor(deploy_apm_receipt):
    return FakeTransactor(receipt=deploy_apm_receipt)

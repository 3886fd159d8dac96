"""
Creation of AragonPM registries (1hive.aragonpm.eth, open.aragonpm.eth, ...)
under the aragonpm.eth top-level APM.

APMRegistryFactory.newAPM registers the new subdomain through the registrar of
the top-level APM, so the deployer must first be granted CREATE_NAME_ROLE on
that registrar. The role already has a manager, and an ACL permission can only
be created once its manager has been removed.
"""

from typing import NamedTuple, Optional

from ape.api import ReceiptAPI
from ens import ENS
from eth_typing import ChecksumAddress
from hexbytes import HexBytes
from web3 import Web3

from deployment.constants import (
    ACL,
    APM_REGISTRY,
    APM_REGISTRY_FACTORY,
    APM_TLD,
    DEPLOY_APM_ADDRESS_ARG,
    DEPLOY_APM_EVENT,
    ENS_SUBDOMAIN_REGISTRAR,
    KERNEL,
)
from deployment.params import Transactor
from deployment.utils import get_contract_container


class APMDeployment(NamedTuple):
    """Outcome of a single APMRegistryFactory.newAPM call."""

    name: str
    tld: str
    tld_hash: HexBytes
    label_hash: HexBytes
    owner: ChecksumAddress
    address: Optional[ChecksumAddress]
    tx_hash: str

    @property
    def ens_name(self) -> str:
        return apm_name(self.name, self.tld)


def namehash(name: str) -> HexBytes:
    """EIP-137 namehash of a full ENS name."""
    return HexBytes(ENS.namehash(name))


def labelhash(label: str) -> HexBytes:
    """keccak256 of a single ENS label."""
    return HexBytes(Web3.keccak(text=label))


def apm_name(label: str, tld: str = APM_TLD) -> str:
    return f"{label}.{tld}"


def get_deployed_apm_address(receipt: ReceiptAPI) -> Optional[ChecksumAddress]:
    """Returns the registry address from the DeployAPM event, if any was emitted."""
    for log in receipt.events:
        if log.event_name == DEPLOY_APM_EVENT:
            return log.event_arguments.get(DEPLOY_APM_ADDRESS_ARG)
    return None


def grant_create_name_role(transactor: Transactor, apm_address: ChecksumAddress) -> None:
    """Makes the transactor account holder and manager of CREATE_NAME_ROLE."""
    owner = transactor.get_account().address

    apm_registry = get_contract_container(APM_REGISTRY).at(apm_address)
    registrar_address = apm_registry.registrar()
    registrar = get_contract_container(ENS_SUBDOMAIN_REGISTRAR).at(registrar_address)
    create_name_role = registrar.CREATE_NAME_ROLE()

    print("Managing permissions...")
    kernel = get_contract_container(KERNEL).at(apm_registry.kernel())
    acl = get_contract_container(ACL).at(kernel.acl())

    print("Removing manager for CREATE_NAME_ROLE")
    transactor.transact(acl.removePermissionManager, registrar_address, create_name_role)

    print(f"Creating permission for {owner} on CREATE_NAME_ROLE")
    transactor.transact(acl.createPermission, owner, registrar_address, create_name_role, owner)


def new_apm(
    transactor: Transactor,
    name: str,
    apm_address: ChecksumAddress,
    factory_address: ChecksumAddress,
    tld: str = APM_TLD,
) -> APMDeployment:
    """
    Deploys the '<name>.<tld>' APM registry owned by the transactor account.

    Any failing call aborts the whole sequence. The permission changes are not
    rolled back, so running it again after a partial failure is not guaranteed
    to succeed.
    """
    owner = transactor.get_account().address
    tld_hash = namehash(tld)
    label_hash = labelhash(name)

    grant_create_name_role(transactor=transactor, apm_address=apm_address)

    apm_factory = get_contract_container(APM_REGISTRY_FACTORY).at(factory_address)
    print(f"Deploying {apm_name(name, tld)} APM...")
    receipt = transactor.transact(apm_factory.newAPM, tld_hash, label_hash, owner)

    return APMDeployment(
        name=name,
        tld=tld,
        tld_hash=tld_hash,
        label_hash=label_hash,
        owner=owner,
        address=get_deployed_apm_address(receipt),
        tx_hash=receipt.txn_hash,
    )

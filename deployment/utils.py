import json
import os
from pathlib import Path

from ape import networks, project
from ape.contracts import ContractContainer
from ethpm_types import ContractType

from deployment.constants import ABI_DIR, LOCAL_NETWORKS


def _load_json(filepath: Path):
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def is_local_network() -> bool:
    return networks.provider.network.name in LOCAL_NETWORKS


def check_etherscan_plugin() -> None:
    """
    Checks that the ape-etherscan plugin is installed and that
    the appropriate API key environment variable is set.
    """
    if is_local_network():
        # unnecessary for local deployment
        return
    try:
        from ape_etherscan.utils import API_KEY_ENV_KEY_MAP
    except ImportError:
        raise ImportError("Please install the ape-etherscan plugin to use this script.")
    ecosystem_name = networks.provider.network.ecosystem.name
    explorer_envvar = API_KEY_ENV_KEY_MAP.get(ecosystem_name)
    api_key = os.environ.get(explorer_envvar)
    if not api_key:
        raise ValueError(f"{explorer_envvar} is not set.")


def check_infura_plugin() -> None:
    """Checks that the ape-infura plugin is installed."""
    if is_local_network():
        return  # unnecessary for local deployment
    if networks.provider.name != "infura":
        return  # unnecessary when using a provider different than infura
    try:
        from ape_infura.provider import _ENVIRONMENT_VARIABLE_NAMES
    except ImportError:
        raise ImportError("Please install the ape-infura plugin to use this script.")
    for envvar in _ENVIRONMENT_VARIABLE_NAMES:
        api_key = os.environ.get(envvar)
        if api_key:
            break
    else:
        raise ValueError(
            f"No Infura API key found in "
            f"environment variables: {', '.join(_ENVIRONMENT_VARIABLE_NAMES)}"
        )


def check_plugins() -> None:
    print("Checking plugins...")
    check_etherscan_plugin()
    check_infura_plugin()


def _get_bundled_contract_container(contract: str) -> ContractContainer:
    """Builds a container from the ABI shipped in deployment/abi."""
    abi_filepath = ABI_DIR / f"{contract}.json"
    if not abi_filepath.exists():
        raise ValueError(f"No contract found with name '{contract}'.")
    contract_type = ContractType.model_validate(
        {"contractName": contract, "abi": _load_json(abi_filepath)}
    )
    return ContractContainer(contract_type)


def get_contract_container(contract: str) -> ContractContainer:
    try:
        contract_container = getattr(project, contract)
    except AttributeError:
        # Aragon contracts are not compiled in this project; use the bundled ABI
        contract_container = _get_bundled_contract_container(contract)

    return contract_container

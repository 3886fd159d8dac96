from pathlib import Path

import deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(deployment.__file__).parent
ABI_DIR = DEPLOYMENT_DIR / "abi"

#
# Networks
#

LOCAL_NETWORKS = ["local"]

#
# ENS
#

ETH_TLD = "eth"
APM_TLD = "aragonpm.eth"

#
# Contracts
#

APM_REGISTRY = "APMRegistry"
APM_REGISTRY_FACTORY = "APMRegistryFactory"
ENS_SUBDOMAIN_REGISTRAR = "ENSSubdomainRegistrar"
KERNEL = "Kernel"
ACL = "ACL"

APM_CONTRACTS = [APM_REGISTRY, APM_REGISTRY_FACTORY, ENS_SUBDOMAIN_REGISTRAR, KERNEL, ACL]

# emitted by APMRegistryFactory.newAPM
DEPLOY_APM_EVENT = "DeployAPM"
DEPLOY_APM_ADDRESS_ARG = "apm"

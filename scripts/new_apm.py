#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option
from eth_utils import encode_hex

from deployment.apm import labelhash, namehash, new_apm
from deployment.constants import APM_TLD, ETH_TLD
from deployment.options import apm_option, auto_option, factory_option, name_option
from deployment.params import Transactor
from deployment.utils import check_plugins


@click.command(cls=ConnectedProviderCommand, name="new-apm")
@network_option(required=True)
@account_option()
@name_option
@apm_option
@factory_option
@auto_option
def cli(network, account, name, apm, factory, auto):
    """
    Create a new APM (AragonPM Registry DAO) such as 1hive.aragonpm.eth.

    ape run new_apm --name 1hive --apm <aragonpm.eth APM> --factory <APMRegistryFactory>
    --network ethereum:sepolia:infura
    """
    check_plugins()
    click.echo(f"Connected to {network.name} network.")

    transactor = Transactor(account=account, autosign=auto)
    click.echo(f"Owner: {transactor.get_account().address}")

    # shown before any transaction so the hashes can be checked when confirming
    click.echo("=========")
    click.echo(f"ETH: {encode_hex(namehash(ETH_TLD))}")
    click.echo(f"TLD: {APM_TLD} ({encode_hex(namehash(APM_TLD))})")
    click.echo(f"Label: {name} ({encode_hex(labelhash(name))})")
    click.echo("=========")

    deployment = new_apm(
        transactor=transactor,
        name=name,
        apm_address=apm,
        factory_address=factory,
    )

    click.echo("=========")
    click.echo(f"# {deployment.ens_name} APM:")
    if deployment.address is None:
        click.secho(
            "⚠️ No DeployAPM event found in the receipt; the APM address is unknown.",
            fg="yellow",
        )
    click.echo(f"Address: {deployment.address}")
    click.echo(f"Transaction hash: {deployment.tx_hash}")
    click.echo("=========")


if __name__ == "__main__":
    cli()

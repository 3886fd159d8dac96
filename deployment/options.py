import click

from deployment.types import APMLabel, ChecksumAddress

name_option = click.option(
    "--name",
    "-n",
    help="Label name of the new APM, i.e. '1hive' for 1hive.aragonpm.eth",
    type=APMLabel(),
    required=True,
)

apm_option = click.option(
    "--apm",
    "-a",
    help="Address of the existing aragonpm.eth APM registry.",
    type=ChecksumAddress(),
    required=True,
)

factory_option = click.option(
    "--factory",
    "-f",
    help="Address of the APMRegistryFactory.",
    type=ChecksumAddress(),
    required=True,
)

auto_option = click.option(
    "--auto",
    help="Automatically sign transactions.",
    is_flag=True,
)

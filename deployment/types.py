import click
from eth_utils import to_checksum_address


class ChecksumAddress(click.ParamType):
    name = "checksum_address"

    def convert(self, value, param, ctx):
        try:
            value = to_checksum_address(value=value)
        except ValueError:
            self.fail(f"{value} is not a valid ethereum address", param, ctx)
        else:
            return value


class APMLabel(click.ParamType):
    """A single ENS label, i.e. the '1hive' part of '1hive.aragonpm.eth'."""

    name = "apm_label"

    def convert(self, value, param, ctx):
        # the label is hashed as given, so it is never rewritten here
        if not value:
            self.fail("APM name cannot be empty", param, ctx)
        if value != value.strip():
            self.fail(f"'{value}' must not have surrounding whitespace", param, ctx)
        if "." in value:
            self.fail(f"{value} must be a single label, without dots", param, ctx)
        if value != value.lower():
            self.fail(f"{value} must be lowercase", param, ctx)
        return value

"""Command line interface for secret recovery."""
from __future__ import annotations

import json
import logging
import sys

import click

from . import radix
from .pipeline import recover_file
from .policy import policy
from .shamir import DIVISION_MODES, split_secret

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=policy.log_level,
    show_default=True,
    help="Verbosity of diagnostics written to stderr",
)
def main(log_level: str) -> None:
    """Recover or split Shamir-style secrets over the integers."""
    logging.basicConfig(
        level=log_level.upper(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("path", required=False, default=None, type=click.Path())
@click.option(
    "--division",
    type=click.Choice(DIVISION_MODES),
    default=policy.division,
    show_default=True,
    help="'exact' rejects non-integral results, 'truncate' keeps the legacy rounding",
)
def recover(path: str | None, division: str) -> None:
    """Print the secret encoded in the share document at PATH."""
    outcome = recover_file(path or policy.input_path, division=division)
    if outcome.error is not None:
        click.echo(f"error: {outcome.error}", err=True)
        sys.exit(outcome.error.exit_code)
    click.echo(str(outcome.secret))


@main.command()
@click.argument("secret", type=click.IntRange(min=0))
@click.option("--n", "n", type=click.IntRange(min=1), required=True, help="Total shares to create")
@click.option("--k", "k", type=click.IntRange(min=1), required=True, help="Threshold to recover the secret")
@click.option(
    "--base",
    type=click.IntRange(radix.MIN_BASE, radix.MAX_BASE),
    default=10,
    show_default=True,
    help="Radix used to encode every share value",
)
@click.option(
    "--coeff-bits",
    type=click.IntRange(min=1),
    default=policy.coeff_bits,
    show_default=True,
    help="Bit length bound of the random coefficients",
)
@click.option("--output", type=click.File("w"), default="-", help="Destination file (stdout by default)")
def split(secret: int, n: int, k: int, base: int, coeff_bits: int, output) -> None:
    """Write a share document for SECRET with threshold K of N."""
    if k > n:
        raise click.BadParameter("threshold must not exceed the number of shares", param_hint="--k")
    shares = split_secret(secret, n=n, k=k, coeff_bits=coeff_bits)
    document = {"keys": {"n": n, "k": k}}
    for share in shares:
        document[str(share.x)] = {"base": str(base), "value": radix.encode(share.y, base)}
    output.write(json.dumps(document, indent=2))
    output.write("\n")


if __name__ == "__main__":
    main()

"""
flow-tx-spec command line.

Generates the signed-transaction fixture files and encodes single
transactions or account keys on demand.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .account_key import encode_account_key
from .config import OUTPUT_FORMATS, GeneratorConfig
from .encoding import encode_envelope, encode_payload
from .errors import SpecError
from .fixtures_io import tx_from_json
from .generator import write_cases

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@click.group()
def main() -> None:
    """Flow transaction encoding and fixture generation."""


@main.command()
@click.argument("out_dir", required=False, type=click.Path(file_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Fixture file format (default: json, or FLOW_TX_SPEC_FORMAT)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def generate(out_dir: Optional[str], output_format: Optional[str], verbose: bool) -> None:
    """Write the payload and envelope fixture files to OUT_DIR."""
    config = GeneratorConfig.from_env()
    if out_dir is not None:
        config.out_dir = out_dir
    if output_format is not None:
        config.output_format = output_format
    config.verbose = config.verbose or verbose

    _setup_logging(config.verbose)

    if config.output_format not in OUTPUT_FORMATS:
        raise click.BadParameter(
            f"unsupported format {config.output_format!r}", param_hint="--format"
        )

    try:
        written = write_cases(Path(config.out_dir), config.output_format)
    except SpecError as e:
        logger.error(f"Fixture generation failed: {e}")
        raise click.ClickException(str(e)) from e

    logger.info(f"Generated {len(written)} fixture files in {config.out_dir}")


@main.command("encode-key")
@click.argument("public_key")
@click.argument("sign_algorithm", type=int)
@click.argument("hash_algorithm", type=int)
@click.argument("weight", type=int)
def encode_key(public_key: str, sign_algorithm: int, hash_algorithm: int, weight: int) -> None:
    """Print the encoded account key as hex."""
    try:
        click.echo(encode_account_key(public_key, sign_algorithm, hash_algorithm, weight))
    except SpecError as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.argument("tx_file", type=click.File("r"))
@click.option("--envelope", is_flag=True, help="Encode the envelope instead of the payload")
def encode(tx_file, envelope: bool) -> None:
    """Encode a transaction JSON file (fixture message format) as hex."""
    try:
        data = json.load(tx_file)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"invalid JSON: {e}") from e

    try:
        tx = tx_from_json(data)
        click.echo(encode_envelope(tx) if envelope else encode_payload(tx))
    except SpecError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    sys.exit(main())

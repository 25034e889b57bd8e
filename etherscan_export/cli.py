#!/usr/bin/env python3
"""CLI interface for Etherscan Export."""

import logging
import sys
from typing import Optional

import click
from dotenv import load_dotenv

from . import __version__
from .config import load_config
from .exporter import export_contract


@click.command()
@click.version_option(version=__version__)
@click.argument("contract_address", required=False)
@click.option("-r", "--rinkeby", is_flag=True, help="Query the rinkeby explorer instead of mainnet")
@click.option("-o", "--output-dir", type=click.Path(file_okay=False), help="Directory to write sources to (default: cwd)")
@click.option("-c", "--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="YAML config file")
@click.option("--strict", is_flag=True, help="Fail when no source files are found")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(
    contract_address: Optional[str],
    rinkeby: bool,
    output_dir: Optional[str],
    config_path: Optional[str],
    strict: bool,
    verbose: bool,
):
    """Download the verified sources of CONTRACT_ADDRESS from Etherscan."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )

    config = load_config(config_path)
    result = export_contract(
        contract_address,
        rinkeby=rinkeby,
        output_dir=output_dir,
        config=config,
        strict_empty=strict,
    )

    logging.info(f"Wrote {len(result.files)} file(s) for {result.address}")
    click.echo(config.success_message)


def main(argv: Optional[list[str]] = None):
    load_dotenv()

    try:
        cli.main(args=argv, prog_name="etherscan-export", standalone_mode=False)
    except click.ClickException as e:
        click.echo(f"Error: {e.format_message()}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()

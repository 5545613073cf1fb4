#!/usr/bin/env python3
"""Sortly Item Group Builder - Entry point."""
import sys
import os
import json
import logging
from pathlib import Path

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import click
import requests
from colorama import Fore, Style, init

from config import app_config
from src.api.sortly_client import SortlyClient
from src.builder.payload_builder import build_item_group_payload
from src.exporter.json_exporter import JsonExporter
from src.schema.models import ItemGroupRequest
from src.validator.item_group_validator import ValidationError

# Initialize colorama
init(autoreset=True)


def print_banner():
    """Print application banner."""
    print(f"{Fore.CYAN}{'=' * 44}")
    print(f"{Fore.CYAN}║   {Fore.WHITE}Sortly Item Group Builder{Fore.CYAN}            ║")
    print(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
    print()


def load_request(request_file: str) -> ItemGroupRequest:
    """Load an item group request from a JSON file."""
    with open(request_file, "r") as f:
        return ItemGroupRequest.from_dict(json.load(f))


def fail(message: str):
    """Print an error and exit with status 1."""
    click.echo(f"{Fore.RED}❌ {message}")
    sys.exit(1)


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Sortly Item Group Builder - Validate and send item group requests."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command()
@click.argument("request_file", type=click.Path(exists=True))
def validate(request_file):
    """Validate an item group request file."""
    try:
        request = load_request(request_file)
        request.validate()
    except (ValidationError, ValueError) as e:
        fail(f"Invalid request: {e}")

    click.echo(f"{Fore.GREEN}✅ '{request.item_group.name}' is valid")


@cli.command()
@click.argument("request_file", type=click.Path(exists=True))
@click.option(
    "--output",
    type=click.Path(),
    help="Write a JSON preview of the encoded payload",
)
def build(request_file, output):
    """Encode an item group request without sending it."""
    try:
        request = load_request(request_file)
        payload = build_item_group_payload(request)
    except (ValidationError, ValueError) as e:
        fail(f"Invalid request: {e}")
    except OSError as e:
        fail(f"Could not read photo: {e}")

    click.echo(f"{Fore.CYAN}Content-Type: {payload.content_type}")

    for part in payload.parts:
        if part.is_file:
            click.echo(f"  {part.name} ← {part.filename} ({len(part.value)} bytes)")
        else:
            click.echo(f"  {part.name} = {part.value}")

    if not payload.is_multipart:
        click.echo(payload.body.decode("utf-8"))

    if output:
        JsonExporter().export(Path(output), request, payload)
        click.echo(f"{Fore.GREEN}✅ Preview saved to {output}")


@cli.command()
@click.argument("request_file", type=click.Path(exists=True))
@click.option(
    "--dry-run",
    is_flag=True,
    help="Validate and encode only",
)
def create(request_file, dry_run):
    """Create an item group in Sortly."""
    print_banner()

    try:
        request = load_request(request_file)

        if dry_run:
            payload = build_item_group_payload(request)
            click.echo(f"{Fore.YELLOW}Dry run: {payload.content_type}, {len(payload.parts)} parts")
            return

        click.echo(f"{Fore.CYAN}Sending to {app_config.sortly_api.base_url}...")
        result = SortlyClient(app_config.sortly_api).create_item_group(request)
    except (ValidationError, ValueError) as e:
        fail(f"Invalid request: {e}")
    except requests.RequestException as e:
        # Must precede OSError, which RequestException subclasses
        fail(f"API error: {e}")
    except OSError as e:
        fail(f"Could not read photo: {e}")

    click.echo(f"{Fore.GREEN}✅ Item group created")
    click.echo(json.dumps(result, indent=2))


if __name__ == "__main__":
    cli()

"""
This script compares the reason phrase table with the IANA HTTP Status Code Registry.

It downloads the registry XML (or reads a local copy with --file), parses it with
http_status.iana and prints a table of every code that is missing from the table or
whose phrase differs. The exit status is 1 when mismatches are found.

⚠️ This script requires some packages not part of the http-status package.
You must install them manually, eg. `uv pip install requests rich`
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import requests
from rich.console import Console
from rich.table import Table

from http_status.iana import IANA_REGISTRY_URL, compare_with_registry, parse_registry
from http_status.version import get_package_version

TIMEOUT = 30

console = Console()


def fetch_registry(file: Optional[Path] = None) -> bytes:
    if file is not None:
        return file.read_bytes()

    response = requests.get(
        str(IANA_REGISTRY_URL),
        timeout=TIMEOUT,
        headers={"User-Agent": f"http-status/{get_package_version()} registry check"},
    )
    response.raise_for_status()
    return response.content


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "--file", type=Path, help="Read the registry XML from a local file"
    )
    args = parser.parse_args()

    try:
        document = fetch_registry(args.file)
    except (OSError, requests.RequestException) as e:
        console.print(f"[red]Could not load the registry:[/red] {e}")
        return 2

    records = parse_registry(document)
    mismatches = compare_with_registry(records)
    console.print(
        f"Checked {len(records)} registered codes from "
        f"{args.file or IANA_REGISTRY_URL}"
    )

    if not mismatches:
        console.print("[green]Reason phrase table matches the registry.[/green]")
        return 0

    table = Table(title="Registry mismatches")
    table.add_column("Code", justify="right")
    table.add_column("Registry")
    table.add_column("Table")
    table.add_column("Reference")
    references = {record.code: record.references for record in records}
    for mismatch in mismatches:
        refs = references.get(mismatch.code) or []
        table.add_row(
            str(mismatch.code),
            mismatch.registry_phrase,
            mismatch.table_phrase if not mismatch.is_missing else "[red]missing[/red]",
            str(refs[0]) if refs else "",
        )
    console.print(table)
    return 1


if __name__ == "__main__":
    sys.exit(main())

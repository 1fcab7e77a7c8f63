#!/usr/bin/env python3
"""
CLI script to query the cloudflare_custom_hostname table.

Runs the same list/get paths the host query engine uses and prints one
JSON row per line.

Usage:
    # List all custom hostnames of a zone
    python scripts/query_custom_hostnames.py --zone-id 023e105f4ecef8ad9ca31a8372d0c353

    # Filter server-side by hostname and status
    python scripts/query_custom_hostnames.py --zone-id ZONE --name app.example.com
    python scripts/query_custom_hostnames.py --zone-id ZONE --status active

    # Get a single custom hostname by ID
    python scripts/query_custom_hostnames.py --zone-id ZONE --id 0d89c70d-ad9f-4843-b99f-6cc0252067e9

    # Use a SOPS-encrypted config file instead of env vars
    python scripts/query_custom_hostnames.py --zone-id ZONE --config config.enc.yaml
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cloudflare_tables.cloudflare import CloudflareConfigError
from cloudflare_tables.config import CUSTOM_HOSTNAME_TABLE, get_settings
from cloudflare_tables.tables import QueryData, TableError, get_table

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Query Cloudflare custom hostnames as table rows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--zone-id", required=True, help="Zone identifier")
    parser.add_argument(
        "--id", dest="hostname_id", help="Custom hostname ID (point lookup)"
    )
    parser.add_argument("--name", help="Filter by exact hostname")
    parser.add_argument("--status", help="Filter by status (e.g. active, pending)")
    parser.add_argument(
        "--config", type=str, help="Path to SOPS-encrypted config file"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    return parser.parse_args(argv)


def build_quals(args: argparse.Namespace) -> QueryData:
    """Translate CLI options into equality predicates."""
    quals = {"zone_id": args.zone_id}
    if args.hostname_id:
        quals["id"] = args.hostname_id
    if args.name:
        quals["name"] = args.name
    if args.status:
        quals["status"] = args.status
    return QueryData(quals)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = get_settings(args.config)
    table = get_table(CUSTOM_HOSTNAME_TABLE)
    quals = build_quals(args)

    rows_emitted = 0
    try:
        if args.hostname_id:
            row = table.get_row(quals, settings=settings)
            rows = [row] if row is not None else []
        else:
            rows = table.list_rows(quals, settings=settings)

        for row in rows:
            print(json.dumps(row, default=str))
            rows_emitted += 1

    except (CloudflareConfigError, TableError) as e:
        logger.error(f"{e}")
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Query failed after {rows_emitted} row(s): {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    logger.info(f"{rows_emitted} row(s) returned")
    return 0


if __name__ == "__main__":
    sys.exit(main())

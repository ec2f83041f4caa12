"""Entrypoint implementing the Ansible dynamic inventory script protocol."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import uvicorn

from .client import DigitalOceanClient
from .config import get_settings
from .errors import InventoryError
from .inventory.serializer import render_yaml, serialize, serialize_host
from .inventory.service import InventoryService

logger = logging.getLogger("do_ansible_inventory")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="do-ansible-inventory",
        description="Ansible dynamic inventory for DigitalOcean droplets.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--list", action="store_true", help="Print the full JSON inventory (default).")
    mode.add_argument("--host", metavar="NAME", help="Print the variables of a single host.")
    mode.add_argument("--yaml", action="store_true", help="Print a static YAML inventory.")
    mode.add_argument("--serve", action="store_true", help="Serve the inventory over HTTP.")
    parser.add_argument("--bind", default="127.0.0.1", help="Address for --serve.")
    parser.add_argument("--port", type=int, default=8000, help="Port for --serve.")
    return parser.parse_args(argv)


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        settings = get_settings()
        logging.basicConfig(
            stream=sys.stderr,
            level=settings.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )
        if args.serve:
            uvicorn.run(
                "do_ansible_inventory.api:app",
                host=args.bind,
                port=args.port,
                reload=False,
                log_level=settings.log_level.lower(),
            )
            return 0

        service = InventoryService(
            DigitalOceanClient.from_settings(settings),
            prefix=settings.group_prefix,
        )
        if args.host is not None:
            output = serialize_host(service.host_vars(args.host))
        elif args.yaml:
            output = render_yaml(service.build()).encode("utf-8")
        else:
            output = serialize(service.build())
    except InventoryError as exc:
        logger.error("error: %s", exc)
        return 1

    sys.stdout.buffer.write(output)
    sys.stdout.buffer.flush()
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()

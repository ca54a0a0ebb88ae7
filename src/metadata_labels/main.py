"""CLI entrypoint for metadata label tooling."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from metadata_labels import __version__
from metadata_labels.config import LabelSettings
from metadata_labels.labels.add import LabelAlreadyExists, add_label
from metadata_labels.labels.options import (
    DEFAULT_BUNDLE,
    DEFAULT_LANGUAGE,
    DEFAULT_TARGET,
    LabelAddOptions,
)
from metadata_labels.logging import configure_logging

logger = logging.getLogger(__name__)


def _parse_categories(values: list[str] | None) -> tuple[str, ...] | None:
    if not values:
        return None
    parts = [p.strip() for value in values for p in value.split(",")]
    categories = tuple(p for p in parts if p)
    return categories or None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metadata-labels",
        description="Manage custom labels in local metadata source",
    )
    parser.add_argument("--version", action="version", version=f"metadata-labels {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    label_add = subparsers.add_parser(
        "label-add",
        help="Create a custom label in the local source. Push it when you're done",
        description=(
            'Example: metadata-labels label-add -t "This is some Text" '
            "creates a custom label with the displayed text and all the defaults"
        ),
    )
    label_add.add_argument(
        "-t", "--text", required=True, help="The text you want to turn into a label"
    )
    label_add.add_argument(
        "--bundle",
        default=DEFAULT_BUNDLE,
        help="Label bundle when you want to organize them more",
    )
    label_add.add_argument("-n", "--name", default=None, help="API name for your label")
    label_add.add_argument(
        "-d", "--description", default=None, help="Description for your label"
    )
    label_add.add_argument(
        "--protected",
        action="store_true",
        help="Mark as protected (packaged, subscribers cannot change the label)",
    )
    label_add.add_argument(
        "--categories",
        action="append",
        default=None,
        help="Comma-separated categories to add to your custom label (repeatable)",
    )
    label_add.add_argument(
        "-l", "--language", default=DEFAULT_LANGUAGE, help="Language code"
    )
    label_add.add_argument(
        "--target",
        default=str(DEFAULT_TARGET),
        help=(
            "Where to create the labels folder (if it doesn't exist already) and file; "
            f"defaults to {DEFAULT_TARGET.as_posix()}"
        ),
    )
    label_add.add_argument(
        "--json",
        action="store_true",
        help="Print the updated label bundle as JSON",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = LabelSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level, settings.log_format)

    try:
        if args.command == "label-add":
            options = LabelAddOptions(
                text=args.text,
                bundle=args.bundle,
                name=args.name,
                description=args.description,
                protected=args.protected,
                categories=_parse_categories(args.categories),
                language=args.language,
                target=Path(args.target),
            )
            bundle = add_label(options)

            if args.json:
                payload = bundle.model_dump(mode="json", by_alias=True, exclude_none=True)
                print(json.dumps(payload, indent=2, ensure_ascii=False))
            else:
                added = bundle.labels[-1]
                print(f"Added {added.full_name} to {options.target_file} in local source")
            return 0

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except LabelAlreadyExists as e:
        logger.warning(str(e), extra={"full_name": e.existing.full_name, "path": str(e.path)})
        print(str(e), file=sys.stderr)
        return 3

    except Exception as e:
        logger.exception("Command failed")
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

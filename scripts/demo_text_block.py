"""Create a text block and print how it displays for a viewer."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from text_block_store.auth import StaticTokenValidator
from text_block_store.blocks import Context, default_registry
from text_block_store.config import StoreSettings, load_dotenv
from text_block_store.startup import bootstrap

DOTENV_PATH = Path(__file__).resolve().parents[1] / ".env"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a text block and render its displays.")
    parser.add_argument("--name", default="Shopping list", help="Text block name.")
    parser.add_argument("--content", default="Eggs, milk, bread", help="Text block content.")
    parser.add_argument("--owner", type=int, default=1, help="User id that owns the new block.")
    parser.add_argument(
        "--viewer",
        type=int,
        default=None,
        help="User id to render for (omit for an anonymous viewer).",
    )
    parser.add_argument("--sqlite-path", type=Path, default=None, help="Persist to this SQLite file.")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    logging.basicConfig(
        level=logging.INFO if not args.quiet else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )
    logger = logging.getLogger("demo_text_block")

    load_dotenv(DOTENV_PATH)
    settings = StoreSettings.from_env()
    if args.sqlite_path is not None:
        settings = StoreSettings(sqlite_path=args.sqlite_path, echo=settings.echo)
    session_factory = bootstrap(settings)

    validator = StaticTokenValidator({"owner": args.owner})
    if args.viewer is not None:
        validator = StaticTokenValidator({"owner": args.owner, "viewer": args.viewer})

    text_type = default_registry().get("text")
    owner_context = Context(session_factory, token="owner", token_validator=validator)
    payload = json.dumps({"name": args.name, "content": args.content})
    block = text_type.create(payload, owner_context, args.owner)
    logger.info("Created %s #%s", text_type.block_name(block, owner_context), block.id)

    viewer_context = Context(
        session_factory,
        token="viewer" if args.viewer is not None else None,
        token_validator=validator,
    )
    output = {
        "block": block.model_dump(mode="json"),
        "page": text_type.page_display(block, viewer_context).model_dump(mode="json"),
        "embed": text_type.embed_display(block, viewer_context).model_dump(mode="json"),
        "create_form": text_type.create_display(viewer_context, args.owner).model_dump(mode="json"),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()

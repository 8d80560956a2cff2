"""
Layout Service - Main Entry Point
Synthesizes page layouts from matcher output and renders page models
"""

import argparse
import sys

from core import configure_from_settings, create_container, get_logger, get_settings, safe_json_dumps
from core.errors import LayoutServiceError
from core.json import JSONParseError, extract_json
from handlers import LayoutHandler

logger = get_logger(__name__)


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="layout-service", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    synth = sub.add_parser("synthesize", help="Lay out an upstream match payload as a page model")
    synth.add_argument("payload", help="Payload file, or - for stdin")
    synth.add_argument("--title", default=None)
    synth.add_argument("--render", action="store_true", help="Also render the page and print the summary")

    render = sub.add_parser("render", help="Render a page model JSON file")
    render.add_argument("page", help="Page model file, or - for stdin")
    render.add_argument("--parallel", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_from_settings(settings)
    container = create_container(settings)
    handler = container.get(LayoutHandler)

    try:
        if args.command == "synthesize":
            layout = handler.synthesize(_read(args.payload), title=args.title)
            output = {"page": layout.page.model_dump(by_alias=True, mode="json"),
                      "warnings": [w.model_dump(mode="json") for w in layout.warnings],
                      "skipped": layout.skipped}
            if args.render:
                output["render"] = handler.render(layout.page).summary()
        else:
            result = handler.render(extract_json(_read(args.page)), parallel=args.parallel)
            output = {
                "summary": result.summary(),
                "diagnostics": {k: d.model_dump(mode="json") for k, d in result.diagnostics.items()},
            }
    except (LayoutServiceError, JSONParseError) as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(safe_json_dumps({"error": str(e), "type": type(e).__name__}, indent=2))
        return 1

    print(safe_json_dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

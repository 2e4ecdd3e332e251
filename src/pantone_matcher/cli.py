# src/pantone_matcher/cli.py
import argparse
import json
import logging
import sys

from .matching import (
    METRICS,
    find_matches,
    get_settings,
    load_palette,
    load_palette_path,
    named_color_palette,
    parse_color_input,
    rgb_to_hex,
    rgb_to_lab,
)
from .matching.general.utils import debug, enable_topics

NAMED_PALETTES = ("css4", "xkcd")


def _resolve_palette(source):
    """Bundled palette name, 'css4'/'xkcd', or a path to a palette JSON file."""
    if source in NAMED_PALETTES:
        return named_color_palette(source)
    if source.endswith(".json"):
        return load_palette_path(source)
    return load_palette(source)


def _build_parser(settings):
    parser = argparse.ArgumentParser(
        prog="pantone-match",
        description="Find the closest reference spot colors to a hex, rgb() or CSS color.",
    )
    parser.add_argument("color", help="Query color, e.g. '#5F3EFF', 'F0A', 'rgb(95,62,255)', 'navy'")
    parser.add_argument(
        "--top-k",
        type=int,
        default=settings.max_results,
        dest="top_k",
        help=f"Number of matches to show (default: {settings.max_results})",
    )
    parser.add_argument(
        "--metric",
        choices=sorted(METRICS),
        default=settings.default_metric,
        help=f"Color difference formula (default: {settings.default_metric})",
    )
    parser.add_argument(
        "--palette",
        default=settings.palette_file,
        help="Bundled palette name, css4, xkcd, or a path to a palette .json",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON document")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI: rank reference palette colors against one query color."""
    settings = get_settings()
    args = _build_parser(settings).parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s [%(levelname)s] %(message)s")
        enable_topics("cli")

    try:
        rgb = parse_color_input(args.color, debug=args.debug)
        if rgb is None:
            print(
                f"Error: {args.color!r} is not a valid color (e.g. #FF0000, F00, rgb(255,0,0), red)",
                file=sys.stderr,
            )
            return 1
        lab = rgb_to_lab(*rgb)
        debug(f"query {args.color!r} → rgb={tuple(rgb)} lab={tuple(round(v, 2) for v in lab)}", topic="cli")

        palette = _resolve_palette(args.palette)
        debug(f"palette {args.palette!r}: {len(palette)} colors", topic="cli")

        results = find_matches(lab, palette, k=args.top_k, distance_fn=args.metric)

        if args.json:
            doc = {
                "input": rgb_to_hex(*rgb).upper(),
                "rgb": rgb._asdict(),
                "lab": lab._asdict(),
                "metric": args.metric,
                "matches": [r.to_dict() for r in results],
            }
            print(json.dumps(doc, indent=2, ensure_ascii=False))
            return 0

        print(f"Your color: {rgb_to_hex(*rgb).upper()}  RGB({rgb.r}, {rgb.g}, {rgb.b})")
        print(f"Top {len(results)} closest matches ({args.metric}):")
        for r in results:
            ref = r.reference
            print(
                f"{r.rank:>3}. {ref.name:<28} {ref.code:<18} {ref.hex}  "
                f"ΔE = {r.distance:.2f}  {r.quality.rating}"
            )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

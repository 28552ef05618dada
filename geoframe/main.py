import argparse
import sys

from environs import Env

from geoframe.logging_config import setup_logging
from geoframe.adapter import GeoFrameAPI
from geoframe.domain.constants import DEFAULT_FIELD_OF_VIEW_DEG
from geoframe.domain.models.angle import Angle
from geoframe.domain.models.distance import Distance
from geoframe.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
)
from geoframe.infrastructure.viewport import VirtualViewport


class UserInputHandler:
    def get_points_text(self, prompt: str) -> str:
        lines = []
        print(prompt)
        while True:
            try:
                line = input()
            except EOFError:
                break
            if not line.strip():
                break
            lines.append(line)
        return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Frame a map camera on a set of positions"
    )
    parser.add_argument(
        "--points",
        type=str,
        default=None,
        help="Coordinate pairs, e.g. \"-1.0 0.0 1.0 0.0\" (prompted when omitted)",
    )
    parser.add_argument(
        "--margin",
        type=float,
        default=None,
        help="Ground margin around the points in meters (default: GEOFRAME_MARGIN_M)",
    )
    parser.add_argument("--width", type=int, default=800, help="Viewport width in pixels")
    parser.add_argument("--height", type=int, default=600, help="Viewport height in pixels")
    parser.add_argument(
        "--fov",
        type=float,
        default=DEFAULT_FIELD_OF_VIEW_DEG,
        help="Horizontal field of view in degrees",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a console report",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Load environment variables before anything reads them
    env = Env()
    env.read_env(".env")

    setup_logging(env)

    try:
        api = GeoFrameAPI.create_from_env(env)

        text = args.points
        if text is None:
            text = UserInputHandler().get_points_text(
                "Enter coordinate pairs (lat lon), one per line; empty line to finish:"
            )
        positions = api.parse_positions(text)

        viewport = VirtualViewport(
            args.width, args.height, field_of_view=Angle.from_degrees(args.fov)
        )
        margin = None if args.margin is None else Distance.from_meters(args.margin)
        eye = api.scale_to_points(viewport, positions, margin=margin)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if eye is None:
        print("Nothing to frame: the viewport or the point set is empty.")
        return 0

    if args.json:
        print(JSONOutputFormatter().format_result(eye))
    else:
        ConsoleOutputFormatter().format_result(eye)
        print(f"✅ Camera framed on {len(positions)} position(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Render every track element outline on a US Letter sample sheet.

Outputs tiles.svg next to this script unless --output is given.
"""
import argparse
import datetime
import logging
import os

from geom.logging_config import setup_logging
from geom.path import SVGPath
from geom.svg import W, H, git_describe, rotate
from fragments import (
    round_element_path, curved_element_path, curved_element_enlarged_path,
    curved_arrow_path, straight_element_path,
    straight_arrow_path, arrow_tip_path, cross_path,
)
from fragments.constants import (
    LANE_WIDTH, BARRIER_WIDTH, BARRIER_CHUNKS, TRACK_WIDTH, INNER_RADIUS,
    SHEET_MARGIN, SHEET_COLUMNS, SHEET_ROWS, SHEET_SCALE, TITLE_SIZE, LABEL_SIZE,
)

logger = logging.getLogger("gen_tiles")

_DIR = os.path.dirname(os.path.abspath(__file__))


# ============================================================
# Samples
# ============================================================
def build_samples() -> list[tuple[str, SVGPath, float]]:
    """(label, outline, rotation) for each element, drawn around the origin in track units."""
    half = TRACK_WIDTH / 2
    chunk = LANE_WIDTH / BARRIER_CHUNKS
    return [
        ("straight element", straight_element_path(-half, -half, TRACK_WIDTH, TRACK_WIDTH, BARRIER_WIDTH), 0),
        ("curved element", curved_element_path(-half, half, LANE_WIDTH, INNER_RADIUS, 45, -45, BARRIER_WIDTH), 0),
        ("enlarged curve", curved_element_enlarged_path(-half, -half, LANE_WIDTH, INNER_RADIUS, chunk, BARRIER_WIDTH), 0),
        ("round element", round_element_path(0, 0, INNER_RADIUS, BARRIER_WIDTH), 0),
        ("curved arrow", curved_arrow_path(0, 0, LANE_WIDTH, chunk, INNER_RADIUS, 270), 0),
        ("straight arrow", straight_arrow_path(0, 0, TRACK_WIDTH, chunk), 0),
        ("arrow tip", arrow_tip_path(0, 0, chunk * 2, chunk * 2), -90),
        ("cross", cross_path(0, 0, LANE_WIDTH, LANE_WIDTH, chunk), 45),
    ]


# ============================================================
# Rendering
# ============================================================
def render_sheet(version: str, generated: str | None = None) -> str:
    """Render the sample sheet. Returns SVG string."""
    samples = build_samples()
    cell_w = (W - 2 * SHEET_MARGIN) / SHEET_COLUMNS
    top = SHEET_MARGIN + TITLE_SIZE * 2
    cell_h = (H - SHEET_MARGIN - top) / SHEET_ROWS

    out = []
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{W}" height="{H}"'
               f' viewBox="0 0 {W} {H}">')
    out.append(f'<rect x="0" y="0" width="{W}" height="{H}" fill="white"/>')
    out.append(f'<text x="{SHEET_MARGIN}" y="{SHEET_MARGIN + TITLE_SIZE}" font-family="Arial"'
               f' font-size="{TITLE_SIZE}" fill="#333">Track elements'
               f' (lane {LANE_WIDTH}, barrier {BARRIER_WIDTH})</text>')

    for i, (label, path, angle) in enumerate(samples[:SHEET_COLUMNS * SHEET_ROWS]):
        col, row = i % SHEET_COLUMNS, i // SHEET_COLUMNS
        cx = SHEET_MARGIN + cell_w * (col + 0.5)
        cy = top + cell_h * (row + 0.5)
        logger.debug(f"{label}: {len(path)} commands")
        out.append(f'<g transform="translate({cx:.1f} {cy:.1f}) scale({SHEET_SCALE})">')
        out.append(f'<path d="{path}" transform="{rotate(angle)}"'
                   f' fill="#ddd" stroke="#333" stroke-width="1.5"/>')
        out.append('</g>')
        out.append(f'<text x="{cx:.1f}" y="{cy + cell_h / 2 - LABEL_SIZE:.1f}" text-anchor="middle"'
                   f' font-family="Arial" font-size="{LABEL_SIZE}" fill="#666">{label}</text>')

    if generated is None:
        generated = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    out.append(f'<text x="{W - SHEET_MARGIN}" y="{H - SHEET_MARGIN / 2:.1f}" text-anchor="end"'
               f' font-family="Arial" font-size="7.5" fill="#999">Generated {generated} from {version}</text>')
    out.append('</svg>')
    return "\n".join(out)


# ============================================================
# Main entry point
# ============================================================
def main(argv: list[str] | None = None) -> str:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--output", "-o", default=os.path.join(_DIR, "tiles.svg"),
                        help="SVG file to write (default: %(default)s)")
    parser.add_argument("--verbose", "-v", action="store_true", help="log every sample")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    version = git_describe(_DIR)
    logger.info(f"git describe: {version}")

    svg_content = render_sheet(version)
    with open(args.output, "w", encoding="utf-8") as f:
        f.write(svg_content)
    logger.info(f"Sample sheet written to {args.output}")
    return args.output


if __name__ == "__main__":
    main()

"""Fukuda renderer — turn an image into intensity-modulated strips.

Single frame:
    python render_fukuda.py mona.jpg -o mona_fan.svg --scheme fan
Animation (one file per frame):
    python render_fukuda.py mona.jpg -o frames/ --frames 40 --sweep evolve --sweep unfurl
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from fukuda.config import settings
from fukuda.engine import AnimationState, FukudaError, LayoutParams, create_pipeline
from fukuda.engine.sweep import SWEEPS
from fukuda.svg.serializer import segments_to_svg
from fukuda.utils.image_io import load_raster
from fukuda.utils.rasterizer import render_png


def write_frame(segments, raster, path: str) -> None:
    style = {
        "stroke": settings.stroke_color,
        "stroke_width": settings.stroke_width,
        "background": settings.background_color,
    }
    if path.lower().endswith(".png"):
        with open(path, "wb") as f:
            f.write(render_png(segments, raster.width, raster.height, **style))
    else:
        with open(path, "w", encoding="utf-8") as f:
            f.write(segments_to_svg(segments, raster.width, raster.height, **style))


def main():
    parser = argparse.ArgumentParser(description="Fukuda-style image tiling")
    parser.add_argument("input", help="Image file (PNG, JPEG, ...)")
    parser.add_argument("-o", "--output", help="Output .svg/.png file, or a folder when --frames > 1")
    parser.add_argument("--scheme", choices=["rectangular", "fan"], default=settings.default_scheme)
    parser.add_argument("--strip-width", type=int, help="Rectangular strip pitch")
    parser.add_argument("--num-strips", type=int, help="Number of fan slices")
    parser.add_argument("--pct-min", type=float, help="Minimum width percentage")
    parser.add_argument("--pct-max", type=float, help="Maximum width percentage")
    parser.add_argument("--angle-start", type=float, help="Fan start angle (degrees)")
    parser.add_argument("--angle-end", type=float, help="Fan end angle (degrees)")
    parser.add_argument("--step-size", type=float, help="Anchor spacing along a strip")
    parser.add_argument("--image-color", action="store_true", help="Colour strips from the image")
    parser.add_argument("--frames", type=int, default=1, help="Number of animation frames")
    parser.add_argument("--sweep", action="append", choices=sorted(SWEEPS), default=[],
                        help="Enable a parameter sweep (repeatable)")
    parser.add_argument("--format", choices=["svg", "png"], default="svg", help="Frame format for folders")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if not os.path.exists(args.input):
        print(f"File not found: {args.input}")
        sys.exit(1)

    try:
        raster = load_raster(args.input)
        params = LayoutParams.from_settings(
            settings,
            scheme=args.scheme,
            strip_width=args.strip_width,
            num_strips=args.num_strips,
            pct_min=args.pct_min,
            pct_max=args.pct_max,
            angle_start=args.angle_start,
            angle_end=args.angle_end,
            step_size=args.step_size,
            solid_color=False if args.image_color else None,
        ).validate()
        pipeline = create_pipeline()

        stem = os.path.splitext(os.path.basename(args.input))[0]
        if args.frames <= 1:
            out_path = args.output or f"{stem}_{params.scheme}.svg"
            write_frame(pipeline.run(raster, params), raster, out_path)
            print(f"  → Saved: {out_path}")
            return

        out_dir = args.output or f"{stem}_{params.scheme}_frames"
        os.makedirs(out_dir, exist_ok=True)
        state = AnimationState.start(params, args.sweep)
        print(f"Animating {args.frames} frames, sweeps: {', '.join(state.enabled) or 'none'}")
        for frame in pipeline.run_streaming(raster, state, args.frames):
            out_path = os.path.join(out_dir, f"frame_{frame.index:04d}.{args.format}")
            write_frame(frame.segments, raster, out_path)
            print(f"[{frame.index + 1}/{args.frames}] {frame.segment_count} segments → {out_path}")
        print(f"Done: {args.frames} frames → {out_dir}")
    except FukudaError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

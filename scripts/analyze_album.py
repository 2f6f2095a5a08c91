#!/usr/bin/env python3
"""
Analyze Duck Game podium screenshots.

Usage:
    # Analyze a whole album folder
    python scripts/analyze_album.py --album path/to/Album

    # Also plot when rounds were played
    python scripts/analyze_album.py --album path/to/Album --plot timeline.png

    # Save victor banner fingerprints for inspection
    python scripts/analyze_album.py --album path/to/Album --fingerprints out/

    # Analyze a single screenshot
    python scripts/analyze_album.py --image "path/to/12-15-16 18;50.png"
"""

import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))


def main():
    parser = argparse.ArgumentParser(description='Duck Game podium screenshot analysis')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--album', '-a', type=str, help='Path to album folder')
    source.add_argument('--image', '-i', type=str, help='Path to a single podium screenshot')
    parser.add_argument('--layout', '-l', type=str,
                       help='Path to a layout override (default: podium_layout.json if present)')
    parser.add_argument('--plot', '-p', type=str,
                       help='Save a timeline chart of the album to this file')
    parser.add_argument('--fingerprints', '-f', type=str,
                       help='Save victor banner fingerprints into this folder')
    parser.add_argument('--quiet', '-q', action='store_true',
                       help='Only print the summary')
    args = parser.parse_args()

    from podium_detection.album import analyze_album, group_by_victor
    from podium_detection.placards import UndeterminedPlayerCountError
    from podium_detection.podium import ImageDecodeError, PodiumImage
    from podium_detection.processing import PodiumLayout
    from podium_detection.processing.constants import DEFAULT_LAYOUT_FILE
    from podium_detection.utils import fingerprint_to_image, render_timeline, save_image

    layout_path = Path(args.layout) if args.layout else None
    if layout_path is None and Path(DEFAULT_LAYOUT_FILE).exists():
        layout_path = Path(DEFAULT_LAYOUT_FILE)

    try:
        layout = PodiumLayout(layout_path)
    except ValueError as e:
        print(f"Error loading layout: {e}")
        return 1

    if args.image:
        try:
            podium = PodiumImage.from_file(args.image, layout=layout)
            count = podium.player_count()
        except (ImageDecodeError, UndeterminedPlayerCountError) as e:
            print(f"Error processing image: {e}")
            return 1

        fingerprint = podium.victor_fingerprint()
        palette = fingerprint.palette
        print(f"Image: {args.image}")
        print(f"Players: {count}")
        print(f"Banner palette: light={palette.light} dark={palette.dark}")
        print(f"Indeterminate banner pixels: {fingerprint.indeterminate_count()}")

        if args.fingerprints:
            out_dir = Path(args.fingerprints)
            out_dir.mkdir(parents=True, exist_ok=True)
            out_path = out_dir / f"{Path(args.image).stem}.png"
            save_image(fingerprint_to_image(fingerprint), out_path)
            print(f"Fingerprint saved to: {out_path}")
        return 0

    try:
        results = analyze_album(args.album, layout=layout, verbose=not args.quiet)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error reading album: {e}")
        return 1

    if not results:
        print("No podium images could be analyzed.")
        return 1

    print_summary(results, group_by_victor(results))

    if args.fingerprints:
        out_dir = Path(args.fingerprints)
        out_dir.mkdir(parents=True, exist_ok=True)
        for result in results:
            save_image(fingerprint_to_image(result.fingerprint), out_dir / result.path.name)
        print(f"\nFingerprints saved to: {out_dir}")

    if args.plot:
        chart = render_timeline([r.timestamp for r in results])
        if save_image(chart, args.plot):
            print(f"\nTimeline saved to: {args.plot}")
        else:
            print(f"\nFailed to save timeline to: {args.plot}")
            return 1

    return 0


def print_summary(results, groups):
    """Print player count and victor statistics."""
    print("\n" + "=" * 50)
    print("PODIUM ALBUM")
    print("=" * 50)

    print(f"\nRounds: {len(results)}")
    print(f"First: {results[0].timestamp:%Y-%m-%d %H:%M}")
    print(f"Last:  {results[-1].timestamp:%Y-%m-%d %H:%M}")

    counts = {}
    for result in results:
        counts[result.player_count] = counts.get(result.player_count, 0) + 1
    print("\nPlayer counts:")
    for count in sorted(counts):
        print(f"  {count} players: {counts[count]}")

    print(f"\nDistinct victor banners: {len(groups)}")
    for i, group in enumerate(sorted(groups, key=len, reverse=True)):
        print(f"  Banner {i + 1}: {len(group)} wins (e.g. {group[0].path.name})")

    print("\n" + "=" * 50)


if __name__ == '__main__':
    sys.exit(main())

#!/usr/bin/env python3
"""
Image-to-ASCII Art Converter

A command-line host for the ascii_canvas library.
Supports both single conversions and an interactive tuning mode.

Usage:
    python scripts/cli.py photo.png                      # Single conversion
    python scripts/cli.py photo.png --interactive        # Tune settings live
    python scripts/cli.py --list-ramps                   # Show ramps
"""

import argparse
import logging
import os
import sys

# Add project to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ascii_canvas import (  # noqa: E402
    ASCIIArtError,
    ConfigSnapshot,
    ConversionSession,
    ScaleMode,
    clamp_line_height,
    get_preset,
    list_presets,
    list_ramps,
    preview_ramp,
)


def show_result(result, output=None):
    """Print a render and optionally save it."""
    print("=" * 60)
    result.display()
    print("=" * 60)
    print(f"Chars: {result.char_count}  ({result.width}x{result.height})")

    if output:
        os.makedirs(os.path.dirname(output) or ".", exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            f.write(result.text)
        print(f"✅ Saved to {output}")


def show_ramps():
    for key in list_ramps():
        print(f"  {key:<18} {preview_ramp(key)}")


def interactive_mode(session):
    """Interactive REPL for tuning settings against the loaded image."""
    print("\n" + "=" * 60)
    print("   INTERACTIVE ASCII CONVERTER")
    print("=" * 60)
    print()
    print("Commands:")
    print("  'load <path>'     - Load a new image")
    print("  'mode <m>'        - pixel-perfect, auto or manual")
    print("  'width <N>'       - Manual width")
    print("  'stretch <F>'     - Vertical stretch")
    print("  'ramp <key>'      - Glyph ramp (see 'ramps')")
    print("  'negative'        - Toggle negative")
    print("  'preset <name>'   - " + ", ".join(list_presets()))
    print("  'save <filename>' - Save last output")
    print("  'quit' or 'exit'  - Exit the program")
    print()

    while True:
        try:
            line = input("\n📝 > ").strip()
            if not line:
                continue

            command, _, arg = line.partition(" ")
            command = command.lower()
            arg = arg.strip()

            if command in ("quit", "exit", "q"):
                print("👋 Goodbye!")
                break

            if command == "ramps":
                show_ramps()
                continue

            if command == "save":
                if session.last_result is None:
                    print("❌ No output to save yet!")
                    continue
                show_result(session.last_result, output=arg or "outputs/ascii.txt")
                continue

            if command == "load":
                session.load(arg)
                result = session.render()
            elif command == "mode":
                result = session.update(scale_mode=ScaleMode.parse(arg))
            elif command == "width":
                result = session.update(scale_mode=ScaleMode.MANUAL, manual_width=arg)
            elif command == "stretch":
                result = session.update(vertical_stretch=float(arg))
            elif command == "ramp":
                result = session.update(ramp_key=arg)
                print(f"   Symbols: {session.preview()}")
            elif command == "negative":
                result = session.update(negative=not session.config.negative)
                print(f"   Symbols: {session.preview()}")
            elif command == "preset":
                preset = get_preset(arg)
                result = session.apply_preset(arg)
                print(f"   Line height for display: {clamp_line_height(preset.line_height)}px")
            else:
                print(f"❌ Unknown command: {command}")
                continue

            if result is None:
                print("⚠️  Settings saved; load an image to render.")
            else:
                show_result(result)

        except KeyboardInterrupt:
            print("\n👋 Interrupted. Goodbye!")
            break
        except (ASCIIArtError, ValueError, OSError) as e:
            print(f"❌ Error: {e}")


def main():
    parser = argparse.ArgumentParser(
        description="Convert an image to ASCII art",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/cli.py cat.png
    Auto width (135 characters)

  python scripts/cli.py cat.png --mode manual --width 87 --stretch 0.35
    Manual width with vertical compression

  python scripts/cli.py cat.png --preset wykop --ramp blocks --negative
    Preset settings with an inverted block ramp
"""
    )

    parser.add_argument("image", nargs="?", help="Source image path")
    parser.add_argument(
        "--mode", "-m",
        choices=[m.value for m in ScaleMode],
        default=ScaleMode.AUTO.value,
        help="Scaling mode (default: auto)"
    )
    parser.add_argument(
        "--width", "-w",
        default=None,
        help="Output width for manual mode (default fallback: 235)"
    )
    parser.add_argument(
        "--stretch", "-s",
        type=float,
        default=1.0,
        help="Vertical stretch factor (default: 1.0)"
    )
    parser.add_argument(
        "--ramp", "-r",
        choices=list_ramps(),
        default="8",
        help="Glyph ramp (default: 8)"
    )
    parser.add_argument("--negative", "-n", action="store_true", help="Reverse the ramp")
    parser.add_argument("--preset", "-p", choices=list_presets(), help="Display preset")
    parser.add_argument("--output", "-o", default=None, help="Output file path (optional)")
    parser.add_argument("--interactive", "-i", action="store_true", help="Interactive mode")
    parser.add_argument("--list-ramps", action="store_true", help="List glyph ramps and exit")
    parser.add_argument("--preview", action="store_true", help="Print the active ramp and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    if args.list_ramps:
        show_ramps()
        return 0

    config = ConfigSnapshot(
        scale_mode=args.mode,
        manual_width=args.width,
        vertical_stretch=args.stretch,
        ramp_key=args.ramp,
        negative=args.negative,
    )
    if args.preset:
        config = config.with_preset(args.preset)

    if args.preview:
        print(config.preview())
        return 0

    session = ConversionSession(config)

    try:
        if args.image:
            session.load(args.image)

        if args.interactive:
            if session.has_image:
                show_result(session.render())
            interactive_mode(session)
            return 0

        show_result(session.render(), output=args.output)
    except (ASCIIArtError, OSError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Demo: Generate a C# enum from an EnumModel.

Shows both brace styles and writes the default rendering to disk.
"""

import logging
import sys

from enumgen.examples import build_example_color_enum
from enumgen.backends import BraceStyle, RenderOptions, generate_csharp


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    model = build_example_color_enum()

    print("=" * 80)
    print("ENUM GENERATOR DEMO")
    print("=" * 80)

    for style in BraceStyle:
        print(f"\n{style.value.upper()} BRACE STYLE:")
        print("-" * 80)
        print(generate_csharp(model, RenderOptions(brace_style=style)))

    output_dir = sys.argv[1] if len(sys.argv) > 1 else "."
    path = model.write_to_file(output_dir)
    print(f"\nSaved to: {path}")


if __name__ == "__main__":
    main()

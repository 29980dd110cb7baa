"""Basic chromapick usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromapick import (
    Color,
    ColorSession,
    Notation,
    compute_contrast,
    convert,
    generate_palettes,
)


def demonstrate_colors() -> None:
    # Build a color from HSL and look at it in other spaces.
    accent = Color.from_hsl(20, 100, 62)
    print("HSV state:", accent.hsv)
    print("RGB:", accent.rgb)
    print("RGB -> OKLCH:", convert(accent.rgb, "oklch"))

    result = compute_contrast(accent, "#1E1E1E")
    print("Contrast on dark gray:", result.ratio_text, result.level.description)


def demonstrate_session() -> None:
    session = ColorSession()
    session.begin_edit(Notation.RGB)

    # A rejected commit leaves the color alone; the field reverts on blur.
    print("Commit '10, 20':", session.commit_text("rgb", "10, 20").ok)
    print("Field reverts to:", session.end_edit())

    session.commit_text("hsl", "hsl(0.75turn 60% 45% / 80%)")
    for notation, text in session.formats().items():
        print(f"{notation.label:>10}: {text.display:<28} copy: {text.copy}")


def demonstrate_palettes() -> None:
    palettes = generate_palettes(*Color.from_hsl(160, 70, 40).hsl)
    print("Scale:", " ".join(entry.hex for entry in palettes.scale))
    print("Tints:", " ".join(entry.hex for entry in palettes.tints))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_session()
    demonstrate_palettes()

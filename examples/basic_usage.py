"""Basic sitecolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from sitecolor import Color


def demonstrate_parsing() -> None:
    # Any supported notation fills the same object.
    for text in ("#fa1", "#336699", "rgb(255, 0, 170)", "rgba(12, 34, 56, 0.5)", "tomato"):
        color = Color.from_string(text)
        print(f"{text!r:>26} -> {color.to_rgb_array()} opacity={color.opacity} str={color}")


def demonstrate_transformations() -> None:
    brand = Color.from_string("#336699")
    print("Brand:", brand)
    print("Hover (darken 25%):", brand.copy().darken(0.25))
    print("Highlight (lighten 20%):", brand.copy().lighten(0.2))
    print("Tint (blend 50% with white):", brand.copy().blend_with(Color.from_string("#fff"), 0.5))
    print("Overlay:", brand.copy().set_opacity(0.6))


def demonstrate_contrast() -> None:
    background = Color.from_string("#fff")
    for text in ("#000", "#777", "#336699", "#fa1"):
        foreground = Color.from_string(text)
        ratio = foreground.compare_contrast_to(background)
        print(f"{text} on white: {ratio:.2f}:1 (luminance {foreground.get_luminance():.4f})")


if __name__ == "__main__":
    demonstrate_parsing()
    demonstrate_transformations()
    demonstrate_contrast()

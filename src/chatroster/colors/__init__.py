"""Color math for the roster UI.

Colors are `Color` models with float channels in [0, 1]. Every operator
here is a pure function: it takes colors and returns a new one.

## Representations

### 1. RGBA floats
**Purpose**: What the rendering layer consumes
**Format**: `Color(r=0.17, g=0.16, b=0.18, a=1.0)`

### 2. Hex strings
**Purpose**: Config files and user input
**Format**: `"#2b292d"` (exactly `#` plus six hex digits, written lowercase)

```python
from chatroster.colors import color_to_hex, hex_to_color

bg = hex_to_color("#2b292d")
assert color_to_hex(bg) == "#2b292d"
```

### 3. Okhsl
**Purpose**: Perceptually even adjustments (mix, lighten, darken, hue swaps)
**Format**: `Okhsl(hue=310.2, saturation=0.04, lightness=0.21)`

Greys have no hue; `to_hsl` gives them the maximum saturation instead of
NaN.

## Per-participant colors

```python
from chatroster.colors import randomize_color

nick_color = randomize_color(palette.accent, "host.example.org")
```

The hue comes from the seed string, saturation and lightness from the
base color. See `chatroster.colors.seeded`.
"""

from .hexcodec import color_to_hex, hex_to_color, is_hex_color
from .operations import alpha, darken, from_hsl, is_dark, lighten, mix, to_hsl
from .seeded import randomize_color, seed_hash, seeded_hue

__all__ = [
    # Hex codec
    "color_to_hex",
    "hex_to_color",
    "is_hex_color",
    # Operators
    "alpha",
    "darken",
    "from_hsl",
    "is_dark",
    "lighten",
    "mix",
    "to_hsl",
    # Seeded colors
    "randomize_color",
    "seed_hash",
    "seeded_hue",
]

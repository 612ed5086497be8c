"""gen-front - Generate the laser-cut front panel of a word clock.

gen-front reads an outline font (TTF/OTF), sizes a grid of letters so that the
whole grid is visually square given the fixed pitch of the LED array behind it,
and exports the panel (letters, edge markers and mounting holes) as SVG or DXF.

Example:
    $ gen-front Siruca.ttf cover.svg

This will create cover.svg with the French word-clock grid cut out of a panel
sized for an 11x10 LED array.
"""

__version__ = "0.1.0"
__author__ = "Boris Faure"

__all__ = ["__author__", "__version__"]

"""
config.py

Central place for world file format constants and library defaults. Keep
values explicit and documented here so the parser, the writer and the CLI
agree on one definition of the format.

Contents:
---------
1. WORLD FILE LAYOUT:
   - Number of coefficient lines and the fixed on-disk order. The order
     interleaves scale and skew terms; it is the de-facto convention and must
     not change or files written here will not be read correctly elsewhere.

2. PARSE_DEFAULTS:
   - `strict`: when False (default) any lines after the sixth are ignored,
     which tolerates readers and writers that append extra metadata lines.

3. SIDECAR_EXTENSIONS:
   - Image extension -> world file extension for the well known raster
     formats. Extensions not listed here follow the generic rule: first and
     last letter of the image extension plus a trailing 'w'.

Usage:
------
    from worldfile.config import LINE_ORDER, SIDECAR_EXTENSIONS
"""

# ───────────────────────────────────────────────────────────────────────────────
# 1) WORLD FILE LAYOUT
# ───────────────────────────────────────────────────────────────────────────────
N_LINES = 6

# Field name per line, line 1 first
LINE_ORDER = (
    'x_scale',   # A: world-x change per unit pixel-x
    'y_skew',    # D: world-y change per unit pixel-x
    'x_skew',    # B: world-x change per unit pixel-y
    'y_scale',   # E: world-y change per unit pixel-y (negative for north-up)
    'x_coord',   # C: world-x of pixel origin (0, 0)
    'y_coord',   # F: world-y of pixel origin (0, 0)
)

NEWLINE = '\n'
ENCODING = 'utf-8'

# ───────────────────────────────────────────────────────────────────────────────
# 2) PARSER DEFAULTS
# ───────────────────────────────────────────────────────────────────────────────
PARSE_DEFAULTS = {
    'strict': False,
}

# ───────────────────────────────────────────────────────────────────────────────
# 3) SIDECAR NAMING
# ───────────────────────────────────────────────────────────────────────────────
SIDECAR_EXTENSIONS = {
    '.tif': '.tfw',
    '.tiff': '.tfw',
    '.jpg': '.jgw',
    '.jpeg': '.jgw',
    '.png': '.pgw',
    '.gif': '.gfw',
    '.bmp': '.bpw',
    '.jp2': '.j2w',
    '.sid': '.sdw',
}

# Extension-agnostic fallback used by several GIS packages
GENERIC_EXTENSION = '.wld'

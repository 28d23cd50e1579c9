# constants.py
# ============

"""
constants.
=========

Does: Define the fixed geometry of a eudex hash (lanes, masks, code-point ranges)
      and the canonical tuning (lane weights + similarity threshold).
Used By: Phone tables, encoder, distance metric, tuning loader.
Returns: Pure data only (no side effects).
"""

# ── 1) Hash geometry ─────────────────────────────────────────────────────────

LANE_BITS = 8
LANE_COUNT = 8
LANE_MASK = 0xFF
U64_MASK = 0xFFFF_FFFF_FFFF_FFFF

# Lane 7 holds the head letter; lanes 0..6 hold the tail.
HEAD_SHIFT = LANE_BITS * (LANE_COUNT - 1)
MAX_TAIL_LANES = LANE_COUNT - 1

DISCRIMINANT_BIT = 0b0000_0001
FEATURE_MASK = LANE_MASK & ~DISCRIMINANT_BIT

# ── 2) Character domain ──────────────────────────────────────────────────────

CASE_BIT = 0x20  # ASCII / Latin-1 case bit, forced on to fold capitals to lowercase

# Uppercase letters whose lowercase form is one case bit away
ASCII_UPPER = (0x41, 0x5A)       # A..Z
LATIN1_UPPER = (0xC0, 0xDE)      # À..Þ
LATIN1_MULTIPLICATION_SIGN = 0xD7  # × sits inside À..Þ but is not a letter

# Capitals living outside Latin-1 whose lowercase is ß or ÿ
OUTSIDE_UPPER = {
    0x1E9E: 0xDF,  # ẞ
    0x0178: 0xFF,  # Ÿ
}

ASCII_FIRST = ord("a")
ASCII_LETTERS = 26

# Latin-1 Supplement, ß (U+00DF) through ÿ (U+00FF)
LATIN1_FIRST = 0xDF
LATIN1_LETTERS = 33
LATIN1_DIVISION_SIGN = 0xF7  # ÷ sits inside ß..ÿ but is not a letter

# ── 3) Canonical tuning ──────────────────────────────────────────────────────

# Fibonacci progression, lane 0 (last letters) → lane 7 (head letter)
DEFAULT_WEIGHTS: tuple[int, ...] = (1, 2, 3, 5, 8, 13, 21, 34)

# `similar` holds when the weighted distance is strictly below this.
DEFAULT_THRESHOLD = 12

"""
Enums shared by the estimate models and calculators.

Values are lowercase snake_case identifiers; they double as the wire format
of the HTTP API and of imported project files.
"""

from enum import Enum

# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class EntityKind(str, Enum):
    """Closed set of paintable entity variants."""

    ROOM = "room"
    BATHROOM = "bathroom"
    IRREGULAR_ROOM = "irregular_room"
    STAIRCASE = "staircase"
    FIREPLACE = "fireplace"
    BUILT_IN = "built_in"
    BRICK_WALL = "brick_wall"


class CeilingType(str, Enum):
    """Ceiling shape. Cathedral ceilings are sloped and raise the wall height."""

    FLAT = "flat"
    CATHEDRAL = "cathedral"


# ---------------------------------------------------------------------------
# Paint & labor
# ---------------------------------------------------------------------------


class PaintType(str, Enum):
    """Paint products purchased for a job. Each has its own coverage and price."""

    WALL = "wall"
    CEILING = "ceiling"
    TRIM = "trim"
    DOOR = "door"
    PRIMER = "primer"


class SurfaceCategory(str, Enum):
    """Labor line categories shown on an itemized estimate."""

    WALLS = "walls"
    CEILINGS = "ceilings"
    BASEBOARDS = "baseboards"
    CROWN_MOULDING = "crown_moulding"
    WINDOWS = "windows"
    DOORS = "doors"
    CLOSETS = "closets"
    RISERS = "risers"
    SPINDLES = "spindles"
    HANDRAIL = "handrail"
    STAIRWELL_WALLS = "stairwell_walls"
    STAIRWELL_CEILING = "stairwell_ceiling"
    FIREPLACE = "fireplace"
    MANTEL = "mantel"
    FIREPLACE_LEGS = "fireplace_legs"
    OVER_MANTEL = "over_mantel"
    FIREPLACE_TRIM = "fireplace_trim"
    BUILT_IN = "built_in"
    BRICK = "brick"
    PRIMER = "primer"


class Unit(str, Enum):
    """Quantity units for labor line items."""

    SQ_FT = "sq_ft"
    LINEAR_FT = "linear_ft"
    EACH = "each"

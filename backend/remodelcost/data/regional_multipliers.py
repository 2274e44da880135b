"""Regional cost multipliers for ZIP-code-based cost adjustment.

Multipliers are relative to a Maryland baseline (1.00). Montgomery County
runs above baseline, Prince George's County below.
"""

from __future__ import annotations

DEFAULT_REGIONAL_MULTIPLIER = 1.0

# Maps 5-digit ZIP -> cost multiplier.
REGIONAL_MULTIPLIERS: dict[str, float] = {
    # Montgomery County (Bethesda, Rockville, Gaithersburg)
    "20814": 1.15,
    "20815": 1.20,
    "20816": 1.18,
    "20817": 1.22,
    "20852": 1.10,
    "20853": 1.12,
    "20854": 1.08,
    "20855": 1.14,
    "20878": 1.16,
    "20879": 1.11,
    "20886": 1.09,
    "20895": 1.13,
    # Prince George's County (Hyattsville, College Park, Bowie)
    "20737": 0.95,
    "20740": 0.92,
    "20742": 0.90,
    "20782": 0.94,
    "20783": 0.93,
    "20784": 0.91,
    "20785": 0.96,
    "20787": 0.97,
    "20794": 0.89,
    "20912": 0.88,
    # Anne Arundel County (Annapolis, Glen Burnie)
    "21401": 1.05,
    "21403": 1.07,
    "21409": 1.03,
    "21122": 1.02,
    "21144": 1.01,
    "21146": 1.04,
    # Howard County (Columbia, Ellicott City)
    "21042": 1.12,
    "21043": 1.14,
    "21044": 1.11,
    "21045": 1.13,
    "21075": 1.10,
}

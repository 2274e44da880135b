"""Base material prices used as the anchor for generated market snapshots."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseMaterialPrice:
    """A reference price for one material before market variation."""

    id: str
    name: str
    base_price: float
    unit: str
    category: str


BASE_MATERIAL_PRICES: list[BaseMaterialPrice] = [
    # Lumber
    BaseMaterialPrice("lumber-2x4", "Lumber 2x4x8", 4.50, "each", "Lumber"),
    BaseMaterialPrice("lumber-2x6", "Lumber 2x6x8", 7.25, "each", "Lumber"),
    BaseMaterialPrice("lumber-plywood", 'Plywood 4x8 3/4"', 58.00, "sheet", "Lumber"),
    BaseMaterialPrice("lumber-osb", 'OSB 4x8 7/16"', 32.00, "sheet", "Lumber"),
    # Concrete & Masonry
    BaseMaterialPrice("concrete-ready-mix", "Ready-Mix Concrete", 125.00, "cubic yard", "Concrete"),
    BaseMaterialPrice("concrete-bags", "Concrete Mix 80lb", 4.25, "bag", "Concrete"),
    BaseMaterialPrice("brick-common", "Common Brick", 0.85, "each", "Masonry"),
    BaseMaterialPrice("cement-portland", "Portland Cement 94lb", 12.50, "bag", "Concrete"),
    # Drywall & Insulation
    BaseMaterialPrice("drywall-half-inch", 'Drywall 4x8 1/2"', 14.50, "sheet", "Drywall"),
    BaseMaterialPrice("drywall-compound", "Joint Compound 5gal", 18.00, "bucket", "Drywall"),
    BaseMaterialPrice("insulation-fiberglass", "Fiberglass R-13", 1.25, "sq ft", "Insulation"),
    BaseMaterialPrice("insulation-foam", "Spray Foam Kit", 485.00, "kit", "Insulation"),
    # Roofing
    BaseMaterialPrice("shingles-asphalt", "Asphalt Shingles", 125.00, "square", "Roofing"),
    BaseMaterialPrice("roofing-felt", "Roofing Felt 15lb", 45.00, "roll", "Roofing"),
    BaseMaterialPrice("roofing-nails", "Roofing Nails 50lb", 78.00, "box", "Roofing"),
    # Electrical
    BaseMaterialPrice("wire-12-gauge", "Romex 12-2 Wire", 1.85, "linear foot", "Electrical"),
    BaseMaterialPrice("wire-14-gauge", "Romex 14-2 Wire", 1.45, "linear foot", "Electrical"),
    BaseMaterialPrice("electrical-outlet", "GFCI Outlet", 18.50, "each", "Electrical"),
    BaseMaterialPrice("electrical-breaker", "20A Circuit Breaker", 25.00, "each", "Electrical"),
    # Plumbing
    BaseMaterialPrice("pipe-pvc-4", "PVC Pipe 4\" x10'", 28.00, "each", "Plumbing"),
    BaseMaterialPrice("pipe-copper-half", 'Copper Pipe 1/2"', 3.25, "linear foot", "Plumbing"),
    BaseMaterialPrice("pvc-fittings", "PVC Fittings Kit", 45.00, "kit", "Plumbing"),
    BaseMaterialPrice("toilet-standard", "Standard Toilet", 285.00, "each", "Plumbing"),
    # Flooring
    BaseMaterialPrice("hardwood-oak", "Oak Hardwood Flooring", 8.50, "sq ft", "Flooring"),
    BaseMaterialPrice("laminate-flooring", "Laminate Flooring", 3.25, "sq ft", "Flooring"),
    BaseMaterialPrice("tile-ceramic", "Ceramic Tile 12x12", 2.85, "sq ft", "Flooring"),
    BaseMaterialPrice("carpet-medium", "Carpet Mid-Grade", 4.50, "sq ft", "Flooring"),
    # Paint & Finishes
    BaseMaterialPrice("paint-interior", "Interior Paint Gallon", 52.00, "gallon", "Paint"),
    BaseMaterialPrice("paint-exterior", "Exterior Paint Gallon", 68.00, "gallon", "Paint"),
    BaseMaterialPrice("primer-interior", "Interior Primer", 35.00, "gallon", "Paint"),
    BaseMaterialPrice("stain-wood", "Wood Stain Quart", 24.00, "quart", "Paint"),
]

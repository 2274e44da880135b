"""Seed corpus of completed projects used for comparables.

Figures are final contract costs including change orders.
"""

from __future__ import annotations

from remodelcost.models.comparables import HistoricalProjectRecord

SEED_PAST_PROJECTS: list[HistoricalProjectRecord] = [
    HistoricalProjectRecord(
        id=1,
        address="4812 Wissioming Rd",
        zip_code="20816",
        project_type="kitchen-remodel",
        square_footage=220,
        finish_level="premium",
        year=2023,
        final_cost=68_500,
        notes="Full gut, custom cabinetry, quartz counters, relocated sink.",
    ),
    HistoricalProjectRecord(
        id=2,
        address="7305 Exeter Rd",
        zip_code="20814",
        project_type="kitchen-remodel",
        square_footage=180,
        finish_level="standard",
        year=2022,
        final_cost=41_200,
        notes="Semi-custom cabinets, LVP flooring, kept existing layout.",
    ),
    HistoricalProjectRecord(
        id=3,
        address="11502 Hounds Way",
        zip_code="20852",
        project_type="kitchen-remodel",
        square_footage=260,
        finish_level="luxury",
        year=2024,
        final_cost=118_000,
        notes="Island addition, panel-ready appliances, structural beam.",
    ),
    HistoricalProjectRecord(
        id=4,
        address="9214 Crosby Rd",
        zip_code="20910",
        project_type="bathroom-remodel",
        square_footage=65,
        finish_level="standard",
        year=2023,
        final_cost=19_800,
        notes="Tub-to-shower conversion, new vanity and tile.",
    ),
    HistoricalProjectRecord(
        id=5,
        address="3406 Tulane Dr",
        zip_code="20783",
        project_type="bathroom-remodel",
        square_footage=80,
        finish_level="premium",
        year=2024,
        final_cost=31_500,
        notes="Curbless shower, heated floor, moved toilet drain.",
    ),
    HistoricalProjectRecord(
        id=6,
        address="1719 Ridgely Ave",
        zip_code="21401",
        project_type="home-addition",
        square_footage=450,
        finish_level="standard",
        year=2021,
        final_cost=112_000,
        notes="Single-story family room addition on slab.",
    ),
    HistoricalProjectRecord(
        id=7,
        address="6020 Bradley Blvd",
        zip_code="20817",
        project_type="home-addition",
        square_footage=620,
        finish_level="luxury",
        year=2023,
        final_cost=305_000,
        notes="Two-story primary suite addition with new foundation.",
    ),
    HistoricalProjectRecord(
        id=8,
        address="5512 Cedar Ln",
        zip_code="21044",
        project_type="deck-construction",
        square_footage=320,
        finish_level="standard",
        year=2022,
        final_cost=17_600,
        notes="Pressure-treated frame, composite decking, one stair run.",
    ),
    HistoricalProjectRecord(
        id=9,
        address="8800 Belmart Rd",
        zip_code="20854",
        project_type="kitchen-remodel",
        square_footage=200,
        finish_level="standard",
        year=2024,
        final_cost=45_900,
        notes="Painted shaker cabinets, new recessed lighting.",
    ),
    HistoricalProjectRecord(
        id=10,
        address="2207 Forest Glen Rd",
        zip_code="20910",
        project_type="roofing-replacement",
        square_footage=2100,
        finish_level="standard",
        year=2023,
        final_cost=24_300,
        notes="Architectural shingles, replaced two sheets of decking.",
    ),
]

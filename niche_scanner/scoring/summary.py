"""
Catalog-wide summary statistics.

Both averages are taken over the entire catalog, not just niches that match
the profile, so they depend only on the catalog.  Callers holding a fixed
catalog may compute them once and reuse the result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from niche_scanner.errors import EmptyCatalogError
from niche_scanner.models.niche import MicroNiche


@dataclass(frozen=True)
class CatalogOverview:
    """Aggregate market figures for the catalog.

    Attributes:
        average_cpm:             Mean of per-niche CPM midpoints.
        average_timeline_months: Mean months to first revenue.
        niche_count:             Number of niches averaged over.
    """

    average_cpm:             float
    average_timeline_months: float
    niche_count:             int


def compute_overview(catalog: Sequence[MicroNiche]) -> CatalogOverview:
    """Average CPM midpoint and monetization timeline across the catalog.

    Raises:
        EmptyCatalogError: If ``catalog`` is empty.
    """
    if not catalog:
        raise EmptyCatalogError()
    count = len(catalog)
    return CatalogOverview(
        average_cpm=math.fsum(n.cpm_midpoint for n in catalog) / count,
        average_timeline_months=math.fsum(
            n.monetization_timeline_months for n in catalog
        ) / count,
        niche_count=count,
    )

"""
Read-only queries the dashboard screens run over a generated dataset.

Nothing here mutates its input; every function takes the collections it
reads as explicit arguments.
"""

from datetime import date
from typing import Dict, List, Optional, Sequence

import pandas as pd
from faker import Faker

from dashboard_data.config import DEFAULT_EXPIRY_CUTOFF
from dashboard_data.generator.constants import CATEGORIES
from dashboard_data.generator.entities import Contract, SpendHistoryEntry, Vendor

# Spend that maps to 100 on the risk matrix impact axis
IMPACT_SCALE = 15000000

LIKELIHOOD_BANDS = {'High': (60, 90), 'Medium': (30, 60), 'Low': (0, 30)}

# Prior-year spend is shown as a fixed fraction of the current total
PREVIOUS_PERIOD_RATIO = 0.92


def search_vendors(vendors: Sequence[Vendor], text: str) -> List[Vendor]:
    """Vendors whose name or category contains `text`, ignoring case."""
    needle = text.lower()
    return [v for v in vendors if needle in v.name.lower() or needle in v.category.lower()]


def find_vendor(vendors: Sequence[Vendor], vendor_id: str) -> Optional[Vendor]:
    for vendor in vendors:
        if vendor.id == vendor_id:
            return vendor
    return None


def spend_by_category(vendors: Sequence[Vendor]) -> List[Dict]:
    """Annual vendor spend per category, largest first."""
    frame = pd.DataFrame([v.to_dict() for v in vendors], columns=['category', 'spend'])
    totals = frame.groupby('category')['spend'].sum().reindex(CATEGORIES, fill_value=0)
    totals = totals.sort_values(ascending=False, kind='stable')
    return [{'name': name, 'value': int(value)} for name, value in totals.items()]


def category_share(vendors: Sequence[Vendor], category: str) -> float:
    total = sum(v.spend for v in vendors)
    if not total:
        return 0.0
    return sum(v.spend for v in vendors if v.category == category) / total


def expiring_contracts(contracts: Sequence[Contract],
                       cutoff: date = DEFAULT_EXPIRY_CUTOFF) -> List[Contract]:
    """Contracts ending strictly before `cutoff`."""
    return [c for c in contracts if c.end_date < cutoff]


def contract_exposure(contracts: Sequence[Contract]) -> int:
    return sum(c.value for c in contracts)


def risk_matrix(vendors: Sequence[Vendor], fake: Faker) -> List[Dict]:
    """
    Scatter points for the likelihood/impact matrix.

    Likelihood is jittered inside the vendor's risk band using the caller's
    Faker instance, so a seeded instance gives the same points on every run,
    as it does for the dataset. Impact is spend normalised to IMPACT_SCALE;
    size is the raw spend.
    """
    points = []
    for vendor in vendors:
        low, high = LIKELIHOOD_BANDS[vendor.risk]
        points.append({
            'id': vendor.id,
            'name': vendor.name,
            'risk': vendor.risk,
            'x': low + fake.random.random() * (high - low),
            'y': vendor.spend / IMPACT_SCALE * 100,
            'z': vendor.spend
        })
    return points


def monthly_totals(spend_history: Sequence[SpendHistoryEntry]) -> pd.Series:
    """Total spend per month, indexed by month start."""
    return pd.Series(
        [entry.total for entry in spend_history],
        index=pd.DatetimeIndex([entry.date for entry in spend_history], name='date'),
        name='total'
    )


def spend_summary(spend_history: Sequence[SpendHistoryEntry]) -> Dict:
    """Headline spend across the whole history against the prior-period figure."""
    total = sum(entry.total for entry in spend_history)
    previous = total * PREVIOUS_PERIOD_RATIO
    change = (total - previous) / previous * 100 if previous else 0.0
    return {'totalSpend': total, 'previousSpend': previous, 'changePct': change}

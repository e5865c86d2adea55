# =============================================================================
# entities.py - Data Models for the Procurement Dashboard
# Purpose: Define the structure of the mock dataset (Vendors, Spend, Contracts)
# =============================================================================

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class Vendor:
    """
    Represents a financial service provider in the vendor roster.

    This entity will be:
    - Hand-authored (V-001..V-013) or synthesized by the generator
    - Displayed in the vendor hub, risk matrix and category charts
    - Referenced by exactly one Contract
    """
    id: str
    name: str
    category: str
    risk: str
    sla: float
    spend: int
    trend: float
    status: str = "Active"

    @property
    def number(self) -> str:
        """Zero-padded sequence suffix shared with the vendor's contract"""
        return self.id.split('-')[1]

    def to_dict(self) -> dict:
        """Convert to dictionary for DataFrame creation"""
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'risk': self.risk,
            'sla': self.sla,
            'spend': self.spend,
            'trend': self.trend,
            'status': self.status
        }


@dataclass(frozen=True)
class SpendHistoryEntry:
    """
    Represents one calendar month of aggregated spend.

    `spend` maps each category to its rounded monthly value; `total` is
    derived from it so the two can never disagree.
    """
    date: date
    spend: Mapping[str, int]
    total: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'spend', MappingProxyType(dict(self.spend)))
        object.__setattr__(self, 'total', sum(self.spend.values()))

    @property
    def display_date(self) -> str:
        """Short month label used on chart axes, e.g. 'Jan 26'"""
        return self.date.strftime('%b %y')

    def to_dict(self) -> dict:
        """Flatten categories next to the date columns"""
        record = {
            'date': self.date.isoformat(),
            'displayDate': self.display_date,
            'total': self.total
        }
        record.update(self.spend)
        return record


@dataclass(frozen=True)
class Contract:
    """Contract terms derived 1:1 from a vendor."""
    id: str
    vendor_id: str
    vendor_name: str
    category: str
    value: int
    start_date: date
    end_date: date
    status: str
    renewal_type: str
    notice_period: int = 90

    def to_dict(self) -> dict:
        """Convert to dictionary for DataFrame creation"""
        return {
            'id': self.id,
            'vendorId': self.vendor_id,
            'vendorName': self.vendor_name,
            'category': self.category,
            'value': self.value,
            'startDate': self.start_date.isoformat(),
            'endDate': self.end_date.isoformat(),
            'status': self.status,
            'renewalType': self.renewal_type,
            'noticePeriod': self.notice_period
        }


@dataclass(frozen=True)
class Dataset:
    """
    The complete mock dataset handed to every dashboard view.

    Built once by the generator and never mutated afterwards; views receive
    it as an explicit argument.
    """
    vendors: Tuple[Vendor, ...]
    spend_history: Tuple[SpendHistoryEntry, ...]
    contracts: Tuple[Contract, ...]

    def vendor_index(self) -> Dict[str, Vendor]:
        return {vendor.id: vendor for vendor in self.vendors}

    def to_dict(self) -> dict:
        return {
            'vendors': [v.to_dict() for v in self.vendors],
            'spendHistory': [entry.to_dict() for entry in self.spend_history],
            'contracts': [c.to_dict() for c in self.contracts]
        }

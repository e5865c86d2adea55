"""
Dataset Checks
Detect and log consistency issues in a generated dashboard dataset

Identifies and logs data quality issues including:
- Roster size and duplicate / malformed vendor ids
- Vendors or contracts carrying an unknown category, risk, status or renewal type
- Generated vendors outside their SLA or spend ranges
- Spend history totals that do not reconcile with their categories
- Spend history months out of order or missing
- Contracts pointing at the wrong vendor or with a stale status
"""

import json
import logging
import os
import re
from datetime import date
from typing import Any, Dict, List, Optional

from dashboard_data.config import DatasetIntegrityError
from dashboard_data.generator.constants import (
    CATEGORIES, HISTORY_MONTHS, RENEWAL_TYPES, RISK_LEVELS, ROSTER_SIZE, SEED_VENDORS, SLA_RANGE,
    SPEND_RANGE, STATUS_ACTIVE, VENDOR_STATUSES
)
from dashboard_data.generator.entities import Dataset

logger = logging.getLogger(__name__)

VENDOR_ID_PATTERN = re.compile(r'^V-\d{3}$')
SEVERITIES = ['CRITICAL', 'HIGH', 'MEDIUM', 'LOW']


class DatasetChecker:
    """Invariant checks over one generated dataset."""

    def __init__(self, dataset: Dataset):
        """
        Initialize dataset checker.

        Args:
            dataset: Dataset produced by the generator
        """
        self.dataset = dataset
        self.issues: List[Dict[str, Any]] = []

    def _record(self, issue_type: str, severity: str, message: str, **details) -> None:
        issue = {'type': issue_type, 'severity': severity, 'message': message}
        issue.update(details)
        self.issues.append(issue)

    def check_vendor_roster(self) -> None:
        """Check roster size, id format, id uniqueness and enumerated fields."""
        vendors = self.dataset.vendors
        if len(vendors) != ROSTER_SIZE:
            self._record('ROSTER_SIZE', 'HIGH',
                         f"Roster has {len(vendors)} vendors, expected {ROSTER_SIZE}",
                         vendor_count=len(vendors))

        seen = set()
        for vendor in vendors:
            if not VENDOR_ID_PATTERN.match(vendor.id):
                self._record('MALFORMED_VENDOR_ID', 'HIGH',
                             f"Vendor id {vendor.id!r} does not match V-###", vendor_id=vendor.id)
            if vendor.id in seen:
                self._record('DUPLICATE_VENDOR_ID', 'CRITICAL',
                             f"Vendor id {vendor.id} appears more than once", vendor_id=vendor.id)
            seen.add(vendor.id)
            if vendor.category not in CATEGORIES:
                self._record('UNKNOWN_CATEGORY', 'HIGH',
                             f"Vendor {vendor.id} has unknown category {vendor.category!r}",
                             vendor_id=vendor.id)
            if vendor.risk not in RISK_LEVELS:
                self._record('UNKNOWN_RISK', 'HIGH',
                             f"Vendor {vendor.id} has unknown risk level {vendor.risk!r}",
                             vendor_id=vendor.id)
            if vendor.status not in VENDOR_STATUSES:
                self._record('UNKNOWN_STATUS', 'HIGH',
                             f"Vendor {vendor.id} has unknown status {vendor.status!r}",
                             vendor_id=vendor.id)

    def check_generated_ranges(self) -> None:
        """Check SLA and spend bounds on synthesized vendors (seed entries are exempt)."""
        for vendor in self.dataset.vendors[len(SEED_VENDORS):]:
            if not SLA_RANGE[0] <= vendor.sla <= SLA_RANGE[1]:
                self._record('SLA_OUT_OF_RANGE', 'MEDIUM',
                             f"Vendor {vendor.id} SLA {vendor.sla} outside {SLA_RANGE}",
                             vendor_id=vendor.id, sla=vendor.sla)
            if not SPEND_RANGE[0] <= vendor.spend <= SPEND_RANGE[1]:
                self._record('SPEND_OUT_OF_RANGE', 'MEDIUM',
                             f"Vendor {vendor.id} spend {vendor.spend} outside {SPEND_RANGE}",
                             vendor_id=vendor.id, spend=vendor.spend)

    def check_spend_totals(self) -> None:
        """Check each month's total against the sum of its categories."""
        for entry in self.dataset.spend_history:
            missing = [c for c in CATEGORIES if c not in entry.spend]
            if missing:
                self._record('MISSING_CATEGORY', 'HIGH',
                             f"Month {entry.date} has no value for {', '.join(missing)}",
                             month=entry.date.isoformat())
            category_sum = sum(entry.spend.values())
            if entry.total != category_sum:
                self._record('TOTAL_MISMATCH', 'CRITICAL',
                             f"Month {entry.date} total {entry.total} != category sum {category_sum}",
                             month=entry.date.isoformat(), total=entry.total, category_sum=category_sum)

    def check_spend_chronology(self, today: Optional[date] = None) -> None:
        """Check history length, strict ordering and, if given, the final month."""
        history = self.dataset.spend_history
        if len(history) != HISTORY_MONTHS:
            self._record('HISTORY_LENGTH', 'HIGH',
                         f"Spend history has {len(history)} months, expected {HISTORY_MONTHS}",
                         month_count=len(history))

        for previous, current in zip(history, history[1:]):
            if current.date <= previous.date:
                self._record('HISTORY_ORDER', 'HIGH',
                             f"Month {current.date} does not follow {previous.date}",
                             month=current.date.isoformat())

        if today is not None and history:
            last = history[-1].date
            if (last.year, last.month) != (today.year, today.month):
                self._record('HISTORY_END', 'MEDIUM',
                             f"Spend history ends {last:%Y-%m}, expected {today:%Y-%m}",
                             month=last.isoformat())

    def check_contract_links(self) -> None:
        """Check the order-preserving 1:1 mapping from vendors to contracts."""
        vendors = self.dataset.vendors
        contracts = self.dataset.contracts
        if len(contracts) != len(vendors):
            self._record('CONTRACT_COUNT', 'CRITICAL',
                         f"{len(contracts)} contracts for {len(vendors)} vendors",
                         contract_count=len(contracts))

        for vendor, contract in zip(vendors, contracts):
            if contract.vendor_id != vendor.id:
                self._record('CONTRACT_VENDOR_MISMATCH', 'CRITICAL',
                             f"Contract {contract.id} references {contract.vendor_id}, expected {vendor.id}",
                             contract_id=contract.id)
                continue
            expected_status = STATUS_ACTIVE if vendor.status == STATUS_ACTIVE else vendor.status
            if contract.status != expected_status:
                self._record('CONTRACT_STATUS', 'MEDIUM',
                             f"Contract {contract.id} status {contract.status} != vendor status {vendor.status}",
                             contract_id=contract.id)
            if contract.value != vendor.spend:
                self._record('CONTRACT_VALUE', 'LOW',
                             f"Contract {contract.id} value {contract.value} != vendor spend {vendor.spend}",
                             contract_id=contract.id)
            if contract.renewal_type not in RENEWAL_TYPES:
                self._record('UNKNOWN_RENEWAL_TYPE', 'MEDIUM',
                             f"Contract {contract.id} has unknown renewal type {contract.renewal_type!r}",
                             contract_id=contract.id)

    def run_all_checks(self, today: Optional[date] = None) -> List[Dict[str, Any]]:
        """Run all dataset checks."""
        logger.info("🔍 Running dataset checks...")

        self.issues = []  # Reset issues

        self.check_vendor_roster()
        self.check_generated_ranges()
        self.check_spend_totals()
        self.check_spend_chronology(today)
        self.check_contract_links()

        logger.info(f"   Found {len(self.issues)} issues")
        return self.issues

    def save_issues(self, output_path: str) -> Optional[str]:
        """Save issues to a JSON report."""
        if not self.issues:
            logger.info("   ✅ No issues to log")
            return None

        os.makedirs(os.path.dirname(output_path) or '.', exist_ok=True)

        by_severity = {severity: [] for severity in SEVERITIES}
        for issue in self.issues:
            by_severity[issue.get('severity', 'MEDIUM')].append(issue)

        output = {
            'generated_at': date.today().isoformat(),
            'total_issues': len(self.issues),
            'by_severity': {k: len(v) for k, v in by_severity.items() if v},
            'issues': self.issues
        }

        with open(output_path, 'w') as f:
            json.dump(output, f, indent=2, default=str)

        logger.info(f"   📝 Saved issues to {output_path}")

        for severity, items in by_severity.items():
            if items:
                logger.warning(f"   ⚠️  {severity}: {len(items)} issues")

        return output_path


def validate_dataset(dataset: Dataset, today: Optional[date] = None) -> Dataset:
    """
    Convenience function to check a dataset and fail loudly on any issue.

    Args:
        dataset: Dataset to check
        today: Reference date the spend history should end on

    Returns:
        The same dataset, for chaining

    Raises:
        DatasetIntegrityError: if any check reports an issue
    """
    checker = DatasetChecker(dataset)
    issues = checker.run_all_checks(today)
    if issues:
        raise DatasetIntegrityError(issues)
    return dataset

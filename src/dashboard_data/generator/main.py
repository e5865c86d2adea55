"""
Procurement Dashboard Data Generator

Synthesizes the dashboard's vendor roster, 36-month spend history and
contracts from one seeded Faker instance, then validates and exports them.
"""

import argparse
import logging
from datetime import date
from typing import List, Optional, Sequence

import pandas as pd
from faker import Faker

from dashboard_data.config import AppConfig, configure_logging
from dashboard_data.export.dataset_files import export_dataset
from dashboard_data.generator.constants import (
    ANNUAL_GROWTH, AUTO_RENEW, BASE_SPEND_RANGE, CATEGORIES, CATEGORY_SCALE, CONTRACT_END_DATES,
    CONTRACT_START_DATE, HISTORY_MONTHS, MANUAL_RENEWAL, NAME_ADJECTIVES, NAME_NOUNS,
    NOTICE_PERIOD_DAYS, RISK_HIGH, RISK_LOW, RISK_MEDIUM, ROSTER_SIZE, SEED_VENDORS, SLA_RANGE,
    SPEND_RANGE, STATUS_ACTIVE, STATUS_EXPIRED, STATUS_REVIEW, TREND_RANGE
)
from dashboard_data.generator.entities import Contract, Dataset, SpendHistoryEntry, Vendor
from dashboard_data.quality.dataset_checks import validate_dataset

logger = logging.getLogger(__name__)

# DATA GENERATION FUNCTIONS

def growth_factor(months_ago: int) -> float:
    """Linear growth: 1.0 for the oldest month, ~1.146 for the current one."""
    return 1 + ANNUAL_GROWTH * (HISTORY_MONTHS - 1 - months_ago) / 12


def seasonality(category: str, month: int) -> float:
    """Calendar spikes: insurance premiums in January, card volume in December."""
    if category == 'Insurance' and month == 1:
        return 2.5
    if category == 'Payment Processing' and month == 12:
        return 1.4
    return 1.0


def category_spend(base: float, category: str, months_ago: int, month: int) -> int:
    scaled = base * CATEGORY_SCALE.get(category, 1)
    return round(scaled * growth_factor(months_ago) * seasonality(category, month))


def _draw_risk(fake: Faker) -> str:
    u = fake.random.random()
    if u > 0.8:
        return RISK_HIGH
    if u > 0.6:
        return RISK_MEDIUM
    return RISK_LOW


def _draw_status(fake: Faker) -> str:
    if fake.random.random() > 0.9:
        return STATUS_EXPIRED
    if fake.random.random() > 0.85:
        return STATUS_REVIEW
    return STATUS_ACTIVE


def generate_vendors(fake: Faker) -> List[Vendor]:
    """Seed vendors followed by synthesized ones up to the full roster."""
    vendors = list(SEED_VENDORS)

    for i in range(len(SEED_VENDORS) + 1, ROSTER_SIZE + 1):
        sla_low, sla_high = SLA_RANGE
        trend_low, trend_high = TREND_RANGE

        vendor = Vendor(
            id=f"V-{i:03d}",
            name=f"{NAME_ADJECTIVES[i % 5]} {NAME_NOUNS[i % 5]}",
            category=CATEGORIES[i % len(CATEGORIES)],
            risk=_draw_risk(fake),
            sla=round(sla_low + fake.random.random() * (sla_high - sla_low), 1),
            spend=fake.random_int(min=SPEND_RANGE[0], max=SPEND_RANGE[1]),
            trend=round(trend_low + fake.random.random() * (trend_high - trend_low), 1),
            status=_draw_status(fake)
        )
        vendors.append(vendor)
    return vendors


def generate_spend_history(fake: Faker, today: date) -> List[SpendHistoryEntry]:
    """Generate monthly spend per category, oldest month first."""
    current_month = pd.Timestamp(today.year, today.month, 1)
    months = pd.date_range(end=current_month, periods=HISTORY_MONTHS, freq='MS')

    history = []
    for position, month_start in enumerate(months):
        months_ago = HISTORY_MONTHS - 1 - position
        spend = {}
        for category in CATEGORIES:
            base = fake.random.uniform(*BASE_SPEND_RANGE)
            spend[category] = category_spend(base, category, months_ago, month_start.month)
        history.append(SpendHistoryEntry(date=month_start.date(), spend=spend))
    return history


def generate_contracts(vendors: Sequence[Vendor], fake: Faker) -> List[Contract]:
    """Derive one contract per vendor, preserving roster order."""
    contracts = []

    for vendor in vendors:
        contract = Contract(
            id=f"CTR-{vendor.number}",
            vendor_id=vendor.id,
            vendor_name=vendor.name,
            category=vendor.category,
            value=vendor.spend,
            start_date=CONTRACT_START_DATE,
            end_date=fake.random_element(CONTRACT_END_DATES),
            status=STATUS_ACTIVE if vendor.status == STATUS_ACTIVE else vendor.status,
            renewal_type=AUTO_RENEW if fake.random.random() > 0.5 else MANUAL_RENEWAL,
            notice_period=NOTICE_PERIOD_DAYS
        )
        contracts.append(contract)
    return contracts


def generate_dataset(seed: Optional[int] = None, today: Optional[date] = None,
                     fake: Optional[Faker] = None) -> Dataset:
    """
    Build vendors, spend history and contracts in one pass.

    Args:
        seed: Seed for the random source; None draws fresh entropy
        today: Reference date whose month ends the spend history
        fake: Pre-configured Faker instance (overrides seed)

    Returns:
        Immutable Dataset
    """
    if today is None:
        today = date.today()
    if fake is None:
        fake = Faker()
        fake.seed_instance(seed)

    vendors = generate_vendors(fake)
    spend_history = generate_spend_history(fake, today)
    contracts = generate_contracts(vendors, fake)

    logger.debug(f"Generated {len(vendors)} vendors, {len(spend_history)} months, "
                 f"{len(contracts)} contracts (seed={seed})")
    return Dataset(
        vendors=tuple(vendors),
        spend_history=tuple(spend_history),
        contracts=tuple(contracts)
    )

# MAIN EXECUTION

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the procurement dashboard mock dataset.")
    parser.add_argument('--seed', type=int, default=None, help="Seed for reproducible output")
    parser.add_argument('--output-dir', default=None, help="Directory for Parquet/JSON files")
    parser.add_argument('--today', type=date.fromisoformat, default=None,
                        help="Reference date (YYYY-MM-DD) ending the spend history")
    parser.add_argument('--check-only', action='store_true', help="Validate without writing files")
    return parser.parse_args(argv)


def run(argv: Optional[Sequence[str]] = None) -> Dataset:
    """Generate, validate and (unless --check-only) export the dataset."""
    config = AppConfig.from_env()
    configure_logging(config.log_level)
    args = parse_args(argv)

    seed = args.seed if args.seed is not None else config.seed
    output_dir = args.output_dir or config.output_dir
    today = args.today or date.today()

    print(f"\n{'='*60}")
    print(f"🚀 Procurement Dashboard Data Generator")
    print(f"📅 Spend history ending: {today.strftime('%Y-%m')}")
    print(f"{'='*60}\n")

    print("📦 Generating dataset...")
    dataset = generate_dataset(seed=seed, today=today)

    print("🔍 Validating dataset...")
    validate_dataset(dataset, today)

    if args.check_only:
        print("✅ Dataset is consistent (no files written)")
        return dataset

    created = export_dataset(dataset, output_dir)

    print(f"✅ Generation Complete!")
    print(f"   - Vendors: {len(dataset.vendors)} records")
    print(f"   - Spend history: {len(dataset.spend_history)} months")
    print(f"   - Contracts: {len(dataset.contracts)} records")
    print(f"   - Files: {len(created)} → {output_dir}")
    return dataset


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for dataset generation."""
    run(argv)


if __name__ == "__main__":
    main()

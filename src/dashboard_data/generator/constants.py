"""
Dataset constants shared by the generator, the quality checks and the views.

Category order must match the dashboard's category legend.
"""

from datetime import date

from dashboard_data.generator.entities import Vendor

CATEGORIES = [
    'Payment Processing', 'Banking Services', 'Insurance', 'Card Network Fees',
    'Cash Handling & CIT', 'Treasury & FX', 'Audit & Compliance'
]

RISK_LEVELS = ['Low', 'Medium', 'High']
VENDOR_STATUSES = ['Active', 'Review', 'Warning', 'Expired']
RENEWAL_TYPES = ['Auto-renew', 'Manual']

RISK_LOW, RISK_MEDIUM, RISK_HIGH = RISK_LEVELS
STATUS_ACTIVE, STATUS_REVIEW, STATUS_WARNING, STATUS_EXPIRED = VENDOR_STATUSES
AUTO_RENEW, MANUAL_RENEWAL = RENEWAL_TYPES

SEED_VENDORS = [
    Vendor('V-001', 'Worldline', 'Payment Processing', 'Low', 99.8, 14200000, 12.4, 'Active'),
    Vendor('V-002', 'Adyen', 'Payment Processing', 'Low', 99.9, 8500000, 18.2, 'Active'),
    Vendor('V-003', 'SumUp', 'Payment Processing', 'Medium', 98.5, 1200000, 5.1, 'Active'),
    Vendor('V-004', 'Deutsche Bank', 'Banking Services', 'Low', 99.5, 3400000, 2.1, 'Active'),
    Vendor('V-005', 'Raiffeisen Bank', 'Banking Services', 'Low', 99.2, 2100000, 1.5, 'Active'),
    Vendor('V-006', 'Allianz', 'Insurance', 'Low', 98.8, 6800000, 4.2, 'Active'),
    Vendor('V-007', 'Zurich Insurance', 'Insurance', 'Medium', 97.9, 4200000, 3.8, 'Review'),
    Vendor('V-008', 'Loomis', 'Cash Handling & CIT', 'High', 94.2, 2800000, -2.4, 'Warning'),
    Vendor('V-009', 'Brinks', 'Cash Handling & CIT', 'Medium', 96.5, 3100000, -1.1, 'Active'),
    Vendor('V-010', 'Visa Europe', 'Card Network Fees', 'Low', 100.0, 8900000, 8.5, 'Active'),
    Vendor('V-011', 'Mastercard', 'Card Network Fees', 'Low', 100.0, 7600000, 7.9, 'Active'),
    Vendor('V-012', 'KPMG', 'Audit & Compliance', 'Low', 98.0, 1500000, 0.0, 'Active'),
    Vendor('V-013', 'HSBC', 'Treasury & FX', 'Low', 99.1, 900000, 1.2, 'Active'),
]

# Both name lists are keyed by the same modulus, so names repeat every 5 vendors.
NAME_ADJECTIVES = ['Global', 'Strategic', 'Prime', 'First', 'United']
NAME_NOUNS = ['Finance', 'Solutions', 'Partners', 'Systems', 'Group']

ROSTER_SIZE = 40
HISTORY_MONTHS = 36

SLA_RANGE = (90.0, 99.9)
SPEND_RANGE = (100000, 2100000)
TREND_RANGE = (-5.0, 10.0)
BASE_SPEND_RANGE = (500000, 700000)

CATEGORY_SCALE = {'Payment Processing': 4, 'Card Network Fees': 2.5}
ANNUAL_GROWTH = 0.05

CONTRACT_START_DATE = date(2023, 1, 1)
CONTRACT_END_DATES = [date(2025, 6, 30), date(2026, 12, 31), date(2025, 12, 31), date(2024, 12, 31)]
NOTICE_PERIOD_DAYS = 90

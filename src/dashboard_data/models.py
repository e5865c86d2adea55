"""
Model summaries shown on the spend analytics and risk screens.

The figures are fixed: an ARIMA spend forecast, random-forest feature
importances for vendor risk, and regression coefficients for spend drivers.
Only the forecast is computed, from a base monthly spend and a flat growth step.
"""

from dataclasses import dataclass
from typing import List, Tuple

import pandas as pd

FORECAST_BASE = 4800000
FORECAST_STEP = 0.008
FORECAST_BAND = 0.05
FORECAST_MONTHS = 12
FORECAST_START_YEAR = 2026


@dataclass(frozen=True)
class ForecastPoint:
    """One forecast month with its +/- 5% confidence band."""
    month: str
    value: float
    lower: float
    upper: float

    def to_dict(self) -> dict:
        return {
            'month': self.month,
            'value': self.value,
            'confidenceCurrent': [self.lower, self.upper]
        }


def arima_forecast(start_year: int = FORECAST_START_YEAR,
                   months: int = FORECAST_MONTHS) -> List[ForecastPoint]:
    """Monthly forecast from January of `start_year`, growing 0.8% of base per month."""
    month_starts = pd.date_range(start=pd.Timestamp(start_year, 1, 1), periods=months, freq='MS')

    points = []
    for i, month_start in enumerate(month_starts):
        value = FORECAST_BASE * (1 + i * FORECAST_STEP)
        points.append(ForecastPoint(
            month=month_start.strftime('%b %y'),
            value=value,
            lower=value * (1 - FORECAST_BAND),
            upper=value * (1 + FORECAST_BAND)
        ))
    return points


ARIMA_SUMMARY = {
    'name': 'ARIMA(2,1,1)',
    'trainPeriod': 'Jan 2023 - Dec 2025',
    'rmse': 142300,
    'mape': 3.2,
}

RANDOM_FOREST_SUMMARY = {
    'accuracy': 89.3,
    'f1': 0.87,
    'features': [
        ('SLA History', 0.35),
        ('Payment Error Freq', 0.28),
        ('Response Time', 0.15),
        ('Contract Value', 0.12),
        ('Relationship Yrs', 0.06),
        ('Countries Served', 0.04),
    ],
}

REGRESSION_SUMMARY = {
    'r2': 0.91,
    'pVal': '< 0.001',
    'coefficients': [
        ('Transaction Vol', 0.43, 0.001),
        ('Store Count', 0.31, 0.004),
        ('Contract Age', -0.12, 0.021),
        ('Inflation Rate', 0.08, 0.15),
    ],
}


def _features(pairs: List[Tuple[str, float]]) -> List[dict]:
    return [{'name': name, 'importance': importance} for name, importance in pairs]


def _coefficients(rows: List[Tuple[str, float, float]]) -> List[dict]:
    return [{'name': name, 'coef': coef, 'p': p} for name, coef, p in rows]


def model_summaries(start_year: int = FORECAST_START_YEAR) -> dict:
    """All three model summaries in the dashboard's JSON shape."""
    arima = dict(ARIMA_SUMMARY)
    arima['forecast'] = [point.to_dict() for point in arima_forecast(start_year)]

    random_forest = dict(RANDOM_FOREST_SUMMARY)
    random_forest['features'] = _features(RANDOM_FOREST_SUMMARY['features'])

    regression = dict(REGRESSION_SUMMARY)
    regression['coefficients'] = _coefficients(REGRESSION_SUMMARY['coefficients'])

    return {'arima': arima, 'randomForest': random_forest, 'regression': regression}

"""
Enumerations for the categorical inputs of a manufacturing metrics record.

Every select box on the input form maps to one ``StrEnum`` here.  Only
``MarketLevel`` (via ``market_demand``) participates in scoring; the rest
are collected for context and reporting.

Usage example::

    from mfg_scorer.taxonomy.metric_taxonomy import IndustryType, MarketLevel

    industry = IndustryType("automotive")
    demand   = MarketLevel.HIGH

This module has NO imports from any other ``mfg_scorer`` package.
"""

from enum import StrEnum


class IndustryType(StrEnum):
    """Industry sector of the manufacturing company (required)."""

    AUTOMOTIVE = "automotive"
    """Cars, motorcycles, spare parts."""

    ELECTRONICS = "electronics"
    """Computers, smartphones, electronic equipment."""

    TEXTILE = "textile"
    """Clothing, fabric, textile products."""

    FOOD = "food"
    """Food and beverage processing."""

    CHEMICAL = "chemical"
    """Chemicals, cosmetics."""

    MACHINERY = "machinery"
    """Industrial machines, heavy equipment."""

    PHARMACEUTICAL = "pharmaceutical"
    """Drugs and medical supplies."""

    OTHER = "other"
    """Anything not covered above."""


class CompanySize(StrEnum):
    """Headcount class of the company."""

    SMALL = "small"
    """Fewer than 50 employees."""

    MEDIUM = "medium"
    """50 to 250 employees."""

    LARGE = "large"
    """More than 250 employees."""


class MaintenanceFrequency(StrEnum):
    """How often scheduled machine maintenance is performed."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


class MarketLevel(StrEnum):
    """Five-step intensity scale shared by market demand and competition level."""

    VERY_LOW = "very_low"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class EconomicCondition(StrEnum):
    """Macro-economic climate the company is operating in."""

    RECESSION = "recession"
    SLOW_GROWTH = "slow_growth"
    STABLE = "stable"
    GROWTH = "growth"
    BOOM = "boom"


class Seasonality(StrEnum):
    """Strength of seasonal swings in demand."""

    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class PerformanceBand(StrEnum):
    """Qualitative band a performance score falls into."""

    VERY_GOOD = "very_good"
    """Score 80–100."""

    GOOD = "good"
    """Score 60–79."""

    MODERATE = "moderate"
    """Score 40–59."""

    LOW = "low"
    """Score 0–39."""

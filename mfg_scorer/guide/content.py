"""
Static help content for the metrics form.

Plain data only: quick-start steps, per-field guidance keyed by field name,
section tips, and the pre-submit checklist.  ``mfg_scorer.guide.render``
turns it into text.  Nothing here touches the score engine.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldGuide:
    """Guidance for one form field.

    Attributes:
        field: ``MetricsInput`` attribute name.
        text: What to enter.
        how_to: Formula or method, if any.
        examples: Example values or options.
    """

    field: str
    text: str
    how_to: str = ""
    examples: tuple[str, ...] = ()


QUICK_START: tuple[tuple[str, str], ...] = (
    ("Prepare company data",
     "Collect basics such as the company name, industry type and company size."),
    ("Compute production metrics",
     "Prepare monthly output, production capacity and efficiency figures."),
    ("Evaluate quality",
     "Enter the defect rate, customer satisfaction and return rate."),
    ("Financial analysis",
     "Enter revenue, production cost and profit margin."),
    ("Predict",
     "Submit the form and read the performance result."),
)


FIELD_GUIDES: dict[str, FieldGuide] = {g.field: g for g in (
    FieldGuide("company_name", "Full name of your manufacturing company.",
               examples=("PT Industri Manufaktur Indonesia", "CV Karya Mandiri Sejahtera")),
    FieldGuide("industry_type", "Pick the category that best matches the business.",
               examples=("automotive: cars, motorcycles, spare parts",
                         "electronics: computers, smartphones, devices",
                         "textile: clothing, fabric",
                         "food: food and beverage processing",
                         "chemical: chemicals, cosmetics",
                         "machinery: industrial machines, heavy equipment")),
    FieldGuide("company_size", "Size class by number of employees.",
               examples=("small: fewer than 50", "medium: 50-250", "large: more than 250")),
    FieldGuide("operating_years", "How many years the company has been operating.",
               examples=("Founded in 2015, evaluated in 2024: 9 years",)),
    FieldGuide("monthly_output", "Units successfully produced in one month.",
               examples=("Shoe factory: 5000 pairs/month", "Food plant: 50000 packs/month")),
    FieldGuide("production_capacity",
               "Maximum units producible in one month at full operation.",
               how_to="Machine rate x operating hours x working days",
               examples=("100 units/hour x 8 hours x 25 days = 20000 units/month",)),
    FieldGuide("capacity_utilization",
               "Filled in automatically from monthly output and production capacity.",
               how_to="(Monthly output / Production capacity) x 100%",
               examples=("Healthy utilization is usually 70-85%",)),
    FieldGuide("production_efficiency",
               "Effectiveness of the production process against the ideal standard.",
               how_to="(Standard time / Actual time) x 100%",
               examples=("Standard 60 min, actual 75 min = 80%",)),
    FieldGuide("defect_rate", "Share of defective units in total production.",
               how_to="(Defective units / Total production) x 100%",
               examples=("50 defects in 10000 units = 0.5%",
                         "< 1% very good, 1-3% good, > 5% needs improvement")),
    FieldGuide("rework_rate", "Share of units that needed rework to meet the standard.",
               examples=("30 of 1000 units reworked = 3%",)),
    FieldGuide("customer_satisfaction", "Customer satisfaction rating on a 10-point scale.",
               examples=("Sources: surveys, online reviews, direct feedback",
                         "> 8.0 excellent, 7.0-8.0 good, < 7.0 needs improvement")),
    FieldGuide("return_rate", "Share of sold units returned by customers.",
               how_to="(Returned units / Total sales) x 100%"),
    FieldGuide("monthly_revenue", "Gross sales revenue in one month.",
               examples=("1000 units x 500,000 = 500,000,000",)),
    FieldGuide("production_cost",
               "Total cost to produce goods: materials, direct labour, factory overhead."),
    FieldGuide("profit_margin", "Profit as a percentage of revenue.",
               how_to="((Revenue - Total cost) / Revenue) x 100%",
               examples=("Revenue 500M, cost 400M: 20%",
                         "Manufacturing margins are usually 10-25%")),
    FieldGuide("operational_cost",
               "Cost of day-to-day operation: utilities, maintenance, administration, logistics."),
    FieldGuide("employee_count", "Employees involved in production.",
               examples=("Machine operators, supervisors, quality control, maintenance staff",)),
    FieldGuide("machine_hours", "Average machine running hours per day.",
               examples=("Single shift: 8", "Double shift: 16", "Round the clock: 24")),
    FieldGuide("downtime_hours", "Total hours machines were not running in one month.",
               examples=("Scheduled maintenance 20 + breakdowns 15 + changeovers 10 = 45",)),
    FieldGuide("maintenance_freq", "How often routine maintenance is performed.",
               examples=("daily: critical or high-precision machines",
                         "weekly: main production machines",
                         "monthly: supporting machines",
                         "quarterly: non-critical equipment")),
    FieldGuide("market_demand", "Current market demand for your products.",
               examples=("very_high: orders exceed capacity",
                         "high: orders near capacity",
                         "moderate: orders at 60-80% of capacity",
                         "low: orders below 60% of capacity")),
    FieldGuide("competition_level", "How tight competition is in your industry.",
               examples=("very_high: more than 10 major competitors",
                         "high: 5-10", "moderate: 3-5", "low: fewer than 3")),
    FieldGuide("economic_condition", "Macro-economic conditions affecting the business.",
               examples=("boom: growth above 6%", "growth: 3-6%", "stable: 1-3%",
                         "slow_growth: 0-1%", "recession: negative growth")),
    FieldGuide("seasonality", "How strongly seasons affect sales.",
               examples=("very_high: holiday products", "high: clothing, toys",
                         "moderate: certain foods", "low: daily necessities")),
    FieldGuide("additional_notes", "Anything else worth recording about the operation."),
)}


TIPS: tuple[str, ...] = (
    "Use averages over the last 3-6 months to smooth out fluctuations.",
    "Keep units and time periods consistent across fields.",
    "Take figures from the ERP system or official reports where possible.",
    "Fill in the required fields (marked *) first.",
)


CHECKLIST: tuple[str, ...] = (
    "All required fields are filled in",
    "Financial data has been verified",
    "Percentages are calculated correctly",
    "Units and time periods are consistent",
    "External factors reflect current conditions",
)

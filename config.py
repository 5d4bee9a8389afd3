import logging
import os

APP_NAME = "Nest Egg: Retirement Number Planner"

DEBUG = os.environ.get("NEST_EGG_DEBUG", "false").lower() == "true"

# Default assumptions (India-leaning; rates are fractions per year)
DEFAULTS = {
    "country": os.environ.get("NEST_EGG_DEFAULT_COUNTRY", "India"),
    "current_age": 30,
    "retirement_age": 60,

    # Projection
    "inflation": float(os.environ.get("NEST_EGG_INFLATION", "0.06")),
    "equity_return": 0.12,
    "debt_return": 0.07,
    "mode": "simple",                 # simple | advanced

    # Wizard
    "total_steps": 8,
}

# Multipliers and base values behind the retirement number.
# Unknown keys fall back to 1.0 (country falls back to "Other").
RETIREMENT_CONFIG = {
    "base_amount": 50_000,

    "country_multipliers": {
        "India": 0.8,
        "Thailand": 1.0,
        "UAE": 1.5,
        "Europe": 1.8,
        "US": 2.0,
        "Other": 1.2,
    },

    "lifestyle_multipliers": {
        "Simple": 0.7,
        "Comfortable": 1.0,
        "Very Comfortable": 1.5,
        "Luxury": 2.5,
    },

    "housing_multipliers": {
        "own_paid": 0.8,
        "rent_modest": 1.0,
        "rent_nice": 1.3,
        "own_premium": 1.4,
        "high_end": 2.0,
    },

    "healthcare_multipliers": {
        "basic": 1.0,
        "reliable": 1.2,
        "top_tier": 1.5,
        "vip": 2.0,
    },

    "travel_multipliers": {
        "rarely": 1.0,
        "occasionally": 1.15,
        "frequently": 1.35,
        "constantly": 1.6,
    },

    # Safe withdrawal rates
    "safety_rates": {
        "ultra_safe": {"rate": 0.03, "label": "Ultra Safe"},
        "safe": {"rate": 0.035, "label": "Safe"},
        "balanced": {"rate": 0.04, "label": "Balanced"},
        "aggressive": {"rate": 0.045, "label": "Aggressive"},
    },
    "default_safety": "balanced",

    # Reference points shown next to the chosen tier
    "reference_rates": {
        "aggressive": 0.05,
        "balanced": 0.04,
        "conservative": 0.03,
    },

    "lifestyle_to_housing_default": {
        "Simple": "own_paid",
        "Comfortable": "rent_modest",
        "Very Comfortable": "rent_nice",
        "Luxury": "own_premium",
    },
}

# Projection presets seeded by the safety answer
SAFETY_PRESETS = {
    "ultra_safe": {"pre_retirement_return": 0.05, "post_retirement_return": 0.03, "equity_alloc": 0.40},
    "safe":       {"pre_retirement_return": 0.06, "post_retirement_return": 0.04, "equity_alloc": 0.50},
    "balanced":   {"pre_retirement_return": 0.08, "post_retirement_return": 0.05, "equity_alloc": 0.70},
    "aggressive": {"pre_retirement_return": 0.10, "post_retirement_return": 0.06, "equity_alloc": 0.80},
}

# Wizard options (key, title, description)
LIFESTYLE_OPTIONS = [
    ("Simple", "Simple", "Calm, basic, stress-free life"),
    ("Comfortable", "Comfortable", "Middle/upper-middle lifestyle"),
    ("Very Comfortable", "Very Comfortable", "High flexibility and travel"),
    ("Luxury", "Luxury", "No real constraints"),
]
HOUSING_OPTIONS = [
    ("own_paid", "Already Own It", "A paid-off apartment or house"),
    ("rent_modest", "Rent Something Modest", "1–2 bedroom in a decent area"),
    ("rent_nice", "Rent Something Nice", "Great location, comfort matters"),
    ("own_premium", "Own a Nice Place", "Good neighborhood, no luxury, but premium"),
    ("high_end", "High-End Living", "Top area / beachfront / prime real estate"),
]
HEALTHCARE_OPTIONS = [
    ("basic", "Basic Coverage", "Public + basic private, I'm okay waiting"),
    ("reliable", "Private Care", "Reliable private hospitals and insurance"),
    ("top_tier", "Premium International", "Top-tier international healthcare"),
    ("vip", "VIP Treatment", "VIP, medical tourism, best of the best"),
]
TRAVEL_OPTIONS = [
    ("rarely", "Rarely Travel", "1 small trip per year"),
    ("occasionally", "Occasional Traveler", "2–3 trips per year"),
    ("frequently", "Frequent Traveler", "4–6 trips per year"),
    ("constantly", "Always on the Move", "Travel whenever I feel like it"),
]
SAFETY_OPTIONS = [
    ("ultra_safe", "Ultra Safe", "I never want to worry"),
    ("safe", "Safe", "Very conservative approach"),
    ("balanced", "Balanced", "Balanced & realistic"),
    ("aggressive", "Aggressive", "I'm okay with some risk"),
]

_logging_ready = False


def setup_logging():
    """Configure root logging once per process (Streamlit reruns the script)."""
    global _logging_ready
    if _logging_ready:
        return
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _logging_ready = True

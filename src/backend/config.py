"""
Application configuration and constants.
"""

import os
from typing import List

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# API configuration
API_VERSION = "1.0.0"
API_TITLE = "FI Planner API"
API_DESCRIPTION = "Projection engine for FIRE, Semi-FI and Coast FI milestones"

# CORS configuration
CORS_ORIGINS: List[str] = [
    o.strip() for o in os.getenv("FI_PLANNER_CORS_ORIGINS", "*").split(",") if o.strip()
]
CORS_CREDENTIALS = True
CORS_METHODS = ["*"]
CORS_HEADERS = ["*"]

# Financial model constants
LIFE_EXPECTANCY = 90  # retirement is funded up to this age
SEMI_FI_FRACTION = 0.6  # share of the FIRE base target that counts as Semi-FI
YIELD_SHIELD_RATE = 0.04  # assumed yield on the Semi-FI portfolio
CASH_CUSHION_YEARS = 5  # years of expenses held against downturns
MAX_PROJECTION_YEARS = 100

# Input domain
MIN_AGE = 18
MAX_AGE = 100
MIN_RATE_PERCENT = -50  # return and inflation, percent
MAX_RATE_PERCENT = 100

# Default planner inputs (percent values where the field is a rate)
DEFAULT_INPUTS = {
    "income": 60000,
    "savings_rate": 20,
    "expenses": 30000,
    "current_savings": 10000,
    "age": 25,
    "return_rate": 7,
    "retirement_age": 65,
    "inflation_rate": 2,
}

# Performance settings
PROJECTION_CACHE_SIZE = int(os.getenv("FI_PLANNER_CACHE_SIZE", "256"))

# Logging configuration
LOG_LEVEL = os.getenv("FI_PLANNER_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

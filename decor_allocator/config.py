# decor_allocator/config.py
"""Configuration settings for the decoration allocator"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Capacity per color channel per town
CAP = 1000
CHANNELS = ('green', 'blue', 'red')

# Category gating
VALHALLA_CATEGORY = "Valhalla"
EVERGARDEN = "evergarden"

# Strategies
STRATEGY_MAXIMUM = "maximum"
STRATEGY_BALANCED = "balanced"
STRATEGIES = (STRATEGY_MAXIMUM, STRATEGY_BALANCED)
DEFAULT_STRATEGY = os.getenv('DECOR_STRATEGY', STRATEGY_MAXIMUM)

# Topper rules: (decoration, channel, window low, window high), checked in order
TOPPER_RULES = [
    ("Meadow", "green", 997, 999),
    ("Meadow", "red", 997, 999),
    ("Snowflake", "blue", 996, 999),
]

# Toppers skip the capacity check unless this is set
TOPPER_RESPECTS_CAP = os.getenv('TOPPER_RESPECTS_CAP', 'false').lower() in ('1', 'true', 'yes')

# Towns and their display names
TOWN_NAMES = {
    'town1': "Town 1",
    'town2': "Town 2",
    'town3': "Town 3",
    'town4': "Town 4",
    'northern1': "Northern Town 1",
    'northern2': "Northern Town 2",
    'northern3': "Northern Town 3",
    'evergarden': "Evergarden",
}

# File paths
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
CATALOG_FILE = os.getenv('DECOR_CATALOG_FILE', os.path.join(PACKAGE_DIR, 'data', 'decorations.json'))
DATA_DIR = os.getenv('DECOR_DATA_DIR', './data')
REQUEST_FILE = os.path.join(DATA_DIR, 'request.json')
OUTPUT_FILE = os.path.join(DATA_DIR, 'allocation_results.json')
USER_DATA_FILE = os.path.join(DATA_DIR, 'user_data.json')

import json
import os
from datetime import datetime

DEFAULT_CONFIG = {
    "complexity": 4,
    "viewport_width": 0,
    "step_delay": 0.2,
    "max_steps": 0,
    "seed": None,
    "log_steps": True,
    "output_directory": "logs/",
    "log_file_prefix": "turing_",
    "states_file": "states.json"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "complexity": int,
    "viewport_width": int,
    "step_delay": (int, float),
    "max_steps": int,
    "seed": (int, type(None)),
    "log_steps": bool,
    "output_directory": str,
    "log_file_prefix": str,
    "states_file": str
}

# Keys that must not go below zero
NON_NEGATIVE_KEYS = ["complexity", "viewport_width", "step_delay", "max_steps"]


def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        value = config[key]
        if isinstance(value, bool) and expected_type is not bool:
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")
        if not isinstance(value, expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")

    for key in NON_NEGATIVE_KEYS:
        if config[key] < 0:
            raise ValueError(f"Config key '{key}' must be non-negative, got {config[key]}.")


def default_config():
    return DEFAULT_CONFIG.copy()


def load_config(path="config/runtime_config.json", verbose=True):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = default_config()
    config.update(user_config)

    validate_config(config)

    os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config

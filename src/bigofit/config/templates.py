"""Templates for generated bigofit configuration files."""

DEFAULT_CONFIG = """# bigofit configuration
# Reject series with fewer samples than this (at least 1).
min_samples: 2

# Thread pool size for scoring the catalog (0 or 1 = sequential).
parallel_workers: 0

# Output of `bigofit scores`: text or json
output_format: "text"

# Decimal places for residuals in text output
precision: 6
"""

MINIMAL_CONFIG = """# bigofit minimal configuration
min_samples: 2
"""

CONFIG_PRESETS = {
    "full": DEFAULT_CONFIG,
    "minimal": MINIMAL_CONFIG,
}

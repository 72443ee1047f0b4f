"""Configuration classes for handlegraph components."""

from dataclasses import dataclass


@dataclass
class ShortestPathConfig:
    """Configuration for the shortest-path engine."""

    # Raise ValueError on edge weights below the additive identity
    check_negative_weights: bool = True

    # Emit a DEBUG summary line per engine call
    log_summary: bool = True


# Global configuration instance
SPF_CONFIG = ShortestPathConfig()

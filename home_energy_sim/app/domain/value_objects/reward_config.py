"""Reward configuration value object.

Configurable weights and thresholds for the home energy reward.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RewardConfig:
    """Configuration for reward calculation in the home energy environment.

    The reward is the negated sum of four cost terms. These parameters
    weight the non-monetary terms and set where they start to accrue.

    Attributes:
        alpha_comfort: Multiplier for indoor temperature deviation beyond the deadband.
        beta_peak: Multiplier for grid draw above the peak threshold.
        gamma_batt: Multiplier for battery throughput (kWh moved in or out).
        comfort_deadband_celsius: Deviation from the preferred temperature that is free.
        peak_threshold_kw: Grid draw above which the peak penalty applies.
    """

    alpha_comfort: float = 6.0
    beta_peak: float = 4.0
    gamma_batt: float = 0.05

    # Thresholds
    comfort_deadband_celsius: float = 0.5
    peak_threshold_kw: float = 6.0

    def __post_init__(self) -> None:
        """Validate reward configuration values."""
        if self.alpha_comfort < 0:
            raise ValueError(f"alpha_comfort must be non-negative, got {self.alpha_comfort}")
        if self.beta_peak < 0:
            raise ValueError(f"beta_peak must be non-negative, got {self.beta_peak}")
        if self.gamma_batt < 0:
            raise ValueError(f"gamma_batt must be non-negative, got {self.gamma_batt}")
        if self.comfort_deadband_celsius < 0:
            raise ValueError(
                f"comfort_deadband_celsius must be non-negative, "
                f"got {self.comfort_deadband_celsius}"
            )
        if self.peak_threshold_kw < 0:
            raise ValueError(
                f"peak_threshold_kw must be non-negative, got {self.peak_threshold_kw}"
            )

"""Policy evaluation value objects.

Immutable results of running a control policy through whole episodes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EpisodeTrace:
    """Per-step record of one evaluated episode.

    Every signal is sampled before the step is taken, except grid power,
    energy cost and appliance status which are realized during the step.

    Attributes:
        policy_name: Name of the policy that produced the episode
        total_cost: Negated sum of rewards over the episode
        avg_comfort_deviation: Mean absolute deviation from the preferred temperature
        indoor_temp: Indoor temperature per step in °C
        outside_temp: Outside temperature per step in °C
        battery_soc: Battery state of charge per step
        price: Electricity price per step in $/kWh
        grid_power_kw: Realized grid draw per step in kW
        energy_cost: Energy cost per step in $
        appliance_on: Whether the appliance drew power during the step
        actions: Joint action index chosen at each step
    """

    policy_name: str
    total_cost: float
    avg_comfort_deviation: float
    indoor_temp: tuple[float, ...]
    outside_temp: tuple[float, ...]
    battery_soc: tuple[float, ...]
    price: tuple[float, ...]
    grid_power_kw: tuple[float, ...]
    energy_cost: tuple[float, ...]
    appliance_on: tuple[bool, ...]
    actions: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate trace values."""
        if not self.policy_name:
            raise ValueError("policy_name cannot be empty")
        if self.avg_comfort_deviation < 0:
            raise ValueError(
                f"avg_comfort_deviation must be non-negative, got {self.avg_comfort_deviation}"
            )
        lengths = {
            len(self.indoor_temp),
            len(self.outside_temp),
            len(self.battery_soc),
            len(self.price),
            len(self.grid_power_kw),
            len(self.energy_cost),
            len(self.appliance_on),
            len(self.actions),
        }
        if len(lengths) != 1:
            raise ValueError("all trace signals must have the same length")

    @property
    def steps(self) -> int:
        """Number of steps in the episode."""
        return len(self.actions)


@dataclass(frozen=True)
class EvaluationResult:
    """Summary of a policy over several episodes.

    Attributes:
        policy_name: Name of the evaluated policy
        episodes: Trace of each evaluated episode
    """

    policy_name: str
    episodes: tuple[EpisodeTrace, ...]

    def __post_init__(self) -> None:
        """Validate evaluation values."""
        if not self.policy_name:
            raise ValueError("policy_name cannot be empty")
        if not self.episodes:
            raise ValueError("episodes cannot be empty")

    @property
    def episode_costs(self) -> tuple[float, ...]:
        return tuple(episode.total_cost for episode in self.episodes)

    @property
    def episode_comfort(self) -> tuple[float, ...]:
        return tuple(episode.avg_comfort_deviation for episode in self.episodes)

    @property
    def mean_cost(self) -> float:
        return sum(self.episode_costs) / len(self.episodes)

    @property
    def mean_comfort_deviation(self) -> float:
        return sum(self.episode_comfort) / len(self.episodes)

"""Configuration management for PokeBattle."""

from pydantic import BaseModel


class Config(BaseModel):
    """Engine and CLI configuration."""

    # Battle rules
    move_slots: int = 4
    team_size: int = 6
    critical_hit_chance: float = 1 / 24  # Gen VII onwards
    critical_hit_multiplier: float = 1.5  # Gen VI onwards
    stab_multiplier: float = 1.5
    damage_spread_min: float = 0.85
    damage_spread_max: float = 1.0

    # Batch simulation
    max_battle_count: int = 100_000
    batch_max_workers: int | None = None  # None = executor default

    # Logging
    log_level: str = "WARNING"


# Global config instance
config = Config()

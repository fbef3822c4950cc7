"""Configuration management with YAML loading and validation."""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field, asdict


@dataclass
class ScoringConfig:
    """Weighting policy and scale mapping for profile aggregation."""
    favorite1_weight: float = 2.0
    favorite2_weight: float = 1.0
    least_favorite_weight: float = -2.0
    # f(x) = x * scale_factor + scale_offset, rounded half up to score_precision
    scale_factor: float = 1.0
    scale_offset: float = 5.0
    score_precision: int = 1
    score_min: float = 1.0
    score_max: float = 10.0
    midpoint: float = 5.0
    persist_multiplier: int = 10

    def __post_init__(self):
        """Validate weights and scale bounds."""
        if self.favorite1_weight <= 0:
            raise ValueError(f"favorite1_weight must be > 0, got {self.favorite1_weight}")
        if not 0 < self.favorite2_weight < self.favorite1_weight:
            raise ValueError(
                f"favorite2_weight must be between 0 and favorite1_weight ({self.favorite1_weight}), "
                f"got {self.favorite2_weight}"
            )
        if self.least_favorite_weight >= 0:
            raise ValueError(f"least_favorite_weight must be < 0, got {self.least_favorite_weight}")
        if self.scale_factor <= 0:
            raise ValueError(f"scale_factor must be > 0, got {self.scale_factor}")
        if self.score_precision < 0:
            raise ValueError(f"score_precision must be >= 0, got {self.score_precision}")
        if self.score_min >= self.score_max:
            raise ValueError(f"score_min ({self.score_min}) must be < score_max ({self.score_max})")
        if not self.score_min <= self.midpoint <= self.score_max:
            raise ValueError(
                f"midpoint must be between {self.score_min} and {self.score_max}, got {self.midpoint}"
            )
        if self.persist_multiplier < 1:
            raise ValueError(f"persist_multiplier must be >= 1, got {self.persist_multiplier}")


@dataclass
class MetricsConfig:
    """Category metric and style label configuration."""
    neutral_value: float = 2.5
    contemporary_below: float = 2.5
    traditional_above: float = 3.5
    tradition_contemporary_below: float = 4.0
    tradition_traditional_above: float = 6.0

    def __post_init__(self):
        """Validate thresholds."""
        if not 1.0 <= self.neutral_value <= 5.0:
            raise ValueError(f"neutral_value must be between 1 and 5, got {self.neutral_value}")
        if self.contemporary_below > self.traditional_above:
            raise ValueError(
                f"contemporary_below ({self.contemporary_below}) must be <= "
                f"traditional_above ({self.traditional_above})"
            )
        if self.tradition_contemporary_below > self.tradition_traditional_above:
            raise ValueError(
                f"tradition_contemporary_below ({self.tradition_contemporary_below}) must be <= "
                f"tradition_traditional_above ({self.tradition_traditional_above})"
            )


@dataclass
class CatalogConfig:
    """Quad catalog configuration."""
    path: Optional[str] = None
    image_base_url: str = "https://res.cloudinary.com/drhp5e0kl/image/upload/v1/Taste-Exploration"
    image_extension: str = "jpg"

    def __post_init__(self):
        """Convert string paths to Path objects."""
        if self.path:
            self.path = Path(self.path)
        self.image_extension = self.image_extension.lstrip(".")


@dataclass
class SelectionConfig:
    """Selection recorder configuration."""
    reject_duplicate_positions: bool = True


@dataclass
class SystemConfig:
    """System configuration."""
    log_level: str = "INFO"
    log_file: Optional[str] = None
    enable_colors: bool = True

    def __post_init__(self):
        """Validate parameters."""
        if self.log_level.upper() not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError(f"log_level must be a standard logging level, got {self.log_level}")
        if self.log_file:
            self.log_file = Path(self.log_file)


@dataclass
class Config:
    """Master configuration object."""
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    metrics: MetricsConfig = field(default_factory=MetricsConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    selections: SelectionConfig = field(default_factory=SelectionConfig)
    system: SystemConfig = field(default_factory=SystemConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        data = data or {}
        return cls(
            scoring=ScoringConfig(**(data.get("scoring") or {})),
            metrics=MetricsConfig(**(data.get("metrics") or {})),
            catalog=CatalogConfig(**(data.get("catalog") or {})),
            selections=SelectionConfig(**(data.get("selections") or {})),
            system=SystemConfig(**(data.get("system") or {})),
        )


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml file. If None, looks in current directory.

    Returns:
        Config object with validated settings.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = Path("config.yaml")
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return Config.from_dict(data)


def save_config(config: Config, config_path: Path):
    """
    Save configuration to YAML file.

    Args:
        config: Config object to save.
        config_path: Path to save config.yaml file.
    """
    def _convert_paths(obj):
        """Convert Path objects to strings for YAML serialization."""
        if isinstance(obj, Path):
            return str(obj)
        elif isinstance(obj, dict):
            return {k: _convert_paths(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [_convert_paths(item) for item in obj]
        return obj

    data = {
        "scoring": asdict(config.scoring),
        "metrics": asdict(config.metrics),
        "catalog": asdict(config.catalog),
        "selections": asdict(config.selections),
        "system": asdict(config.system),
    }

    data = _convert_paths(data)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

"""
Configuration for clustering runs.

ClusterConfig holds the settings the engine honors; Config loads them
(and loader settings) from a YAML file with optional environment overrides.
"""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from spkmeans.core.exceptions import ClusteringConfigError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 10
DEFAULT_INITIALIZER = "kmeans++"


@dataclass
class ClusterConfig:
    """
    Settings for one clustering run.

    Attributes:
        num_clusters: Number of centers K (1 <= K <= dataset size)
        initializer: Registered initializer name ("random" or "kmeans++")
        max_iterations: Iteration cap for the assign/update loop
        seed: Optional seed for center initialization
        num_workers: Threads for the assignment step (None = CPU count)
    """
    num_clusters: int
    initializer: str = DEFAULT_INITIALIZER
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    seed: Optional[int] = None
    num_workers: Optional[int] = None

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "ClusterConfig":
        """
        Build from a config section such as ``clustering`` in kmeans.yaml.

        Raises:
            ClusteringConfigError: If num_clusters is missing
        """
        if config.get("num_clusters") is None:
            raise ClusteringConfigError("num_clusters is required")

        return cls(
            num_clusters=int(config["num_clusters"]),
            initializer=config.get("initializer", DEFAULT_INITIALIZER),
            max_iterations=int(config.get("max_iterations", DEFAULT_MAX_ITERATIONS)),
            seed=config.get("seed"),
            num_workers=config.get("num_workers"),
        )

    def validate(self, dataset_size: int) -> None:
        """
        Check the settings against a dataset before any work starts.

        Args:
            dataset_size: Number of vectors to be clustered

        Raises:
            ClusteringConfigError: On an empty dataset or out-of-range setting
        """
        if dataset_size <= 0:
            raise ClusteringConfigError("Cannot cluster an empty dataset")
        if self.num_clusters <= 0:
            raise ClusteringConfigError(
                f"num_clusters must be positive, got {self.num_clusters}"
            )
        if self.num_clusters > dataset_size:
            raise ClusteringConfigError(
                f"num_clusters ({self.num_clusters}) exceeds dataset size ({dataset_size})"
            )
        if self.max_iterations <= 0:
            raise ClusteringConfigError(
                f"max_iterations must be positive, got {self.max_iterations}"
            )
        if self.num_workers is not None and self.num_workers <= 0:
            raise ClusteringConfigError(
                f"num_workers must be positive, got {self.num_workers}"
            )
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0
        ):
            raise ClusteringConfigError(
                f"seed must be a non-negative integer, got {self.seed!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Config:
    """
    Singleton loader for run settings kept in YAML.

    The file holds a ``clustering`` section (fields of ClusterConfig) and a
    ``loader`` section (TSVLoader keyword arguments). Sections left empty
    in the file read as empty dicts.

    Usage:
        config = Config.load("config/kmeans.yaml", env="dev")
        settings = config.get_section("clustering")
        loader = TSVLoader(**config.loader_settings())
    """

    _instance: Optional["Config"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def load(cls, config_path: str = "config/kmeans.yaml", env: str = None) -> "Config":
        """
        Load config from YAML file.

        Args:
            config_path: Path to main config file
            env: Environment name (loads environments/{env}.yaml next to
                the main file as override)

        Returns:
            Config instance
        """
        instance = cls()

        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(path, "r") as f:
            instance._config = cls._read_mapping(f, path)

        logger.info(f"Loaded config from {config_path}")

        if env:
            env_path = path.parent / "environments" / f"{env}.yaml"
            if env_path.exists():
                with open(env_path, "r") as f:
                    env_config = cls._read_mapping(f, env_path)
                instance._config = instance._merge_configs(instance._config, env_config)
                logger.info(f"Applied environment override: {env}")
            else:
                logger.warning(f"Environment override not found: {env_path}")

        return instance

    @staticmethod
    def _read_mapping(stream, path: Path) -> Dict[str, Any]:
        data = yaml.safe_load(stream)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ClusteringConfigError(f"Config file must hold a mapping: {path}")
        return data

    def _merge_configs(self, base: dict, override: dict) -> dict:
        """Deep merge override into base config."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value using dot notation.

        Example:
            config.get("clustering.max_iterations")  # Returns 10
            config.get("clustering.missing", 100)  # Returns 100
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get entire config section as dict.

        Raises:
            ClusteringConfigError: If the section is present but not a mapping
        """
        value = self.get(section)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ClusteringConfigError(f"Config section '{section}' must be a mapping")
        return value

    def loader_settings(self) -> Dict[str, Any]:
        """Keyword arguments for the record loader."""
        return dict(self.get_section("loader"))

    @property
    def raw(self) -> Dict[str, Any]:
        """Get raw config dict."""
        return self._config

    @classmethod
    def reset(cls):
        """Reset singleton instance (useful for testing)."""
        cls._instance = None
        cls._config = {}

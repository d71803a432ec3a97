"""Analyzer configuration: command-line options and YAML settings."""

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

# Switches turned on by --everything
SWITCHES = (
    'detect_language',
    'sentiment_analysis',
    'lemmatize',
    'alternatives',
    'names',
    'mame',
    'place',
    'organization',
)


@dataclass(frozen=True)
class AnalyzerConfig:
    """Options of a single run. Read-only once resolved."""

    maximum_alternatives: int = 10
    far_away: float = 0.8

    detect_language: bool = False
    sentiment_analysis: bool = False
    lemmatize: bool = False
    alternatives: bool = False
    names: bool = False
    mame: bool = False
    place: bool = False
    organization: bool = False
    everything: bool = False

    def resolve(self) -> 'AnalyzerConfig':
        """
        Expand the "everything" switch into every other switch.

        Returns:
            A new config; the original is returned unchanged when "everything" is off
        """
        if not self.everything:
            return self
        return replace(self, **{name: True for name in SWITCHES})

    @property
    def wants_entities(self) -> bool:
        return self.names or self.mame or self.place or self.organization

    @classmethod
    def from_namespace(cls, namespace) -> 'AnalyzerConfig':
        """Build a config from parsed argparse arguments, ignoring unrelated attributes."""
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in vars(namespace).items() if key in names})


@dataclass(frozen=True)
class Settings:
    """Model and logging settings loaded from config.yaml."""

    maximum_alternatives: int = 10
    far_away: float = 0.8
    fallback_model: Optional[str] = 'en_core_web_sm'
    pipelines: Dict[str, str] = field(default_factory=dict)
    embeddings: Dict[str, str] = field(default_factory=dict)
    log_level: str = 'WARNING'

    def pipeline_for(self, language: Optional[str]) -> Optional[str]:
        """Tagging pipeline for a language, or the fallback model."""
        return self.pipelines.get(language or '', self.fallback_model)

    def embedding_for(self, language: Optional[str]) -> Optional[str]:
        return self.embeddings.get(language or '')


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        config_path: Path to the YAML file (default: config.yaml bundled with the package)

    Returns:
        Settings with built-in defaults for every missing key
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Invalid settings file {config_path}: expected a mapping at top level")

    analysis = config.get('analysis') or {}
    models = config.get('models') or {}
    logging_config = config.get('logging') or {}
    defaults = Settings()

    settings = Settings(
        maximum_alternatives=int(analysis.get('maximum_alternatives', defaults.maximum_alternatives)),
        far_away=float(analysis.get('far_away', defaults.far_away)),
        fallback_model=models.get('fallback', defaults.fallback_model),
        pipelines=dict(models.get('pipelines') or {}),
        embeddings=dict(models.get('embeddings') or {}),
        log_level=str(logging_config.get('level', defaults.log_level)).upper(),
    )
    logger.debug(f"Loaded settings from {config_path}")
    return settings

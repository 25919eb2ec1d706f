"""
SymCorrect Configuration Module
===============================
Centralized configuration for the correction engine.

Configuration can be set via:
1. Environment variables (SYMCORRECT_MAX_EDIT_DISTANCE=1)
2. Config file (symcorrect_config.json)
3. Direct API calls (config.set('spelling.max_edit_distance', 1))

All settings have sensible defaults for offline operation.
"""

import os
import json
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, asdict

from config_logging import get_logger, ConfigError

__version__ = "1.0.0"

# Default configuration path
CONFIG_FILE = Path(__file__).parent.parent / "symcorrect_config.json"

logger = get_logger('symcorrect.config')


@dataclass
class SpellingConfig:
    """Dictionary and lookup configuration."""
    enabled: bool = True
    max_edit_distance: int = 2
    dictionary_path: Optional[str] = None
    use_bundled_dictionary: bool = False  # symspellpy's English frequency list
    personal_dictionary: Optional[str] = None
    personal_word_frequency: int = 1_000_000


@dataclass
class ContextConfig:
    """Trigram context model configuration."""
    enabled: bool = True
    corpus_path: Optional[str] = None  # One sentence per line


@dataclass
class TrackerConfig:
    """Word tracking session configuration."""
    enabled_by_default: bool = True
    undo_timeout_seconds: float = 5.0


@dataclass
class EngineConfig:
    """Master engine configuration."""
    spelling: SpellingConfig = field(default_factory=SpellingConfig)
    context: ContextConfig = field(default_factory=ContextConfig)
    tracker: TrackerConfig = field(default_factory=TrackerConfig)


# Global configuration instance
_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """Get the global engine configuration."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def load_config(path: Optional[Path] = None) -> EngineConfig:
    """Load configuration from file and environment."""
    config = EngineConfig()
    path = Path(path) if path else CONFIG_FILE

    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
            _apply_dict_to_config(config, file_config)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load config file {path}: {e}")

    _apply_env_to_config(config)

    return config


def _apply_dict_to_config(config: EngineConfig, data: Dict[str, Any]):
    """Apply dictionary values to config object."""
    for section_name, section_data in data.items():
        if hasattr(config, section_name) and isinstance(section_data, dict):
            section = getattr(config, section_name)
            for key, value in section_data.items():
                if hasattr(section, key):
                    setattr(section, key, value)


def _apply_env_to_config(config: EngineConfig):
    """Apply environment variables to config."""
    env_mappings = {
        'SYMCORRECT_ENABLED': ('spelling', 'enabled', _parse_bool),
        'SYMCORRECT_MAX_EDIT_DISTANCE': ('spelling', 'max_edit_distance', _parse_distance),
        'SYMCORRECT_DICTIONARY': ('spelling', 'dictionary_path', str),
        'SYMCORRECT_BUNDLED_DICTIONARY': ('spelling', 'use_bundled_dictionary', _parse_bool),
        'SYMCORRECT_PERSONAL_DICTIONARY': ('spelling', 'personal_dictionary', str),
        'SYMCORRECT_CONTEXT_ENABLED': ('context', 'enabled', _parse_bool),
        'SYMCORRECT_CONTEXT_CORPUS': ('context', 'corpus_path', str),
        'SYMCORRECT_UNDO_TIMEOUT': ('tracker', 'undo_timeout_seconds', float),
    }

    for env_var, (section, key, converter) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            try:
                section_obj = getattr(config, section)
                setattr(section_obj, key, converter(value))
            except (ValueError, AttributeError) as e:
                logger.warning(f"Invalid env var {env_var}={value}: {e}")


def _parse_bool(value: str) -> bool:
    """Parse boolean from string."""
    return value.lower() in ('true', '1', 'yes', 'on')


def _parse_distance(value: str) -> int:
    distance = int(value)
    if distance < 0:
        raise ValueError("edit distance must be non-negative")
    return distance


def get(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by dot-notation key.

    Example: get('spelling.max_edit_distance') -> 2
    """
    obj = get_config()
    for part in key.split('.'):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            return default

    return obj


def set(key: str, value: Any):
    """
    Set a configuration value by dot-notation key.

    Example: set('context.enabled', False)
    """
    config = get_config()
    parts = key.split('.')

    if len(parts) != 2:
        raise ConfigError(f"Key must be in format 'section.key': {key}", key=key)

    section_name, attr_name = parts

    if not hasattr(config, section_name):
        raise ConfigError(f"Unknown config section: {section_name}", key=key)

    section = getattr(config, section_name)
    if not hasattr(section, attr_name):
        raise ConfigError(f"Unknown config key: {attr_name}", key=key)
    setattr(section, attr_name, value)


def save_config(path: Optional[Path] = None):
    """Save current configuration to file."""
    path = Path(path) if path else CONFIG_FILE

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(asdict(get_config()), f, indent=2)


def reset_config():
    """Reset configuration to defaults."""
    global _config
    _config = EngineConfig()

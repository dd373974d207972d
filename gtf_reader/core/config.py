#!/usr/bin/env python3

"""
Configuration management for the GTF reader.

Centralized configuration with support for file-based configuration
(JSON or YAML) and environment variable overrides.
"""

import codecs
import os
import json
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

import yaml

from .exceptions import ConfigurationError

ENCODING_ERROR_POLICIES = ('strict', 'replace', 'ignore', 'surrogateescape')


def _is_yaml_path(path: str) -> bool:
    return path.lower().endswith(('.yaml', '.yml'))


@dataclass
class ReaderConfig:
    """Centralized configuration for reading GTF files."""

    # Input decoding
    encoding: str = 'utf-8'
    encoding_errors: str = 'replace'  # undecodable bytes become U+FFFD

    # Diagnostics
    log_invalid_lines: bool = False
    debug_mode: bool = False

    # Memory guard
    enable_memory_monitoring: bool = True
    memory_limit_mb: int = 4096
    memory_check_interval: int = 100000  # lines

    @classmethod
    def from_file(cls, config_path: str) -> 'ReaderConfig':
        """Load configuration from file (JSON or YAML)."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                if _is_yaml_path(config_path):
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML configuration file format: {e}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid configuration file format: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading configuration: {e}")

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ReaderConfig':
        """Create configuration from dictionary."""
        # Filter out unknown keys
        known_keys = set(cls.__dataclass_fields__.keys())
        filtered_dict = {k: v for k, v in config_dict.items() if k in known_keys}

        try:
            return cls(**filtered_dict)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration parameters: {e}")

    @classmethod
    def from_env(cls) -> 'ReaderConfig':
        """Load configuration from environment variables."""
        config = cls()

        def to_bool(value: str) -> bool:
            return value.lower() in ('true', '1', 'yes')

        env_mappings = {
            'GTF_READER_ENCODING': ('encoding', str),
            'GTF_READER_ENCODING_ERRORS': ('encoding_errors', str),
            'GTF_READER_LOG_INVALID_LINES': ('log_invalid_lines', to_bool),
            'GTF_READER_MEMORY_MONITORING': ('enable_memory_monitoring', to_bool),
            'GTF_READER_MEMORY_LIMIT_MB': ('memory_limit_mb', int),
            'GTF_READER_MEMORY_CHECK_INTERVAL': ('memory_check_interval', int),
            'GTF_READER_DEBUG_MODE': ('debug_mode', to_bool),
        }

        for env_var, (field_name, converter) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                try:
                    setattr(config, field_name, converter(env_value))
                except (ValueError, TypeError) as e:
                    raise ConfigurationError(f"Invalid environment variable {env_var}: {e}")

        config.validate()
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def save_to_file(self, config_path: str) -> None:
        """Save configuration to file."""
        config_dict = self.to_dict()

        try:
            with open(config_path, 'w') as f:
                if _is_yaml_path(config_path):
                    yaml.safe_dump(config_dict, f, default_flow_style=False)
                else:
                    json.dump(config_dict, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration: {e}")

    def validate(self) -> None:
        """Validate configuration parameters."""
        if not self.encoding:
            raise ConfigurationError("encoding must not be empty")

        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError):
            raise ConfigurationError(f"Unknown encoding: {self.encoding}")

        if self.encoding_errors not in ENCODING_ERROR_POLICIES:
            raise ConfigurationError(
                f"encoding_errors must be one of {', '.join(ENCODING_ERROR_POLICIES)}"
            )

        if self.memory_limit_mb < 100:
            raise ConfigurationError("memory_limit_mb must be >= 100")

        if self.memory_check_interval < 1:
            raise ConfigurationError("memory_check_interval must be >= 1")

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.validate()


def load_config(config_path: Optional[str] = None,
                use_env: bool = True) -> ReaderConfig:
    """
    Load configuration with priority: file > environment > defaults.

    Args:
        config_path: Path to configuration file (optional)
        use_env: Whether to load environment variables

    Returns:
        ReaderConfig: Loaded configuration
    """
    config = ReaderConfig()

    if use_env:
        env_config = ReaderConfig.from_env()
        for field_name in ReaderConfig.__dataclass_fields__.keys():
            env_value = getattr(env_config, field_name)
            if env_value != getattr(config, field_name):
                setattr(config, field_name, env_value)

    if config_path:
        file_config = ReaderConfig.from_file(config_path)
        for field_name in ReaderConfig.__dataclass_fields__.keys():
            setattr(config, field_name, getattr(file_config, field_name))

    return config

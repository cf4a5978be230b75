"""Configuration file loading and validation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from phargs.exceptions import ValidationError, ConfigValidationError
from phargs.program import comma_separated


class PreservingLoader(yaml.SafeLoader):
    """YAML loader that keeps yes/no/on/off as strings so they can be used as values."""
    pass


# Only true/false stay booleans; yes, no, on, off, y, n load as plain strings
PreservingLoader.yaml_implicit_resolvers = dict(PreservingLoader.yaml_implicit_resolvers)
for _first in 'oOyYnN':
    if _first in PreservingLoader.yaml_implicit_resolvers:
        PreservingLoader.yaml_implicit_resolvers[_first] = [
            (tag, regexp) for tag, regexp in PreservingLoader.yaml_implicit_resolvers[_first]
            if tag != 'tag:yaml.org,2002:bool'
        ]


LOG_LEVELS = ('debug', 'info', 'warn', 'error')


@dataclass
class RunConfig:
    """Settings for one phargs invocation."""
    values: List[str] = field(default_factory=list)
    dry_run: bool = False
    sibling: bool = False
    log_level: str = 'info'


class ConfigLoader:
    """Loads and validates a phargs YAML configuration file."""

    KNOWN_FIELDS = {'values', 'dry_run', 'sibling', 'log_level'}

    def __init__(self):
        self.errors: List[ValidationError] = []

    def load(self, config_path: Path) -> RunConfig:
        """Load and validate a configuration file."""
        self.errors = []
        try:
            with open(config_path, 'r') as f:
                data = yaml.load(f, Loader=PreservingLoader)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load config: {e}", str(config_path))
            self._raise_validation_errors()

        if data is None:
            return RunConfig()

        if not isinstance(data, dict):
            self._add_error("Config must be a YAML object/dictionary", str(config_path))
            self._raise_validation_errors()

        config = self.from_dict(data)
        if self.errors:
            self._raise_validation_errors()
        return config

    def from_dict(self, data: Dict[str, Any]) -> RunConfig:
        """Build a RunConfig, recording an error for every invalid field."""
        config = RunConfig()

        for key in data.keys():
            if key not in self.KNOWN_FIELDS:
                self._add_error(f"Unknown field '{key}'", str(key))

        if 'values' in data:
            values = self._validate_values(data['values'])
            if values is not None:
                config.values = values

        for flag in ('dry_run', 'sibling'):
            if flag in data:
                if isinstance(data[flag], bool):
                    setattr(config, flag, data[flag])
                else:
                    self._add_error(f"'{flag}' must be a boolean, got {type(data[flag]).__name__}", flag)

        if 'log_level' in data:
            level = data['log_level']
            if level in LOG_LEVELS:
                config.log_level = level
            else:
                self._add_error(f"'log_level' must be one of {list(LOG_LEVELS)}, got {level!r}", 'log_level')

        return config

    def _validate_values(self, values: Any) -> Optional[List[str]]:
        """Accept a list of scalars or a comma-separated string."""
        if isinstance(values, str):
            return comma_separated(values)

        if not isinstance(values, list):
            self._add_error("'values' must be a list or a comma-separated string", 'values')
            return None

        result = []
        for i, value in enumerate(values):
            if isinstance(value, (dict, list)) or value is None:
                self._add_error(f"'values[{i}]' must be a scalar", f"values[{i}]")
            elif isinstance(value, bool):
                result.append('true' if value else 'false')
            else:
                result.append(str(value))
        return result

    def _add_error(self, message: str, path: str = "", exit_code: int = 2):
        """Add validation error."""
        self.errors.append(ValidationError(message, path, exit_code))

    def _raise_validation_errors(self):
        """Raise ConfigValidationError with accumulated errors."""
        raise ConfigValidationError(self.errors)

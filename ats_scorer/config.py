"""
Scoring configuration.
Named constants for thresholds, limits and weights used across the pipeline.
"""

from dataclasses import dataclass, fields
from numbers import Real
from typing import Any, Dict, Mapping, Optional

from .exceptions import ConfigurationError


DEFAULT_THRESHOLD = 75
EXCELLENT_THRESHOLD = 90
DEFAULT_MAX_KEYWORDS = 50
DEFAULT_SUGGESTION_LIMIT = 5
SECTION_PENALTY = 5
POSITIONAL_BOOST = 1.5
LEAD_FRACTION = 0.2

# camelCase keys sent by the front end
_KEY_ALIASES = {
    'maxKeywords': 'max_keywords',
    'suggestionLimit': 'suggestion_limit',
    'sectionPenalty': 'section_penalty',
    'positionalBoost': 'positional_boost',
    'leadFraction': 'lead_fraction',
    'excellentThreshold': 'excellent_threshold',
}


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class AnalysisConfig:
    """Tunable values for a single analysis call."""
    threshold: float = DEFAULT_THRESHOLD
    max_keywords: int = DEFAULT_MAX_KEYWORDS
    suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT
    section_penalty: int = SECTION_PENALTY
    positional_boost: float = POSITIONAL_BOOST
    lead_fraction: float = LEAD_FRACTION
    excellent_threshold: float = EXCELLENT_THRESHOLD

    def __post_init__(self):
        if not _is_number(self.threshold) or not 0 <= self.threshold <= 100:
            raise ConfigurationError(f"threshold must be a number between 0 and 100, got {self.threshold!r}")
        if not _is_number(self.excellent_threshold) or not 0 <= self.excellent_threshold <= 100:
            raise ConfigurationError(
                f"excellent_threshold must be a number between 0 and 100, got {self.excellent_threshold!r}"
            )
        if not _is_int(self.max_keywords) or self.max_keywords < 0:
            raise ConfigurationError(f"max_keywords must be a non-negative integer, got {self.max_keywords!r}")
        if not _is_int(self.suggestion_limit) or self.suggestion_limit < 0:
            raise ConfigurationError(
                f"suggestion_limit must be a non-negative integer, got {self.suggestion_limit!r}"
            )
        if not _is_number(self.section_penalty) or self.section_penalty < 0:
            raise ConfigurationError(f"section_penalty must be a non-negative number, got {self.section_penalty!r}")
        if not _is_number(self.positional_boost) or self.positional_boost < 1:
            raise ConfigurationError(f"positional_boost must be at least 1, got {self.positional_boost!r}")
        if not _is_number(self.lead_fraction) or not 0 <= self.lead_fraction <= 1:
            raise ConfigurationError(f"lead_fraction must be between 0 and 1, got {self.lead_fraction!r}")

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> 'AnalysisConfig':
        """Build a config from a mapping with camelCase or snake_case keys.

        Keys whose value is None are ignored so optional request fields fall
        back to the defaults.
        """
        if values is None:
            return cls()
        if not isinstance(values, Mapping):
            raise ConfigurationError(f"config must be a mapping, got {type(values).__name__}")

        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in values.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown configuration key: {key}")
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)

    def rating_for(self, score: int) -> str:
        """Band a score the way the dashboard color-codes it.

        A failing score is never rated above ``needs_improvement``, even when
        the pass threshold is set above the excellent band.
        """
        if score < self.threshold:
            return "needs_improvement"
        if score >= self.excellent_threshold:
            return "excellent"
        return "good"


def resolve_config(config=None, **overrides) -> AnalysisConfig:
    """Merge an optional config (object or mapping) with keyword overrides."""
    if isinstance(config, AnalysisConfig):
        base = config
    else:
        base = AnalysisConfig.from_mapping(config)

    changes = {k: v for k, v in overrides.items() if v is not None}
    if not changes:
        return base
    values = {f.name: getattr(base, f.name) for f in fields(base)}
    values.update(changes)
    return AnalysisConfig(**values)

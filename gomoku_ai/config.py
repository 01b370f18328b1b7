"""
Configuration constants and the Settings object consumed by the search engine.
"""
import logging
import math
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .types import Pattern

logger = logging.getLogger(__name__)

# --- Board ---
BOARD_SIZE: int = 15
WIN_LENGTH: int = 5
LINE_HALF_LENGTH: int = 4  # Cells scanned on each side of a cell for local patterns

# --- Search defaults ---
DEFAULT_SEARCH_DEPTH: int = 4
DEFAULT_CANDIDATE_COUNT: int = 10
DEFAULT_SEARCH_RANGE: int = 2

# --- Evaluation defaults ---
DEFAULT_PATTERN_WEIGHTS: Dict[str, float] = {
    Pattern.FIVE.value: 100000,
    Pattern.LIVE_FOUR.value: 100000,
    Pattern.DEAD_FOUR.value: 500,
    Pattern.LIVE_THREE.value: 1000,
    Pattern.DEAD_THREE.value: 100,
    Pattern.LIVE_TWO.value: 100,
    Pattern.DEAD_TWO.value: 10,
}
DEFAULT_OPPONENT_THREAT: float = 1.2

# quick_evaluate_position: own move counts double, blocking value is damped
QUICK_EVAL_SELF_FACTOR: float = 2
QUICK_EVAL_BLOCK_FACTOR: float = 0.8

# camelCase keys accepted from front-end settings payloads
_KEY_ALIASES = {
    'searchDepth': 'search_depth',
    'candidateCount': 'candidate_count',
    'searchRange': 'search_range',
    'patternWeights': 'pattern_weights',
    'opponentThreat': 'opponent_threat',
    'liveFive': Pattern.FIVE.value,
    'liveFour': Pattern.LIVE_FOUR.value,
    'deadFour': Pattern.DEAD_FOUR.value,
    'liveThree': Pattern.LIVE_THREE.value,
    'deadThree': Pattern.DEAD_THREE.value,
    'liveTwo': Pattern.LIVE_TWO.value,
    'deadTwo': Pattern.DEAD_TWO.value,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _positive_int(name: str, value: Any, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            pass
    if _is_number(value) and float(value).is_integer() and value >= 1:
        return int(value)
    logger.warning(f"Invalid {name}={value!r}, falling back to {default}")
    return default


def _weight(name: str, value: Any, default: float) -> float:
    if value is None:
        return default
    if _is_number(value) and value >= 0:
        return value
    logger.warning(f"Invalid weight {name}={value!r}, falling back to {default}")
    return default


class Settings:
    """
    Search configuration. Read-only once built; every missing or malformed field is
    replaced by its documented default instead of raising.
    """
    def __init__(self, search_depth: Optional[int] = None, candidate_count: Optional[int] = None,
                 search_range: Optional[int] = None, pattern_weights: Optional[Mapping[str, Any]] = None,
                 opponent_threat: Optional[float] = None):
        self._search_depth = _positive_int('search_depth', search_depth, DEFAULT_SEARCH_DEPTH)
        self._candidate_count = _positive_int('candidate_count', candidate_count, DEFAULT_CANDIDATE_COUNT)
        self._search_range = _positive_int('search_range', search_range, DEFAULT_SEARCH_RANGE)

        raw_weights: Dict[str, Any] = {}
        if pattern_weights is not None:
            if isinstance(pattern_weights, Mapping):
                raw_weights = {_KEY_ALIASES.get(k, k): v for k, v in pattern_weights.items()}
            else:
                logger.warning(f"Invalid pattern_weights={pattern_weights!r}, using default table")

        # Front ends may keep the threat coefficient inside the weight table
        if opponent_threat is None:
            opponent_threat = raw_weights.pop('opponent_threat', None)
        else:
            raw_weights.pop('opponent_threat', None)

        for key in raw_weights:
            if key not in DEFAULT_PATTERN_WEIGHTS:
                logger.warning(f"Ignoring unknown pattern weight {key!r}")

        self._pattern_weights = MappingProxyType({
            key: _weight(key, raw_weights.get(key), default)
            for key, default in DEFAULT_PATTERN_WEIGHTS.items()
        })

        if opponent_threat is not None and _is_number(opponent_threat):
            # Sign is ignored, the coefficient always scales the opponent's score down from ours
            self._opponent_threat = abs(opponent_threat)
        else:
            if opponent_threat is not None:
                logger.warning(f"Invalid opponent_threat={opponent_threat!r}, "
                               f"falling back to {DEFAULT_OPPONENT_THREAT}")
            self._opponent_threat = DEFAULT_OPPONENT_THREAT

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'Settings':
        """
        Build settings from a plain mapping, accepting snake_case or camelCase keys.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            logger.warning(f"Settings must be a mapping, got {type(data).__name__}; using defaults")
            return cls()
        kwargs = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name in ('search_depth', 'candidate_count', 'search_range', 'pattern_weights', 'opponent_threat'):
                kwargs[name] = value
            elif name == 'board_size':
                if value != BOARD_SIZE:
                    logger.warning(f"Only {BOARD_SIZE}x{BOARD_SIZE} boards are supported, ignoring board_size={value!r}")
            else:
                logger.warning(f"Ignoring unknown setting {key!r}")
        return cls(**kwargs)

    @property
    def search_depth(self) -> int:
        return self._search_depth

    @property
    def candidate_count(self) -> int:
        return self._candidate_count

    @property
    def search_range(self) -> int:
        return self._search_range

    @property
    def pattern_weights(self) -> Mapping[str, float]:
        return self._pattern_weights

    @property
    def opponent_threat(self) -> float:
        return self._opponent_threat

    def weight(self, pattern: Pattern) -> float:
        return self._pattern_weights[pattern.value]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'search_depth': self._search_depth,
            'candidate_count': self._candidate_count,
            'search_range': self._search_range,
            'pattern_weights': dict(self._pattern_weights),
            'opponent_threat': self._opponent_threat,
        }

    def __eq__(self, other):
        if isinstance(other, Settings):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    def __repr__(self):
        return (f"Settings(depth={self._search_depth}, candidates={self._candidate_count}, "
                f"range={self._search_range}, threat={self._opponent_threat})")

# qcomposer/sampler.py
"""
Shot sampling from a probability vector.

Histogram keys are fixed-width bitstrings, width = log2(len(probs)),
zero-padded, most significant bit first: the leftmost character is qubit
n-1 and the rightmost is qubit 0. So for a 2-qubit Bell state the keys are
"00" and "11", and index 1 (qubit 0 set) prints as "01".
"""
import logging
from typing import Dict, List, Optional, Tuple
import numpy as np

from .config import validate_shots
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

PROB_SUM_TOL = 1e-6


def bitstring(index: int, width: int) -> str:
    return format(index, f"0{width}b")

def _check_probs(probs) -> np.ndarray:
    p = np.asarray(probs, dtype=np.float64)
    N = p.shape[0] if p.ndim == 1 else 0
    if N < 2 or (N & (N - 1)) != 0:
        raise ConfigurationError(f"probability vector must be 1-D with length 2**n (n >= 1), got shape {p.shape}")
    if not np.all(np.isfinite(p)) or np.any(p < 0):
        raise ConfigurationError("probabilities must be finite and non-negative")
    total = float(p.sum())
    if abs(total - 1.0) > PROB_SUM_TOL:
        raise ConfigurationError(f"probabilities sum to {total}, expected 1")
    return p

def sample_counts(probs, shots: int, rng: Optional[np.random.Generator] = None,
                  seed: Optional[int] = None) -> Dict[str, int]:
    """
    Draw `shots` independent outcomes and count them per bitstring.

    Each shot takes r uniform in [0, 1) and picks the first index whose
    running sum reaches r. Draws past the final running sum (float round-off)
    land on the last index, so the counts always add up to `shots`.
    """
    p = _check_probs(probs)
    shots = validate_shots(shots)
    rng = rng or np.random.default_rng(seed)

    N = p.shape[0]
    width = N.bit_length() - 1
    cdf = np.cumsum(p)
    r = rng.random(shots)
    idx = np.searchsorted(cdf, r, side="left")
    overshoot = int(np.count_nonzero(idx >= N))
    if overshoot:
        logger.debug("%d draw(s) past cumulative sum %.17g, counted as index %d", overshoot, cdf[-1], N - 1)
        idx = np.minimum(idx, N - 1)

    hist = np.bincount(idx, minlength=N)
    return {bitstring(int(i), width): int(hist[i]) for i in np.flatnonzero(hist)}

def sorted_counts(counts: Dict[str, int]) -> List[Tuple[str, int]]:
    """Rows for a counts table: most frequent first, ties by bitstring."""
    return sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))

"""In‑place 1‑D discrete Fourier transform.

``dft1d(x, inverse)`` and ``transform(x, direction)`` overwrite the caller's
buffer with

    X[k] = Σ_n x[n]·exp(∓2πi·k·n/N)

(minus sign forward, plus sign inverse). The inverse is **not** divided by N;
call :func:`normalize` at any point of the pipeline to get the true inverse.

The buffer is a one‑dimensional ``complex128`` ndarray (contiguous or a
strided view) or a Python ``list`` of numbers. Everything is validated before
the first write, so a call that raises leaves the buffer as it was.
"""

import enum
import logging

import numpy as np

from bluestein import bluestein_fft_inplace
from radix import TWIDDLE_METHODS, InvalidLengthError, is_power_of_two, radix2_fft_inplace

__all__ = ["Direction", "InvalidLengthError", "dft1d", "normalize", "transform"]

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Transform direction; the value is the sign of the twiddle exponent."""

    FORWARD = -1
    INVERSE = 1

    @property
    def sign(self) -> int:
        return self.value

    @classmethod
    def of(cls, inverse: bool) -> "Direction":
        return cls.INVERSE if inverse else cls.FORWARD

    @classmethod
    def coerce(cls, direction) -> "Direction":
        """Accept a ``Direction`` or a boolean ``inverse`` flag, nothing else."""
        if isinstance(direction, cls):
            return direction
        if isinstance(direction, (bool, np.bool_)):
            return cls.of(bool(direction))
        raise TypeError(
            f"direction must be Direction.FORWARD, Direction.INVERSE or a bool, got {direction!r}."
        )


def _workspace(x):
    """Contiguous complex128 array to compute in; *x* itself when possible."""
    if isinstance(x, np.ndarray):
        if x.ndim != 1:
            raise TypeError(f"Expected a one-dimensional buffer, got shape {x.shape}.")
        if x.dtype != np.complex128:
            raise TypeError(f"Buffer must have dtype complex128 to be transformed in place, got {x.dtype}.")
        if not x.flags.writeable:
            raise TypeError("Buffer is read-only.")
        return x if x.flags.c_contiguous else x.copy()
    if isinstance(x, list):
        work = np.array(x, dtype=complex)
        if work.ndim != 1:
            raise TypeError("Expected a flat list of numbers.")
        return work
    raise TypeError(f"Expected a numpy array or a list, got {type(x).__name__}.")


def _write_back(x, work):
    if isinstance(x, list):
        x[:] = work.tolist()
    elif work is not x:
        x[...] = work


def transform(x, direction: Direction = Direction.FORWARD, *, any_length: bool = False,
              twiddles: str = "table"):
    """Fourier transform *x* in place.

    Parameters
    ----------
    x : ndarray or list
        Buffer of N complex samples, overwritten with the result.
    direction : Direction
        ``Direction.FORWARD`` or ``Direction.INVERSE`` (unnormalized).
    any_length : bool
        Accept any N >= 1, using Bluestein's algorithm when N is not a power
        of two. By default only powers of two are accepted.
    twiddles : {"table", "recurrence"}
        Twiddle generation for the radix‑2 stages.

    Raises
    ------
    InvalidLengthError
        N = 0, or N is not a power of two and *any_length* is false.
    TypeError
        *x* cannot hold complex values in place, or *direction* is neither a
        ``Direction`` nor a bool.
    """
    direction = Direction.coerce(direction)
    if twiddles not in TWIDDLE_METHODS:
        raise ValueError(f"Unknown twiddle method {twiddles!r}, expected one of {TWIDDLE_METHODS}.")

    work = _workspace(x)
    N = work.size
    if N < 1:
        raise InvalidLengthError(N, "at least 1")

    if is_power_of_two(N):
        logger.debug("transform: N=%d direction=%s engine=radix2", N, direction.name)
        radix2_fft_inplace(work, direction.sign, twiddles)
    elif any_length:
        logger.debug("transform: N=%d direction=%s engine=bluestein", N, direction.name)
        bluestein_fft_inplace(work, direction.sign)
    else:
        raise InvalidLengthError(N)

    _write_back(x, work)
    return x


def dft1d(x, inverse: bool = False):
    """Radix‑2 DFT of *x* in place; ``inverse=True`` skips the 1/N factor."""
    return transform(x, Direction.of(inverse))


def normalize(x):
    """Divide *x* by its length in place."""
    if isinstance(x, np.ndarray):
        if x.ndim != 1:
            raise TypeError(f"Expected a one-dimensional buffer, got shape {x.shape}.")
        if not x.flags.writeable:
            raise TypeError("Buffer is read-only.")
    elif isinstance(x, list):
        if np.ndim(x) != 1:
            raise TypeError("Expected a flat list of numbers.")
    else:
        raise TypeError(f"Expected a numpy array or a list, got {type(x).__name__}.")
    N = len(x)
    if N < 1:
        raise InvalidLengthError(N, "at least 1")
    if isinstance(x, np.ndarray):
        x /= N
    else:
        x[:] = [v / N for v in x]
    return x

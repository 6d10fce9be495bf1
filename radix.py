import logging
import time

import numpy as np

logger = logging.getLogger(__name__)

TWIDDLE_METHODS = ("table", "recurrence")


class InvalidLengthError(ValueError):
    """Buffer length does not meet the transform's size precondition."""

    def __init__(self, length, requirement="a power of two"):
        self.length = length
        super().__init__(f"Input length must be {requirement}, got {length}.")


# ---------------- helpers ---------------- #

def is_power_of_two(n: int) -> bool:
    return n >= 1 and not (n & (n - 1))


def bit_reverse_indices(n: int) -> np.ndarray:
    """Bit‑reversal permutation for power‑of‑two *n* (vectorised, 32‑bit)."""
    bits = n.bit_length() - 1
    if bits == 0:
        return np.zeros(n, dtype=np.intp)
    rev = np.arange(n, dtype=np.uint32)
    rev = ((rev & 0x55555555) << 1) | ((rev & 0xAAAAAAAA) >> 1)
    rev = ((rev & 0x33333333) << 2) | ((rev & 0xCCCCCCCC) >> 2)
    rev = ((rev & 0x0F0F0F0F) << 4) | ((rev & 0xF0F0F0F0) >> 4)
    rev = ((rev & 0x00FF00FF) << 8) | ((rev & 0xFF00FF00) >> 8)
    rev = (rev << 16) | (rev >> 16)
    rev >>= 32 - bits
    return rev.astype(np.intp)


def bit_reverse_permute(x: np.ndarray) -> np.ndarray:
    """Reorder *x* in place into bit‑reversed order.

    Every pair ``(i, rev(i))`` with ``i < rev(i)`` is exchanged exactly once.
    The swap is vectorised, so the index table and the gathered halves are
    O(N) scratch; *x* is still never replaced by a second buffer.
    """
    rev = bit_reverse_indices(x.size)
    i = np.flatnonzero(np.arange(x.size) < rev)
    j = rev[i]
    x[i], x[j] = x[j], x[i]
    return x


def twiddle_factors(m: int, sign: int, method: str = "table") -> np.ndarray:
    """Twiddles ``exp(sign·2πi·j/m)`` for ``j = 0 .. m/2 - 1``.

    ``"table"`` evaluates every factor directly. ``"recurrence"`` rotates by
    doubling: ``W[k:2k] = W[:k]·exp(sign·2πi·k/m)`` for ``k = 1, 2, 4, …``, so
    each factor is at most log2(m) products away from an exact value.
    The quarter turn ``j = m/4`` is set to the exact value ``sign·i`` in both
    cases.
    """
    half = m // 2
    if method == "table":
        W = np.exp(sign * 2j * np.pi * np.arange(half) / m)
    elif method == "recurrence":
        W = np.empty(half, dtype=complex)
        W[0] = 1.0
        k = 1
        while k < half:
            W[k:2 * k] = W[:k] * np.exp(sign * 2j * np.pi * k / m)
            k <<= 1
    else:
        raise ValueError(f"Unknown twiddle method {method!r}, expected one of {TWIDDLE_METHODS}.")
    if half % 2 == 0:
        W[half // 2] = sign * 1j
    return W


# ---------------- radix‑2 (DIT) FFT ---------------- #

def radix2_fft_inplace(x: np.ndarray, sign: int = -1, twiddles: str = "table") -> np.ndarray:
    """Non‑recursive, in‑place radix‑2 Cooley–Tukey FFT.

    Parameters
    ----------
    x : ndarray
        Contiguous one‑dimensional ``complex128`` array whose *length must be an
        exact power of two*. It is not validated here and is overwritten.
    sign : int
        Exponent sign of the twiddles: ``-1`` forward, ``+1`` inverse.
        The inverse is **not** divided by N.
    twiddles : {"table", "recurrence"}
        How each stage builds its twiddle factors.

    Returns
    -------
    ndarray (complex)
        *x* itself, now holding the transform.
    """
    N = x.size

    # 1. Bit‑reverse permutation
    bit_reverse_permute(x)

    # 2. Iterative Danielson–Lanczos stages (DIT), all groups of a stage at once
    m = 2
    while m <= N:
        half = m // 2
        W = twiddle_factors(m, sign, twiddles)
        groups = x.reshape(-1, m)                # view: rows are the groups of this stage

        u = groups[:, :half].copy()             # **copy!** – pre‑update values of the top half
        t = groups[:, half:] * W                # twiddled second half

        groups[:, :half] = u + t                # butterfly
        groups[:, half:] = u - t
        m <<= 1  # ×2 per stage
    return x


def radix2_fft(x, inverse: bool = False) -> np.ndarray:
    """Out‑of‑place radix‑2 FFT; the input is left untouched."""
    X = np.array(x, dtype=complex).ravel()
    N = X.size
    if not is_power_of_two(N):
        raise InvalidLengthError(N, "a power of two for radix‑2 FFT")
    logger.debug("radix2_fft: N=%d inverse=%s", N, inverse)
    return radix2_fft_inplace(X, 1 if inverse else -1)


# ---------------- quick benchmark / accuracy check ---------------- #

def benchmark_radix(N):
    print(f"\n🚀 测试大规模 Radix‑2 FFT, 长度 N = {N}")
    x = np.random.randn(N) + 1j * np.random.randn(N)

    X_r = x.copy()
    start = time.perf_counter()
    radix2_fft_inplace(X_r)
    elapsed = time.perf_counter() - start
    print(f"✅ 完成 Radix‑2 FFT，耗时：{elapsed:.2f} 秒")

    X_np = np.fft.fft(x)
    rel_err = np.max(np.abs(X_r - X_np) / np.maximum(np.abs(X_np), 1e-12))
    print(f"最大相对误差 = {rel_err:.2e}")

    # round trip, unnormalized inverse
    radix2_fft_inplace(X_r, sign=1)
    rt_err = np.max(np.abs(X_r / N - x))
    print(f"往返误差 (ifft/N) = {rt_err:.2e}")


if __name__ == "__main__":
    for N in (1 << 20, 1 << 22, 1 << 24):  # 1 M, 4 M, 16 M
        benchmark_radix(N)

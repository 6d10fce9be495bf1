import logging
import time

import numpy as np

from radix import InvalidLengthError, radix2_fft_inplace

logger = logging.getLogger(__name__)


def chirp(n: int, sign: int = -1) -> np.ndarray:
    """``exp(sign·iπ·k²/n)`` for ``k = 0 .. n-1``.

    ``k²`` is reduced mod ``2n`` first (the chirp has that period), which keeps
    the angle small and exact for large *n*.
    """
    k = np.arange(n, dtype=np.int64)
    return np.exp(sign * 1j * np.pi * ((k * k) % (2 * n)) / n)


def bluestein_fft_inplace(x: np.ndarray, sign: int = -1) -> np.ndarray:
    """DFT of any length ``N >= 1`` written back into *x*.

    The DFT is rewritten as a circular convolution of length ``M >= 2N - 1``
    (a power of two), which the radix‑2 engine evaluates. Like the radix‑2
    path, ``sign=+1`` gives the inverse **without** the ``1/N`` factor.
    """
    N = x.size
    M = 1 << (2 * N - 1).bit_length()

    w = chirp(N, sign)  # Chirp
    w_conj = np.conj(w)  # Instead of recomputing exp(-sign·j...)

    a = np.zeros(M, dtype=complex)
    a[:N] = x * w

    b = np.zeros(M, dtype=complex)
    b[:N] = w_conj
    if N > 1:
        b[-(N - 1):] = w_conj[1:N][::-1]  # mirror of w_conj[1:]

    radix2_fft_inplace(a)
    radix2_fft_inplace(b)
    a *= b
    radix2_fft_inplace(a, sign=1)
    a /= M

    x[:] = a[:N] * w
    return x


def bluestein_fft(x, inverse: bool = False) -> np.ndarray:
    """Out‑of‑place Bluestein FFT; the input is left untouched."""
    X = np.array(x, dtype=complex).ravel()
    N = X.size
    if N < 1:
        raise InvalidLengthError(N, "at least 1")
    logger.debug("bluestein_fft: N=%d inverse=%s", N, inverse)
    return bluestein_fft_inplace(X, 1 if inverse else -1)


def benchmark_bluestein(N):
    print(f"\n🚀 测试大规模 Bluestein FFT, 长度 N = {N}")
    x = np.random.randn(N) + 1j * np.random.randn(N)

    X_b = x.copy()
    start = time.perf_counter()
    bluestein_fft_inplace(X_b)
    elapsed = time.perf_counter() - start

    print(f"✅ 完成 Bluestein FFT，耗时：{elapsed:.2f} 秒")

    try:
        X_np = np.fft.fft(x)
        # 最大相对误差（避免除以零）
        relative_err = np.max(np.abs(X_b - X_np) / np.maximum(np.abs(X_np), 1e-12))
        print(f"最大相对误差 = {relative_err:.2e}")
    except MemoryError:
        print("⚠️ 无法验证 NumPy FFT（可能内存不足）")


if __name__ == "__main__":
    benchmark_bluestein(1_000_007)
    benchmark_bluestein(5_000_001)

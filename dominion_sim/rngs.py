"""Multi-stream Lehmer random number generator."""

from __future__ import annotations

import time

MODULUS = 2147483647
MULTIPLIER = 48271
CHECK = 399268537
STREAMS = 256
A256 = 22925
DEFAULT = 123456789


class RandomStreams:
    """A set of independent Lehmer generator streams.

    Each stream holds a state in ``[1, MODULUS - 1]``; ``random`` advances the
    current stream and returns a float uniformly distributed in ``(0, 1)``.
    """

    def __init__(self) -> None:
        self._seeds = [0] * STREAMS
        self._seeds[0] = DEFAULT
        self._stream = 0
        self._initialized = False

    @property
    def stream(self) -> int:
        """Index of the currently selected stream."""
        return self._stream

    def random(self) -> float:
        """Advance the current stream and return a value in (0.0, 1.0)."""
        q, r = divmod(MODULUS, MULTIPLIER)
        state = self._seeds[self._stream]
        t = MULTIPLIER * (state % q) - r * (state // q)
        self._seeds[self._stream] = t if t > 0 else t + MODULUS
        return self._seeds[self._stream] / MODULUS

    def plant_seeds(self, x: int) -> None:
        """Seed stream 0 with ``x`` and derive the state of every other stream."""
        q, r = divmod(MODULUS, A256)
        self._initialized = True
        current = self._stream
        self.select_stream(0)
        self.put_seed(x)
        self._stream = current
        for j in range(1, STREAMS):
            prev = self._seeds[j - 1]
            value = A256 * (prev % q) - r * (prev // q)
            self._seeds[j] = value if value > 0 else value + MODULUS

    def put_seed(self, x: int) -> None:
        """Set the state of the current stream.

        A positive value is used (reduced modulo the modulus), a negative value
        takes the state from the clock, and zero asks for a seed interactively.
        """
        if x > 0:
            x %= MODULUS
        if x < 0:
            x = int(time.time()) % MODULUS
        while not 0 < x < MODULUS:
            answer = input("\nEnter a positive integer seed (9 digits or less) >> ")
            try:
                x = int(answer.strip())
            except ValueError:
                x = 0
            if not 0 < x < MODULUS:
                print("\nInput out of range ... try again")
        self._seeds[self._stream] = x

    def get_seed(self) -> int:
        """Return the state of the current stream."""
        return self._seeds[self._stream]

    def select_stream(self, index: int) -> None:
        """Make stream ``index`` (taken modulo the stream count) current."""
        self._stream = index % STREAMS
        if not self._initialized and self._stream != 0:
            self.plant_seeds(DEFAULT)

    def self_check(self) -> bool:
        """Verify the generator against its reference values.

        This resets the generator's streams as a side effect.
        """
        self.select_stream(0)
        self.put_seed(1)
        for _ in range(10000):
            self.random()
        ok = self.get_seed() == CHECK
        self.select_stream(1)
        self.plant_seeds(1)
        return ok and self.get_seed() == A256
import numpy as np


class RandomSource:
    """Uniform draws over finite sequences, backed by a numpy Generator.

    Anything exposing the same ``choice(options)`` method can stand in for it,
    which is how the tests script table generation and tape growth.
    """

    def __init__(self, seed=None, generator=None):
        self._generator = generator if generator is not None else np.random.default_rng(seed)

    def choice(self, options):
        if not options:
            raise ValueError("Cannot choose from an empty sequence.")
        return options[int(self._generator.integers(len(options)))]

"""
Random directory name generation
"""

# Standard library -----------------------------------------------------------------------------------------------------
import random
import time

# Constants ------------------------------------------------------------------------------------------------------------
NAME_SEPARATOR = "-"
RANDOM_MAX = 2 ** 31 - 1


# Methods --------------------------------------------------------------------------------------------------------------

def random_dir_name(seed: int | None = None, separator: str = NAME_SEPARATOR) -> str:
    """
    Return a collision-resistant directory name such as '1804289383-17297348001234560098765'.

    The name joins a random integer in [0, RANDOM_MAX] and a time stamp built from
    the wall clock (microsecond resolution) and the monotonic performance counter.
    Spaces and periods are removed from the stamp, so the result is always safe
    as a single path segment.

    Args:
        seed: If provided, use a dedicated deterministic RNG seeded with this value.
              If None, use random.SystemRandom (cryptographically strong).
              The time component is never seeded.
        separator: String placed between the random and the time component.

    Returns:
        The generated name.
    """
    rng = random.Random(seed) if seed is not None else random.SystemRandom()
    number = rng.randint(0, RANDOM_MAX)
    stamp = f"{time.time():.6f} {time.perf_counter_ns()}"
    stamp = stamp.replace(" ", "").replace(".", "")
    return f"{number}{separator}{stamp}"

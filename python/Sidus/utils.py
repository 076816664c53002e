import time
import logging


class Timer:
    """
    Time multiple code blocks using a context manager.
    Usage:
        with Timer("decode stars"):
            stars = list(iter_stars(data, header))
    """

    def __init__(self, name):
        self.name = name
        self.start_time = None
        self.elapsed = None
        self.logger = logging.getLogger("Sidus.Timer")

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        end_time = time.time()
        self.elapsed = end_time - self.start_time
        self.logger.debug("%s: %.6f seconds", self.name, self.elapsed)

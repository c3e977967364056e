# sink.py
# Destinations for solutions found by the search. Both sinks are callables
# taking a tuple of word indices and are safe to call from many threads.

import threading


class SinkWriteError(Exception):
    """A solution could not be recorded."""


def format_solution(words, indices):
    return " ".join(words[i] for i in indices)


class FileSink:
    """Stream solutions to ``path`` as they are found, one line each."""

    def __init__(self, path, words):
        self.path = path
        self.words = words
        self.count = 0
        self._lock = threading.Lock()
        self._fh = None

    def open(self):
        try:
            self._fh = open(self.path, "w", encoding="utf-8")
        except OSError as e:
            raise SinkWriteError(f"cannot open {self.path}: {e}") from e
        return self

    def close(self):
        if self._fh is None:
            return
        with self._lock:
            fh, self._fh = self._fh, None
            try:
                fh.close()
            except OSError as e:
                raise SinkWriteError(f"cannot close {self.path}: {e}") from e

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __call__(self, indices):
        line = format_solution(self.words, indices) + "\n"
        with self._lock:
            if self._fh is None:
                raise SinkWriteError(f"{self.path} is not open")
            try:
                self._fh.write(line)
            except OSError as e:
                raise SinkWriteError(f"cannot write to {self.path}: {e}") from e
            self.count += 1


class MemorySink:
    """Collect solutions in memory; ``write_to`` dumps them afterwards."""

    def __init__(self, words):
        self.words = words
        self.solutions = []
        self._lock = threading.Lock()

    @property
    def count(self):
        return len(self.solutions)

    def __call__(self, indices):
        with self._lock:
            self.solutions.append(indices)

    def as_words(self):
        return [tuple(self.words[i] for i in s) for s in self.solutions]

    def write_to(self, path):
        try:
            with open(path, "w", encoding="utf-8") as f:
                for s in self.solutions:
                    f.write(format_solution(self.words, s) + "\n")
        except OSError as e:
            raise SinkWriteError(f"cannot write to {path}: {e}") from e

# progress.py


class NullProgress:
    """Swallows every message. Default for library use and tests."""

    def start(self, message):
        pass

    def update(self, message):
        pass

    def finish(self, message):
        pass


class ConsoleProgress(NullProgress):
    """Prints search progress on one console line, then a closing message."""

    def __init__(self, tag="search"):
        self.tag = tag

    def start(self, message):
        print(f"[{self.tag}] {message}", end="", flush=True)

    def update(self, message):
        print(f"\r[{self.tag}] {message}", end="", flush=True)

    def finish(self, message):
        print()
        print(f"[{self.tag}] {message}")

"""Root of the filestats exception hierarchy."""


class FileStatsError(Exception):
    """Base exception for all filestats errors.

    Context is passed as keyword arguments and kept as strings in
    ``details``; ``None`` values are left out. ``str()`` appends the context
    after the message, e.g. ``Cannot access file: a.txt (filepath=a.txt, ...)``,
    which is what the CLI prints before exiting.
    """

    def __init__(self, message: str, **details):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in details.items() if value is not None}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"

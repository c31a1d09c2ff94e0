class LedgerError(Exception):
    """Base class for failures raised by the site ledger core."""


class NotFound(LedgerError):
    def __init__(self, kind, key):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key}")


class MissingWorkerReference(LedgerError):
    def __init__(self):
        super().__init__("Worker ID is missing")

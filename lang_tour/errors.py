class TourError(Exception):
    pass


class UsageError(TourError):
    def __init__(self, message, token=None):
        super().__init__(message)
        self.message = message
        self.token = token


class DemoAbort(TourError):
    def __init__(self, step, reason):
        super().__init__(f"{step}: {reason}")
        self.step = step
        self.reason = reason

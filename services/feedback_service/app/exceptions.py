class FeedbackStoreError(Exception):
    """
    Raised when a statement against the feedback table fails.

    The message is safe to return to the client; the underlying driver
    error is kept on `__cause__` for logging.
    """

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

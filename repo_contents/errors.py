class InvalidArgument(ValueError):
    """Raised when a request object is built from an unusable argument."""

    def __init__(self, argument: str, reason: str = 'invalid value') -> None:
        super().__init__(f'{argument}: {reason}')
        self.argument = argument
        self.reason = reason

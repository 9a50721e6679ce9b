class InvalidArgumentError(ValueError):
    """Precondition violation: bad step parameters, state length or input text."""

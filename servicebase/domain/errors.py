"""Domain-level exceptions."""


class ContractViolationError(ValueError):
    """Raised when a repository call is made with invalid arguments.

    Examples: a None entity, a paged call without ordering, a sort accessor
    that is not a plain column, a key tuple of the wrong length.
    Never swallowed by the repository layer.
    """

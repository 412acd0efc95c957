# clique/errors.py


class CliqueError(Exception):
    """Base class for everything the clique finder raises."""


class ConstructionError(CliqueError):
    """Bad arguments handed to a finder at construction time."""


class NullArgumentError(ConstructionError, TypeError):
    pass


class InvalidArgumentError(ConstructionError, ValueError):
    pass


class PreconditionError(CliqueError):
    """The input graph does not satisfy what the search needs."""


class InvalidGraphError(PreconditionError, ValueError):
    pass

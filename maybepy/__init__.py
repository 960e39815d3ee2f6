from .maybe import (
    Maybe,
    Just,
    NOTHING,
    just,
    of,
    nothing,
    from_nullable,
    zip_maybes,
    lift,
    identity,
)
from .errors import MaybeError, EmptyValueError, ContractViolation, ArityError
from .logger import ConsoleLogger

from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import ConflictException as ConflictException
from .exceptions import DomainException as DomainException
from .exceptions import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exceptions import ErrorKind as ErrorKind
from .exceptions import OptimisticLockException as OptimisticLockException
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exceptions import StoreException as StoreException
from .exceptions import ValidationException as ValidationException

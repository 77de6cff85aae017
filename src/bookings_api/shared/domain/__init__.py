from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    ConflictException as ConflictException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    ErrorKind as ErrorKind,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    StoreException as StoreException,
)
from .exception import (
    ValidationException as ValidationException,
)
from .repository import Repository as Repository

from .api import Api as Api
from .database import Database as Database
from .deployment import Deployment as Deployment
from .functions import Functions as Functions
from .layers import Layers as Layers

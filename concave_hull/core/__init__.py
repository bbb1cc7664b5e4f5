from . import contain
from . import index
from . import intersect
from . import select
from . import trace

from .hist import *
from .fileutils import *
from .quiet import *

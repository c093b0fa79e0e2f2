from .mputils import *
from .generic_object import *

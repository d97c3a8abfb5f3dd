from .brine import *

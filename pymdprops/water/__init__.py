from .water import *

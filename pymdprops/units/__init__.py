from .units import *

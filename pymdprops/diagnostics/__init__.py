from .diagnostics import *

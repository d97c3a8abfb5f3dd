from .membrane import *

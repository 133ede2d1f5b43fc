# Import modules to get core functions exported
from . import flists

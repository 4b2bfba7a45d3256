from diffinterp.version import __version__
from diffinterp.interp.interp3 import Interp3
from diffinterp.interp.interp5 import Interp5
from diffinterp.interp.lagrange import Lagrange

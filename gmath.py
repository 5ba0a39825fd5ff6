# Fixed library of math constants and functions available to every expression.

import math
from types import MappingProxyType

def _floor (x): # float results keep all arithmetic in IEEE doubles
	return float (math.floor (x))

def _ceil (x):
	return float (math.ceil (x))

def _round (x): # half rounds toward positive infinity, round (2.5) == 3, round (-2.5) == -2
	return float (math.floor (x + 0.5))

def _min (*args):
	if not args:
		raise TypeError ('min expected at least 1 argument')

	return min (args)

def _max (*args):
	if not args:
		raise TypeError ('max expected at least 1 argument')

	return max (args)

CONSTS = MappingProxyType ({
	'PI': math.pi,
	'E' : math.e,
})

FUNCS = MappingProxyType ({
	'sin'  : math.sin,
	'cos'  : math.cos,
	'tan'  : math.tan,
	'sqrt' : math.sqrt,
	'abs'  : abs,
	'exp'  : math.exp,
	'ln'   : math.log,
	'log'  : math.log10,
	'pow'  : math.pow,
	'asin' : math.asin,
	'acos' : math.acos,
	'atan' : math.atan,
	'sinh' : math.sinh,
	'cosh' : math.cosh,
	'tanh' : math.tanh,
	'floor': _floor,
	'ceil' : _ceil,
	'round': _round,
	'min'  : _min,
	'max'  : _max,
})

LIBRARY = MappingProxyType ({**FUNCS, **CONSTS})
# Variable and function definitions as supplied by the front end.
#
# The front end may hand in plain dicts (with camelCase keys) or any object with matching attributes, the
# classes here are just a convenience. Nothing in the core mutates or keeps a reference to these.

from collections import namedtuple
from collections.abc import Mapping

Variable = namedtuple ('Variable', 'name value')

class FunctionDef:
	__slots__ = ['id', 'expr', 'derivative', 'independent_var', 'dependent_var', 'visible']

	def __init__ (self, id, expr, derivative = None, independent_var = 'x', dependent_var = 'f', visible = True):
		self.id              = id
		self.expr            = expr
		self.derivative      = derivative
		self.independent_var = independent_var
		self.dependent_var   = dependent_var
		self.visible         = visible

	def __repr__ (self):
		return f'FunctionDef ({self.id!r}, {self.expr!r}, {self.dependent_var}({self.independent_var}))'

_ALIASES = {
	'independent_var': ('independent_var', 'independentVar'),
	'dependent_var'  : ('dependent_var', 'dependentVar'),
}

class _None: pass # unique non-None None marker

def field (obj, name, default = None):
	for key in _ALIASES.get (name, (name,)):
		if isinstance (obj, Mapping):
			val = obj.get (key, _None)
		else:
			val = getattr (obj, key, _None)

		if val is not _None:
			return val

	return default

def func_independent_var (func):
	return field (func, 'independent_var') or 'x'

def func_dependent_var (func):
	return field (func, 'dependent_var') or 'f'

def func_is_visible (func):
	return field (func, 'visible', True) is not False

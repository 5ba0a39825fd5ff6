# Numeric evaluation of expression text against library, variables and the independent variable.
#
# Public entry points never raise, any failure at all is returned as None which callers treat as "no value
# at this point". The calc_*() counterparts raise and are there for diagnostics.

import math
import os
import sys

from gparser import Parser
import gdefs
import gmath
import gnorm

_DEBUG = os.environ.get ('GRAPHCALC_DEBUG') # print reasons for swallowed failures to stderr

class UnboundNameError (NameError): pass # reference to name not in library, variables or independent variable
class NonFiniteError (ArithmeticError): pass # NaN, infinity, division by zero or overflow

class _None: pass # unique non-None None marker

def set_debug (state):
	global _DEBUG

	_DEBUG = state

def debug_failure (where, expr, exc):
	if _DEBUG:
		print (f'{where}: {expr!r}: {exc.__class__.__name__}: {exc}', file = sys.stderr)

def _is_finite_num (val):
	return isinstance (val, (int, float)) and not isinstance (val, bool) and math.isfinite (val)

#...............................................................................................
class ast2num: # abstract syntax tree -> float
	def __init__ (self, context):
		self.context = context

	def __call__ (self, ast):
		try:
			val = self._ast2num (ast)
		except (ZeroDivisionError, OverflowError) as e:
			raise NonFiniteError (str (e)) from e

		if not isinstance (val, (int, float)) or isinstance (val, bool):
			raise TypeError (f'expression evaluated to {type (val).__name__!r}, not a number')

		if not math.isfinite (val):
			raise NonFiniteError (f'expression evaluated to {val}')

		return float (val)

	def _ast2num (self, ast):
		return self._ast2num_funcs [ast.op] (self, ast)

	def _ast2num_var (self, ast):
		val = self.context.get (ast.var, _None)

		if val is _None:
			raise UnboundNameError (f'name {ast.var!r} is not defined')

		return val

	def _ast2num_add (self, ast):
		itr = iter (ast.add)
		res = self._ast2num (next (itr))

		for arg in itr:
			res = res + self._ast2num (arg)

		return res

	def _ast2num_mul (self, ast):
		itr = iter (ast.mul)
		res = self._ast2num (next (itr))

		for arg in itr:
			res = res * self._ast2num (arg)

		return res

	def _ast2num_func (self, ast):
		func = self.context.get (ast.func, _None)

		if func is _None:
			raise UnboundNameError (f'function {ast.func!r} is not defined')

		if not callable (func):
			raise TypeError (f'{ast.func!r} is not a function')

		return func (*(self._ast2num (a) for a in ast.args))

	_ast2num_funcs = {
		'#'    : lambda self, ast: ast.as_float,
		'@'    : _ast2num_var,
		'('    : lambda self, ast: self._ast2num (ast.paren),
		'-'    : lambda self, ast: -self._ast2num (ast.minus),
		'+'    : _ast2num_add,
		'*'    : _ast2num_mul,
		'/'    : lambda self, ast: self._ast2num (ast.numer) / self._ast2num (ast.denom),
		'^'    : lambda self, ast: math.pow (self._ast2num (ast.base), self._ast2num (ast.exp)),
		'-func': _ast2num_func,
	}

#...............................................................................................
def build_variable_context (variables = ()):
	context = {}

	for var in variables or ():
		name, value = gdefs.field (var, 'name'), gdefs.field (var, 'value')

		if isinstance (name, str) and name and _is_finite_num (value):
			context [name] = float (value)

	return context

def build_context (point, independent_var = 'x', variables = ()): # library < variables < independent variable
	return {**gmath.LIBRARY, **build_variable_context (variables), (independent_var or 'x'): point}

def parse (expr):
	return Parser ().parse (gnorm.normalize (expr))

def calc_simple (expr, point, independent_var = 'x', variables = ()):
	ast = parse (expr)

	return ast2num (build_context (point, independent_var, variables)) (ast)

def evaluate_simple (expr, point, independent_var = 'x', variables = ()):
	try:
		return calc_simple (expr, point, independent_var, variables)

	except Exception as e:
		debug_failure ('evaluate_simple', expr, e)

	return None

# Convert calculator expressions to SymPy expressions and LaTeX text for display.
# Nothing here is simplified or differentiated, the tree is translated as written.

import sympy as sp

from gast import AST
import geval

def _round (a):
	return sp.floor (a + sp.Rational (1, 2))

_ast2spt_consts = {
	AST.Pi.var: sp.pi,
	AST.E.var : sp.E,
}

_ast2spt_libfuncs = {
	'sin'  : sp.sin,
	'cos'  : sp.cos,
	'tan'  : sp.tan,
	'sqrt' : sp.sqrt,
	'abs'  : sp.Abs,
	'exp'  : sp.exp,
	'ln'   : sp.log,
	'log'  : lambda a: sp.log (a, 10),
	'pow'  : sp.Pow,
	'asin' : sp.asin,
	'acos' : sp.acos,
	'atan' : sp.atan,
	'sinh' : sp.sinh,
	'cosh' : sp.cosh,
	'tanh' : sp.tanh,
	'floor': sp.floor,
	'ceil' : sp.ceiling,
	'round': _round,
	'min'  : sp.Min,
	'max'  : sp.Max,
}

#...............................................................................................
class ast2spt: # abstract syntax tree -> sympy tree (expression)
	def __call__ (self, ast):
		return self._ast2spt (ast)

	def _ast2spt (self, ast):
		return self._ast2spt_funcs [ast.op] (self, ast)

	def _ast2spt_num (self, ast):
		return sp.Integer (ast.num) if ast.is_num_int else sp.Float (ast.num)

	def _ast2spt_var (self, ast):
		return _ast2spt_consts [ast.var] if ast.is_var_const else sp.Symbol (ast.var)

	def _ast2spt_add (self, ast):
		return sp.Add (*(self._ast2spt (a) for a in ast.add), evaluate = False)

	def _ast2spt_mul (self, ast):
		return sp.Mul (*(self._ast2spt (a) for a in ast.mul), evaluate = False)

	def _ast2spt_div (self, ast):
		return sp.Mul (self._ast2spt (ast.numer), sp.Pow (self._ast2spt (ast.denom), -1, evaluate = False), evaluate = False)

	def _ast2spt_func (self, ast):
		args = tuple (self._ast2spt (a) for a in ast.args)
		func = _ast2spt_libfuncs.get (ast.func)

		if func is None: # unknown name, keep as undefined function for display
			func = sp.Function (ast.func)

		return func (*args)

	_ast2spt_funcs = {
		'#'    : _ast2spt_num,
		'@'    : _ast2spt_var,
		'('    : lambda self, ast: self._ast2spt (ast.strip_paren),
		'-'    : lambda self, ast: sp.Mul (sp.S.NegativeOne, self._ast2spt (ast.minus), evaluate = False),
		'+'    : _ast2spt_add,
		'*'    : _ast2spt_mul,
		'/'    : _ast2spt_div,
		'^'    : lambda self, ast: sp.Pow (self._ast2spt (ast.base), self._ast2spt (ast.exp), evaluate = False),
		'-func': _ast2spt_func,
	}

#...............................................................................................
def expr2spt (expr):
	return ast2spt () (geval.parse (expr))

def expr2tex (expr):
	try:
		return sp.latex (expr2spt (expr))

	except Exception as e:
		geval.debug_failure ('expr2tex', expr, e)

	return None

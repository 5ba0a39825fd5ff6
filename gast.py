# Base classes for abstract math syntax tree of calculator expressions, tuple based.
#
# ('#', 'num')                                        - real numbers represented as strings exactly as entered
# ('@', 'var')                                        - variable or constant name: 'x', 'a', 'PI', 'E'
# ('(', expr)                                         - explicit parentheses
# ('-', expr)                                         - negative of expression
# ('+', (expr1, expr2, ...))                          - addition, subtraction is addition of negative
# ('*', (expr1, expr2, ...))                          - multiplication
# ('/', numer, denom)                                 - fraction numer(ator) / denom(inator)
# ('^', base, exp)                                    - power base ^ exp(onent)
# ('-func', 'name', (a1, a2, ...))                    - function call to 'name', will be called with expressions a1, a2, ...

import re

#...............................................................................................
class AST (tuple):
	op      = None

	CONSTS  = set () # filled in after all classes defined

	_OP2CLS = {}
	_CLS2OP = {}

	def __new__ (cls, *args):
		op       = AST._CLS2OP.get (cls)
		cls_args = tuple (AST (*arg) if arg.__class__ is tuple else arg for arg in args)

		if op:
			args = (op,) + cls_args

		elif args:
			args = cls_args

			try:
				cls2 = AST._OP2CLS.get (args [0])
			except TypeError: # for unhashable types
				cls2 = None

			if cls2:
				cls      = cls2
				cls_args = cls_args [1:]

		self = tuple.__new__ (cls, args)

		if self.op:
			self._init (*cls_args)

		return self

	def __getattr__ (self, name): # calculate value for nonexistent self.name by calling self._name () and store
		func                 = getattr (self, f'_{name}') if name [0] != '_' else None
		val                  = func and func ()
		self.__dict__ [name] = val

		return val

	def _strip_paren (self):
		while self.is_paren:
			self = self.paren

		return self

	def neg (self):
		if self.is_minus:
			return self.minus
		elif not self.is_num:
			return AST ('-', self)
		elif self.num [0] == '-':
			return AST ('#', self.num [1:])
		else:
			return AST ('#', f'-{self.num}')

	@staticmethod
	def register_AST (cls):
		AST._CLS2OP [cls]    = cls.op
		AST._OP2CLS [cls.op] = cls

		setattr (AST, cls.__name__ [4:], cls)

#...............................................................................................
class AST_Num (AST):
	op, is_num = '#', True

	_rec_num   = re.compile (r'^(-?)(\d*)(?:(\.)(\d*))?$')

	def _init (self, num):
		self.num = str (num)

	_grp        = lambda self: [g or '' for g in AST_Num._rec_num.match (self.num).groups ()]
	_is_num_int = lambda self: not self.grp [2]
	_as_float   = lambda self: float (self.num)

class AST_Var (AST):
	op, is_var = '@', True

	def _init (self, var):
		self.var = var

	_is_var_const    = lambda self: self in AST.CONSTS

class AST_Paren (AST):
	op, is_paren = '(', True

	def _init (self, paren):
		self.paren = paren

class AST_Minus (AST):
	op, is_minus = '-', True

	def _init (self, minus):
		self.minus = minus

class AST_Add (AST):
	op, is_add = '+', True

	def _init (self, add):
		self.add = add

class AST_Mul (AST):
	op, is_mul = '*', True

	def _init (self, mul):
		self.mul = mul

class AST_Div (AST):
	op, is_div = '/', True

	def _init (self, numer, denom):
		self.numer, self.denom = numer, denom

class AST_Pow (AST):
	op, is_pow = '^', True

	def _init (self, base, exp):
		self.base, self.exp = base, exp

class AST_Func (AST):
	op, is_func = '-func', True

	def _init (self, func, args):
		self.func, self.args = func, args

#...............................................................................................
_AST_CLASSES = [AST_Num, AST_Var, AST_Paren, AST_Minus, AST_Add, AST_Mul, AST_Div, AST_Pow, AST_Func]

for _cls in _AST_CLASSES:
	AST.register_AST (_cls)

_AST_CONSTS = (('Pi', 'PI'), ('E', 'E'))

for _vp, _vv in _AST_CONSTS:
	ast = AST ('@', _vv)

	AST.CONSTS.add (ast)
	setattr (AST, _vp, ast)

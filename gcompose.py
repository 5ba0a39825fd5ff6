# Function composition: calls to other user defined functions inside an expression are replaced by the
# numeric value of that function at the call's argument before the expression itself is evaluated.
#
#   g (x) = f (x)^2    with    f (x) = x + 1    at    x = 0.5    ->    '(1.5)^2'
#
# Arguments are resolved recursively so f (f (x)) works, function bodies are evaluated plainly and never see
# other functions. Nesting depth is capped at MAX_DEPTH after which the whole evaluation fails.

from decimal import Decimal
import re

import gdefs
import geval

MAX_DEPTH = 32 # maximum nesting depth of composed function calls within arguments

class CompositionDepthError (RecursionError): pass

def _num2text (val): # positional decimal text in parens, exponent notation would be mangled by normalization ('1e-07' -> '1*E-07')
	return f"({format (Decimal (repr (val)), 'f')})"

def _call_rec (name): # 'name(' not part of a longer identifier, digits in front allowed for '2f(x)'
	return re.compile (rf'(?<![a-zA-Z_]){re.escape (name)}\(')

def _match_paren (text, pos): # index of ')' closing the paren opened just before pos or None if unbalanced
	depth = 1

	for i in range (pos, len (text)):
		c = text [i]

		if c == '(':
			depth += 1

		elif c == ')':
			depth -= 1

			if not depth:
				return i

	return None

def _subs_calls (text, name, subs): # replace each balanced 'name(inner)' with subs (inner) unless that returns None
	rec = _call_rec (name)
	pos = 0

	while 1:
		m = rec.search (text, pos)

		if not m:
			return text

		start, inner = m.start (), m.end ()
		end          = _match_paren (text, inner)

		if end is None:
			return text

		repl = subs (text [inner : end])

		if repl is None:
			pos  = end + 1
		else:
			text = f'{text [:start]}{repl}{text [end + 1:]}'
			pos  = start + len (repl)

def _is_current (func, current_function_id):
	return current_function_id is not None and gdefs.field (func, 'id') == current_function_id

class _None: pass # unique non-None None marker

#...............................................................................................
def resolve (expr, point, independent_var = 'x', current_function_id = None, functions = (), variables = (), depth = 0, memo = None):
	if depth > MAX_DEPTH:
		raise CompositionDepthError (f'function composition nested deeper than {MAX_DEPTH} levels')

	memo = {} if memo is None else memo # (argument text, depth) -> value or exception, lives for one top level evaluation
	text = expr

	for func in functions or ():
		if not func or _is_current (func, current_function_id) or not gdefs.func_is_visible (func):
			continue

		name  = str (gdefs.func_dependent_var (func))
		indep = gdefs.func_independent_var (func)
		body  = gdefs.field (func, 'expr')

		def subs (inner):
			try:
				val = _calc_arg (inner, point, independent_var, current_function_id, functions, variables, depth + 1, memo)

				return _num2text (geval.calc_simple (body, val, indep, variables))

			except CompositionDepthError:
				raise

			except Exception as e:
				geval.debug_failure (f'compose {name}', inner, e)

			return None

		text = _subs_calls (text, name, subs)

	return text

def calc (expr, point, independent_var = 'x', current_function_id = None, functions = (), variables = (), depth = 0, memo = None):
	text = resolve (expr, point, independent_var, current_function_id, functions, variables, depth, memo)

	return geval.calc_simple (text, point, independent_var, variables)

def _calc_arg (inner, point, independent_var, current_function_id, functions, variables, depth, memo):
	# value of argument text at depth, failures too, function passes rescan the text failed calls leave behind
	key = (inner, depth)
	val = memo.get (key, _None)

	if val is _None:
		try:
			val = calc (inner, point, independent_var, current_function_id, functions, variables, depth, memo)

		except CompositionDepthError:
			raise

		except Exception as e:
			val = e

		memo [key] = val

	if isinstance (val, Exception):
		raise val

	return val

def evaluate (expr, point, independent_var = 'x', current_function_id = None, functions = (), variables = ()):
	try:
		return calc (expr, point, independent_var, current_function_id, functions, variables)

	except Exception as e:
		geval.debug_failure ('evaluate', expr, e)

	return None

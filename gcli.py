#!/usr/bin/env python3
# python 3.6+

# Command line front end, evaluate, differentiate, tabulate or typeset an expression.

import getopt
import re
import sys

import gcompose
import gdefs
import gdiff
import geval
import gplot

_VERSION      = '1.0.0'

_SHORT_OPTS   = 'hvx:i:V:F:ds:t'
_LONG_OPTS    = ['help', 'version', 'at=', 'indep=', 'var=', 'func=', 'derivative', 'step=', 'sample=', 'tex', 'debug']

_HELP         = 'usage: graphcalc [options] expression' '''

  -h, --help                  - Show help information
  -v, --version               - Show version string
  -x, --at=VALUE              - Value of independent variable to evaluate at (default 0)
  -i, --indep=NAME            - Name of independent variable (default x)
  -V, --var=NAME=VALUE        - Define variable, may be repeated
  -F, --func=NAME[(VAR)]=EXPR - Define function usable as NAME(...) in expression, may be repeated
  -d, --derivative            - Print numerical derivative instead of value
  --step=H                    - Step for numerical derivative (default 0.0001)
  -s, --sample=XMIN:XMAX[:N]  - Print table of N + 1 values from XMIN to XMAX (default N is 10)
  -t, --tex                   - Print expression as LaTeX
  --debug                     - Print reasons for failed evaluations to stderr

examples:
  graphcalc -x 2 '3x^2 + 1'
  graphcalc -V a=2 -V b=0.5 -F 'f(x)=a*sin(b*x)' -d -x 1 'f(x)^2'
  graphcalc -s -3:3:6 'sqrt(x)'
'''.lstrip ()

_SAMPLE_COUNT = 10

_rec_var_def  = re.compile (r'^\s*([a-zA-Z_]\w*)\s*=(.*)$')
_rec_func_def = re.compile (r'^\s*([a-zA-Z_]\w*)\s*(?:\(\s*([a-zA-Z_]\w*)\s*\))?\s*=(.*)$')

class UsageError (ValueError): pass

def _float (text, what):
	try:
		return float (text)
	except ValueError:
		raise UsageError (f'invalid {what} {text!r}') from None

def _parse_var (text):
	m = _rec_var_def.match (text)

	if not m:
		raise UsageError (f'invalid variable definition {text!r}, expected NAME=VALUE')

	return gdefs.Variable (m.group (1), _float (m.group (2).strip (), f'value for variable {m.group (1)!r}'))

def _parse_func (text, id):
	m = _rec_func_def.match (text)

	if not m or not m.group (3).strip ():
		raise UsageError (f'invalid function definition {text!r}, expected NAME[(VAR)]=EXPR')

	return gdefs.FunctionDef (id, m.group (3).strip (), independent_var = m.group (2) or 'x', dependent_var = m.group (1))

def _parse_sample (text):
	parts = text.split (':')

	if len (parts) not in {2, 3}:
		raise UsageError (f'invalid sample range {text!r}, expected XMIN:XMAX[:N]')

	xmin, xmax = _float (parts [0], 'sample start'), _float (parts [1], 'sample end')

	try:
		count = int (parts [2]) if len (parts) == 3 else _SAMPLE_COUNT
	except ValueError:
		raise UsageError (f'invalid sample count {parts [2]!r}') from None

	if count < 1:
		raise UsageError ('sample count must be at least 1')

	return xmin, xmax, count

def _fmt (val):
	return '-' if val is None else repr (val)

#...............................................................................................
def main (argv = None):
	argv = sys.argv [1:] if argv is None else argv

	try:
		opts, args = getopt.getopt (argv, _SHORT_OPTS, _LONG_OPTS)

		point, indep, h, sample, deriv, tex = 0., 'x', gdiff.DEFAULT_STEP, None, False, False
		variables, functions                = [], []

		for opt, arg in opts:
			if opt in ('-h', '--help'):
				print (_HELP)

				return 0

			elif opt in ('-v', '--version'):
				print (_VERSION)

				return 0

			elif opt in ('-x', '--at'):
				point = _float (arg, 'point')
			elif opt in ('-i', '--indep'):
				indep = arg
			elif opt in ('-V', '--var'):
				variables.append (_parse_var (arg))
			elif opt in ('-F', '--func'):
				functions.append (_parse_func (arg, len (functions) + 1))
			elif opt in ('-d', '--derivative'):
				deriv = True
			elif opt == '--step':
				h = _float (arg, 'step')
			elif opt in ('-s', '--sample'):
				sample = _parse_sample (arg)
			elif opt in ('-t', '--tex'):
				tex = True
			elif opt == '--debug':
				geval.set_debug (True)

		if len (args) != 1:
			raise UsageError ('expected exactly one expression')

		if h == 0:
			raise UsageError ('step must not be zero')

	except (getopt.GetoptError, UsageError) as e:
		print (f'graphcalc: {e}', file = sys.stderr)
		print ("try 'graphcalc --help' for more information", file = sys.stderr)

		return 2

	expr = args [0]

	if tex:
		import gsym # sympy slow to import so only do it when needed

		text = gsym.expr2tex (expr)

		if text is None:
			print (f'graphcalc: can not typeset {expr!r}', file = sys.stderr)

			return 1

		print (text)

		return 0

	def calc (x):
		if deriv:
			return gdiff.numerical_derivative (expr, x, indep, None, functions, variables, h)
		else:
			return gcompose.evaluate (expr, x, indep, None, functions, variables)

	if sample:
		xmin, xmax, count = sample

		if deriv:
			xs = gplot.grid (xmin, xmax, count)
			ys = [calc (x) for x in xs]
		else:
			xs, ys = gplot.sample (expr, xmin, xmax, count, independent_var = indep, functions = functions, variables = variables)

		for x, y in zip (xs, ys):
			print (f'{_fmt (x)}\t{_fmt (y)}')

		return 0 if any (y is not None for y in ys) else 1

	val = calc (point)

	if val is None:
		print (f'graphcalc: {expr!r} is undefined at {indep} = {point!r}', file = sys.stderr)

		return 1

	print (_fmt (val))

	return 0

if __name__ == '__main__':
	sys.exit (main ())

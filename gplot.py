# Sample functions and tangent lines over an interval for the graphing front end.

import gcompose
import gdefs
import gdiff

SAMPLE_COUNT  = 500 # intervals across x range for function curves
TANGENT_COUNT = 100 # intervals across x range for tangent lines

def _in_bounds (y, ymin, ymax):
	return (ymin is None or y >= ymin) and (ymax is None or y <= ymax)

def grid (xmin, xmax, count): # count + 1 evenly spaced points from xmin to xmax inclusive
	if count < 1:
		raise ValueError (f'grid count must be at least 1, not {count!r}')

	dx = xmax - xmin

	return [xmin + dx * i / count for i in range (count + 1)]

#...............................................................................................
def sample (expr, xmin, xmax, count = SAMPLE_COUNT, ymin = None, ymax = None, independent_var = 'x', current_function_id = None,
		functions = (), variables = ()):
	"""Sample expression at count + 1 evenly spaced points from xmin to xmax.

Returns (xs, ys), ys [i] is None where the expression can not be evaluated or falls outside of ymin / ymax
if those are given, these are where the curve should be broken.
	"""

	xs = grid (xmin, xmax, count)
	ys = [None] * len (xs)

	for i in range (len (xs)):
		y = gcompose.evaluate (expr, xs [i], independent_var, current_function_id, functions, variables)

		if y is not None and _in_bounds (y, ymin, ymax):
			ys [i] = y

	return xs, ys

def segments (xs, ys): # split sampled curve into contiguous runs of [(x, y), ...] at None values
	segs = []
	seg  = []

	for x, y in zip (xs, ys):
		if y is None:
			if seg:
				segs.append (seg)
				seg = []

		else:
			seg.append ((x, y))

	if seg:
		segs.append (seg)

	return segs

def slope (func, point, functions = (), variables = (), h = gdiff.DEFAULT_STEP):
	indep = gdefs.func_independent_var (func)
	fid   = gdefs.field (func, 'id')
	deriv = gdefs.field (func, 'derivative')

	if isinstance (deriv, str) and deriv.strip ():
		return gcompose.evaluate (deriv, point, indep, fid, functions, variables)

	return gdiff.numerical_derivative (gdefs.field (func, 'expr'), point, indep, fid, functions, variables, h)

def tangent (func, point, functions = (), variables = (), h = gdiff.DEFAULT_STEP): # -> (y0, slope) or None
	y0 = gcompose.evaluate (gdefs.field (func, 'expr'), point, gdefs.func_independent_var (func), gdefs.field (func, 'id'), functions, variables)

	if y0 is None:
		return None

	m = slope (func, point, functions, variables, h)

	return None if m is None else (y0, m)

def tangent_line (func, point, xmin, xmax, count = TANGENT_COUNT, ymin = None, ymax = None, functions = (), variables = (),
		h = gdiff.DEFAULT_STEP):
	tan = tangent (func, point, functions, variables, h)

	if tan is None:
		return [], []

	y0, m = tan
	xs    = grid (xmin, xmax, count)
	ys    = [y0 + m * (x - point) for x in xs]

	return xs, [y if _in_bounds (y, ymin, ymax) else None for y in ys]

# Numerical differentiation by centered finite difference on top of composed evaluation.

import math

import gcompose
import geval

DEFAULT_STEP = 0.0001

def numerical_derivative (expr, point, independent_var = 'x', current_function_id = None, functions = (), variables = (), h = DEFAULT_STEP):
	"""Estimate d/dv expr at point as (f (point + h) - f (point - h)) / (2h).

Error is second order in h. Returns None if the expression can not be evaluated at either side or the
quotient is not finite, h is used as given with no adaptive refinement.
	"""

	f1 = gcompose.evaluate (expr, point + h, independent_var, current_function_id, functions, variables)
	f2 = gcompose.evaluate (expr, point - h, independent_var, current_function_id, functions, variables)

	if f1 is None or f2 is None:
		return None

	try:
		slope = (f1 - f2) / (2 * h)

	except ZeroDivisionError as e:
		geval.debug_failure ('numerical_derivative', expr, e)

		return None

	return slope if math.isfinite (slope) else None

# Rewrite shorthand math notation into explicit text the parser understands.
#
# Rules are applied in this order, later rules must not undo earlier ones:
#
#   1. '^'  -> '**'
#   2. '3x' -> '3*x'     digit followed by letter
#   3. ')3' -> ')*3'     closing paren followed by digit
#   4. '3(' -> '3*('     digit followed by opening paren
#   5. ')(' -> ')*('     adjacent parens
#   6. 'pi' -> 'PI'      any case
#   7. 'e'  -> 'E'       any case, unless followed by a letter other than 'e'
#
# Rules 6 and 7 are plain text matches and do not respect identifier boundaries, so 'e2' becomes 'E2' and
# a variable named 'ke' becomes 'kE'. Identifiers like 'exp', 'ceil' or 'beta' survive because the 'e' in
# them is followed by another letter.

import re

_NORMALIZE_RULES = (
	(re.compile (r'\^'), '**'),
	(re.compile (r'(\d)([a-z])', re.I), r'\1*\2'),
	(re.compile (r'\)(\d)'), r')*\1'),
	(re.compile (r'(\d)\('), r'\1*('),
	(re.compile (r'\)\('), ')*('),
	(re.compile (r'pi', re.I), 'PI'),
	(re.compile (r'e(?![a-df-z])', re.I), 'E'),
)

def normalize (text):
	for rec, repl in _NORMALIZE_RULES:
		text = rec.sub (repl, text)

	return text

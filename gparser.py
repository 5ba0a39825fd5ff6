# Builds expression tree from normalized text, nodes are nested AST tuples.
#
# Tokenizer is a single combined regex of named groups, parser is plain operator precedence recursive descent:
#
#   expr  := add
#   add   := mul (('+' | '-') mul)*
#   mul   := sign (('*' | '/') sign)*
#   sign  := ('-' | '+') sign | pow
#   pow   := atom ('**' sign)?                          - right associative, exponent may be signed
#   atom  := NUM | VAR '(' [expr (',' expr)*] ')' | VAR | '(' expr ')'

from collections import OrderedDict
import re

from gast import AST

#...............................................................................................
class Token (str):
	__slots__ = ['text', 'pos', 'grp']

	def __new__ (cls, str_, text = None, pos = None, grps = None):
		self      = str.__new__ (cls, str_)
		self.text = text or ''
		self.pos  = pos
		self.grp  = () if not grps else grps

		return self

class Lexer:
	TOKENS = OrderedDict ()

	def set_tokens (self, tokens):
		self.tokgrps = {} # {'token': (groups pos start, groups pos end), ...}
		tokpats      = list (tokens.items ())
		pos          = 0

		for tok, pat in tokpats:
			l                   = re.compile (pat).groups + 1
			self.tokgrps [tok]  = (pos, pos + l)
			pos                += l

		self.tokre   = '|'.join (f'(?P<{tok}>{pat})' for tok, pat in tokpats)
		self.tokrec  = re.compile (self.tokre)

	def __init__ (self):
		self.set_tokens (self.TOKENS)

	def tokenize (self, text):
		tokens = []
		end    = len (text)
		pos    = 0

		while pos < end:
			m = self.tokrec.match (text, pos)

			if m is None:
				tokens.append (Token ('$err', text [pos], pos))

				break

			else:
				if m.lastgroup != 'ignore':
					tok  = m.lastgroup
					s, e = self.tokgrps [tok]
					grps = m.groups () [s : e]

					tokens.append (Token (tok, grps [0], pos, grps [1:]))

				pos += len (m.group (0))

		tokens.append (Token ('$end', '', pos))

		return tokens

#...............................................................................................
class Parser (Lexer):
	TOKENS = OrderedDict ([
		('NUM',    r'\d+\.?\d*|\.\d+'),
		('VAR',    r'[a-zA-Z_]\w*'),
		('POW',    r'\*\*'),
		('ADD',    r'\+'),
		('SUB',    r'-'),
		('MUL',    r'\*'),
		('DIV',    r'/'),
		('PARENL', r'\('),
		('PARENR', r'\)'),
		('COMMA',  r','),
		('ignore', r'\s+'),
	])

	_TOKEN_TEXT = {'$end': 'end of input', 'PARENR': "')'", 'PARENL': "'('"}

	def _next (self):
		tok          = self.tokens [self.tokidx]
		self.tokidx += 1

		return tok

	def _peek (self):
		return self.tokens [self.tokidx]

	def _expect (self, tokname):
		tok = self._next ()

		if tok != tokname:
			self._error (tok, self._TOKEN_TEXT.get (tokname, tokname))

		return tok

	def _error (self, tok, want = None):
		if tok == '$end':
			raise SyntaxError ('unexpected end of input' if want is None else f'unexpected end of input, expected {want}')
		elif tok == '$err':
			raise SyntaxError (f'invalid token {tok.text!r} at position {tok.pos}')

		raise SyntaxError (f'invalid syntax {self.src [tok.pos : tok.pos + 16]!r} at position {tok.pos}')

	def _expr_add (self):
		add = [self._expr_mul ()]

		while self._peek () in {'ADD', 'SUB'}:
			tok = self._next ()
			rhs = self._expr_mul ()

			add.append (rhs if tok == 'ADD' else rhs.neg ())

		return add [0] if len (add) == 1 else AST ('+', tuple (add))

	def _expr_mul (self):
		ast = self._expr_sign ()
		mul = [ast]

		while self._peek () in {'MUL', 'DIV'}:
			tok = self._next ()
			rhs = self._expr_sign ()

			if tok == 'MUL':
				mul.append (rhs)

			else: # division is left associative over whatever product precedes it
				numer = mul [0] if len (mul) == 1 else AST ('*', tuple (mul))
				mul   = [AST ('/', numer, rhs)]

		return mul [0] if len (mul) == 1 else AST ('*', tuple (mul))

	def _expr_sign (self):
		tok = self._peek ()

		if tok == 'SUB':
			self._next ()

			return AST ('-', self._expr_sign ())

		if tok == 'ADD':
			self._next ()

			return self._expr_sign ()

		return self._expr_pow ()

	def _expr_pow (self):
		base = self._expr_atom ()

		if self._peek () == 'POW':
			self._next ()

			return AST ('^', base, self._expr_sign ())

		return base

	def _expr_atom (self):
		tok = self._next ()

		if tok == 'NUM':
			return AST ('#', tok.text)

		if tok == 'VAR':
			if self._peek () != 'PARENL':
				return AST ('@', tok.text)

			self._next ()

			args = []

			if self._peek () != 'PARENR':
				args.append (self._expr_add ())

				while self._peek () == 'COMMA':
					self._next ()
					args.append (self._expr_add ())

			self._expect ('PARENR')

			return AST ('-func', tok.text, tuple (args))

		if tok == 'PARENL':
			ast = self._expr_add ()

			self._expect ('PARENR')

			return AST ('(', ast)

		self._error (tok)

	def parse (self, src):
		self.src    = src
		self.tokens = self.tokenize (src)
		self.tokidx = 0

		ast         = self._expr_add ()
		tok         = self._peek ()

		if tok != '$end':
			self._error (tok)

		return ast

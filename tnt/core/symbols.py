"""
The concrete symbol set of TNT.

One ASCII alphabet is used everywhere: the parser grammar is built from
these constants, str() of every AST node writes them, and the rules that
look for patterns (interchange, induction) compare against ASTs printed
with them. Change a symbol here and all three move together.

    Terms:     0   S   +   *   ( )   variables a, b', z''
    Formulas:  =   ~   &   |   >   [ ]   A (for all)   E (exists)   :
"""

ZERO = "0"
SUCC = "S"
PLUS = "+"
TIMES = "*"
LPAREN = "("
RPAREN = ")"

EQUALS = "="
NOT = "~"
AND = "&"
OR = "|"
IMPLIES = ">"
LBRACKET = "["
RBRACKET = "]"

FORALL = "A"
EXISTS = "E"
QUANT_SEP = ":"

PRIME = "'"
VARIABLE_PATTERN = r"[a-z]'*"

# Austere names are AUSTERE_BASE followed by primes: a, a', a'', ...
AUSTERE_BASE = "a"

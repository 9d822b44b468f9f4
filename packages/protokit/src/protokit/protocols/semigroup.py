from protokit.core import define

Semigroup = define("Semigroup", {"concat": None}, doc="Types with an associative concatenation.")

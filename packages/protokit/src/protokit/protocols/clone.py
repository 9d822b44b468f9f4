from protokit.core import define

Clone = define("Clone", {"clone": None}, doc="Types that can produce an independent copy of a value.")

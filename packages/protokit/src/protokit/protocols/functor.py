from protokit.core import define

Functor = define("Functor", {"map": None}, doc="Mappable containers: ``Functor.map(value, fn)``.")

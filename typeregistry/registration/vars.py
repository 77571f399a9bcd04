__type_name__ = "__type_name__"
""" Optional class attribute. A class which defines it (on itself, not through a parent) is registered under this name instead of a derived one. """

REFERENCE_PREFIX = "*"
""" Prepended to a type name to name the reference form of the type. """

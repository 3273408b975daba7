# -*- coding: utf-8 -*-
"""
Package information.
"""

__title__ = "py_dgschema"
__description__ = "Derive complete CRUD GraphQL schemas from type declarations."
__version__ = "0.1.0"
__license__ = "MIT"

# exercises_app/data/__init__.py
"""
Hardcoded inputs of the exercises: literal samples and product catalogues.
"""

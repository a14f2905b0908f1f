"""
Observer test-support package.
Item store collaborator plus fixture seeding and output snapshot helpers.
"""

__version__ = "0.1.0"

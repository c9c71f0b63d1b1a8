"""
Franchise Stock Service Django project.
"""

# pandoc_filter/core/__init__.py

"""Document model, error types and shared type definitions"""

# pandoc_filter/adapters/__init__.py

"""Adapters exposing the filter to the outside world"""

# pandoc_filter/infrastructure/__init__.py

"""Infrastructure: configuration and logging"""

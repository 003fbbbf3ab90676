# pandoc_filter/application/__init__.py

"""Application layer: tag codec, filter entry point and tree walking"""

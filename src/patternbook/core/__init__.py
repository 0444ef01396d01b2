"""
patternbook core: expression language, IR types, errors, and configuration.
"""

"""
Configuration module: defaults, YAML overrides and validation.
"""

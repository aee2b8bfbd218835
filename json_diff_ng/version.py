"""
json-diff-ng version constant.
"""

# Library version (matches pyproject.toml)
JSON_DIFF_NG_VERSION = "0.1.0"

"""ModelSearch Errors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""


class ModelSearchError(Exception):
    """Base class for ModelSearch errors."""


class ConfigurationError(ModelSearchError, ValueError):
    """Search options are out of range."""


__all__ = ["ModelSearchError", "ConfigurationError"]

# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.

class ErmError(Exception):
    """Base class for all ermtools exceptions."""
    pass

class MalformedInputError(ErmError, ValueError):
    """Raised when an ERM literal (or a value handed to a helper) has an unusable shape."""
    pass

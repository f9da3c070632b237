# parcel_match/shared/utils/__init__.py

"""Shared utility functions for text processing"""

# Local imports
from parcel_match.shared.utils.text_utils import ascii_fold
from parcel_match.shared.utils.text_utils import is_cjk
from parcel_match.shared.utils.text_utils import normalize_unicode

__all__ = ["ascii_fold", "is_cjk", "normalize_unicode"]

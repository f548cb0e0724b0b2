from __future__ import annotations

import dataclasses
from typing import Optional


@dataclasses.dataclass
class PagerSettings:
    """ Settings for pagination

    This object defines additional behavior for paginated lists: default page size, max page size.
    Without settings, `first` and `last` are used as they are.
    """
    # The page size you get by default, when neither `first` nor `last` is given
    default_page_size: Optional[int] = None

    # The max number of items you get, regardless of `first` and `last`
    max_page_size: Optional[int] = None

    def __post_init__(self):
        assert self.default_page_size is None or self.default_page_size >= 0, 'default_page_size must be non-negative'
        assert self.max_page_size is None or self.max_page_size >= 0, 'max_page_size must be non-negative'

    def get_final_page_size(self, first: Optional[int], last: Optional[int]) -> tuple[Optional[int], Optional[int]]:
        """ Callback that fine-tunes `first` and `last` by applying default and max page sizes

        Used by: the pager, after the arguments are validated.
        Note that `0` is a valid page size and is never replaced with the default.
        """
        # Apply default page size: forward pagination
        if first is None and last is None:
            first = self.default_page_size

        # Apply max page size
        if self.max_page_size is not None:
            if first is not None:
                first = min(first, self.max_page_size)
            if last is not None:
                last = min(last, self.max_page_size)

        # Done
        return first, last

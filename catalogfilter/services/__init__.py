from catalogfilter.services.fuzzy import FuzzySearcher
from catalogfilter.services.tag_index import TagIndex, is_tagged, lookup_key

__all__ = [
    "FuzzySearcher",
    "TagIndex",
    "is_tagged",
    "lookup_key",
]

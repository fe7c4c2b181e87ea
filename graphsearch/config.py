"""Configuration classes for graphsearch algorithms."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Tunable behavior shared by the search and analysis algorithms."""

    # Bron-Kerbosch pivot: False picks the first available candidate,
    # True picks the candidate covering the most of the candidate set.
    max_coverage_pivot: bool = False

    # A*: log a warning whenever h(u) > c(u, v) + h(v) during relaxation.
    check_heuristic_consistency: bool = False

    # Unorderable.__str__ lists members only up to this many cyclic nodes.
    unorderable_max_nodes: int = 10


# Global configuration instance
SEARCH_CONFIG = SearchConfig()

from coachsite.domain.homepage.aggregates.home_page import HomePage

__all__ = ["HomePage"]

"""Icon candidate generation, fetching and selection components"""

from iconfetcher.favicon.candidate_generator import generate_candidates
from iconfetcher.favicon.favicon_selector import FaviconSelector
from iconfetcher.favicon.fetch_coordinator import FetchCoordinator, ResolutionSession

__all__ = ["FaviconSelector", "FetchCoordinator", "ResolutionSession", "generate_candidates"]

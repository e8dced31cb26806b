"""vodgate - aggregation gateway for video-on-demand search sources."""

__version__ = "1.0.0"
